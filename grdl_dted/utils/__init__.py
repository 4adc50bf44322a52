# -*- coding: utf-8 -*-
"""
Utilities - DTED format constants.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from grdl_dted.utils.constants import (
    RecognitionSentinel,
    UHL_RECORD_LENGTH,
    DSI_RECORD_LENGTH,
    ACC_RECORD_LENGTH,
    DATA_RECORD_OFFSET,
    DTED_VOID,
    data_record_length,
)

__all__ = [
    "RecognitionSentinel",
    "UHL_RECORD_LENGTH",
    "DSI_RECORD_LENGTH",
    "ACC_RECORD_LENGTH",
    "DATA_RECORD_OFFSET",
    "DTED_VOID",
    "data_record_length",
]
