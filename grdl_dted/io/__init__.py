# -*- coding: utf-8 -*-
"""
DTED I/O - Decoders and record structures for DTED files.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from grdl_dted.io.dted import decode_dted, read_dted
from grdl_dted.io.records import RawDTEDHeader, RawDTEDRecord, RawDTEDFile
from grdl_dted.io.parsers import (
    skip_block,
    parse_uint,
    parse_nan,
    signed_magnitude_to_int,
    parse_signed_magnitude,
    parse_signed_magnitude_array,
    parse_angle,
    parse_uhl,
    parse_record,
    parse_dted_file,
)

__all__ = [
    "decode_dted",
    "read_dted",
    "RawDTEDHeader",
    "RawDTEDRecord",
    "RawDTEDFile",
    "skip_block",
    "parse_uint",
    "parse_nan",
    "signed_magnitude_to_int",
    "parse_signed_magnitude",
    "parse_signed_magnitude_array",
    "parse_angle",
    "parse_uhl",
    "parse_record",
    "parse_dted_file",
]
