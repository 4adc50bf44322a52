# -*- coding: utf-8 -*-
"""
grdl-dted - Decoder for DTED (Digital Terrain Elevation Data) files.

Decodes the fixed-width ASCII/binary DTED layout into header and
elevation record structures backed by NumPy arrays.

Modules
-------
io : Field, header, record and file decoders; decoded structures
primitives : Angle and latitude/longitude pair types
errors : Decode error hierarchy
utils : Format constants and recognition sentinels

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

__version__ = "0.1.0"

from grdl_dted import io, utils
from grdl_dted.errors import (
    DTEDError,
    DTEDDecodeError,
    InsufficientBytesError,
    TagMismatchError,
    DigitFormatError,
)
from grdl_dted.io import decode_dted, read_dted, RawDTEDHeader, RawDTEDRecord, RawDTEDFile
from grdl_dted.primitives import Angle, AxisElement

__all__ = [
    "io",
    "utils",
    "DTEDError",
    "DTEDDecodeError",
    "InsufficientBytesError",
    "TagMismatchError",
    "DigitFormatError",
    "decode_dted",
    "read_dted",
    "RawDTEDHeader",
    "RawDTEDRecord",
    "RawDTEDFile",
    "Angle",
    "AxisElement",
    "__version__",
]
