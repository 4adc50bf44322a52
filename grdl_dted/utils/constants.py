# -*- coding: utf-8 -*-
"""
DTED Format Constants - Field widths, record lengths and recognition tags.

Values follow the DTED layout described in MIL-PRF-89020B (23 May 2000).
Every decoder in :mod:`grdl_dted.io.parsers` reads its offsets and
widths from here, so the whole fixed layout lives in one place.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from enum import Enum


# ===================================================================
# Recognition Sentinels
# ===================================================================

class RecognitionSentinel(Enum):
    """
    Literal byte tags that identify DTED blocks and unavailable values.

    Used only for matching at fixed offsets; never stored in decoded
    structures.
    """

    UHL = b'UHL1'
    DSI = b'DSI'
    ACC = b'ACC'
    DATA = b'\xaa'
    NA = b'NA'

    @property
    def length(self) -> int:
        """Number of bytes occupied by the tag."""
        return len(self.value)


# ===================================================================
# Record Lengths
# ===================================================================

#: User Header Label length in bytes
UHL_RECORD_LENGTH = 80

#: Data Set Identification record length in bytes
DSI_RECORD_LENGTH = 648

#: Accuracy record length in bytes
ACC_RECORD_LENGTH = 2700

#: Offset of the first data record from the start of the file
DATA_RECORD_OFFSET = UHL_RECORD_LENGTH + DSI_RECORD_LENGTH + ACC_RECORD_LENGTH  # 3428

# ===================================================================
# UHL Field Widths
# ===================================================================

#: Origin angle widths (degrees, minutes, seconds); a hemisphere
#: character follows each origin
ORIGIN_DEG_WIDTH = 3
ORIGIN_MIN_WIDTH = 2
ORIGIN_SEC_WIDTH = 2

#: Sampling interval width, tenths of arc seconds
INTERVAL_WIDTH = 4

#: Absolute vertical accuracy width (may hold the NA sentinel)
ACCURACY_WIDTH = 4

#: Security code and unique reference, not decoded
UHL_RESERVED_WIDTH = 15

#: Number of longitude lines / latitude points
COUNT_WIDTH = 4

#: Multiple accuracy flag and trailing fill, not decoded
UHL_TRAILER_WIDTH = 25

# ===================================================================
# Data Record Layout
# ===================================================================

#: Block counter high byte and low word
BLOCK_COUNT_HIGH_WIDTH = 1
BLOCK_COUNT_LOW_WIDTH = 2

#: Longitude / latitude line index width (big-endian binary)
LINE_INDEX_WIDTH = 2

#: Width of one elevation sample
ELEVATION_WIDTH = 2

#: Trailing checksum width (consumed, not validated)
CHECKSUM_WIDTH = 4

#: Fixed bytes of a data record excluding the elevation samples
DATA_RECORD_OVERHEAD = (
    RecognitionSentinel.DATA.length
    + BLOCK_COUNT_HIGH_WIDTH
    + BLOCK_COUNT_LOW_WIDTH
    + 2 * LINE_INDEX_WIDTH
    + CHECKSUM_WIDTH
)  # 12

# ===================================================================
# Signed-Magnitude Encoding
# ===================================================================

#: Sign bit of a 16-bit signed-magnitude value
U16_SIGN_BIT = 0x8000

#: Magnitude bits of a 16-bit signed-magnitude value
U16_DATA_MASK = 0x7FFF

#: Elevation value marking a void (null) post
DTED_VOID = -32767

# ===================================================================
# Angle Hemispheres
# ===================================================================

#: Hemisphere character -> negative flag
HEMISPHERE_SIGN = {
    ord('N'): False,
    ord('E'): False,
    ord('S'): True,
    ord('W'): True,
}

#: Tenths of an arc second per degree
TENTHS_OF_SECOND_PER_DEGREE = 10 * 60 * 60


def data_record_length(line_len: int) -> int:
    """
    Total byte length of one data record.

    Parameters
    ----------
    line_len : int
        Number of elevation samples in the record.

    Returns
    -------
    int
        Record length in bytes.
    """
    return DATA_RECORD_OVERHEAD + ELEVATION_WIDTH * line_len
