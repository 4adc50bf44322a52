# -*- coding: utf-8 -*-
"""
DTED Parsers - Field, header and record decoders for DTED byte buffers.

Every decoder is a pure function of a bytes-like buffer and an absolute
offset::

    value, next_offset = parse_thing(data, ..., offset)

``data[next_offset:]`` is the unconsumed tail. Decoders compose by
threading the offset through straight-line calls; any failure raises a
:class:`~grdl_dted.errors.DTEDDecodeError` carrying the offset and the
name of the failing field, and aborts the enclosing decode.

Buffers of any item size are viewed as raw bytes, so offsets always
count bytes.

Layout
------
UHL (80 bytes)::

    UHL1 | lon origin DDDMMSSH | lat origin DDDMMSSH | lon interval (4)
         | lat interval (4) | accuracy (4, may be NA) | reserved (15)
         | lon count (4) | lat count (4) | reserved (25)

Data record (12 + 2 * lat count bytes)::

    0xAA | block count (1 + 2) | lon index (2) | lat index (2)
         | elevations (2 each, signed magnitude) | checksum (4)

Binary fields are big-endian.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import logging
import struct
from typing import Optional, Tuple, Union

import numpy as np

from grdl_dted.errors import (
    DTEDDecodeError,
    DigitFormatError,
    InsufficientBytesError,
    TagMismatchError,
)
from grdl_dted.io.records import RawDTEDFile, RawDTEDHeader, RawDTEDRecord
from grdl_dted.primitives import Angle, AxisElement
from grdl_dted.utils.constants import (
    ACC_RECORD_LENGTH,
    ACCURACY_WIDTH,
    BLOCK_COUNT_HIGH_WIDTH,
    BLOCK_COUNT_LOW_WIDTH,
    CHECKSUM_WIDTH,
    COUNT_WIDTH,
    DSI_RECORD_LENGTH,
    ELEVATION_WIDTH,
    HEMISPHERE_SIGN,
    INTERVAL_WIDTH,
    LINE_INDEX_WIDTH,
    ORIGIN_DEG_WIDTH,
    ORIGIN_MIN_WIDTH,
    ORIGIN_SEC_WIDTH,
    U16_DATA_MASK,
    U16_SIGN_BIT,
    UHL_RESERVED_WIDTH,
    UHL_TRAILER_WIDTH,
    RecognitionSentinel,
    data_record_length,
)

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview]

_BE_U16 = struct.Struct('>H')
_RECORD_PREFIX = struct.Struct('>BHHH')


# ===================================================================
# Helpers
# ===================================================================

def _byte_view(data: Buffer) -> memoryview:
    """View any contiguous buffer as unsigned bytes so offsets count bytes."""
    view = memoryview(data)
    if view.format == 'B' and view.ndim == 1:
        return view
    return view.cast('B')


def _require(data: Buffer, offset: int, count: int, field: str) -> None:
    """Raise if fewer than ``count`` bytes remain at ``offset``."""
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")
    available = max(len(data) - offset, 0)
    if available < count:
        raise InsufficientBytesError(
            f"Expected {count} bytes, {available} remain",
            offset, field, expected=count, actual=available
        )


def _match_tag(
    data: Buffer,
    sentinel: RecognitionSentinel,
    offset: int,
    field: str
) -> int:
    """Consume a recognition sentinel, returning the offset after it."""
    _require(data, offset, sentinel.length, field)
    actual = bytes(data[offset:offset + sentinel.length])
    if actual != sentinel.value:
        raise TagMismatchError(
            f"Recognition tag mismatch: expected {sentinel.value!r}, got {actual!r}",
            offset, field, expected=sentinel.value, actual=actual
        )
    return offset + sentinel.length


def skip_block(data: Buffer, length: int, offset: int = 0, field: str = 'block') -> int:
    """
    Skip an opaque block of ``length`` bytes without interpreting it.

    Returns
    -------
    int
        Offset of the first byte after the block.

    Raises
    ------
    InsufficientBytesError
        If fewer than ``length`` bytes remain.
    """
    data = _byte_view(data)
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    _require(data, offset, length, field)
    return offset + length


# ===================================================================
# Primitive Field Decoders
# ===================================================================

def parse_uint(
    data: Buffer,
    count: int,
    offset: int = 0,
    default: int = 0,
    field: str = 'uint'
) -> Tuple[int, int]:
    """
    Decode a fixed-width unsigned ASCII decimal integer.

    Parameters
    ----------
    data : bytes-like
        Input buffer.
    count : int
        Field width in bytes. A width of zero consumes nothing and
        yields ``default``, for fields absent from a layout variant.
    offset : int
        Absolute offset of the field.
    default : int
        Value returned for a zero-width field.
    field : str
        Field name used in error reports.

    Returns
    -------
    value : int
        Decoded integer.
    next_offset : int
        Offset after the field.

    Raises
    ------
    InsufficientBytesError
        If fewer than ``count`` bytes remain.
    DigitFormatError
        If any byte is not an ASCII digit (signs and spaces included).
    """
    data = _byte_view(data)
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count == 0:
        return default, offset
    _require(data, offset, count, field)
    raw = bytes(data[offset:offset + count])
    if not raw.isdigit():
        raise DigitFormatError(
            f"Non-digit byte in decimal field {raw!r}",
            offset, field, expected='ASCII digits', actual=raw
        )
    return int(raw), offset + count


def parse_nan(
    data: Buffer,
    count: int,
    offset: int = 0,
    field: str = 'nan'
) -> Tuple[Optional[int], int]:
    """
    Decode a decimal field that may hold the "not available" sentinel.

    The sentinel test runs first: a field starting with ``NA`` is
    absent no matter what follows it, and the whole width is consumed.
    Anything else must decode as a :func:`parse_uint` field.

    Returns
    -------
    value : int or None
        ``None`` for the sentinel, otherwise the decoded integer.
    next_offset : int
        Offset after the field.
    """
    data = _byte_view(data)
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    tag = RecognitionSentinel.NA.value
    if count >= len(tag) and bytes(data[offset:offset + len(tag)]) == tag:
        _require(data, offset, count, field)
        return None, offset + count
    return parse_uint(data, count, offset, field=field)


def signed_magnitude_to_int(raw: int) -> int:
    """
    Convert a 16-bit signed-magnitude pattern to an integer.

    Bit 15 is the sign and bits 0-14 the magnitude, so ``0x8003`` is -3
    and ``0xFFFF`` is -32767. Both zero patterns give 0.

    Parameters
    ----------
    raw : int
        Unsigned 16-bit pattern.

    Returns
    -------
    int
        Value in the range [-32767, 32767].
    """
    if not 0 <= raw <= 0xFFFF:
        raise ValueError(f"raw must be a 16-bit pattern, got {raw}")
    magnitude = raw & U16_DATA_MASK
    sign = (raw & U16_SIGN_BIT) >> 15
    return (1 - (sign << 1)) * magnitude


def parse_signed_magnitude(data: Buffer, offset: int = 0) -> Tuple[int, int]:
    """Decode one big-endian signed-magnitude 16-bit value."""
    data = _byte_view(data)
    _require(data, offset, ELEVATION_WIDTH, 'signed_magnitude')
    raw, = _BE_U16.unpack_from(data, offset)
    return signed_magnitude_to_int(raw), offset + ELEVATION_WIDTH


def parse_signed_magnitude_array(
    data: Buffer,
    count: int,
    offset: int = 0,
    field: str = 'elevations'
) -> Tuple[np.ndarray, int]:
    """
    Decode ``count`` consecutive signed-magnitude values.

    Returns
    -------
    values : np.ndarray
        ``int16`` array of length ``count``.
    next_offset : int
        Offset after the last value.
    """
    data = _byte_view(data)
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    nbytes = ELEVATION_WIDTH * count
    _require(data, offset, nbytes, field)
    if count == 0:
        return np.empty(0, dtype=np.int16), offset
    raw = np.frombuffer(data, dtype='>u2', count=count, offset=offset)
    magnitude = (raw & U16_DATA_MASK).astype(np.int16)
    sign = (raw >> 15).astype(np.int16)
    values = ((1 - (sign << 1)) * magnitude).astype(np.int16)
    return values, offset + nbytes


# ===================================================================
# Angle Decoder
# ===================================================================

def parse_angle(
    data: Buffer,
    num_deg: int,
    num_min: int,
    num_sec: int,
    offset: int = 0,
    field: str = 'angle'
) -> Tuple[Angle, int]:
    """
    Decode a degrees/minutes/seconds angle with optional hemisphere.

    Each width may be zero, in which case that component is 0. One
    trailing ``N``, ``S``, ``E`` or ``W`` is consumed if present; ``S``
    and ``W`` mark the angle negative. With no hemisphere character
    the angle is non-negative.

    Parameters
    ----------
    data : bytes-like
        Input buffer.
    num_deg, num_min, num_sec : int
        Widths of the degrees, minutes and seconds fields.
    offset : int
        Absolute offset of the degrees field.
    field : str
        Field name prefix used in error reports.

    Returns
    -------
    angle : Angle
        Decoded angle.
    next_offset : int
        Offset after the angle.

    Examples
    --------
    >>> parse_angle(b'12345W', 3, 1, 1)
    (Angle(degrees=123, minutes=4, seconds=5.0, negative=True), 6)
    """
    data = _byte_view(data)
    deg, offset = parse_uint(data, num_deg, offset, field=f'{field}.degrees')
    mins, offset = parse_uint(data, num_min, offset, field=f'{field}.minutes')
    secs, offset = parse_uint(data, num_sec, offset, field=f'{field}.seconds')
    negative = False
    if 0 <= offset < len(data) and data[offset] in HEMISPHERE_SIGN:
        negative = HEMISPHERE_SIGN[data[offset]]
        offset += 1
    return Angle(degrees=deg, minutes=mins, seconds=float(secs), negative=negative), offset


# ===================================================================
# Header (UHL) Decoder
# ===================================================================

def parse_uhl(data: Buffer, offset: int = 0) -> Tuple[RawDTEDHeader, int]:
    """
    Decode the User Header Label.

    Returns
    -------
    header : RawDTEDHeader
        Decoded header.
    next_offset : int
        Offset after the UHL.

    Raises
    ------
    TagMismatchError
        If the buffer does not start with ``UHL1``.
    InsufficientBytesError
        If the header is truncated.
    DigitFormatError
        If a numeric field holds non-digit bytes.
    """
    data = _byte_view(data)
    offset = _match_tag(data, RecognitionSentinel.UHL, offset, 'uhl.tag')

    lon_origin, offset = parse_angle(
        data, ORIGIN_DEG_WIDTH, ORIGIN_MIN_WIDTH, ORIGIN_SEC_WIDTH, offset, field='uhl.lon_origin'
    )
    lat_origin, offset = parse_angle(
        data, ORIGIN_DEG_WIDTH, ORIGIN_MIN_WIDTH, ORIGIN_SEC_WIDTH, offset, field='uhl.lat_origin'
    )
    lon_interval, offset = parse_uint(data, INTERVAL_WIDTH, offset, field='uhl.lon_interval')
    lat_interval, offset = parse_uint(data, INTERVAL_WIDTH, offset, field='uhl.lat_interval')
    accuracy, offset = parse_nan(data, ACCURACY_WIDTH, offset, field='uhl.accuracy')
    offset = skip_block(data, UHL_RESERVED_WIDTH, offset, field='uhl.reserved')
    lon_count, offset = parse_uint(data, COUNT_WIDTH, offset, field='uhl.lon_count')
    lat_count, offset = parse_uint(data, COUNT_WIDTH, offset, field='uhl.lat_count')
    offset = skip_block(data, UHL_TRAILER_WIDTH, offset, field='uhl.trailer')

    header = RawDTEDHeader(
        origin=AxisElement(lat=lat_origin, lon=lon_origin),
        interval_secs_x_10=AxisElement(lat=lat_interval, lon=lon_interval),
        accuracy=accuracy,
        count=AxisElement(lat=lat_count, lon=lon_count),
    )
    return header, offset


# ===================================================================
# Data Record Decoder
# ===================================================================

def parse_record(data: Buffer, line_len: int, offset: int = 0) -> Tuple[RawDTEDRecord, int]:
    """
    Decode one data record (a longitude line of elevation posts).

    The checksum is consumed but not validated.

    Parameters
    ----------
    data : bytes-like
        Input buffer.
    line_len : int
        Number of elevation samples, the header's latitude count.
    offset : int
        Absolute offset of the record's recognition tag.

    Returns
    -------
    record : RawDTEDRecord
        Decoded record.
    next_offset : int
        Offset after the checksum.

    Raises
    ------
    TagMismatchError
        If the record does not start with ``0xAA``.
    InsufficientBytesError
        If fewer bytes remain than the full record needs.
    """
    data = _byte_view(data)
    if line_len < 0:
        raise ValueError(f"line_len must be >= 0, got {line_len}")
    start = offset
    offset = _match_tag(data, RecognitionSentinel.DATA, offset, 'record.tag')
    _require(data, start, data_record_length(line_len), 'record')

    blk_high, blk_low, lon_count, lat_count = _RECORD_PREFIX.unpack_from(data, offset)
    offset += BLOCK_COUNT_HIGH_WIDTH + BLOCK_COUNT_LOW_WIDTH + 2 * LINE_INDEX_WIDTH

    elevations, offset = parse_signed_magnitude_array(
        data, line_len, offset, field='record.elevations'
    )
    offset = skip_block(data, CHECKSUM_WIDTH, offset, field='record.checksum')

    record = RawDTEDRecord(
        blk_count=blk_high * 0x10000 + blk_low,
        lon_count=lon_count,
        lat_count=lat_count,
        elevations=elevations,
    )
    return record, offset


# ===================================================================
# File Decoder
# ===================================================================

def parse_dted_file(data: Buffer, offset: int = 0) -> Tuple[RawDTEDFile, int]:
    """
    Decode a complete DTED file held in memory.

    Decodes the UHL, skips the DSI and ACC records as opaque blocks,
    then decodes one data record per longitude line. Decoding is
    all-or-nothing: the first failure propagates unchanged.

    Returns
    -------
    dted : RawDTEDFile
        Decoded file with ``dsi_record`` and ``acc_record`` left empty.
    next_offset : int
        Offset after the last data record.
    """
    data = _byte_view(data)
    header, offset = parse_uhl(data, offset)
    logger.debug(
        "Decoded UHL: %d longitude lines x %d latitude points",
        header.count.lon, header.count.lat
    )
    offset = skip_block(data, DSI_RECORD_LENGTH, offset, field='dsi_record')
    offset = skip_block(data, ACC_RECORD_LENGTH, offset, field='acc_record')

    records = []
    for i in range(header.count.lon):
        try:
            record, offset = parse_record(data, header.count.lat, offset)
        except DTEDDecodeError:
            logger.debug("Failed to decode data record %d of %d", i + 1, header.count.lon)
            raise
        records.append(record)

    return RawDTEDFile(header=header, data=records), offset


__all__ = [
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
