# -*- coding: utf-8 -*-
"""
Shared fixtures for DTED decoder tests.

Builds synthetic DTED byte buffers so no binary test data is needed.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import struct
from typing import Sequence

import pytest

from grdl_dted.utils.constants import ACC_RECORD_LENGTH, DSI_RECORD_LENGTH


def encode_signed_magnitude(value: int) -> int:
    """Encode an integer as a 16-bit signed-magnitude pattern."""
    if value < 0:
        return 0x8000 | (-value)
    return value


def build_uhl(
    lon_origin: bytes = b'0730000W',
    lat_origin: bytes = b'0380000N',
    lon_interval: int = 10,
    lat_interval: int = 10,
    accuracy: bytes = b'0020',
    lon_count: int = 1,
    lat_count: int = 1,
) -> bytes:
    """Assemble an 80-byte UHL."""
    uhl = (
        b'UHL1'
        + lon_origin
        + lat_origin
        + b'%04d' % lon_interval
        + b'%04d' % lat_interval
        + accuracy
        + b'U  ' + b' ' * 12
        + b'%04d' % lon_count
        + b'%04d' % lat_count
        + b'0' + b' ' * 24
    )
    assert len(uhl) == 80
    return uhl


def build_record(
    elevations: Sequence[int],
    blk_count: int = 0,
    lon_index: int = 0,
    lat_index: int = 0,
) -> bytes:
    """Assemble one data record with a zero checksum."""
    return (
        b'\xaa'
        + struct.pack('>BHHH', blk_count >> 16, blk_count & 0xFFFF, lon_index, lat_index)
        + b''.join(struct.pack('>H', encode_signed_magnitude(e)) for e in elevations)
        + b'\x00\x00\x00\x00'
    )


def build_dted(grid: Sequence[Sequence[int]], **uhl_kwargs) -> bytes:
    """Assemble a complete file; ``grid[i]`` is longitude line ``i``."""
    lat_count = len(grid[0]) if grid else 0
    uhl_kwargs.setdefault('lon_count', len(grid))
    uhl_kwargs.setdefault('lat_count', lat_count)
    body = b''.join(
        build_record(line, blk_count=i, lon_index=i) for i, line in enumerate(grid)
    )
    return (
        build_uhl(**uhl_kwargs)
        + b'DSI' + b' ' * (DSI_RECORD_LENGTH - 3)
        + b'ACC' + b' ' * (ACC_RECORD_LENGTH - 3)
        + body
    )


@pytest.fixture
def small_grid():
    """3 longitude lines x 4 latitude points, including a void post."""
    return [
        [100, 101, -5, 103],
        [200, 0, 202, -32767],
        [300, 301, 302, 32767],
    ]


@pytest.fixture
def small_dted(small_grid):
    """Encoded DTED buffer for ``small_grid``."""
    return build_dted(small_grid)


@pytest.fixture
def make_uhl():
    return build_uhl


@pytest.fixture
def make_record():
    return build_record


@pytest.fixture
def make_dted():
    return build_dted
