# -*- coding: utf-8 -*-
"""
DTED Reader - Decode DTED (Digital Terrain Elevation Data) files.

Reads elevation data in the DTED format as described in
MIL-PRF-89020B (23 May 2000). The DSI and ACC records are skipped
unread and data record checksums are not verified.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import logging
import os
from typing import Union

from grdl_dted.io.parsers import Buffer, parse_dted_file
from grdl_dted.io.records import RawDTEDFile

logger = logging.getLogger(__name__)


def decode_dted(data: Buffer) -> RawDTEDFile:
    """
    Decode a DTED file from an in-memory buffer.

    Parameters
    ----------
    data : bytes, bytearray or memoryview
        The complete file contents.

    Returns
    -------
    RawDTEDFile
        Decoded header and data records.

    Raises
    ------
    DTEDDecodeError
        If the buffer is truncated, a recognition tag does not match, or
        a decimal field holds non-digit bytes. Subclasses ``ValueError``.
    """
    dted, offset = parse_dted_file(data)
    trailing = memoryview(data).nbytes - offset
    if trailing:
        logger.debug("Ignoring %d trailing bytes after last data record", trailing)
    return dted


def read_dted(filename: Union[str, os.PathLike]) -> RawDTEDFile:
    """
    Read and decode a DTED file.

    Parameters
    ----------
    filename : str or path-like
        Path to the DTED file (``.dt0``, ``.dt1``, ``.dt2``).

    Returns
    -------
    RawDTEDFile
        Decoded header and data records.

    Raises
    ------
    FileNotFoundError
        If the file cannot be opened.
    DTEDDecodeError
        If the file is not in DTED format.
    """
    with open(filename, 'rb') as f:
        data = f.read()
    logger.debug("Read %d bytes from %s", len(data), filename)
    return decode_dted(data)


__all__ = ["decode_dted", "read_dted"]
