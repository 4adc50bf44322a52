# -*- coding: utf-8 -*-
"""
Errors - Exceptions raised while decoding DTED byte buffers.

All decode failures derive from ``ValueError`` so callers that treat a
malformed file as a bad value keep working. Each carries the absolute
byte offset and the field that failed.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from typing import Any, Optional


class DTEDError(ValueError):
    """Base class for all DTED errors."""


class DTEDDecodeError(DTEDError):
    """
    A field could not be decoded.

    Attributes
    ----------
    offset : int
        Absolute byte offset of the failing field.
    field : str
        Name of the failing field.
    expected : Any
        What the decoder required at ``offset``.
    actual : Any
        What was found instead.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        field: str = '',
        expected: Optional[Any] = None,
        actual: Optional[Any] = None
    ):
        self.offset = offset
        self.field = field
        self.expected = expected
        self.actual = actual
        where = f" in field '{field}'" if field else ''
        super().__init__(f"{message}{where} at offset {offset}")


class InsufficientBytesError(DTEDDecodeError):
    """Input ended before a fixed-width field or record was complete."""


class TagMismatchError(DTEDDecodeError):
    """A recognition sentinel did not match at its expected offset."""


class DigitFormatError(DTEDDecodeError):
    """A decimal field contained a byte that is not an ASCII digit."""


__all__ = [
    "DTEDError",
    "DTEDDecodeError",
    "InsufficientBytesError",
    "TagMismatchError",
    "DigitFormatError",
]
