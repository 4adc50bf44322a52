# -*- coding: utf-8 -*-
"""
Tests for the DTED error hierarchy.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import pytest

from grdl_dted.errors import (
    DTEDDecodeError,
    DTEDError,
    DigitFormatError,
    InsufficientBytesError,
    TagMismatchError,
)


class TestErrorHierarchy:
    @pytest.mark.parametrize('cls', [InsufficientBytesError, TagMismatchError, DigitFormatError])
    def test_subclasses(self, cls):
        assert issubclass(cls, DTEDDecodeError)
        assert issubclass(cls, DTEDError)
        assert issubclass(cls, ValueError)

    def test_context(self):
        err = TagMismatchError('bad tag', 3428, 'record.tag', expected=b'\xaa', actual=b'\x00')
        assert err.offset == 3428
        assert err.field == 'record.tag'
        assert err.expected == b'\xaa'
        assert err.actual == b'\x00'
        assert str(err) == "bad tag in field 'record.tag' at offset 3428"

    def test_message_without_field(self):
        assert str(DTEDDecodeError('short', 0)) == 'short at offset 0'
