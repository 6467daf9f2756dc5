"""Tests for the parse error hierarchy."""

import pytest

from objforge.core import errors
from objforge.core.errors import ErrorKind, IndexOutOfRange, ParseError

SUBCLASSES = [
    errors.InvalidNumber, errors.MalformedIndex, errors.IndexOutOfRange,
    errors.UnsupportedDirective, errors.MaterialAttributeBeforeName,
    errors.MissingRequiredValue, errors.TooManyValues, errors.InvalidSwitch,
]


def test_every_subclass_has_its_own_kind():
    kinds = [cls.kind for cls in SUBCLASSES]
    assert all(isinstance(k, ErrorKind) for k in kinds)
    assert set(kinds) == set(ErrorKind)


def test_base_class_is_usable():
    err = ParseError("bad input", 7, token="x")
    assert err.kind is None
    assert err.line == 7
    assert err.token == "x"
    assert str(err) == "line 7: bad input"
    assert not hasattr(err, "detail")


def test_errors_are_value_errors():
    with pytest.raises(ValueError, match="line 2"):
        raise IndexOutOfRange("normal", "1//9", 2, 3)
