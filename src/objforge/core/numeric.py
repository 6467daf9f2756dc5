"""Token to number conversion for OBJ/MTL values."""

import re

from objforge.core.errors import InvalidNumber, InvalidSwitch

# Plain decimal or scientific notation; Python's float() alone would also
# accept "nan", "inf" and "1_000".
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")


def is_number(token: str) -> bool:
    """Return True if *token* is a well-formed decimal number."""
    return _FLOAT_RE.fullmatch(token) is not None


def parse_float(token: str, line: int) -> float:
    """Convert *token* to float, raising :class:`InvalidNumber` otherwise."""
    if _FLOAT_RE.fullmatch(token) is None:
        raise InvalidNumber(token, line)
    return float(token)


def parse_int(token: str, line: int) -> int:
    """Convert *token* to int, raising :class:`InvalidNumber` otherwise."""
    if _INT_RE.fullmatch(token) is None:
        raise InvalidNumber(token, line)
    return int(token)


def parse_switch(token: str, line: int) -> bool:
    """Convert an ``on``/``off`` token to bool."""
    value = token.lower()
    if value == "on":
        return True
    if value == "off":
        return False
    raise InvalidSwitch(token, line)
