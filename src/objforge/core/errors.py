"""Parse errors raised by the OBJ and MTL parsers.

Every error is a ``ValueError`` so callers that only care about "bad
input" can catch that; the subclasses and :class:`ErrorKind` let callers
tell the failures apart.  Parsing is all-or-nothing: the first error
aborts the call.
"""

from enum import Enum, auto
from typing import Optional


class ErrorKind(Enum):
    INVALID_NUMBER = auto()
    MALFORMED_INDEX = auto()
    INDEX_OUT_OF_RANGE = auto()
    UNSUPPORTED_DIRECTIVE = auto()
    MATERIAL_ATTRIBUTE_BEFORE_NAME = auto()
    MISSING_REQUIRED_VALUE = auto()
    TOO_MANY_VALUES = auto()
    INVALID_SWITCH = auto()


class ParseError(ValueError):
    """Base class for all parse failures.

    The parsers only raise the subclasses below, each of which sets its
    own ``kind``; on the base class ``kind`` is None.

    Attributes
    ----------
    kind : ErrorKind
        Which failure occurred.
    line : int
        1-based source line (first physical line of a continued line).
    token : str or None
        The offending raw token or keyword, where there is one.
    collection : str or None
        ``"vertex"``, ``"texture"`` or ``"normal"`` for index errors.
    """

    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        message: str,
        line: int,
        token: Optional[str] = None,
        collection: Optional[str] = None,
    ):
        self.line = line
        self.token = token
        self.collection = collection
        super().__init__(f"line {line}: {message}")


class InvalidNumber(ParseError):
    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, token: str, line: int):
        super().__init__(f"invalid number {token!r}", line, token=token)


class MalformedIndex(ParseError):
    kind = ErrorKind.MALFORMED_INDEX

    def __init__(self, token: str, line: int, reason: str = "malformed index"):
        super().__init__(f"{reason} {token!r}", line, token=token)


class IndexOutOfRange(ParseError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, collection: str, token: str, line: int, count: int):
        self.count = count
        super().__init__(
            f"index {token!r} out of range for {collection} ({count} defined)",
            line, token=token, collection=collection,
        )


class UnsupportedDirective(ParseError):
    kind = ErrorKind.UNSUPPORTED_DIRECTIVE

    def __init__(self, keyword: str, line: int):
        super().__init__(f"unsupported statement {keyword!r}", line, token=keyword)


class MaterialAttributeBeforeName(ParseError):
    kind = ErrorKind.MATERIAL_ATTRIBUTE_BEFORE_NAME

    def __init__(self, keyword: str, line: int):
        super().__init__(
            f"{keyword!r} appears before any newmtl statement", line, token=keyword,
        )


class MissingRequiredValue(ParseError):
    kind = ErrorKind.MISSING_REQUIRED_VALUE

    def __init__(self, keyword: str, line: int, expected: str):
        super().__init__(
            f"{keyword!r} needs {expected}", line, token=keyword,
        )


class TooManyValues(ParseError):
    kind = ErrorKind.TOO_MANY_VALUES

    def __init__(self, keyword: str, line: int, expected: str):
        super().__init__(
            f"{keyword!r} takes {expected}", line, token=keyword,
        )


class InvalidSwitch(ParseError):
    kind = ErrorKind.INVALID_SWITCH

    def __init__(self, token: str, line: int):
        super().__init__(f"expected 'on' or 'off', got {token!r}", line, token=token)
