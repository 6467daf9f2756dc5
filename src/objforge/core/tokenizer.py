"""Line splitter and tokenizer shared by the OBJ and MTL parsers."""

import re
from typing import Iterator, NamedTuple

# "#" starts a comment unless escaped as "\#"
_COMMENT_RE = re.compile(r"(?<!\\)#.*")

# Only CR, LF and CRLF end a line; \f, \v, \x85 etc. are plain whitespace
_LINE_END_RE = re.compile(r"\r\n|\r|\n")


class LogicalLine(NamedTuple):
    """One statement: keyword plus its whitespace-separated values."""
    number: int            # first physical line, 1-based
    keyword: str
    values: tuple[str, ...]


def _clean(raw: str) -> tuple[str, bool]:
    """Strip the comment from a physical line; report a trailing ``\\``."""
    text = _COMMENT_RE.sub("", raw, count=1).rstrip()
    continued = text.endswith("\\")
    if continued:
        text = text[:-1]
    return text.replace("\\#", "#"), continued


def iter_logical_lines(text: str) -> Iterator[LogicalLine]:
    """Yield the logical lines of *text* in order.

    Backslash-continued physical lines are joined, comments are dropped,
    and blank lines are skipped.  Each line is tagged with the number of
    its first physical line for error reporting.
    """
    pending: list[str] = []
    start = 0

    physical = _LINE_END_RE.split(text)
    if physical and physical[-1] == "":
        physical.pop()

    for number, raw in enumerate(physical, start=1):
        piece, continued = _clean(raw)
        if not pending:
            start = number
        pending.append(piece)
        if continued:
            continue
        line = _tokenize(start, " ".join(pending))
        pending = []
        if line is not None:
            yield line

    if pending:
        line = _tokenize(start, " ".join(pending))
        if line is not None:
            yield line


def _tokenize(number: int, text: str):
    parts = text.split()
    if not parts:
        return None
    return LogicalLine(number, parts[0], tuple(parts[1:]))
