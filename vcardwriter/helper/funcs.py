from __future__ import annotations

from typing import Generator

from ..patterns import newline_re, param_unsafe_re
from .constants import LINE_LENGTH
from .constants import Character as Char


def escape_text(s: str) -> str:
    """
    Backslash escape a TEXT value.

    Every newline variant becomes a single LF first, so CRLF is written as
    one \\n and never two.
    """
    s = newline_re.sub(Char.LF, s)
    s = s.replace("\\", "\\\\").replace(";", "\\;").replace(",", "\\,")
    return s.replace(Char.LF, "\\n")


def escape_param_value(param: str) -> str:
    """
    Return param as a ptext, or as a quoted-string if it holds '"', ';', ':' or ','.

    Parameters are single line, newlines become spaces. A quoted-string cannot
    carry a DQUOTE, so those become apostrophes.
    """
    param = newline_re.sub(Char.SPACE, param)
    if param_unsafe_re.search(param) is None:
        return param
    return '"{}"'.format(param.replace('"', "'"))


def split_by_length(text: str, line_length: int = LINE_LENGTH) -> Generator:
    """Yield a first chunk of line_length characters, then chunks one shorter."""
    yield text[:line_length]
    start = line_length
    while start < len(text):
        yield text[start : start + line_length - 1]
        start += line_length - 1


def fold_line(line: str, line_length: int = LINE_LENGTH) -> str:
    """
    Fold a logical line so no physical line exceeds line_length characters.

    Continuation lines start with a single space, which a reader strips
    together with the preceding CRLF.
    """
    if len(line) <= line_length:
        return line
    return Char.FOLD.join(split_by_length(line, line_length))
