"""Content lines, folding and the behavior registry."""

from __future__ import annotations

from typing import Iterable, TextIO

from .custom_class import ParameterDict
from .helper import Character as Char
from .helper import fold_line, get_buffer, logger


# --------------------------------- Main classes -------------------------------
class ContentLine:
    """
    Holds one logical content line of a vCard.

    For example::
      <TEL{'TYPE': ['work', 'voice']}+1-555-555-5555>

    @ivar name:
        The property name, written as given (X-ABLabel keeps its case).
    @ivar params:
        A ParameterDict of upper-cased parameter names and lists of values.
        Values are written as they are stored, callers escape them first.
    @ivar value:
        The already encoded value of the line.
    @ivar group:
        An optional group prefix, used to tie grouped lines like item1.URL and
        item1.X-ABLabel together.
    """

    def __init__(self, name, params=None, value="", group=None):
        self.name = name
        self.params = ParameterDict(params or {})
        self.value = value
        self.group = group

    def __eq__(self, other):
        return (
            isinstance(other, ContentLine)
            and (self.group, self.name, self.value) == (other.group, other.name, other.value)
            and list(self.params.items()) == list(other.params.items())
        )

    def __repr__(self):
        return f"<{self.name}{dict(self.params)}{self.value}>"

    def add_param(self, key, *values):
        """Append values to a parameter, creating it if needed."""
        self.params.setdefault(key, []).extend(values)

    def serialize(self) -> str:
        """
        Return the unfolded text of the line.
        """
        s = get_buffer()
        if self.group is not None:
            s.write(f"{self.group}.")
        s.write(self.name)
        for key, values in self.params.items():
            s.write(f";{key}={','.join(values)}")
        s.write(f":{self.value}")
        return s.getvalue()


def fold_one_line(outbuf: TextIO, input_: str):
    """
    Write input_ to outbuf, folded at 75 characters.
    """
    outbuf.write(fold_line(input_))


def default_serialize(lines: Iterable[ContentLine | str], buf: TextIO = None):
    """
    Fold every logical line and join them with CRLF, write to buf or return a string.

    There is no terminator after the last line.
    """
    outbuf = buf or get_buffer()
    for n, line in enumerate(lines):
        if n:
            outbuf.write(Char.CRLF)
        text = line.serialize() if isinstance(line, ContentLine) else line
        fold_one_line(outbuf, text)
    return buf or outbuf.getvalue()


# --------------------------- behavior registry --------------------------------
__behavior_registry = {}


def register_behavior(behavior, name=None):
    """
    Register the given behavior under its upper-cased property name.
    """
    if not name:
        name = behavior.name
    name = name.upper()
    if name in __behavior_registry:
        logger.debug(f"replacing behavior for {name}")
    __behavior_registry[name] = behavior


def get_behavior(name):
    """
    Return the behavior registered for name, or None.
    """
    return __behavior_registry.get(name.upper())


def registered_names():
    return list(__behavior_registry.keys())
