from __future__ import annotations

from dataclasses import dataclass

from .base import ContentLine
from .exceptions import VCardError
from .helper import escape_param_value, escape_text, logger


@dataclass(frozen=True)
class SerializeContext:
    """
    State shared by every behavior during one serialization.

    @ivar charset:
        The charset declared on the record, or None.
    """

    charset: str | None = None

    def add_charset(self, line):
        if self.charset is not None:
            line.params["CHARSET"] = [escape_param_value(self.charset)]
        return line


def is_absent(value) -> bool:
    """None and empty lists both mean "no line"."""
    return value is None or (isinstance(value, (list, tuple)) and not value)


# ------------------------ Abstract class for behavior --------------------------
class Behavior:
    """
    Encoding rules for one vCard property.

    Behavior subclasses are not meant to be instantiated, all methods should
    be classmethods.

    @cvar name:
        The name written for the property, e.g. FN.
    @cvar description:
        A brief excerpt from the RFC explaining the function of the property.
    @cvar attribute:
        The VCard field the property is read from.
    @cvar required:
        Required properties are always written, a missing value is written as
        empty text.
    @cvar charset_aware:
        Whether the CHARSET parameter is added to the text lines generated.
    """

    name = ""
    description = ""
    attribute = ""
    required = False
    charset_aware = True

    def __init__(self):
        err = "Behavior subclasses are not meant to be instantiated"
        raise VCardError(err)

    @classmethod
    def serialize(cls, card, context: SerializeContext) -> list[ContentLine]:
        """
        Return the content lines for this property of card, possibly none.
        """
        value = getattr(card, cls.attribute, None)
        if is_absent(value):
            if not cls.required:
                return []
            value = cls.empty_value()
        logger.debug(f"serializing {cls.name!s} with behavior {cls.__name__!s}")
        return cls.generate_lines(value, context)

    @staticmethod
    def empty_value():
        return ""

    @classmethod
    def generate_lines(cls, value, context: SerializeContext) -> list[ContentLine]:
        """
        Default is a single backslash escaped TEXT line.
        """
        return [cls.text_line(escape_text(value), context)]

    @classmethod
    def text_line(cls, text, context: SerializeContext, params=None, name=None, group=None) -> ContentLine:
        """
        Build a line holding escaped text, with CHARSET as its last parameter.
        """
        line = ContentLine(name or cls.name, params, text, group)
        return context.add_charset(line) if cls.charset_aware else line
