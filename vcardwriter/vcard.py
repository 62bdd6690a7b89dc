"""Definitions and behavior for vCard 3.0"""

from __future__ import annotations

import datetime as dt

from .base import ContentLine, default_serialize, get_behavior, register_behavior
from .behavior import Behavior, SerializeContext, is_absent
from .custom_class import ParameterDict
from .helper import (
    FormatOptions,
    escape_param_value,
    escape_text,
    format_date,
    format_date_time,
    logger,
    number_to_string,
    to_list,
)
from .helper.constants import DEFAULT_CHARSET
from .models import AgentUri, MediaUri, Name
from .patterns import utc_offset_re


def type_params(types):
    """TYPE values are IANA tokens, written raw."""
    types = to_list(types)
    return {"TYPE": types} if types else None


def serialize_list(values):
    return ",".join(escape_text(val) for val in to_list(values))


def serialize_fields(obj, order):
    """
    Turn an object's fields into a ';' and ',' separated string.

    A missing field is written as an empty string, so there is always one
    ';' less than there are fields.
    """
    fields = []
    for field in order:
        value = getattr(obj, field, None)
        fields.append(serialize_list(value) if value is not None else "")
    return ";".join(fields)


NAME_ORDER = ("family", "given", "additional", "prefixes", "suffixes")
ADDRESS_ORDER = ("po_box", "extended", "street", "locality", "region", "postal_code", "country")


# ------------------------ Registered Behavior subclasses ----------------------
class FN(Behavior):
    name = "FN"
    description = "Formatted name"
    attribute = "formatted_name"
    required = True


register_behavior(FN)


class NameBehavior(Behavior):
    """
    A structured name.
    """

    name = "N"
    description = "Structured name"
    attribute = "name"
    required = True

    @staticmethod
    def empty_value():
        return Name()

    @classmethod
    def generate_lines(cls, value, context):
        return [cls.text_line(serialize_fields(value, NAME_ORDER), context)]


register_behavior(NameBehavior)


class TextListBehavior(Behavior):
    """
    A comma separated list of TEXT values.
    """

    @classmethod
    def generate_lines(cls, value, context):
        return [cls.text_line(serialize_list(value), context)]


class Nickname(TextListBehavior):
    name = "NICKNAME"
    description = "Nicknames"
    attribute = "nickname"


register_behavior(Nickname)


class MediaBehavior(Behavior):
    """
    PHOTO, LOGO and SOUND, either a reference or inline base64 data.

    Neither form is escaped: uris are written as given and base64 text has
    nothing to escape.
    """

    charset_aware = False

    @classmethod
    def generate_lines(cls, value, context):
        line = ContentLine(cls.name)
        if isinstance(value, MediaUri):
            line.add_param("VALUE", "uri")
            line.value = value.uri
        else:
            line.add_param("ENCODING", "b")
            line.value = value.value
        if value.media_type is not None:
            line.add_param("TYPE", value.media_type)
        return [line]


class Photo(MediaBehavior):
    name = "PHOTO"
    description = "Photograph"
    attribute = "photo"


register_behavior(Photo)


class Birthday(Behavior):
    name = "BDAY"
    description = "Birth date"
    attribute = "birthday"
    charset_aware = False

    @classmethod
    def generate_lines(cls, value, context):
        if isinstance(value, dt.date):
            value = format_date(value)
        return [ContentLine(cls.name, None, value)]


register_behavior(Birthday)


class AddressBehavior(Behavior):
    """
    A structured address.
    """

    name = "ADR"
    description = "Delivery address"
    attribute = "addresses"

    @classmethod
    def generate_lines(cls, value, context):
        return [cls.text_line(serialize_fields(adr, ADDRESS_ORDER), context, type_params(adr.types)) for adr in value]


register_behavior(AddressBehavior)


class LabelBehavior(Behavior):
    name = "LABEL"
    description = "Formatted address"
    attribute = "labels"

    @classmethod
    def generate_lines(cls, value, context):
        return [cls.text_line(escape_text(label.value), context, type_params(label.types)) for label in value]


register_behavior(LabelBehavior)


class Telephone(Behavior):
    name = "TEL"
    description = "Telephone number"
    attribute = "phones"
    charset_aware = False

    @classmethod
    def generate_lines(cls, value, context):
        return [ContentLine(cls.name, type_params(tel.types), tel.value) for tel in value]


register_behavior(Telephone)


class EmailBehavior(Behavior):
    name = "EMAIL"
    description = "Electronic mail address"
    attribute = "emails"

    @classmethod
    def generate_lines(cls, value, context):
        return [cls.text_line(escape_text(email.value), context, type_params(email.types)) for email in value]


register_behavior(EmailBehavior)


class Mailer(Behavior):
    name = "MAILER"
    description = "Mailer software"
    attribute = "mailer"


register_behavior(Mailer)


class Timezone(Behavior):
    """
    The default value type of TZ is utc-offset. Anything else is reset to
    text with VALUE=text.
    """

    name = "TZ"
    description = "Time zone"
    attribute = "timezone"

    @classmethod
    def generate_lines(cls, value, context):
        if utc_offset_re.fullmatch(value):
            return [ContentLine(cls.name, None, value)]
        return [cls.text_line(escape_text(value), context, {"VALUE": ["text"]})]


register_behavior(Timezone)


class GEO(Behavior):
    name = "GEO"
    description = "Geographical location"
    attribute = "geo"
    charset_aware = False

    @classmethod
    def generate_lines(cls, value, context):
        return [ContentLine(cls.name, None, f"{number_to_string(value.latitude)};{number_to_string(value.longitude)}")]


register_behavior(GEO)


class Title(Behavior):
    name = "TITLE"
    description = "Job title"
    attribute = "title"


register_behavior(Title)


class Role(Behavior):
    name = "ROLE"
    description = "Business category or function"
    attribute = "role"


register_behavior(Role)


class Logo(MediaBehavior):
    name = "LOGO"
    description = "Organization logo"
    attribute = "logo"


register_behavior(Logo)


class AgentBehavior(Behavior):
    name = "AGENT"
    description = "Person acting on behalf of the contact"
    attribute = "agent"

    @classmethod
    def generate_lines(cls, value, context):
        if isinstance(value, AgentUri):
            return [ContentLine(cls.name, {"VALUE": ["uri"]}, value.uri)]
        return [cls.text_line(escape_text(value.value), context)]


register_behavior(AgentBehavior)


class OrgBehavior(Behavior):
    """
    An organization name followed by its units, ';' separated.
    """

    name = "ORG"
    description = "Organization name and units"
    attribute = "organization"

    @classmethod
    def generate_lines(cls, value, context):
        parts = [] if value.name is None else [value.name]
        parts.extend(to_list(value.units))
        if not parts:
            return []
        return [cls.text_line(";".join(escape_text(part) for part in parts), context)]


register_behavior(OrgBehavior)


class Categories(TextListBehavior):
    name = "CATEGORIES"
    description = "Application categories"
    attribute = "categories"


register_behavior(Categories)


class Note(Behavior):
    name = "NOTE"
    description = "Supplemental information"
    attribute = "note"


register_behavior(Note)


class ProductId(Behavior):
    name = "PRODID"
    description = "Product that created the vCard"
    attribute = "product_id"


register_behavior(ProductId)


class Revision(Behavior):
    name = "REV"
    description = "Last revision, always written in UTC"
    attribute = "revision"
    charset_aware = False

    @classmethod
    def generate_lines(cls, value, context):
        if isinstance(value, dt.date):
            value = format_date_time(value)
        return [ContentLine(cls.name, None, value)]


register_behavior(Revision)


class SortString(Behavior):
    name = "SORT-STRING"
    description = "Sort key for the formatted name"
    attribute = "sort_string"


register_behavior(SortString)


class Sound(MediaBehavior):
    name = "SOUND"
    description = "Pronunciation of the formatted name"
    attribute = "sound"


register_behavior(Sound)


class UID(Behavior):
    name = "UID"
    description = "Globally unique identifier"
    attribute = "uid"


register_behavior(UID)


class UrlBehavior(Behavior):
    """
    URLs, grouped as itemN so Apple clients can show an X-ABLabel for each.

    The single legacy url is written as a plain URL line unless the same
    value is already among the grouped urls.
    """

    name = "URL"
    description = "Uniform resource locators"
    attribute = "urls"
    label_name = "X-ABLabel"

    @classmethod
    def serialize(cls, card, context):
        urls = [] if is_absent(card.urls) else card.urls
        lines = cls.generate_lines(urls, context)
        if card.url is not None and all(entry.value != card.url for entry in urls):
            lines.append(ContentLine(cls.name, None, card.url))
        elif card.url is not None:
            logger.debug(f"legacy url {card.url!s} already grouped, skipped")
        return lines

    @classmethod
    def generate_lines(cls, value, context):
        lines = []
        for number, entry in enumerate(value, start=1):
            group = f"item{number}"
            lines.append(ContentLine(cls.name, None, entry.value, group))
            if entry.label is not None and entry.label.strip():
                lines.append(ContentLine(cls.label_name, None, escape_text(entry.label), group))
        return lines


register_behavior(UrlBehavior)


class Class(Behavior):
    name = "CLASS"
    description = "Access classification"
    attribute = "classification"
    charset_aware = False

    @classmethod
    def generate_lines(cls, value, context):
        return [ContentLine(cls.name, None, str(value))]


register_behavior(Class)


class Key(MediaBehavior):
    """
    KEY is text or inline binary, never a uri. A MediaUri is written as
    escaped text without VALUE=uri.
    """

    name = "KEY"
    description = "Public key or authentication certificate"
    attribute = "key"

    @classmethod
    def generate_lines(cls, value, context):
        if isinstance(value, MediaUri):
            return [ContentLine(cls.name, None, escape_text(value.uri))]
        return super().generate_lines(value, context)


register_behavior(Key)


class CustomPropertyBehavior(Behavior):
    """
    X- extension properties.

    The record charset is the first parameter, a property's own parameters
    follow and override it when they also name CHARSET.
    """

    name = "X-"
    description = "Non-standard extension properties"
    attribute = "custom_properties"

    @classmethod
    def generate_lines(cls, value, context):
        lines = []
        for prop in value:
            params = ParameterDict()
            if context.charset is not None:
                params["CHARSET"] = context.charset
            params.update(prop.params)
            rendered = {key: [escape_param_value(str(val))] for key, val in params.items()}
            lines.append(ContentLine(prop.name.upper(), rendered, escape_text(prop.value)))
        return lines


register_behavior(CustomPropertyBehavior)


# ------------------------ The vCard itself ------------------------------------
def content_type_header(charset: str) -> str:
    return f"Content-Type: text/directory;profile=vcard;charset={escape_param_value(charset)}"


class VCard3(Behavior):
    """
    vCard 3.0 behavior.

    Works on a whole record, not one property, so it is kept out of the
    property registry.

    @cvar property_order:
        Registry names of the property behaviors, in the order they are written.
    """

    name = "VCARD"
    description = "vCard 3.0, defined in rfc2426"
    version_string = "3.0"
    property_order = (
        "FN",
        "N",
        "NICKNAME",
        "PHOTO",
        "BDAY",
        "ADR",
        "LABEL",
        "TEL",
        "EMAIL",
        "MAILER",
        "TZ",
        "GEO",
        "TITLE",
        "ROLE",
        "LOGO",
        "AGENT",
        "ORG",
        "CATEGORIES",
        "NOTE",
        "PRODID",
        "REV",
        "SORT-STRING",
        "SOUND",
        "UID",
        "URL",
        "CLASS",
        "KEY",
        "X-",
    )

    @classmethod
    def generate_lines(cls, card, context):
        lines = [ContentLine("BEGIN", None, cls.name), ContentLine("VERSION", None, cls.version_string)]
        for name in cls.property_order:
            lines.extend(get_behavior(name).serialize(card, context))
        lines.append(ContentLine("END", None, cls.name))
        return lines

    @classmethod
    def serialize(cls, card, buf=None, options: FormatOptions = None):
        """
        Serialize card to buf if it exists, otherwise return a string.

        A Content-Type header and a blank line come first when the card
        declares a charset or options.include_content_type is set.
        """
        options = options or FormatOptions()
        context = SerializeContext(charset=card.charset)
        lines = []
        if card.charset is not None or options.include_content_type:
            charset = DEFAULT_CHARSET if card.charset is None else card.charset
            lines.extend((content_type_header(charset), ""))
        lines.extend(cls.generate_lines(card, context))
        return default_serialize(lines, buf)


def format_vcard(card, options: FormatOptions = None) -> str:
    """
    Return card as vCard 3.0 text, lines joined with CRLF.
    """
    return VCard3.serialize(card, options=options)
