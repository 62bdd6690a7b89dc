"""Build VCard records from plain JSON-style data."""

from __future__ import annotations

import json
from dataclasses import fields

import pytz
from dateutil import parser as date_parser

from .exceptions import RecordError
from .helper import logger
from .models import (
    VERSION_3,
    Address,
    AgentText,
    AgentUri,
    Classification,
    CustomProperty,
    Email,
    Geo,
    Label,
    MediaInline,
    MediaUri,
    Name,
    Organization,
    Phone,
    Url,
    VCard,
)

ALIASES = {"class": "classification"}


def _require_mapping(data, field):
    if not isinstance(data, dict):
        raise RecordError(f"expected an object, got {type(data).__name__}", field)
    return data


def _string_list(data, field):
    if data is None:
        return None
    if isinstance(data, str) or not isinstance(data, list):
        raise RecordError("expected a list of strings", field)
    return [str(item) for item in data]


def _object_list(data, field, build):
    if data is None:
        return None
    if not isinstance(data, list):
        raise RecordError("expected a list", field)
    return [build(_require_mapping(item, f"{field}[{n}]"), f"{field}[{n}]") for n, item in enumerate(data)]


STRING_TYPES = ("str", "Optional[str]")


def _check_string(value, field, optional=False):
    if value is None and optional:
        return
    if not isinstance(value, str):
        raise RecordError("expected a string", field)


def _build(cls, data, field, list_fields=()):
    """Instantiate a dataclass from data, rejecting unknown keys and non-string text."""
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise RecordError(f"unknown keys {', '.join(sorted(unknown))}", field)
    kwargs = dict(data)
    for name in list_fields:
        if name in kwargs:
            kwargs[name] = _string_list(kwargs[name], f"{field}.{name}") or ()
    for f in fields(cls):
        if f.type in STRING_TYPES and f.name in kwargs:
            _check_string(kwargs[f.name], f"{field}.{f.name}", optional=f.type != "str")
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise RecordError(str(e), field) from e


def _media(data, field):
    data = _require_mapping(data, field)
    if ("uri" in data) == ("value" in data):
        raise RecordError("media needs exactly one of uri or value", field)
    cls = MediaUri if "uri" in data else MediaInline
    return _build(cls, data, field)


def _agent(data, field):
    data = _require_mapping(data, field)
    if ("uri" in data) == ("value" in data):
        raise RecordError("agent needs exactly one of uri or value", field)
    key = "uri" if "uri" in data else "value"
    _check_string(data[key], f"{field}.{key}")
    return AgentUri(data[key]) if key == "uri" else AgentText(data[key])


def _custom_property(data, field):
    params = data.get("params")
    if params is not None and not isinstance(params, dict):
        raise RecordError("params must be an object", f"{field}.params")
    return _build(CustomProperty, data, field)


def _classification(value):
    try:
        return Classification(value.upper())
    except ValueError:
        logger.warning(f"unknown classification {value!s}, written as given")
        return value


def _revision(value, default_timezone):
    """
    Parse an ISO 8601 revision string, localizing naive values.

    Strings dateutil can't read are kept and written verbatim.
    """
    try:
        parsed = date_parser.isoparse(value)
    except ValueError:
        logger.warning(f"revision {value!s} is not ISO 8601, written as given")
        return value
    if parsed.tzinfo is None:
        parsed = default_timezone.localize(parsed)
    return parsed


def get_timezone(name=None):
    """
    Return the pytz zone called name, UTC when name is None.
    """
    if name is None:
        return pytz.utc
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError as e:
        raise RecordError(f"unknown time zone {name!s}", "timezone") from e


def _name(data, field):
    return _build(Name, _require_mapping(data, field), field, ("additional", "prefixes", "suffixes"))


def _geo(data, field):
    geo = _build(Geo, _require_mapping(data, field), field)
    for coordinate in (geo.latitude, geo.longitude):
        if isinstance(coordinate, bool) or not isinstance(coordinate, (int, float)):
            raise RecordError("coordinates must be numbers", field)
    return geo


def _organization(data, field):
    return _build(Organization, _require_mapping(data, field), field, ("units",))


def _typed_list(cls):
    def build_list(data, field):
        return _object_list(data, field, lambda item, item_field: _build(cls, item, item_field, ("types",)))

    return build_list


def _urls(data, field):
    return _object_list(data, field, lambda item, item_field: _build(Url, item, item_field))


def _custom_properties(data, field):
    return _object_list(data, field, _custom_property)


BUILDERS = {
    "name": _name,
    "nickname": _string_list,
    "photo": _media,
    "logo": _media,
    "sound": _media,
    "key": _media,
    "addresses": _typed_list(Address),
    "labels": _typed_list(Label),
    "phones": _typed_list(Phone),
    "emails": _typed_list(Email),
    "geo": _geo,
    "agent": _agent,
    "organization": _organization,
    "categories": _string_list,
    "urls": _urls,
    "custom_properties": _custom_properties,
}


def record_from_dict(data, default_timezone: str = None) -> VCard:
    """
    Build a VCard from a mapping keyed by VCard field names.

    @param data:
        The record, as decoded from JSON. Nested objects use the field names
        of the model classes; media and agent objects hold either uri or value.
    @param default_timezone:
        Name of the pytz zone naive revision timestamps are in, UTC if None.
    """
    data = _require_mapping(data, "record")
    tzinfo = get_timezone(default_timezone)
    known = {f.name for f in fields(VCard)}
    kwargs = {}
    for key, value in data.items():
        field = ALIASES.get(key, key)
        if field not in known:
            logger.warning(f"ignoring unknown field {key!s}")
            continue
        if value is None:
            continue
        if field in BUILDERS:
            value = BUILDERS[field](value, field)
        elif not isinstance(value, str):
            raise RecordError("expected a string", field)
        elif field == "revision":
            value = _revision(value, tzinfo)
        elif field == "classification":
            value = _classification(value)
        kwargs[field] = value

    if kwargs.get("version", VERSION_3) != VERSION_3:
        raise RecordError(f"only vCard {VERSION_3} is supported, got {kwargs['version']!s}", "version")
    for field in ("formatted_name", "name"):
        if field not in kwargs:
            raise RecordError("required field is missing", field)
    return VCard(**kwargs)


def records_from_json(text: str, default_timezone: str = None) -> list:
    """
    Decode one record or a list of records from JSON text.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordError(f"invalid JSON: {e.msg} (line {e.lineno})") from e
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise RecordError("expected an object or a list of objects")
    return [record_from_dict(item, default_timezone) for item in data]
