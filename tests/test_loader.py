import datetime as dt
import logging

import pytest
from dateutil.tz import tzutc

from vcardwriter import (
    AgentText,
    Classification,
    MediaInline,
    MediaUri,
    Name,
    format_vcard,
    record_from_dict,
    records_from_json,
)
from vcardwriter.exceptions import RecordError

from .common import get_test_file


# pylint:disable = W0621
@pytest.fixture(scope="module")
def full_contact():
    return get_test_file("full_contact.json")


def minimal(**kwargs):
    record = {"formatted_name": "John Doe", "name": {"family": "Doe", "given": "John"}}
    record.update(kwargs)
    return record


def test_full_contact(full_contact):
    (card,) = records_from_json(full_contact, default_timezone="America/New_York")
    assert format_vcard(card).replace("\r\n", "\n") + "\n" == get_test_file("full_contact.vcf")


def test_full_contact_models(full_contact):
    (card,) = records_from_json(full_contact)
    assert card.name == Name("Thompson", "Michael", ["David"], ["Dr."], ["Jr."])
    assert card.photo == MediaUri("https://example.com/photos/michael.jpg", "JPEG")
    assert card.logo == MediaInline("iVBORw0KGgo=", "PNG")
    assert card.classification is Classification.CONFIDENTIAL
    assert card.revision == dt.datetime(2024, 1, 15, 10, 30, tzinfo=tzutc())
    assert card.birthday == "1985-03-20"
    assert list(card.custom_properties[1].params.items()) == [("TYPE", "twitter"), ("X-USER", "drthompson")]


def test_revision():
    card = record_from_dict(minimal(revision="2024-01-15T10:30:00+02:00"))
    assert "REV:2024-01-15T08:30:00Z" in format_vcard(card).split("\r\n")

    card = record_from_dict(minimal(revision="2024-07-01T12:00:00"), default_timezone="Europe/Paris")
    assert "REV:2024-07-01T10:00:00Z" in format_vcard(card).split("\r\n")


def test_unparseable_revision_kept(caplog):
    with caplog.at_level(logging.WARNING):
        card = record_from_dict(minimal(revision="last tuesday"))
    assert card.revision == "last tuesday"
    assert "not ISO 8601" in caplog.text


def test_unknown_field_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        card = record_from_dict(minimal(favourite_colour="blue"))
    assert card.formatted_name == "John Doe"
    assert "favourite_colour" in caplog.text


def test_agent_and_classification():
    card = record_from_dict(minimal(agent={"value": "Jane"}, classification="private"))
    assert card.agent == AgentText("Jane")
    assert card.classification is Classification.PRIVATE

    card = record_from_dict(minimal(**{"class": "restricted"}))
    assert card.classification == "restricted"


def test_none_values_are_absent():
    card = record_from_dict(minimal(note=None, urls=None))
    assert card.note is None
    assert card.urls is None


@pytest.mark.parametrize(
    "record, field",
    [
        (minimal(version="4.0"), "version"),
        ({"formatted_name": "John"}, "name"),
        ({"name": {"family": "Doe"}}, "formatted_name"),
        (minimal(photo={"uri": "https://a", "value": "QUJD"}), "photo"),
        (minimal(key={"media_type": "PGP"}), "key"),
        (minimal(agent={}), "agent"),
        (minimal(geo={"latitude": "37", "longitude": 1}), "geo"),
        (minimal(geo={"latitude": 37}), "geo"),
        (minimal(nickname="Johnny"), "nickname"),
        (minimal(phones={"value": "1"}), "phones"),
        (minimal(emails=[{"value": "a@b", "kind": "home"}]), "emails[0]"),
        (minimal(note=5), "note"),
        (minimal(name={"family": "Doe", "middle": "Q"}), "name"),
        (minimal(custom_properties=[{"name": "X-A", "value": "1", "params": ["a"]}]), "custom_properties[0].params"),
        (minimal(emails=[{"value": 12345}]), "emails[0].value"),
        (minimal(name={"family": 5}), "name.family"),
        (minimal(urls=[{"value": "https://a", "label": 7}]), "urls[0].label"),
        (minimal(agent={"value": ["Jane"]}), "agent.value"),
        (minimal(addresses=[{"street": 1, "types": ["home"]}]), "addresses[0].street"),
        (minimal(labels=[{"value": None}]), "labels[0].value"),
        (minimal(photo={"uri": "https://a", "media_type": 3}), "photo.media_type"),
    ],
)
def test_invalid_records(record, field):
    with pytest.raises(RecordError) as excinfo:
        record_from_dict(record)
    assert excinfo.value.field == field


def test_unknown_timezone():
    with pytest.raises(RecordError) as excinfo:
        record_from_dict(minimal(), default_timezone="Mars/Olympus_Mons")
    assert str(excinfo.value) == "In field timezone: unknown time zone Mars/Olympus_Mons"


def test_records_from_json():
    cards = records_from_json('[{"formatted_name": "A", "name": {}}, {"formatted_name": "B", "name": {"given": "B"}}]')
    assert [card.formatted_name for card in cards] == ["A", "B"]

    with pytest.raises(RecordError):
        records_from_json("{not json")
    with pytest.raises(RecordError):
        records_from_json('"just a string"')


def test_optional_text_may_be_null():
    card = record_from_dict(minimal(name={"family": "Doe", "given": None}, urls=[{"value": "https://a", "label": None}]))
    assert card.name.given is None
    assert "item1.URL:https://a" in format_vcard(card).split("\r\n")
