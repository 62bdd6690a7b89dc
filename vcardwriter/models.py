"""Structured contact data consumed by the vCard 3.0 serializer."""

from __future__ import annotations

import datetime as dt
import enum
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence, Union

from .custom_class import ParameterDict

VERSION_3 = "3.0"


# ------------------------ vCard structs ---------------------------------------
@dataclass(frozen=True)
class Name:
    """
    Structured name value for N.

    Components map to: Family; Given; Additional; Prefixes; Suffixes.
    """

    family: Optional[str] = None
    given: Optional[str] = None
    additional: Sequence[str] = ()
    prefixes: Sequence[str] = ()
    suffixes: Sequence[str] = ()


@dataclass(frozen=True)
class Address:
    """
    Structured address value for ADR.

    Components map to: PO Box; Extended Address; Street; Locality; Region;
    Postal Code; Country.
    """

    po_box: Optional[str] = None
    extended: Optional[str] = None
    street: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    types: Sequence[str] = ()


@dataclass(frozen=True)
class Label:
    """Formatted delivery address for LABEL."""

    value: str
    types: Sequence[str] = ()


@dataclass(frozen=True)
class Phone:
    value: str
    types: Sequence[str] = ()


@dataclass(frozen=True)
class Email:
    value: str
    types: Sequence[str] = ()


@dataclass(frozen=True)
class MediaUri:
    """PHOTO/LOGO/SOUND/KEY referencing external content."""

    uri: str
    media_type: Optional[str] = None


@dataclass(frozen=True)
class MediaInline:
    """PHOTO/LOGO/SOUND/KEY carrying base64 text, written with ENCODING=b."""

    value: str
    media_type: Optional[str] = None


Media = Union[MediaUri, MediaInline]


@dataclass(frozen=True)
class AgentUri:
    uri: str


@dataclass(frozen=True)
class AgentText:
    value: str


Agent = Union[AgentUri, AgentText]


@dataclass(frozen=True)
class Geo:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Organization:
    name: Optional[str] = None
    units: Sequence[str] = ()


class Classification(str, enum.Enum):
    """Access classification for CLASS."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    CONFIDENTIAL = "CONFIDENTIAL"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class CustomProperty:
    """
    Extension property, e.g. X-TWITTER.

    params is kept as a ParameterDict so rendering follows insertion order.
    """

    name: str
    value: str
    params: Mapping[str, str] = field(default_factory=ParameterDict)

    def __post_init__(self):
        object.__setattr__(self, "params", ParameterDict(self.params or {}))


@dataclass(frozen=True)
class Url:
    """
    URL entry, label is shown by Apple clients through itemN.X-ABLabel.
    """

    value: str
    label: Optional[str] = None


@dataclass(frozen=True)
class VCard:
    """
    A vCard 3.0 record. FN and N are required, everything else may be None.

    charset, when set, is declared on every text property and in the MIME
    header.
    """

    formatted_name: str
    name: Name
    version: str = VERSION_3
    charset: Optional[str] = None

    # Identification
    nickname: Optional[Sequence[str]] = None
    photo: Optional[Media] = None
    birthday: Union[dt.date, str, None] = None

    # Delivery addressing
    addresses: Optional[Sequence[Address]] = None
    labels: Optional[Sequence[Label]] = None

    # Telecommunications
    phones: Optional[Sequence[Phone]] = None
    emails: Optional[Sequence[Email]] = None
    mailer: Optional[str] = None

    # Geographical
    timezone: Optional[str] = None
    geo: Optional[Geo] = None

    # Organizational
    title: Optional[str] = None
    role: Optional[str] = None
    logo: Optional[Media] = None
    agent: Optional[Agent] = None
    organization: Optional[Organization] = None

    # Explanatory
    categories: Optional[Sequence[str]] = None
    note: Optional[str] = None
    product_id: Optional[str] = None
    revision: Union[dt.datetime, dt.date, str, None] = None
    sort_string: Optional[str] = None
    sound: Optional[Media] = None
    url: Optional[str] = None
    urls: Optional[Sequence[Url]] = None
    uid: Optional[str] = None

    # Security
    classification: Union[Classification, str, None] = None
    key: Optional[Media] = None

    # X- properties
    custom_properties: Optional[Sequence[CustomProperty]] = None
