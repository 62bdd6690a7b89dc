"""
vcardwriter module for writing vCard 3.0 (RFC 2426) text.

Building a card
---------------
>>> import vcardwriter as vw
>>> card = vw.VCard(formatted_name="John Doe", name=vw.Name(family="Doe", given="John"))
>>> print(vw.format_vcard(card).replace("\\r\\n", "\\n"))
BEGIN:VCARD
VERSION:3.0
FN:John Doe
N:Doe;John;;;
END:VCARD

Declaring a charset adds a MIME header and a CHARSET parameter to every text
property:

>>> card = vw.VCard(formatted_name="José García", name=vw.Name(family="García", given="José"), charset="UTF-8")
>>> print(vw.format_vcard(card).replace("\\r\\n", "\\n"))
Content-Type: text/directory;profile=vcard;charset=UTF-8
<BLANKLINE>
BEGIN:VCARD
VERSION:3.0
FN;CHARSET=UTF-8:José García
N;CHARSET=UTF-8:García;José;;;
END:VCARD
"""

from .helper import FormatOptions
from .loader import record_from_dict, records_from_json
from .models import (
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
from .vcard import VCard3, format_vcard

VERSION = "1.0.0"
