from __future__ import annotations

import logging
from dataclasses import dataclass
from io import StringIO

# ------------------------------------ Logging ---------------------------------
logger = logging.getLogger(__name__)
if not logging.getLogger().handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(filename)s:%(lineno)d %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
logger.setLevel(logging.INFO)  # vcard_format --verbose lowers this to DEBUG


def get_buffer(x: str | StringIO = None) -> StringIO:
    return StringIO(x) if isinstance(x, str) or x is None else x


# ------------------------------------ Options ---------------------------------
@dataclass(frozen=True)
class FormatOptions:
    """
    Call-scoped serialization options.

    @ivar include_content_type:
        Emit the MIME Content-Type header even when the record declares no
        charset. The header then names UTF-8.
    """

    include_content_type: bool = False
