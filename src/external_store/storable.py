"""Storable — the record persisted by every store provider."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

DEFAULT_CACHE_PERIOD = "{0:00:00:00}"


class Longevity(IntEnum):
    """Durability/priority classification attached to a stored record.

    Persisted by *name*.  The integer codes only exist so that rows which
    received the column default (``0``) still decode.
    """

    PERMANENT = 0
    LIMITED = 1


@dataclass
class Storable:
    """A key-identified item held in an external store.

    Attributes:
        key:                   Unique identifier within the store.
        contents:              Opaque payload.
        content_type:          Tag describing how to interpret ``contents``.
        cache_for_time_period: Serialized duration downstream consumers may
                               cache the item for.  Stored verbatim; see
                               :func:`external_store.codec.format_period`.
        longevity:             Durability classification.
    """

    key: str
    contents: str = ""
    content_type: str = ""
    cache_for_time_period: str = DEFAULT_CACHE_PERIOD
    longevity: Longevity = Longevity.PERMANENT
