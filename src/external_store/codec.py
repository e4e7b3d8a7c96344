"""Record codec — converts a Storable to column values and back."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import timedelta
from typing import Any

from external_store.exceptions import InvalidEnumerationValueError
from external_store.storable import Longevity, Storable

_PERIOD_RE = re.compile(r"^\{(\d+):([01]\d|2[0-3]):([0-5]\d):([0-5]\d)\}$")


# ── longevity ────────────────────────────────────────────────


def encode_longevity(longevity: Longevity) -> str:
    return longevity.name


def decode_longevity(value: Any) -> Longevity:
    """Parse a stored longevity value.

    Accepts a member name, or the integer code of a defined member (as a
    number or a decimal string).  Anything else is corrupt data.
    """
    if isinstance(value, Longevity):
        return value
    code = value
    if isinstance(value, str):
        if value in Longevity.__members__:
            return Longevity[value]
        if value.strip().isdecimal():
            code = int(value)
    if isinstance(code, int) and not isinstance(code, bool):
        try:
            return Longevity(code)
        except ValueError:
            pass
    raise InvalidEnumerationValueError("longevity", value)


# ── rows ─────────────────────────────────────────────────────


def to_row(storable: Storable) -> dict[str, Any]:
    """Return the named statement parameters for *storable*."""
    return {
        "key": storable.key,
        "cacheForTimePeriod": storable.cache_for_time_period,
        "contents": storable.contents,
        "contentType": storable.content_type,
        "longevity": encode_longevity(storable.longevity),
    }


def from_row(key: str, row: Sequence[Any]) -> Storable:
    """Rebuild a Storable from ``(cacheForTimePeriod, contents, contentType, longevity)``."""
    cache_for_time_period, contents, content_type, longevity = row
    return Storable(
        key=key,
        cache_for_time_period=cache_for_time_period,
        contents=contents,
        content_type=content_type,
        longevity=decode_longevity(longevity),
    )


# ── cache periods ────────────────────────────────────────────


def format_period(period: timedelta) -> str:
    """Render *period* as ``{d:hh:mm:ss}``, e.g. ``{1:02:30:00}``."""
    if period < timedelta(0):
        raise ValueError("cache period cannot be negative")
    days, remainder = divmod(int(period.total_seconds()), 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{{{days}:{hours:02d}:{minutes:02d}:{seconds:02d}}}"


def parse_period(text: str) -> timedelta:
    match = _PERIOD_RE.match(text)
    if match is None:
        raise ValueError(f"Malformed cache period: {text!r}")
    days, hours, minutes, seconds = (int(part) for part in match.groups())
    return timedelta(days=days, hours=hours, minutes=minutes, seconds=seconds)
