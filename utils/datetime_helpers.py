# -*- coding: utf-8 -*-
"""Datetime helpers.

Every ``datetime`` stored in the database is naive UTC. Documents are
rendered as ISO 8601 strings with an explicit ``+00:00`` offset.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Current time as naive UTC, the form stored in the database."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


def _ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to naive values, convert aware ones."""

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def datetime_to_iso(dt: Optional[datetime]) -> Optional[str]:
    """Format ``dt`` as a UTC ISO string; ``None`` passes through."""

    if dt is None:
        return None
    return _ensure_utc(dt).isoformat()


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 string (``Z`` suffix accepted) into naive UTC.

    :raises ValueError: when the string is not a valid timestamp.
    """

    if value is None or value == "":
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    return _ensure_utc(parsed).replace(tzinfo=None)
