"""Hysteria exclusion filter for proxy records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

HYSTERIA_TOKEN = "hysteria"


def _field(record: Any, key: str) -> str:
    """Read a field as text. Missing, None and other falsy values read as ''."""
    if not isinstance(record, Mapping):
        return ""
    value = record.get(key)
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def is_hysteria(record: Any) -> bool:
    """Return True if the record's type or name mentions hysteria.

    Matching is a case-insensitive substring test, so "hysteria2" and
    "US-Hysteria-Relay" both match. A record with neither field set is
    never treated as hysteria.
    """
    proxy_type = _field(record, "type")
    name = _field(record, "name")
    if not proxy_type and not name:
        return False

    return HYSTERIA_TOKEN in proxy_type.lower() or HYSTERIA_TOKEN in name.lower()


def remove_hysteria(records: Iterable[Any]) -> list[Any]:
    """Return the records that are not hysteria, in their original order.

    Records are passed through as-is; nothing is copied or mutated.
    """
    kept = []
    removed = 0
    for record in records:
        if is_hysteria(record):
            removed += 1
        else:
            kept.append(record)

    logger.debug("Removed %d hysteria record(s), kept %d", removed, len(kept))
    return kept
