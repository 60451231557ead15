"""Identifier sanitization and naming rules shared by every boundary."""

from __future__ import annotations

import re

from .errors import InvalidIdentifier

_DISALLOWED = re.compile(r"[^A-Za-z0-9_-]")
_SEGMENT_SPLIT = re.compile(r"[-_]")


def sanitize_identifier(value: str) -> str:
    """Drop every character outside ``[A-Za-z0-9_-]``."""
    return _DISALLOWED.sub("", value)


def require_identifier(value: object) -> str:
    """Return the sanitized identifier or raise when nothing usable remains."""
    if not isinstance(value, str) or not value:
        raise InvalidIdentifier("componentId required")
    safe_id = sanitize_identifier(value)
    if not safe_id:
        raise InvalidIdentifier("Invalid componentId")
    return safe_id


def to_component_name(value: str) -> str:
    """Derive the exported component name, e.g. ``card-2`` -> ``Card2``."""
    safe_id = sanitize_identifier(value)
    return "".join(
        segment[:1].upper() + segment[1:].lower()
        for segment in _SEGMENT_SPLIT.split(safe_id)
    )


__all__ = ["require_identifier", "sanitize_identifier", "to_component_name"]
