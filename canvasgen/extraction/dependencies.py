"""Infers which known external symbols a transformed body uses."""

from __future__ import annotations

import re

from ..models import Dependencies
from .constants import GLYPH_NAMES, SUB_COMPONENT_NAME


def _tag_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"<{re.escape(name)}[\s/>]")


_GLYPH_PATTERNS = tuple((name, _tag_pattern(name)) for name in GLYPH_NAMES)
_SUB_COMPONENT_PATTERN = _tag_pattern(SUB_COMPONENT_NAME)


class DependencyInferer:
    """Membership test of markup tags against the closed glyph and sub-component sets."""

    def infer(self, body: str) -> Dependencies:
        glyphs = tuple(name for name, pattern in _GLYPH_PATTERNS if pattern.search(body))
        return Dependencies(
            glyphs=glyphs,
            uses_sub_component=bool(_SUB_COMPONENT_PATTERN.search(body)),
        )


__all__ = ["DependencyInferer"]
