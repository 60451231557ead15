"""Rewrite rules that turn a canvas arm into standalone component markup."""

from __future__ import annotations

import re
from typing import Dict, List, Sequence

from ..logging import get_logger
from ..models import TransformResult
from .constants import (
    CANVAS_ATTRIBUTE_PATTERNS,
    CANVAS_CLASS_PATTERN,
    CLASS_NAME_STRING_PATTERN,
    COLLAPSE_CALLBACK_PATTERN,
    COLLAPSE_CALLBACK_REPLACEMENT,
    RESERVED_PROPS,
    SCOPE_REFERENCE_PATTERN,
)

_SPACE_RUN = re.compile(r" {2,}")


def dedent_lines(lines: Sequence[str]) -> List[str]:
    """Remove the common leading whitespace from every non-blank line."""
    widths = [len(line) - len(line.lstrip()) for line in lines if line.strip()]
    if not widths:
        return list(lines)
    width = min(widths)
    if width == 0:
        return list(lines)
    return [line[width:] if line.strip() else line for line in lines]


class TextTransformPipeline:
    """Applies the canvas rewrite stages in a fixed order.

    Every stage works on one line at a time, so the transformed body always has
    the same number of lines as the raw block. Attribute stripping runs before
    identifier rewriting because the drag handler references ``el.id``.
    """

    def __init__(self) -> None:
        self.logger = get_logger("extraction.transform")

    def transform(self, raw_block: str, type_id: str) -> TransformResult:
        lines = dedent_lines(raw_block.replace("\r\n", "\n").split("\n"))
        lines = [self.strip_canvas_affordances(line) for line in lines]

        found: Dict[str, None] = {}
        lines = [self.rewrite_identifiers(line, found) for line in lines]
        lines = [self.normalize_callbacks(line) for line in lines]

        body = "\n".join(lines)
        if not body.strip():
            body = ""
        props = tuple(name for name in found if name not in RESERVED_PROPS)
        self.logger.debug("Transformed %s block: %d lines, props=%s", type_id, len(lines), props)
        return TransformResult(body=body, props=props)

    @staticmethod
    def strip_canvas_affordances(line: str) -> str:
        if not line.strip():
            return line
        result = line
        for pattern in CANVAS_ATTRIBUTE_PATTERNS:
            result = pattern.sub("", result)
        result = CLASS_NAME_STRING_PATTERN.sub(_clean_class_string, result)

        indent_width = len(result) - len(result.lstrip())
        content = _SPACE_RUN.sub(" ", result[indent_width:]).rstrip()
        if not content:
            return ""
        return result[:indent_width] + content

    @staticmethod
    def rewrite_identifiers(line: str, found: Dict[str, None]) -> str:
        def _replace(match: re.Match[str]) -> str:
            name = match.group(1)
            found.setdefault(name, None)
            return name

        return SCOPE_REFERENCE_PATTERN.sub(_replace, line)

    @staticmethod
    def normalize_callbacks(line: str) -> str:
        return COLLAPSE_CALLBACK_PATTERN.sub(COLLAPSE_CALLBACK_REPLACEMENT, line)


def _clean_class_string(match: re.Match[str]) -> str:
    classes = CANVAS_CLASS_PATTERN.sub("", match.group(1))
    classes = _SPACE_RUN.sub(" ", classes).strip()
    return f'className="{classes}"'


__all__ = ["TextTransformPipeline", "dedent_lines"]
