"""Locates one element type's arm in the canvas dispatch chain."""

from __future__ import annotations

from typing import Optional, Sequence

from ..models import BlockSpan
from .constants import BRANCH_END_PATTERN, BRANCH_START_PATTERN


class BlockLocator:
    """Line-oriented scan over a chain of ``el.type === "X" ? (...) : ...`` arms.

    Arms are assumed not to nest under the same guard. A guard whose opening
    parenthesis sits on the following line is not recognised.
    """

    def locate(self, lines: Sequence[str], type_id: str) -> Optional[BlockSpan]:
        """Return the span of the arm for ``type_id`` or None when absent or unterminated."""
        start = self._find_start(lines, type_id)
        if start is None:
            return None
        for index in range(start + 1, len(lines)):
            if BRANCH_END_PATTERN.match(lines[index]):
                return BlockSpan(start=start, end=index)
        return None

    @staticmethod
    def _find_start(lines: Sequence[str], type_id: str) -> Optional[int]:
        for index, line in enumerate(lines):
            match = BRANCH_START_PATTERN.search(line)
            if match and match.group(1) == type_id:
                return index
        return None


__all__ = ["BlockLocator"]
