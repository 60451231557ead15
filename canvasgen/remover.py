"""Deletion of a generated component together with its imports and usages."""

from __future__ import annotations

import os
import re
import shutil
from pathlib import Path
from typing import Iterator, List, Tuple

from .config import CanvasGenConfig
from .logging import get_logger
from .models import DeletionReport
from .validators.completeness import COMPONENT_SUFFIX

_SOURCE_SUFFIXES = (".tsx", ".ts", ".jsx", ".js")
_EXCLUDED_DIRS = {"node_modules"}


def _import_pattern(safe_id: str) -> re.Pattern[str]:
    module = rf"[^'\"]*components[/\\]{re.escape(safe_id)}(?:[/\\][^'\"]*|\.(?:tsx|ts|jsx|js))?"
    return re.compile(
        rf"^[ \t]*import\s+(\w+)\s+from\s+['\"]{module}['\"];?[ \t]*(?:\r?\n)?",
        re.MULTILINE,
    )


def _usage_pattern(name: str) -> re.Pattern[str]:
    escaped = re.escape(name)
    return re.compile(rf"<{escaped}\s+[^/]*/>|<{escaped}\s*/>")


def strip_component_references(content: str, safe_id: str) -> str:
    """Drop default imports of the component and replace self-closing usages with ``{null}``."""
    pattern = _import_pattern(safe_id)
    names = [match.group(1) for match in pattern.finditer(content)]
    if not names:
        return content
    updated = pattern.sub("", content)
    for name in dict.fromkeys(names):
        updated = _usage_pattern(name).sub("{null}", updated)
    return updated


class ComponentRemover:
    """Removes ``<components_dir>/<id>.tsx`` (or its directory) and every reference to it."""

    def __init__(self, config: CanvasGenConfig) -> None:
        self.config = config
        self.logger = get_logger("remover")

    def remove(self, safe_id: str) -> DeletionReport:
        component_file = self.config.components_dir / f"{safe_id}{COMPONENT_SUFFIX}"
        component_dir = self.config.components_dir / safe_id

        # Rewrites are computed for the whole tree before any file is touched.
        rewrites: List[Tuple[Path, str]] = []
        for path in self._iter_source_files():
            if path == component_file or component_dir in path.parents:
                continue
            try:
                content = path.read_text(encoding="utf-8")
            except UnicodeDecodeError:
                self.logger.warning("Skipping %s: not valid UTF-8", self.config.relative(path))
                continue
            stripped = strip_component_references(content, safe_id)
            if stripped != content:
                rewrites.append((path, stripped))

        updated: List[str] = []
        for path, stripped in rewrites:
            path.write_text(stripped, encoding="utf-8")
            updated.append(self.config.relative(path))
            self.logger.debug("Removed references to %s from %s", safe_id, path)

        deleted = False
        if component_file.is_file():
            component_file.unlink()
            deleted = True
        if component_dir.is_dir():
            shutil.rmtree(component_dir)
            deleted = True

        self.logger.info(
            "Deleted component %s (removed=%s, updated %d files)", safe_id, deleted, len(updated)
        )
        return DeletionReport(success=True, deleted=deleted, updated_files=updated)

    def _iter_source_files(self) -> Iterator[Path]:
        root = self.config.source_dir
        if not root.is_dir():
            return
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(
                name for name in dirnames
                if name not in _EXCLUDED_DIRS and not name.startswith(".")
            )
            for filename in sorted(filenames):
                if filename.endswith(_SOURCE_SUFFIXES):
                    yield Path(dirpath) / filename


__all__ = ["ComponentRemover", "strip_component_references"]
