"""Classifies generated component files as placeholder stubs or complete UI."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from ..models import VERDICT_COMPLETE, VERDICT_SKIP, VERDICT_STUB, ComponentCheck

COMPONENT_SUFFIX = ".tsx"

_IDENTITY_MARKER = re.compile(r"data-component-id")

# A single wrapping element whose only content is bare text.
_STUB_PATTERNS = (
    re.compile(
        r"return\s*<div\s+data-component-id=[\"'][^\"']+[\"'][^>]*>\s*[^<]*</div>\s*;?\s*$",
        re.MULTILINE,
    ),
    re.compile(r"return\s*<div[^>]*>\s*[^<{]*</div>\s*;?\s*$", re.MULTILINE),
)

_FULL_UI_INDICATORS = (
    re.compile(r"@carbon/icons-react"),
    re.compile(r"^\s*import\s+.+\s+from\s+[\"'][^\"']+[\"']", re.MULTILINE),
    re.compile(r"border-brandcolor|bg-brandcolor|text-brandcolor"),
    re.compile(r"rounded-large|rounded-button|shadow-card"),
    re.compile(r"className=.*\s{2,}"),
    re.compile(r"<(?:button|nav|header|aside|main)\s"),
)


def classify(content: str) -> str:
    """Return ``skip``, ``stub`` or ``complete`` for one component file's text."""
    if not _IDENTITY_MARKER.search(content):
        return VERDICT_SKIP
    if not any(pattern.search(content) for pattern in _STUB_PATTERNS):
        return VERDICT_COMPLETE
    if any(indicator.search(content) for indicator in _FULL_UI_INDICATORS):
        return VERDICT_COMPLETE
    return VERDICT_STUB


@dataclass
class CompletenessReport:
    """Verdicts for every checked file, with stub paths relative to the project root."""

    root: Path
    checks: List[ComponentCheck] = field(default_factory=list)

    @property
    def stubs(self) -> List[ComponentCheck]:
        return [check for check in self.checks if check.verdict == VERDICT_STUB]

    @property
    def ok(self) -> bool:
        return not self.stubs

    def stub_paths(self) -> List[str]:
        paths: List[str] = []
        for check in self.stubs:
            try:
                paths.append(check.path.relative_to(self.root).as_posix())
            except ValueError:
                paths.append(str(check.path))
        return paths


class CompletenessValidator:
    """Batch classifier over a components directory or one named component."""

    def __init__(self, root: Path, components_dir: Path) -> None:
        self.root = root
        self.components_dir = components_dir

    def resolve_target(self, component: str) -> Path:
        """Map ``card-2`` or ``card-2.tsx`` (or an absolute path) to a component file."""
        name = component if component.endswith(COMPONENT_SUFFIX) else f"{component}{COMPONENT_SUFFIX}"
        path = Path(name)
        return path if path.is_absolute() else self.components_dir / path

    def check_file(self, path: Path) -> ComponentCheck:
        content = path.read_text(encoding="utf-8")
        return ComponentCheck(path=path, verdict=classify(content))

    def check(self, component: str | None = None) -> CompletenessReport:
        """Classify one component, or every tracked file; raises FileNotFoundError for a missing name."""
        if component:
            target = self.resolve_target(component)
            if not target.is_file():
                raise FileNotFoundError(f"File not found: {target}")
            files: Sequence[Path] = [target]
        elif self.components_dir.is_dir():
            files = sorted(
                path for path in self.components_dir.iterdir()
                if path.is_file() and path.suffix == COMPONENT_SUFFIX
            )
        else:
            files = []
        return CompletenessReport(root=self.root, checks=[self.check_file(path) for path in files])


__all__ = ["CompletenessReport", "CompletenessValidator", "classify"]
