"""Core data models shared across canvasgen components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

ORIGIN_EXTRACTED = "extracted"
ORIGIN_TEMPLATE = "template"

VERDICT_SKIP = "skip"
VERDICT_STUB = "stub"
VERDICT_COMPLETE = "complete"


@dataclass(frozen=True)
class BlockSpan:
    """Line span of one conditional arm; the payload sits strictly between the bounds."""

    start: int
    end: int

    def payload(self, lines: Sequence[str]) -> List[str]:
        """Return the raw block lines without the branch delimiters."""
        return list(lines[self.start + 1 : self.end])


@dataclass(frozen=True)
class TransformResult:
    """Rewritten block body and the property names it references."""

    body: str
    props: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Dependencies:
    """External symbols a generated definition must import."""

    glyphs: Tuple[str, ...] = ()
    uses_sub_component: bool = False


@dataclass
class ExtractionResult:
    """Tagged outcome of extracting one element type from the canvas document."""

    success: bool
    source: Optional[str] = None
    error: Optional[str] = None
    kind: Optional[str] = None

    @classmethod
    def ok(cls, source: str) -> "ExtractionResult":
        return cls(success=True, source=source)

    @classmethod
    def failure(cls, error: str, *, kind: Optional[str] = None) -> "ExtractionResult":
        return cls(success=False, error=error, kind=kind)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "source": self.source}
        return {"success": False, "error": self.error}


@dataclass
class GenerationManifest:
    """Result of a generation request, mirrored over HTTP and the CLI."""

    success: bool
    files: List[str] = field(default_factory=list)
    component_path: Optional[str] = None
    component_tag: Optional[str] = None
    error: Optional[str] = None
    origin: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"success": self.success}
        if self.success:
            payload["files"] = list(self.files)
            payload["componentPath"] = self.component_path
            payload["componentTag"] = self.component_tag
            if self.origin:
                payload["origin"] = self.origin
        else:
            payload["error"] = self.error
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationManifest":
        files = data.get("files")
        return cls(
            success=bool(data.get("success")),
            files=[str(item) for item in files] if isinstance(files, list) else [],
            component_path=_optional_str(data.get("componentPath")),
            component_tag=_optional_str(data.get("componentTag")),
            error=_optional_str(data.get("error")),
            origin=_optional_str(data.get("origin")),
        )


@dataclass
class DeletionReport:
    """Outcome of removing a generated component and its usages."""

    success: bool
    deleted: bool = False
    updated_files: List[str] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error}
        return {
            "success": True,
            "deleted": self.deleted,
            "updatedFiles": list(self.updated_files),
        }


@dataclass(frozen=True)
class ComponentCheck:
    """Classification verdict for a single component file."""

    path: Path
    verdict: str


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None
