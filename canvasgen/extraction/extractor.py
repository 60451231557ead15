"""Extraction request: canvas document + element type -> component source."""

from __future__ import annotations

from pathlib import Path

from ..errors import BranchNotFound, CanvasGenError, DocumentNotFound
from ..logging import get_logger
from ..models import ExtractionResult
from .assembler import DefinitionAssembler
from .dependencies import DependencyInferer
from .locator import BlockLocator
from .transform import TextTransformPipeline


class ComponentExtractor:
    """Runs locate -> transform -> infer -> assemble against a fresh read of the document."""

    def __init__(
        self,
        locator: BlockLocator | None = None,
        pipeline: TextTransformPipeline | None = None,
        inferer: DependencyInferer | None = None,
        assembler: DefinitionAssembler | None = None,
    ) -> None:
        self.locator = locator or BlockLocator()
        self.pipeline = pipeline or TextTransformPipeline()
        self.inferer = inferer or DependencyInferer()
        self.assembler = assembler or DefinitionAssembler()
        self.logger = get_logger("extraction")

    def extract(self, type_id: str, document_path: Path | str) -> ExtractionResult:
        """Return the generated source, or a failure result; never raises."""
        try:
            source = self._extract(type_id, Path(document_path))
        except CanvasGenError as exc:
            return ExtractionResult.failure(str(exc), kind=exc.kind)
        except Exception as exc:
            self.logger.debug("Unexpected extraction fault for %s", type_id, exc_info=True)
            return ExtractionResult.failure(str(exc) or exc.__class__.__name__)
        return ExtractionResult.ok(source)

    def _extract(self, type_id: str, document_path: Path) -> str:
        full_path = document_path if document_path.is_absolute() else Path.cwd() / document_path
        if not full_path.is_file():
            raise DocumentNotFound(f"Canvas document not found: {full_path}")

        lines = full_path.read_text(encoding="utf-8").split("\n")
        span = self.locator.locate(lines, type_id)
        if span is None:
            raise BranchNotFound(f'No branch el.type === "{type_id}" in {full_path.name}')
        self.logger.debug("Located %s at lines %d-%d", type_id, span.start + 1, span.end + 1)

        raw_block = "\n".join(span.payload(lines))
        transformed = self.pipeline.transform(raw_block, type_id)
        deps = self.inferer.infer(transformed.body)
        return self.assembler.assemble(type_id, transformed.body, transformed.props, deps)


def extract_component(type_id: str, document_path: Path | str) -> ExtractionResult:
    """Convenience wrapper around :class:`ComponentExtractor`."""
    return ComponentExtractor().extract(type_id, document_path)


__all__ = ["ComponentExtractor", "extract_component"]
