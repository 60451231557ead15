"""Pipeline orchestration for generate/extract/delete flows."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from .config import CanvasGenConfig, load_config
from .errors import CanvasGenError, WriteFailure
from .extraction import ComponentExtractor
from .identifiers import require_identifier, to_component_name
from .logging import get_logger
from .models import (
    ORIGIN_EXTRACTED,
    ORIGIN_TEMPLATE,
    DeletionReport,
    ExtractionResult,
    GenerationManifest,
)
from .remover import ComponentRemover
from .templates import get_fallback
from .validators.completeness import COMPONENT_SUFFIX


class GenerationOrchestrator:
    """Extracts a canvas arm into a component file, degrading to a template on failure.

    Nothing is cached between calls: the canvas document is read again on every
    request, and concurrent requests for the same id simply race on the write.
    """

    def __init__(
        self,
        config: CanvasGenConfig | None = None,
        *,
        extractor: ComponentExtractor | None = None,
        remover: ComponentRemover | None = None,
    ) -> None:
        self.config = config or load_config(Path.cwd())
        self.extractor = extractor or ComponentExtractor()
        self.remover = remover or ComponentRemover(self.config)
        self.logger = get_logger("orchestrator")

    @classmethod
    def for_project(cls, path: str | Path) -> "GenerationOrchestrator":
        return cls(load_config(Path(path).expanduser().resolve()))

    def extract(self, component_id: str, document: Path | str | None = None) -> ExtractionResult:
        """Extraction request against ``document`` (defaults to the configured canvas page)."""
        try:
            safe_id = require_identifier(component_id)
        except CanvasGenError as exc:
            return ExtractionResult.failure(str(exc), kind=exc.kind)
        target = Path(document) if document is not None else self.config.source_document
        return self.extractor.extract(safe_id, target)

    def generate(self, component_id: str) -> GenerationManifest:
        """Write ``<components_dir>/<id>.tsx`` and return the manifest; never raises."""
        try:
            safe_id = require_identifier(component_id)
            source, origin = self._build_source(safe_id)
            target = self.config.components_dir / f"{safe_id}{COMPONENT_SUFFIX}"
            self._write(target, source)
        except CanvasGenError as exc:
            self.logger.error("Generation failed for %r: %s", component_id, exc)
            return GenerationManifest(success=False, error=str(exc))
        except Exception as exc:  # pragma: no cover - unexpected faults keep the failure shape
            self.logger.exception("Unexpected failure generating %r", component_id)
            return GenerationManifest(success=False, error=str(exc) or exc.__class__.__name__)

        self.logger.info("Generated %s from %s", self.config.relative(target), origin)
        return GenerationManifest(
            success=True,
            files=[str(target)],
            component_path=self.config.relative(target),
            component_tag=f"<{to_component_name(safe_id)} />",
            origin=origin,
        )

    def delete(self, component_id: str) -> DeletionReport:
        """Delete a generated component and strip its imports/usages from the source tree."""
        try:
            safe_id = require_identifier(component_id)
            return self.remover.remove(safe_id)
        except CanvasGenError as exc:
            return DeletionReport(success=False, error=str(exc))
        except OSError as exc:
            self.logger.error("Deletion failed for %r: %s", component_id, exc)
            return DeletionReport(success=False, error=str(exc))
        except Exception as exc:
            self.logger.exception("Unexpected failure deleting %r", component_id)
            return DeletionReport(success=False, error=str(exc) or exc.__class__.__name__)

    def _build_source(self, safe_id: str) -> Tuple[str, str]:
        result = self.extractor.extract(safe_id, self.config.source_document)
        if result.success and result.source is not None:
            return result.source, ORIGIN_EXTRACTED
        self.logger.info("Extraction unavailable for %s; using template fallback", safe_id)
        self.logger.debug("Extraction failure (%s): %s", result.kind, result.error)
        return get_fallback(safe_id), ORIGIN_TEMPLATE

    @staticmethod
    def _write(target: Path, source: str) -> None:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source, encoding="utf-8")
        except OSError as exc:
            raise WriteFailure(f"Failed to write {target}: {exc.strerror or exc}") from exc


__all__ = ["GenerationOrchestrator"]
