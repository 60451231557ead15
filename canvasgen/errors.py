"""Error taxonomy for the extraction and generation pipeline."""

from __future__ import annotations


class CanvasGenError(RuntimeError):
    """Base class for expected pipeline failures."""

    kind = "canvasgen_error"


class DocumentNotFound(CanvasGenError):
    """Raised when the canvas source document path does not resolve."""

    kind = "document_not_found"


class BranchNotFound(CanvasGenError):
    """Raised when no complete conditional arm exists for an element type."""

    kind = "branch_not_found"


class InvalidIdentifier(CanvasGenError):
    """Raised when an identifier is empty after sanitization."""

    kind = "invalid_identifier"


class WriteFailure(CanvasGenError):
    """Raised when the file system rejects a component write."""

    kind = "write_failure"


class ServiceUnavailable(CanvasGenError):
    """Raised when the component generation service cannot be reached."""

    kind = "service_unavailable"


__all__ = [
    "BranchNotFound",
    "CanvasGenError",
    "DocumentNotFound",
    "InvalidIdentifier",
    "ServiceUnavailable",
    "WriteFailure",
]
