"""Validation of generated component files."""

from .completeness import CompletenessReport, CompletenessValidator, classify

__all__ = [
    "CompletenessReport",
    "CompletenessValidator",
    "classify",
]
