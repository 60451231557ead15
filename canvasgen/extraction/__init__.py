"""Canvas arm extraction: locate, rewrite, infer imports, assemble."""

from .assembler import DefinitionAssembler
from .dependencies import DependencyInferer
from .extractor import ComponentExtractor, extract_component
from .locator import BlockLocator
from .transform import TextTransformPipeline, dedent_lines

__all__ = [
    "BlockLocator",
    "ComponentExtractor",
    "DefinitionAssembler",
    "DependencyInferer",
    "TextTransformPipeline",
    "dedent_lines",
    "extract_component",
]
