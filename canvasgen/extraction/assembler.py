"""Assembles a standalone component source file from a transformed block."""

from __future__ import annotations

from typing import List, Sequence

from ..identifiers import to_component_name
from ..models import Dependencies
from .constants import (
    BODY_INDENT,
    CLIENT_DIRECTIVE,
    GLYPH_ORIGIN,
    PROP_TYPE,
    SUB_COMPONENT_NAME,
    SUB_COMPONENT_ORIGIN,
)


class DefinitionAssembler:
    """Pure text assembly: identical inputs always produce identical output."""

    def assemble(
        self,
        type_id: str,
        body: str,
        props: Sequence[str],
        deps: Dependencies,
    ) -> str:
        name = to_component_name(type_id)
        parts: List[str] = [CLIENT_DIRECTIVE, ""]

        if deps.glyphs:
            parts.append(f'import {{ {", ".join(deps.glyphs)} }} from "{GLYPH_ORIGIN}";')
            parts.append("")
        if deps.uses_sub_component:
            parts.append(f'import {SUB_COMPONENT_NAME} from "{SUB_COMPONENT_ORIGIN}";')
            parts.append("")

        if props:
            parts.append(f"export interface {name}Props {{")
            parts.extend(f"  {prop}?: {PROP_TYPE};" for prop in props)
            parts.append("}")
            parts.append("")
            params = f"{{ {', '.join(props)} }}: {name}Props = {{}}"
        else:
            params = ""

        parts.append(f"export default function {name}({params}) {{")
        parts.append("  return (")
        parts.extend(self._indent(body))
        parts.append("  );")
        parts.append("}")
        return "\n".join(parts) + "\n"

    @staticmethod
    def _indent(body: str) -> List[str]:
        if not body:
            return []
        return [BODY_INDENT + line if line.strip() else line for line in body.split("\n")]


__all__ = ["DefinitionAssembler"]
