"""Fallback component sources used when canvas extraction is unavailable."""

from __future__ import annotations

from typing import Callable, Dict

from .identifiers import sanitize_identifier, to_component_name


def get_fallback(type_id: str) -> str:
    """Return a curated definition for known types, otherwise a placeholder stub."""
    safe_id = sanitize_identifier(type_id)
    builder = _CURATED_BUILDERS.get(safe_id)
    if builder is not None:
        return builder()
    return build_stub(safe_id)


def has_curated_template(type_id: str) -> bool:
    return sanitize_identifier(type_id) in _CURATED_BUILDERS


def build_stub(safe_id: str) -> str:
    """Placeholder that `canvasgen check` reports until real markup replaces it."""
    name = to_component_name(safe_id)
    return (
        '"use client";\n'
        "\n"
        f'// Placeholder: replace with the full markup of the canvas element type "{safe_id}".\n'
        f"// Run `canvasgen check {safe_id}` after copying the UI over.\n"
        f"export default function {name}() {{\n"
        f'  return <div data-component-id="{safe_id}">{safe_id}</div>;\n'
        "}\n"
    )


def _card_2_source() -> str:
    return '''"use client";

import { Catalog } from "@carbon/icons-react";

export interface Card2Props {
  title?: string;
  label?: string;
  description?: string;
}

export default function Card2({
  title,
  label,
  description = "Outline button component for secondary actions.",
}: Card2Props = {}) {
  const heading = title ?? label ?? "Title";
  return (
    <div className="min-w-64 w-full max-w-full h-[323px] rounded-large overflow-hidden bg-brandcolor-white shadow-card flex flex-col">
      <div className="bg-brandcolor-fill px-4 py-3 rounded-b-button shrink-0">
        <div className="flex items-center gap-2">
          <Catalog size={20} className="text-brandcolor-strokestrong shrink-0" aria-hidden />
          <h3 className="text-sm font-semibold text-brandcolor-textstrong">
            {heading}
          </h3>
        </div>
        {description && (
          <p className="mt-1.5 text-xs text-brandcolor-textweak">
            {description}
          </p>
        )}
      </div>
      <div className="flex flex-col flex-1 min-h-0 items-center justify-center p-4">
        <img src="/Button.svg" alt="" className="max-w-full h-auto shrink-0" width={107} height={40} />
      </div>
    </div>
  );
}
'''


_CURATED_BUILDERS: Dict[str, Callable[[], str]] = {
    "card-2": _card_2_source,
}


__all__ = ["build_stub", "get_fallback", "has_curated_template"]
