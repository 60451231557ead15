"""Fixed catalogs for canvas element extraction."""

from __future__ import annotations

import re

# Name bound to the current canvas element inside the dispatch chain.
SCOPE_VARIABLE = "el"

BRANCH_START_PATTERN = re.compile(r"\bel\.type\s*===\s*[\"']([^\"']+)[\"']\s*\?\s*\(")
BRANCH_END_PATTERN = re.compile(r"^\s*\)\s*:\s*(?:el\.type\s*===|\()")

SCOPE_REFERENCE_PATTERN = re.compile(r"\bel\.([A-Za-z_][A-Za-z0-9_]*)\b")
RESERVED_PROPS = frozenset({"id"})

# Attributes present only for drag/selection on the canvas.
CANVAS_ATTRIBUTE_PATTERNS = (
    re.compile(r"[ \t]*onMouseDown=\{[^}\n]+\}"),
    re.compile(r"[ \t]*role=\"button\""),
    re.compile(r"[ \t]*tabIndex=\{0\}"),
)

CANVAS_CLASS_TOKENS = ("cursor-move", "hover:cursor-grab", "active:cursor-grabbing")
CANVAS_CLASS_PATTERN = re.compile(
    r"(?<![\w:-])(?:" + "|".join(re.escape(token) for token in CANVAS_CLASS_TOKENS) + r")(?![\w:-])"
)
CLASS_NAME_STRING_PATTERN = re.compile(r"className=\"([^\"]*)\"")

COLLAPSE_CALLBACK_PATTERN = re.compile(r"onCollapsedChange=\{[^}\n]+\}")
COLLAPSE_CALLBACK_REPLACEMENT = "onCollapsedChange={() => {}}"

GLYPH_NAMES = (
    "Catalog",
    "ArrowLeft",
    "Add",
    "Copy",
    "Share",
    "TrashCan",
    "Document",
    "User",
    "Search",
    "Application",
    "Category",
)
GLYPH_ORIGIN = "@carbon/icons-react"

SUB_COMPONENT_NAME = "StackSidebar"
SUB_COMPONENT_ORIGIN = "@/components/stack-sidebar"

CLIENT_DIRECTIVE = '"use client";'
BODY_INDENT = "    "
PROP_TYPE = "string | boolean"
