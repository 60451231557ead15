"""Tests for dependency inference."""

from __future__ import annotations

from canvasgen.extraction import DependencyInferer
from canvasgen.models import Dependencies


def test_glyphs_follow_catalog_order_not_body_order() -> None:
    body = "<div>\n  <Search size={16} />\n  <TrashCan/>\n  <Catalog>\n</div>"
    deps = DependencyInferer().infer(body)
    assert deps.glyphs == ("Catalog", "TrashCan", "Search")
    assert deps.uses_sub_component is False


def test_prefix_names_are_not_treated_as_glyphs() -> None:
    body = "<CatalogItem />\n<Adder>\n<UserAvatar name={name} />"
    assert DependencyInferer().infer(body) == Dependencies()


def test_sub_component_detected_as_tag() -> None:
    body = "<StackSidebar\n  compact\n/>"
    deps = DependencyInferer().infer(body)
    assert deps.uses_sub_component is True
    assert deps.glyphs == ()


def test_names_outside_tags_do_not_count() -> None:
    body = '<span title="Catalog">{User} StackSidebar</span>'
    assert DependencyInferer().infer(body) == Dependencies()
