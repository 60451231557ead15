"""Tests for canvasgen.orchestrator."""

from __future__ import annotations

from canvasgen.orchestrator import GenerationOrchestrator
from canvasgen.validators import classify
from tests._fixtures.project_builder import ProjectBuilder


def test_generate_extracts_from_canvas(project_builder: ProjectBuilder) -> None:
    project_builder.write_canvas()
    orchestrator = GenerationOrchestrator(project_builder.config())

    manifest = orchestrator.generate("card-2")

    target = project_builder.path("src/components/card-2.tsx")
    assert manifest.success is True
    assert manifest.origin == "extracted"
    assert manifest.files == [str(target)]
    assert manifest.component_path == "src/components/card-2.tsx"
    assert manifest.component_tag == "<Card2 />"
    content = target.read_text(encoding="utf-8")
    assert "export default function Card2({ title, label, description }" in content
    assert "onMouseDown" not in content


def test_generate_unknown_type_falls_back_to_stub(project_builder: ProjectBuilder) -> None:
    project_builder.write_canvas()
    orchestrator = GenerationOrchestrator(project_builder.config())

    manifest = orchestrator.generate("unknown-widget")

    assert manifest.success is True
    assert manifest.origin == "template"
    content = project_builder.path("src/components/unknown-widget.tsx").read_text(encoding="utf-8")
    assert '<div data-component-id="unknown-widget">unknown-widget</div>' in content
    assert classify(content) == "stub"


def test_generate_without_canvas_uses_curated_template(project_builder: ProjectBuilder) -> None:
    orchestrator = GenerationOrchestrator(project_builder.config())

    manifest = orchestrator.generate("card-2")

    assert manifest.success is True
    assert manifest.origin == "template"
    content = project_builder.path("src/components/card-2.tsx").read_text(encoding="utf-8")
    assert 'description = "Outline button component for secondary actions."' in content


def test_generate_sanitizes_identifier(project_builder: ProjectBuilder) -> None:
    project_builder.write_canvas()
    orchestrator = GenerationOrchestrator(project_builder.config())

    manifest = orchestrator.generate("card;rm -rf")

    assert manifest.success is True
    assert manifest.component_path == "src/components/cardrm-rf.tsx"
    components = project_builder.path("src/components")
    assert [path.name for path in components.iterdir()] == ["cardrm-rf.tsx"]


def test_generate_rejects_empty_identifier(project_builder: ProjectBuilder) -> None:
    orchestrator = GenerationOrchestrator(project_builder.config())

    manifest = orchestrator.generate("../;!")

    assert manifest.success is False
    assert manifest.error == "Invalid componentId"
    assert not project_builder.path("src/components").exists()


def test_generate_reports_write_failure(project_builder: ProjectBuilder) -> None:
    project_builder.write_canvas()
    project_builder.write({"src/components": "not a directory\n"})
    orchestrator = GenerationOrchestrator(project_builder.config())

    manifest = orchestrator.generate("card-2")

    assert manifest.success is False
    assert "Failed to write" in (manifest.error or "")
    assert manifest.to_dict() == {"success": False, "error": manifest.error}


def test_generate_is_repeatable_and_last_write_wins(project_builder: ProjectBuilder) -> None:
    project_builder.write_canvas()
    orchestrator = GenerationOrchestrator(project_builder.config())
    target = project_builder.path("src/components/card.tsx")

    orchestrator.generate("card")
    first = target.read_text(encoding="utf-8")
    orchestrator.generate("card")
    assert target.read_text(encoding="utf-8") == first

    target.write_text("edited by hand\n", encoding="utf-8")
    orchestrator.generate("card")
    assert target.read_text(encoding="utf-8") == first


def test_extract_uses_configured_document(project_builder: ProjectBuilder) -> None:
    project_builder.write_canvas()
    orchestrator = GenerationOrchestrator(project_builder.config())

    result = orchestrator.extract("card")

    assert result.success is True
    assert "export default function Card({ label }: CardProps = {}) {" in (result.source or "")


def test_extract_rejects_invalid_identifier(project_builder: ProjectBuilder) -> None:
    result = GenerationOrchestrator(project_builder.config()).extract("")
    assert result.success is False
    assert result.error == "componentId required"


def test_for_project_loads_config(project_builder: ProjectBuilder) -> None:
    project_builder.write({".canvasgen.yml": "components_dir: ui/shared\n"})
    project_builder.write_canvas()

    manifest = GenerationOrchestrator.for_project(project_builder.path()).generate("card")

    assert manifest.component_path == "ui/shared/card.tsx"
