"""Tests for the HTTP client that talks to a running canvasgen service."""

from __future__ import annotations

import io
import json
from typing import Any, List
from urllib.error import HTTPError, URLError

import pytest

from canvasgen.errors import ServiceUnavailable
from canvasgen.helper_client import HelperClient


class _FakeResponse:
    def __init__(self, payload: Any) -> None:
        self._body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> "_FakeResponse":
        return self

    def __exit__(self, *exc: object) -> None:
        return None


def test_generate_posts_component_id(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: List[Any] = []

    def fake_urlopen(request, **kwargs):
        captured.append((request, kwargs))
        return _FakeResponse(
            {
                "success": True,
                "files": ["/abs/src/components/card-2.tsx"],
                "componentPath": "src/components/card-2.tsx",
                "componentTag": "<Card2 />",
                "origin": "extracted",
            }
        )

    monkeypatch.setattr("canvasgen.helper_client.urlopen", fake_urlopen)

    manifest = HelperClient("http://localhost:4202/").generate("card-2")

    request, kwargs = captured[0]
    assert request.full_url == "http://localhost:4202/generate-component"
    assert request.get_method() == "POST"
    assert json.loads(request.data.decode("utf-8")) == {"componentId": "card-2"}
    assert kwargs == {}
    assert manifest.success is True
    assert manifest.component_path == "src/components/card-2.tsx"
    assert manifest.component_tag == "<Card2 />"
    assert manifest.files == ["/abs/src/components/card-2.tsx"]


def test_generate_applies_configured_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: List[Any] = []

    def fake_urlopen(request, **kwargs):
        captured.append(kwargs)
        return _FakeResponse({"success": True, "files": []})

    monkeypatch.setattr("canvasgen.helper_client.urlopen", fake_urlopen)

    HelperClient(request_timeout=5.0).generate("card")

    assert captured == [{"timeout": 5.0}]


def test_generate_returns_failure_manifest_from_error_status(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def fake_urlopen(request, **kwargs):
        body = io.BytesIO(json.dumps({"success": False, "error": "Invalid componentId"}).encode())
        raise HTTPError(request.full_url, 400, "Bad Request", {}, body)

    monkeypatch.setattr("canvasgen.helper_client.urlopen", fake_urlopen)

    manifest = HelperClient().generate("!!!")

    assert manifest.success is False
    assert manifest.error == "Invalid componentId"


def test_generate_raises_when_service_unreachable(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_urlopen(request, **kwargs):
        raise URLError("Connection refused")

    monkeypatch.setattr("canvasgen.helper_client.urlopen", fake_urlopen)

    with pytest.raises(ServiceUnavailable, match="unavailable at http://localhost:4202"):
        HelperClient().generate("card")


def test_generate_rejects_invalid_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "canvasgen.helper_client.urlopen", lambda request, **kwargs: _FakeResponse(b"<html>")
    )

    with pytest.raises(ServiceUnavailable, match="invalid JSON"):
        HelperClient().generate("card")


def test_health_reports_status(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "canvasgen.helper_client.urlopen",
        lambda request, **kwargs: _FakeResponse({"status": "ok"}),
    )
    assert HelperClient().health() is True

    def refused(request, **kwargs):
        raise ConnectionRefusedError("refused")

    monkeypatch.setattr("canvasgen.helper_client.urlopen", refused)
    assert HelperClient().health() is False
