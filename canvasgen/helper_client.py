"""Client for a running canvasgen generation service."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .config import DEFAULT_HELPER_URL
from .errors import ServiceUnavailable
from .models import GenerationManifest


class HelperClient:
    """Posts generation requests to the local service over HTTP."""

    def __init__(
        self,
        base_url: str = DEFAULT_HELPER_URL,
        *,
        request_timeout: Optional[float] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.request_timeout = request_timeout

    def health(self) -> bool:
        """Return True when the service answers its health probe."""
        try:
            payload = self._send(Request(f"{self.base_url}/health", method="GET"))
        except ServiceUnavailable:
            return False
        return payload.get("status") == "ok"

    def generate(self, component_id: str) -> GenerationManifest:
        data = json.dumps({"componentId": component_id}).encode("utf-8")
        request = Request(
            f"{self.base_url}/generate-component",
            data=data,
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        return GenerationManifest.from_dict(self._send(request))

    def _send(self, request: Request) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        if self.request_timeout is not None:
            kwargs["timeout"] = self.request_timeout
        try:
            with urlopen(request, **kwargs) as response:
                raw = response.read()
        except HTTPError as exc:
            # Failed manifests are still delivered as JSON bodies.
            raw = exc.read()
            payload = _decode(raw)
            if payload is None:
                raise ServiceUnavailable(
                    f"Component service returned status {exc.code}: {exc.reason}"
                ) from exc
            return payload
        except (URLError, ConnectionError) as exc:
            reason = getattr(exc, "reason", exc)
            raise ServiceUnavailable(
                f"Component service unavailable at {self.base_url}: {reason}"
            ) from exc

        payload = _decode(raw)
        if payload is None:
            raise ServiceUnavailable("Component service returned invalid JSON")
        return payload


def _decode(raw: bytes) -> Optional[Dict[str, Any]]:
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    return payload if isinstance(payload, dict) else None


__all__ = ["HelperClient"]
