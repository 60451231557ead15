"""Configuration loading for canvasgen (.canvasgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".canvasgen.yml"

DEFAULT_SOURCE_DOCUMENT = "src/pages/CanvasPage.tsx"
DEFAULT_SOURCE_DIR = "src"
DEFAULT_COMPONENTS_DIR = "src/components"
DEFAULT_HELPER_URL = "http://localhost:4202"
DEFAULT_SERVICE_HOST = "127.0.0.1"
DEFAULT_SERVICE_PORT = 4202


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class HelperConfig:
    """Where the local generation service listens, as seen by clients."""

    base_url: str = DEFAULT_HELPER_URL
    request_timeout: Optional[float] = None


@dataclass
class ServiceConfig:
    """Bind address for `canvasgen serve`."""

    host: str = DEFAULT_SERVICE_HOST
    port: int = DEFAULT_SERVICE_PORT


@dataclass
class CanvasGenConfig:
    """Represents the settings defined in .canvasgen.yml."""

    root: Path
    source_document: Path = field(init=False)
    source_dir: Path = field(init=False)
    components_dir: Path = field(init=False)
    helper: HelperConfig = field(default_factory=HelperConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)

    def __post_init__(self) -> None:
        self.source_document = self.root / DEFAULT_SOURCE_DOCUMENT
        self.source_dir = self.root / DEFAULT_SOURCE_DIR
        self.components_dir = self.root / DEFAULT_COMPONENTS_DIR

    def relative(self, path: Path) -> str:
        """Return ``path`` relative to the project root in POSIX form when possible."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return str(path)


def load_config(config_path: Path) -> CanvasGenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()
    config = CanvasGenConfig(root=root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    source_document = _as_str(data.get("source_document"))
    if source_document:
        config.source_document = _resolve(root, source_document)
    source_dir = _as_str(data.get("source_dir"))
    if source_dir:
        config.source_dir = _resolve(root, source_dir)
    components_dir = _as_str(data.get("components_dir"))
    if components_dir:
        config.components_dir = _resolve(root, components_dir)

    helper_data = _as_dict(data.get("helper"))
    if helper_data:
        config.helper = HelperConfig(
            base_url=_as_str(helper_data.get("base_url")) or DEFAULT_HELPER_URL,
            request_timeout=_as_float(helper_data.get("request_timeout")),
        )

    service_data = _as_dict(data.get("service"))
    if service_data:
        config.service = ServiceConfig(
            host=_as_str(service_data.get("host")) or DEFAULT_SERVICE_HOST,
            port=_as_int(service_data.get("port")) or DEFAULT_SERVICE_PORT,
        )

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _resolve(root: Path, value: str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "CanvasGenConfig",
    "ConfigError",
    "HelperConfig",
    "ServiceConfig",
    "load_config",
]
