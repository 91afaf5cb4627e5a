"""Configuration loading for docdown (.docdown.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .style import DEFAULT_STYLE, HeadingPattern, Style

CONFIG_FILENAME = ".docdown.yml"

_HEADER_FIELDS = {
    "synopsis": "synopsis_header",
    "usage": "usage_header",
    "constant": "constant_header",
    "variable": "variable_header",
    "function": "function_header",
    "type": "type_header",
    "type_function": "type_function_header",
}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DocdownConfig:
    """Represents the settings defined in .docdown.yml."""

    root: Path
    style: Style = field(default_factory=lambda: DEFAULT_STYLE)
    template: Optional[Path] = None


def load_config(config_path: Path) -> DocdownConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocdownConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    style = _style_from_mapping(_as_dict(data.get("style")))

    template_str = _as_str(data.get("template"))
    template = root / template_str if template_str else None

    return DocdownConfig(root=root, style=style, template=template)


def _style_from_mapping(style_data: Dict[str, Any]) -> Style:
    if not style_data:
        return DEFAULT_STYLE

    heading: Optional[HeadingPattern] = None
    if "heading" in style_data:
        raw_heading = style_data.get("heading")
        try:
            heading = HeadingPattern.parse(_as_str(raw_heading) if raw_heading is not None else None)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    headers = _as_dict(style_data.get("headers"))
    header_overrides = {
        attribute: _as_str(headers.get(key)) for key, attribute in _HEADER_FIELDS.items()
    }

    return DEFAULT_STYLE.with_overrides(
        plain=_as_bool(style_data.get("plain")),
        include_signature=_as_bool(style_data.get("signature")),
        include_import=_as_bool(style_data.get("include_import")),
        synopsis_heading=heading,
        **header_overrides,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "DocdownConfig", "load_config"]
