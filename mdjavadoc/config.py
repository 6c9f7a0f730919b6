"""Configuration loading for mdjavadoc (.mdjavadoc.yml)."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".mdjavadoc.yml"
DEFAULT_SUFFIX = ".java"
DEFAULT_BASE_INDENT = 20
DEFAULT_ENCODING = "utf-8"
# Continuation lines are emitted four columns shallower than the base indentation.
MIN_BASE_INDENT = 4


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class ConverterConfig:
    """Read-only settings shared by every stage of a conversion run."""

    root: Path
    suffix: str = DEFAULT_SUFFIX
    base_indent: int = DEFAULT_BASE_INDENT
    encoding: str = DEFAULT_ENCODING
    exclude_paths: List[str] = field(default_factory=list)

    def with_overrides(
        self, *, suffix: Optional[str] = None, base_indent: Optional[int] = None
    ) -> "ConverterConfig":
        """Return a copy with command-line overrides applied."""
        updated = self
        if suffix is not None:
            updated = replace(updated, suffix=_validate_suffix(suffix))
        if base_indent is not None:
            updated = replace(updated, base_indent=_validate_base_indent(base_indent))
        return updated


def load_config(config_path: Path) -> ConverterConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ConverterConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    suffix = _as_str(data.get("suffix"))
    base_indent = _as_int(data.get("base_indent"))
    if data.get("base_indent") is not None and base_indent is None:
        raise ConfigError("base_indent must be an integer")
    encoding = _as_str(data.get("encoding"))

    return ConverterConfig(
        root=root,
        suffix=_validate_suffix(suffix) if suffix is not None else DEFAULT_SUFFIX,
        base_indent=(
            _validate_base_indent(base_indent) if base_indent is not None else DEFAULT_BASE_INDENT
        ),
        encoding=_validate_encoding(encoding) if encoding else DEFAULT_ENCODING,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _validate_suffix(value: str) -> str:
    suffix = value.strip()
    if not suffix:
        raise ConfigError("suffix must not be empty")
    return suffix


def _validate_base_indent(value: int) -> int:
    if value < MIN_BASE_INDENT:
        raise ConfigError(f"base_indent must be at least {MIN_BASE_INDENT}, got {value}")
    return value


def _validate_encoding(value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding: {value}") from exc
    return value


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


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


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
