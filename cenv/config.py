"""Configuration loading for cenv (.cenv.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import CenvError
from .parser.markers import DEFAULT_COMMENT_CHAR
from .parser.policies import DEFAULT_POLICY, available_policies

CONFIG_FILENAME = ".cenv.yml"
DEFAULT_ENV_FILE = ".env"


class ConfigError(CenvError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class CenvConfig:
    """Represents the settings defined in .cenv.yml."""

    root: Path
    env_file: Path
    comment_char: str = DEFAULT_COMMENT_CHAR
    activation: str = DEFAULT_POLICY
    hyphenated_keywords: bool = False

    @classmethod
    def default(cls, root: Path) -> "CenvConfig":
        return cls(root=root, env_file=root / DEFAULT_ENV_FILE)


def load_config(config_path: Path) -> CenvConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CenvConfig.default(root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    env_file_str = _as_str(data.get("env_file"))
    env_file = root / env_file_str if env_file_str else root / DEFAULT_ENV_FILE

    comment_char = _as_str(data.get("comment_char"))
    if comment_char is None:
        comment_char = DEFAULT_COMMENT_CHAR
    validate_comment_char(comment_char)

    activation = _as_str(data.get("activation")) or DEFAULT_POLICY
    if activation not in available_policies():
        raise ConfigError(
            f"Unknown activation '{activation}' in {CONFIG_FILENAME}; "
            f"expected one of: {', '.join(available_policies())}"
        )

    hyphenated = _as_bool(data.get("hyphenated_keywords"))

    return CenvConfig(
        root=root,
        env_file=env_file,
        comment_char=comment_char,
        activation=activation,
        hyphenated_keywords=bool(hyphenated),
    )


def validate_comment_char(comment_char: str) -> None:
    """Reject comment characters that would make markers ambiguous."""
    if len(comment_char) != 1:
        raise ConfigError("comment_char must be exactly one character")
    if comment_char.isspace() or comment_char == "+" or comment_char.isalnum() or comment_char == "_":
        raise ConfigError(f"comment_char {comment_char!r} cannot be used as a comment marker")


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


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


__all__ = [
    "CONFIG_FILENAME",
    "CenvConfig",
    "ConfigError",
    "DEFAULT_ENV_FILE",
    "load_config",
    "validate_comment_char",
]
