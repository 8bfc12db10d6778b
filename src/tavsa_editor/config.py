"""YAML configuration for tavsa-editor."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from tavsa_editor.exceptions import ConfigError

# Environment variable naming the default config file for the CLI
CONFIG_ENV_VAR = "TAVSA_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EditorConfig:
    """Settings for opening an editor and running the CLI."""
    database: str = "tavsa.db"
    log_level: str = "WARNING"
    strict_etymology: bool = False


def load_config(
    source: Union[str, Path, Dict[str, Any], None] = None,
) -> EditorConfig:
    """Load configuration from a YAML file, YAML string or dictionary.

    Args:
        source: Path to YAML file, YAML string, parsed dictionary, or
            None for the defaults

    Returns:
        EditorConfig object

    Raises:
        ConfigError: If the content cannot be parsed or is invalid
        FileNotFoundError: If the file does not exist
    """
    if source is None:
        return EditorConfig()

    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or (isinstance(source, str) and _is_file_path(source)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = _load_yaml(f)
    else:
        data = _load_yaml(source)

    return _parse_config(data)


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path."""
    if "/" in s or "\\" in s:
        return True
    if s.endswith((".yaml", ".yml")):
        return True
    return False


def _load_yaml(stream: Any) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping (dictionary)")
    return data


def _parse_config(data: Dict[str, Any]) -> EditorConfig:
    known = {f.name for f in fields(EditorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    config = EditorConfig()

    database: Optional[Any] = data.get("database")
    if database is not None:
        if not isinstance(database, str) or not database:
            raise ConfigError("Field 'database' must be a non-empty string")
        config.database = database

    log_level = data.get("log_level")
    if log_level is not None:
        if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"Field 'log_level' must be one of {', '.join(LOG_LEVELS)}"
            )
        config.log_level = log_level.upper()

    strict = data.get("strict_etymology")
    if strict is not None:
        if not isinstance(strict, bool):
            raise ConfigError("Field 'strict_etymology' must be a boolean")
        config.strict_etymology = strict

    return config
