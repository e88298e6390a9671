"""Configuration loading for agentline projects."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from agentline.domain.exceptions import ConfigurationError

PROJECT_STATE_DIR = ".agentline"
CONFIG_FILENAME = "config.json"
DEFAULT_INVOKER = "claude"
DEFAULT_CLAUDE_COMMAND = "claude"

_KNOWN_KEYS = {"runs_dir", "personas_dir", "invoker", "claude_command", "stage_timeout"}


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one project."""

    runs_dir: Path
    personas_dir: Path
    invoker: str = DEFAULT_INVOKER
    claude_command: str = DEFAULT_CLAUDE_COMMAND
    stage_timeout: float | None = None


def default_config_path(project_dir: Path) -> Path:
    return project_dir / PROJECT_STATE_DIR / CONFIG_FILENAME


def _require_str(data: dict[str, Any], key: str, path: Path) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{path}: '{key}' must be a non-empty string")
    return value


def _resolve_dir(raw: str | None, default: Path, project_dir: Path) -> Path:
    if raw is None:
        return default
    candidate = Path(raw).expanduser()
    if not candidate.is_absolute():
        candidate = project_dir / candidate
    return candidate


def load_settings(project_dir: str | Path, config_path: str | Path | None = None) -> Settings:
    """
    Load settings for a project.

    Reads ``<project>/.agentline/config.json`` when it exists (or
    config_path, which must exist). Relative directories resolve against
    the project directory.

    Args:
        project_dir: Project root the agents work in
        config_path: Explicit config file, overriding the default location

    Returns:
        Settings with defaults filled in

    Raises:
        ConfigurationError: If the file is missing (explicit path only),
            not valid JSON, or holds unknown keys or wrongly typed values
    """
    project = Path(project_dir).expanduser().resolve()
    defaults = Settings(
        runs_dir=project / PROJECT_STATE_DIR / "runs",
        personas_dir=project / PROJECT_STATE_DIR / "personas",
    )

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
    else:
        path = default_config_path(project)
        if not path.exists():
            return defaults

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected object in {path}, got {type(data).__name__}")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown keys in {path}: {', '.join(unknown)}")

    stage_timeout = data.get("stage_timeout")
    if stage_timeout is not None:
        if isinstance(stage_timeout, bool) or not isinstance(stage_timeout, int | float):
            raise ConfigurationError(f"{path}: 'stage_timeout' must be a number")
        if stage_timeout <= 0:
            raise ConfigurationError(f"{path}: 'stage_timeout' must be positive")
        stage_timeout = float(stage_timeout)

    return Settings(
        runs_dir=_resolve_dir(_require_str(data, "runs_dir", path), defaults.runs_dir, project),
        personas_dir=_resolve_dir(
            _require_str(data, "personas_dir", path), defaults.personas_dir, project
        ),
        invoker=_require_str(data, "invoker", path) or DEFAULT_INVOKER,
        claude_command=_require_str(data, "claude_command", path) or DEFAULT_CLAUDE_COMMAND,
        stage_timeout=stage_timeout,
    )
