"""Per-repository settings."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from gch.git_ops import DEFAULT_REMOTE
from gch.models import DEFAULT_COMMIT_PREFIXES


class ConfigError(Exception):
    """Settings file is malformed."""


@dataclass(frozen=True)
class Settings:
    """Tunable behaviour, read from .gch/settings.json."""

    commit_prefixes: tuple[str, ...] = DEFAULT_COMMIT_PREFIXES
    remote: str = DEFAULT_REMOTE
    git_timeout: float | None = None


def settings_path(repo_root: Path) -> Path:
    return repo_root / ".gch" / "settings.json"


def _expect_prefixes(value: object, path: Path) -> tuple[str, ...]:
    if not isinstance(value, list) or not value:
        raise ConfigError(f"commitPrefixes must be a non-empty list in {path}")
    if not all(isinstance(item, str) and item for item in value):
        raise ConfigError(f"commitPrefixes entries must be non-empty strings in {path}")
    return tuple(cast(list[str], value))


def _expect_remote(value: object, path: Path) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"remote must be a non-empty string in {path}")
    return value.strip()


def _expect_timeout(value: object, path: Path) -> float | None:
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"gitTimeout must be a positive number in {path}")
    return float(value)


def load_settings(repo_root: Path) -> Settings:
    """Load settings for a repository, falling back to defaults."""
    path = settings_path(repo_root)
    defaults = Settings()
    if not path.is_file():
        return defaults

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Invalid settings format in {path}")

    prefixes = defaults.commit_prefixes
    if "commitPrefixes" in raw:
        prefixes = _expect_prefixes(raw["commitPrefixes"], path)
    remote = defaults.remote
    if "remote" in raw:
        remote = _expect_remote(raw["remote"], path)
    timeout = defaults.git_timeout
    if "gitTimeout" in raw:
        timeout = _expect_timeout(raw["gitTimeout"], path)

    return Settings(commit_prefixes=prefixes, remote=remote, git_timeout=timeout)
