"""Configuration loading and defaults."""

from __future__ import annotations

import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]


CONFIG_DIR_NAME = ".menagerie"

DEFAULT_CONFIG = {
    "logging": {
        "level": "WARNING",
    },
    "demo": {
        # Release the instances still owned by the demo when it ends
        "release_at_exit": True,
    },
}


class Config:
    def __init__(self, data: dict, config_dir: Path):
        self._data = data
        self.config_dir = config_dir

    @classmethod
    def load(cls, project_root: Path) -> "Config":
        config_dir = project_root / CONFIG_DIR_NAME
        config_file = config_dir / "config.toml"

        data = _deep_merge(DEFAULT_CONFIG, {})

        if config_file.exists():
            with open(config_file, "rb") as f:
                user_data = tomllib.load(f)
            data = _deep_merge(DEFAULT_CONFIG, user_data)

        config = cls(data, config_dir)
        config.validate()
        return config

    @classmethod
    def load_from_cwd(cls) -> "Config":
        root = _find_project_root(Path.cwd())
        return cls.load(root)

    @property
    def config_file(self) -> Path:
        return self.config_dir / "config.toml"

    # --- logging ---
    @property
    def log_level(self) -> str:
        return str(self._data["logging"]["level"]).upper()

    # --- demo ---
    @property
    def release_at_exit(self) -> bool:
        value = self._data["demo"]["release_at_exit"]
        if not isinstance(value, bool):
            raise ValueError(
                f"demo.release_at_exit must be true or false, got {value!r}"
            )
        return value

    def validate(self) -> None:
        """Raise ValueError if a setting has the wrong type."""
        self.release_at_exit


def _deep_merge(base: dict, override: dict) -> dict:
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _find_project_root(start: Path) -> Path:
    """Walk up to find the directory containing .menagerie/ or .git/."""
    current = start.resolve()
    while True:
        if (current / CONFIG_DIR_NAME).exists() or (current / ".git").exists():
            return current
        parent = current.parent
        if parent == current:
            return start.resolve()
        current = parent


DEFAULT_CONFIG_TOML = """\
[logging]
level = "WARNING"

[demo]
release_at_exit = true
"""
