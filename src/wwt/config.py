"""wwt configuration."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from wwt.exceptions import ConfigError

STORE_PATH_ENV = "WWT_STORE_PATH"
MIN_SCORE_ENV = "WWT_MIN_SCORE"


def config_dir(env: Mapping[str, str] | None = None, platform: str | None = None) -> Path:
    """Return the per-user configuration directory for this platform."""
    env = os.environ if env is None else env
    platform = platform or sys.platform
    home = Path(env.get("HOME") or Path.home())

    if platform.startswith("win"):
        appdata = env.get("APPDATA")
        return Path(appdata) if appdata else home / "AppData" / "Roaming"
    if platform == "darwin":
        return home / "Library" / "Application Support"
    xdg = env.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else home / ".config"


def default_store_path() -> Path:
    return config_dir() / "wwt" / "store.json"


class WwtConfig(BaseModel):
    """Configuration for a wwt instance."""

    store_path: Path = Field(default_factory=default_store_path)
    min_score: float = Field(default=0.0, ge=0.0, le=1.0)
    min_substring_len: int = Field(default=3, ge=1)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None, **overrides) -> WwtConfig:
        """Build a config from ``WWT_*`` environment variables.

        Keyword *overrides* that are not ``None`` take precedence over the
        environment.
        """
        env = os.environ if env is None else env
        values: dict[str, object] = {}
        if env.get(STORE_PATH_ENV):
            values["store_path"] = Path(env[STORE_PATH_ENV]).expanduser()
        if env.get(MIN_SCORE_ENV):
            values["min_score"] = env[MIN_SCORE_ENV]
        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc
