from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..errors import ConfigError

DEFAULT_SOURCES_PATH = "config/trackers.yaml"


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(slots=True)
class Settings:
    """Runtime settings resolved from the environment."""

    aria2_url: Optional[str] = None
    secret_key: Optional[str] = None
    sources_path: str = DEFAULT_SOURCES_PATH
    fetch_timeout: float = 30.0
    sync_interval: float = 0.0
    listen_host: str = "0.0.0.0"
    listen_port: int = 8080

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            aria2_url=env.get("ARIA2_URL") or None,
            secret_key=env.get("SECRET_KEY") or None,
            sources_path=env.get("TRACKERS_CONFIG") or DEFAULT_SOURCES_PATH,
            fetch_timeout=_float_env(env, "FETCH_TIMEOUT", 30.0),
            sync_interval=_float_env(env, "SYNC_INTERVAL", 0.0),
            listen_host=env.get("LISTEN_HOST") or "0.0.0.0",
            listen_port=_int_env(env, "LISTEN_PORT", 8080),
        )

    def require_aria2(self) -> tuple[str, str]:
        """Return ``(aria2_url, secret_key)`` or raise ``ConfigError`` naming what is missing."""
        missing = [name for name, val in (("ARIA2_URL", self.aria2_url), ("SECRET_KEY", self.secret_key)) if not val]
        if missing:
            raise ConfigError(f"Missing required setting(s): {', '.join(missing)}")
        return self.aria2_url, self.secret_key  # type: ignore[return-value]
