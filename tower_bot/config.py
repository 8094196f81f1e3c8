"""Runtime settings, read from the environment (and a local .env if present)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from tower_bot import __version__

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    team_name: str = "Mega ogudor"
    strategy: str = "AI-trapped-strategy"
    version: str = __version__


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _env_log_level(name: str, default: str) -> str:
    level = os.environ.get(name, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{name} must be a logging level name, got {level!r}")
    return level


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from the process environment."""
    if dotenv:
        load_dotenv()

    defaults = Settings()
    return Settings(
        host=os.environ.get("HOST", defaults.host),
        port=_env_int("PORT", defaults.port),
        log_level=_env_log_level("LOG_LEVEL", defaults.log_level),
        team_name=os.environ.get("TEAM_NAME", defaults.team_name),
        strategy=os.environ.get("STRATEGY", defaults.strategy),
        version=os.environ.get("BOT_VERSION", defaults.version),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
