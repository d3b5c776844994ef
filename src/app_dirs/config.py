"""Configuration for app_dirs."""

from __future__ import annotations

from typing import Literal

from loguru import logger
from pydantic import BaseModel, ValidationError, field_validator

from app_dirs.constants import PLATFORM_OVERRIDE_ENV
from app_dirs.environment import Environment, getenv, live_environment

PlatformName = Literal["windows", "darwin", "xdg"]

_PLATFORM_ALIASES: dict[str, str] = {
    "windows": "windows",
    "win32": "windows",
    "nt": "windows",
    "darwin": "darwin",
    "macos": "darwin",
    "osx": "darwin",
    "xdg": "xdg",
    "linux": "xdg",
    "posix": "xdg",
    "unix": "xdg",
}


class ConfigError(RuntimeError):
    """Raised when app_dirs configuration is invalid."""


class ResolverConfig(BaseModel):
    """Settings controlling how the host profile is picked."""

    platform: PlatformName | None = None

    @field_validator("platform", mode="before")
    @classmethod
    def normalize_platform(cls, v: str | None) -> str | None:
        """Lower-case the platform name and map common aliases."""
        if v is None:
            return None
        lowered = str(v).strip().lower()
        if not lowered:
            return None
        if lowered not in _PLATFORM_ALIASES:
            raise ValueError(f"Unknown platform: {v!r}")
        return _PLATFORM_ALIASES[lowered]


def load_resolver_config(environ: Environment | None = None) -> ResolverConfig:
    """Load resolver configuration from the environment.

    Raises:
        ConfigError: If APP_DIRS_PLATFORM names a platform we do not know.
    """
    env = live_environment() if environ is None else environ
    raw = getenv(env, PLATFORM_OVERRIDE_ENV)

    try:
        config = ResolverConfig(platform=raw)
    except ValidationError as exc:
        raise ConfigError(
            f"Invalid {PLATFORM_OVERRIDE_ENV}: {raw!r}. "
            "Expected one of windows, darwin or xdg.",
        ) from exc

    if config.platform is not None:
        logger.debug(f"[ResolverConfig] Platform override from {PLATFORM_OVERRIDE_ENV}: {config.platform}")
    return config
