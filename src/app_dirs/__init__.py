"""app_dirs - platform-appropriate data, config, cache and log directories."""

from loguru import logger

from app_dirs.config import ConfigError, ResolverConfig, load_resolver_config
from app_dirs.dirs import (
    AppDirs,
    host_profile,
    site_config_dir,
    site_data_dir,
    user_cache_dir,
    user_config_dir,
    user_data_dir,
    user_log_dir,
)
from app_dirs.models import ApplicationIdentity, DirectoryKind, PathResult
from app_dirs.profiles import (
    DarwinProfile,
    PlatformProfile,
    WindowsProfile,
    XdgProfile,
    append_name_version,
    detect_profile,
)

logger.disable("app_dirs")

__all__ = [
    "AppDirs",
    "ApplicationIdentity",
    "ConfigError",
    "DarwinProfile",
    "DirectoryKind",
    "PathResult",
    "PlatformProfile",
    "ResolverConfig",
    "WindowsProfile",
    "XdgProfile",
    "append_name_version",
    "detect_profile",
    "host_profile",
    "load_resolver_config",
    "site_config_dir",
    "site_data_dir",
    "user_cache_dir",
    "user_config_dir",
    "user_data_dir",
    "user_log_dir",
]
