"""Shared constants for app_dirs.

Centralizes environment variable names and the fixed directory layouts each
platform profile falls back to.
"""

from __future__ import annotations

# Configuration
PLATFORM_OVERRIDE_ENV = "APP_DIRS_PLATFORM"

# Windows
APPDATA_ENV = "APPDATA"
LOCALAPPDATA_ENV = "LOCALAPPDATA"
ALLUSERSPROFILE_ENV = "ALLUSERSPROFILE"

# Darwin / XDG
HOME_ENV = "HOME"
HOME_FALLBACK = "~"

# Darwin layout, relative to $HOME unless absolute
DARWIN_USER_DATA_SUFFIX = "Library/Application Support"
DARWIN_USER_CACHE_SUFFIX = "Library/Caches"
DARWIN_USER_LOG_SUFFIX = "Library/Logs"
DARWIN_SITE_DATA_DIR = "/Library/Application Support"

# XDG Base Directory variables
XDG_DATA_HOME_ENV = "XDG_DATA_HOME"
XDG_CONFIG_HOME_ENV = "XDG_CONFIG_HOME"
XDG_CACHE_HOME_ENV = "XDG_CACHE_HOME"
XDG_DATA_DIRS_ENV = "XDG_DATA_DIRS"
XDG_CONFIG_DIRS_ENV = "XDG_CONFIG_DIRS"

# XDG defaults, relative to $HOME
XDG_DATA_HOME_SUFFIX = ".local/share"
XDG_CONFIG_HOME_SUFFIX = ".config"
XDG_CACHE_HOME_SUFFIX = ".cache"
XDG_LOG_SUBDIR = "log"

DEFAULT_XDG_DATA_DIRS = ("/usr/local/share", "/usr/share")
DEFAULT_XDG_CONFIG_DIRS = ("/etc/xdg",)

# Delimiter for multi-directory XDG variables
XDG_PATH_LIST_DELIMITER = ":"
