"""Application directory lookups bound to the host platform.

The module-level functions resolve against the profile detected for the
running system, unless an explicit ``profile`` is passed. ``AppDirs`` wraps
one application identity so callers don't repeat it on every lookup.
"""

from __future__ import annotations

from functools import lru_cache

from app_dirs.models import ApplicationIdentity, DirectoryKind
from app_dirs.profiles import PlatformProfile, detect_profile

PathValue = str | list[str]


@lru_cache(maxsize=1)
def host_profile() -> PlatformProfile:
    """Profile for the running system, detected on first use."""
    return detect_profile()


def _pick(profile: PlatformProfile | None) -> PlatformProfile:
    return profile if profile is not None else host_profile()


def user_data_dir(
    appname: str | None = None,
    appauthor: str | None = None,
    version: str | None = None,
    roaming: bool = False,
    *,
    profile: PlatformProfile | None = None,
) -> str:
    """Return the user-specific data directory.

    Typical values:
        macOS:              ~/Library/Application Support/{appname}
        XDG:                ~/.local/share/{appname}
        Windows:            %LOCALAPPDATA%\\{appname}
        Windows (roaming):  %APPDATA%\\{appname}

    ``appauthor`` is accepted on every platform but is not part of the path.
    """
    return _pick(profile).user_data_dir(appname, appauthor, version, roaming).first


def user_config_dir(
    appname: str | None = None,
    appauthor: str | None = None,
    version: str | None = None,
    roaming: bool = False,
    *,
    profile: PlatformProfile | None = None,
) -> str:
    """Return the user-specific config directory.

    Same as the data directory on macOS and Windows; ``~/.config/{appname}``
    under XDG.
    """
    return _pick(profile).user_config_dir(appname, appauthor, version, roaming).first


def user_cache_dir(
    appname: str | None = None,
    appauthor: str | None = None,
    version: str | None = None,
    *,
    profile: PlatformProfile | None = None,
) -> str:
    """Return the user-specific cache directory (``~/Library/Caches``, ``~/.cache``)."""
    return _pick(profile).user_cache_dir(appname, appauthor, version).first


def site_data_dir(
    appname: str | None = None,
    appauthor: str | None = None,
    version: str | None = None,
    multipath: bool = False,
    *,
    profile: PlatformProfile | None = None,
) -> PathValue:
    """Return the data directory shared by all users.

    With ``multipath`` a list of every candidate is returned, in priority
    order. Only XDG can yield more than one.
    """
    return _pick(profile).site_data_dir(appname, appauthor, version, multipath).value


def site_config_dir(
    appname: str | None = None,
    appauthor: str | None = None,
    version: str | None = None,
    multipath: bool = False,
    *,
    profile: PlatformProfile | None = None,
) -> PathValue:
    """Return the config directory shared by all users. See ``site_data_dir``."""
    return _pick(profile).site_config_dir(appname, appauthor, version, multipath).value


def user_log_dir(
    appname: str | None = None,
    appauthor: str | None = None,
    version: str | None = None,
    *,
    profile: PlatformProfile | None = None,
) -> str:
    """Return the user-specific log directory.

    ``~/Library/Logs/{appname}`` on macOS, ``{user_cache_dir}/log`` under XDG.
    """
    return _pick(profile).user_log_dir(appname, appauthor, version).first


class AppDirs:
    """Directories for one application.

    Args:
        appname: Application name.
        appauthor: Application author. Defaults to appname.
        version: Application version, appended after appname.
        roaming: Use the Windows roaming profile for data and config.
        multipath: Return every candidate for the site directories.
        profile: Platform profile to resolve with. Defaults to the host's.
    """

    def __init__(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        roaming: bool = False,
        multipath: bool = False,
        profile: PlatformProfile | None = None,
    ) -> None:
        self.identity = ApplicationIdentity(name=appname, author=appauthor, version=version)
        self.roaming = roaming
        self.multipath = multipath
        self._profile = profile

    def __repr__(self) -> str:
        return (
            f"AppDirs(appname={self.appname!r}, appauthor={self.appauthor!r}, "
            f"version={self.version!r}, roaming={self.roaming!r}, multipath={self.multipath!r})"
        )

    @property
    def appname(self) -> str | None:
        """Application name."""
        return self.identity.name

    @property
    def appauthor(self) -> str | None:
        """Application author, falling back to the name."""
        return self.identity.resolved_author

    @property
    def version(self) -> str | None:
        """Application version."""
        return self.identity.version

    @property
    def profile(self) -> PlatformProfile:
        """Profile used for lookups, the host's unless one was given."""
        return _pick(self._profile)

    def resolve(self, kind: DirectoryKind | str) -> PathValue:
        """Resolve any directory kind with this instance's identity and flags."""
        return self.profile.resolve(kind, self.identity, self.roaming, self.multipath).value

    @property
    def user_data_dir(self) -> str:
        """User data directory, honouring ``roaming``."""
        return self.profile.resolve(DirectoryKind.USER_DATA, self.identity, roaming=self.roaming).first

    @property
    def user_config_dir(self) -> str:
        """User config directory, honouring ``roaming``."""
        return self.profile.resolve(DirectoryKind.USER_CONFIG, self.identity, roaming=self.roaming).first

    @property
    def user_cache_dir(self) -> str:
        """User cache directory."""
        return self.profile.resolve(DirectoryKind.USER_CACHE, self.identity).first

    @property
    def site_data_dir(self) -> PathValue:
        """Shared data directory, or every candidate when ``multipath`` is set."""
        return self.resolve(DirectoryKind.SITE_DATA)

    @property
    def site_config_dir(self) -> PathValue:
        """Shared config directory, or every candidate when ``multipath`` is set."""
        return self.resolve(DirectoryKind.SITE_CONFIG)

    @property
    def user_log_dir(self) -> str:
        """User log directory."""
        return self.profile.resolve(DirectoryKind.USER_LOG, self.identity).first
