"""Per-platform directory layouts.

Each profile computes the six directory kinds from the application identity
and an injected environment mapping. Profiles never touch the filesystem and
never cache what they read, so the same profile can be shared freely.

Windows follows the AppData layout, Darwin the ``~/Library`` layout and every
other system the XDG Base Directory Specification
(https://specifications.freedesktop.org/basedir-spec/latest/). Darwin and XDG
join with ``posixpath`` and Windows with ``ntpath``, so all three resolve the
same way regardless of the host they run on.
"""

from __future__ import annotations

import ntpath
import platform
import posixpath
from abc import ABC, abstractmethod
from collections.abc import Callable
from types import ModuleType
from typing import ClassVar

from loguru import logger

from app_dirs import constants
from app_dirs.config import ConfigError, ResolverConfig, load_resolver_config
from app_dirs.environment import Environment, getenv, live_environment, split_path_list
from app_dirs.models import ApplicationIdentity, DirectoryKind, PathResult


def append_name_version(
    join: Callable[..., str],
    base: str,
    appname: str | None = None,
    version: str | None = None,
) -> str:
    """Append the app name and version to ``base``.

    Version is only appended when appname is present.
    """
    if not appname:
        return base
    path = join(base, appname)
    if version:
        path = join(path, version)
    return path


class PlatformProfile(ABC):
    """Directory layout for one operating system family."""

    name: ClassVar[str]
    pathmod: ClassVar[ModuleType]

    def __init__(self, environ: Environment | None = None) -> None:
        self._environ = live_environment() if environ is None else environ

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @property
    def environ(self) -> Environment:
        return self._environ

    def _getenv(self, name: str) -> str | None:
        return getenv(self._environ, name)

    def _join(self, *parts: str) -> str:
        # Later parts are always appended, even absolute or drive-prefixed ones.
        seps = self.pathmod.sep + (self.pathmod.altsep or "")
        path = ""
        for part in parts:
            if path:
                part = part.lstrip(seps)
            if not part:
                continue
            if path and not path.endswith(tuple(seps)):
                path += self.pathmod.sep
            path += part
        return self.pathmod.normpath(path)

    def _app_path(self, base: str, appname: str | None, version: str | None) -> str:
        return append_name_version(self._join, base, appname, version)

    def _home(self) -> str:
        home = self._getenv(constants.HOME_ENV)
        if home is None:
            logger.debug(f"[{type(self).__name__}] HOME is not set, using {constants.HOME_FALLBACK!r}")
            return constants.HOME_FALLBACK
        return home

    @abstractmethod
    def user_data_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        roaming: bool = False,
    ) -> PathResult: ...

    @abstractmethod
    def user_config_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        roaming: bool = False,
    ) -> PathResult: ...

    @abstractmethod
    def user_cache_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
    ) -> PathResult: ...

    @abstractmethod
    def site_data_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        multipath: bool = False,
    ) -> PathResult: ...

    @abstractmethod
    def site_config_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        multipath: bool = False,
    ) -> PathResult: ...

    @abstractmethod
    def user_log_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
    ) -> PathResult: ...

    def resolve(
        self,
        kind: DirectoryKind | str,
        identity: ApplicationIdentity | None = None,
        roaming: bool = False,
        multipath: bool = False,
    ) -> PathResult:
        """Resolve ``kind`` for ``identity``.

        Flags a kind has no use for are ignored.

        Raises:
            ValueError: If ``kind`` is not a known directory kind.
        """
        kind = DirectoryKind(kind)
        identity = identity or ApplicationIdentity()
        method = getattr(self, kind.method_name)
        args = (identity.name, identity.author, identity.version)
        if kind.supports_roaming:
            return method(*args, roaming=roaming)
        if kind.supports_multipath:
            return method(*args, multipath=multipath)
        return method(*args)


class WindowsProfile(PlatformProfile):
    """AppData layout.

    Bases come straight from APPDATA, LOCALAPPDATA and ALLUSERSPROFILE with
    no further fallback. ``appauthor`` is accepted but not part of any path.
    """

    name = "windows"
    pathmod = ntpath

    def _base(self, var: str) -> str:
        value = self._getenv(var)
        if value is None:
            logger.debug(f"[WindowsProfile] {var} is not set, using an empty base")
            return ""
        return value

    def _user_base(self, roaming: bool) -> str:
        if roaming:
            return self._base(constants.APPDATA_ENV)
        return self._base(constants.LOCALAPPDATA_ENV)

    def user_data_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        roaming: bool = False,
    ) -> PathResult:
        return PathResult.single(self._app_path(self._user_base(roaming), appname, version))

    def user_config_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        roaming: bool = False,
    ) -> PathResult:
        return PathResult.single(self._app_path(self._user_base(roaming), appname, version))

    def user_cache_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
    ) -> PathResult:
        base = self._base(constants.LOCALAPPDATA_ENV)
        return PathResult.single(self._app_path(base, appname, version))

    def site_data_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        multipath: bool = False,
    ) -> PathResult:
        base = self._base(constants.ALLUSERSPROFILE_ENV)
        return PathResult.candidates([self._app_path(base, appname, version)], multipath=multipath)

    def site_config_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        multipath: bool = False,
    ) -> PathResult:
        base = self._base(constants.ALLUSERSPROFILE_ENV)
        return PathResult.candidates([self._app_path(base, appname, version)], multipath=multipath)

    def user_log_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
    ) -> PathResult:
        base = self._base(constants.ALLUSERSPROFILE_ENV)
        return PathResult.single(self._app_path(base, appname, version))


class DarwinProfile(PlatformProfile):
    """macOS ``Library`` layout. Config directories alias the data ones."""

    name = "darwin"
    pathmod = posixpath

    def user_data_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        roaming: bool = False,
    ) -> PathResult:
        base = self._join(self._home(), constants.DARWIN_USER_DATA_SUFFIX)
        return PathResult.single(self._app_path(base, appname, version))

    def user_config_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        roaming: bool = False,
    ) -> PathResult:
        return self.user_data_dir(appname, appauthor, version, roaming)

    def user_cache_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
    ) -> PathResult:
        base = self._join(self._home(), constants.DARWIN_USER_CACHE_SUFFIX)
        return PathResult.single(self._app_path(base, appname, version))

    def site_data_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        multipath: bool = False,
    ) -> PathResult:
        path = self._app_path(constants.DARWIN_SITE_DATA_DIR, appname, version)
        return PathResult.candidates([path], multipath=multipath)

    def site_config_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        multipath: bool = False,
    ) -> PathResult:
        return self.site_data_dir(appname, appauthor, version, multipath)

    def user_log_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
    ) -> PathResult:
        base = self._join(self._home(), constants.DARWIN_USER_LOG_SUFFIX)
        return PathResult.single(self._app_path(base, appname, version))


class XdgProfile(PlatformProfile):
    """XDG Base Directory layout, used for every system that is not Windows or macOS."""

    name = "xdg"
    pathmod = posixpath
    path_list_delimiter: ClassVar[str] = constants.XDG_PATH_LIST_DELIMITER

    def _user_base(self, var: str, home_suffix: str) -> str:
        value = self._getenv(var)
        if value is not None:
            return value
        return self._join(self._home(), home_suffix)

    def _site_candidates(
        self,
        var: str,
        defaults: tuple[str, ...],
        appname: str | None,
        version: str | None,
        multipath: bool,
    ) -> PathResult:
        raw = self._getenv(var)
        if raw is None:
            bases = list(defaults)
        else:
            bases = split_path_list(raw, self.path_list_delimiter)
        paths = [self._app_path(base, appname, version) for base in bases]
        return PathResult.candidates(paths, multipath=multipath)

    def user_data_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        roaming: bool = False,
    ) -> PathResult:
        base = self._user_base(constants.XDG_DATA_HOME_ENV, constants.XDG_DATA_HOME_SUFFIX)
        return PathResult.single(self._app_path(base, appname, version))

    def user_config_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        roaming: bool = False,
    ) -> PathResult:
        base = self._user_base(constants.XDG_CONFIG_HOME_ENV, constants.XDG_CONFIG_HOME_SUFFIX)
        return PathResult.single(self._app_path(base, appname, version))

    def user_cache_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
    ) -> PathResult:
        base = self._user_base(constants.XDG_CACHE_HOME_ENV, constants.XDG_CACHE_HOME_SUFFIX)
        return PathResult.single(self._app_path(base, appname, version))

    def site_data_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        multipath: bool = False,
    ) -> PathResult:
        return self._site_candidates(
            constants.XDG_DATA_DIRS_ENV,
            constants.DEFAULT_XDG_DATA_DIRS,
            appname,
            version,
            multipath,
        )

    def site_config_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
        multipath: bool = False,
    ) -> PathResult:
        return self._site_candidates(
            constants.XDG_CONFIG_DIRS_ENV,
            constants.DEFAULT_XDG_CONFIG_DIRS,
            appname,
            version,
            multipath,
        )

    def user_log_dir(
        self,
        appname: str | None = None,
        appauthor: str | None = None,
        version: str | None = None,
    ) -> PathResult:
        cache_dir = self.user_cache_dir(appname, appauthor, version).first
        return PathResult.single(self._join(cache_dir, constants.XDG_LOG_SUBDIR))


PROFILES: dict[str, type[PlatformProfile]] = {
    WindowsProfile.name: WindowsProfile,
    DarwinProfile.name: DarwinProfile,
    XdgProfile.name: XdgProfile,
}


def detect_profile(
    system: str | None = None,
    environ: Environment | None = None,
    config: ResolverConfig | None = None,
) -> PlatformProfile:
    """Pick the profile for the running system.

    A configured platform override wins over ``platform.system()``. An invalid
    override read from the environment is logged and ignored.
    """
    env = live_environment() if environ is None else environ
    if config is None:
        try:
            config = load_resolver_config(env)
        except ConfigError as exc:
            logger.warning(f"[detect_profile] Ignoring platform override: {exc}")
            config = ResolverConfig()

    if config.platform is not None:
        profile_cls = PROFILES[config.platform]
    else:
        match system or platform.system():
            case "Windows":
                profile_cls = WindowsProfile
            case "Darwin":
                profile_cls = DarwinProfile
            case _:
                profile_cls = XdgProfile

    logger.debug(f"[detect_profile] Using {profile_cls.__name__}")
    return profile_cls(env)
