"""Value types shared by the platform profiles and the AppDirs facade."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class DirectoryKind(str, Enum):
    """The directory kinds every platform profile resolves."""

    USER_DATA = "user_data"
    USER_CONFIG = "user_config"
    USER_CACHE = "user_cache"
    SITE_DATA = "site_data"
    SITE_CONFIG = "site_config"
    USER_LOG = "user_log"

    @property
    def method_name(self) -> str:
        """Name of the profile method resolving this kind."""
        return f"{self.value}_dir"

    @property
    def supports_roaming(self) -> bool:
        return self in (DirectoryKind.USER_DATA, DirectoryKind.USER_CONFIG)

    @property
    def supports_multipath(self) -> bool:
        return self in (DirectoryKind.SITE_DATA, DirectoryKind.SITE_CONFIG)


@dataclass(frozen=True, slots=True)
class ApplicationIdentity:
    """Who the directories are for.

    Every field is optional. ``author`` only has meaning on Windows and falls
    back to ``name`` when unset.
    """

    name: str | None = None
    author: str | None = None
    version: str | None = None

    @property
    def resolved_author(self) -> str | None:
        return self.author or self.name


@dataclass(frozen=True, slots=True)
class PathResult:
    """One resolved directory, or every candidate when multipath was asked for.

    ``paths`` is never empty and is ordered by priority.
    """

    paths: tuple[str, ...]
    multipath: bool = False

    def __post_init__(self) -> None:
        if not self.paths:
            raise ValueError("PathResult requires at least one path")

    @classmethod
    def single(cls, path: str) -> PathResult:
        return cls(paths=(path,))

    @classmethod
    def candidates(cls, paths: Iterable[str], *, multipath: bool) -> PathResult:
        return cls(paths=tuple(paths), multipath=multipath)

    @property
    def first(self) -> str:
        return self.paths[0]

    @property
    def value(self) -> str | list[str]:
        """The first path, or the full list when multipath is set."""
        if self.multipath:
            return list(self.paths)
        return self.paths[0]

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)
