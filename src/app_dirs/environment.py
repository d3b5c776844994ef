"""Environment lookup helpers used by the platform profiles."""

from __future__ import annotations

import os
from collections.abc import Mapping

Environment = Mapping[str, str]


def live_environment() -> Environment:
    """Return the process environment.

    The mapping is live, so profiles holding it see later changes.
    """
    return os.environ


def getenv(environ: Environment, name: str) -> str | None:
    """Read a variable, treating an empty value the same as an unset one."""
    value = environ.get(name)
    if not value:
        return None
    return value


def split_path_list(value: str, delimiter: str) -> list[str]:
    """Split a delimiter-separated directory list, keeping order and empties."""
    return value.split(delimiter)
