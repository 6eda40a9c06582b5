"""Filesystem and process probes used before loading a config file."""

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def is_exist(path: PathLike) -> bool:
    """Check if the path exists."""
    if not path:
        return False
    return Path(path).exists()


def is_readable(path: PathLike) -> bool:
    """Check if the current user can read the path."""
    if not path:
        return False
    return os.access(path, os.R_OK)


def is_non_empty(path: PathLike) -> bool:
    """Check if the file exists and has at least one byte."""
    try:
        return Path(path).stat().st_size > 0
    except OSError:
        return False


def is_privileged() -> bool:
    """Check if the process runs with root privileges."""
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return False
    return geteuid() == 0
