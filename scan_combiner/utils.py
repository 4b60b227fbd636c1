"""Utility helpers for paths and logging."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def expand_tilde(path: PathLike) -> str:
    """Expand a leading ``~`` to the user's home directory."""

    return os.path.expanduser(str(path))


def abbreviate_with_tilde(path: PathLike, home: Optional[PathLike] = None) -> str:
    """Replace the user's home directory prefix of *path* with ``~``."""

    text = str(path)
    home_dir = str(home) if home is not None else os.path.expanduser("~")
    home_dir = home_dir.rstrip(os.sep)
    if not home_dir or home_dir == "~":
        return text
    if text == home_dir:
        return "~"
    if text.startswith(home_dir + os.sep):
        return "~" + text[len(home_dir):]
    return text


def ensure_path(path: PathLike) -> Path:
    """Return an absolute :class:`~pathlib.Path` for *path* with ``~`` expanded."""

    return Path(expand_tilde(path)).absolute()


def same_file(first: PathLike, second: PathLike) -> bool:
    """Return ``True`` if both paths exist and name the same file."""

    try:
        return os.path.samefile(first, second)
    except OSError:
        return False


def reachable_file(path: PathLike) -> Optional[Path]:
    """Return the expanded path if it names an existing file, otherwise ``None``."""

    candidate = ensure_path(path)
    return candidate if candidate.is_file() else None


def get_logger(name: str = "scancombine", level: int = logging.WARNING) -> logging.Logger:
    logger = logging.getLogger(name)
    if not any(isinstance(handler, logging.StreamHandler) for handler in logger.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level)
    return logger


__all__ = [
    "PathLike",
    "expand_tilde",
    "abbreviate_with_tilde",
    "ensure_path",
    "reachable_file",
    "same_file",
    "get_logger",
]
