"""Filesystem operations rooted at the autorun directory.

Every operation takes a path relative to the autorun root, joins it onto
``base()`` before touching the disk, and hands back ``FSPath`` values with
the root stripped again. Absolute host paths never leave this module.

I/O failures are raised as the builtin ``OSError`` subclasses and are not
logged or retried here.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import BinaryIO, Callable, List, Union

from .config import DEFAULT_CONFIG
from .environment import home_dir
from .path import FSPath

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]"]
Visitor = Callable[[FSPath, os.DirEntry], None]


def base() -> Path:
    """Return the autorun root, ``<home>/autorun``."""
    return home_dir() / DEFAULT_CONFIG.root_dir_name


def in_autorun(path: PathArg) -> Path:
    """Join a root-relative path onto the autorun root."""
    return base() / path


def relativize(path: PathArg) -> FSPath:
    """Strip the autorun root from an absolute path.

    Paths that do not lie under the root (a symlink target outside it, for
    instance) are wrapped unchanged instead of raising.
    """
    try:
        return FSPath(Path(path).relative_to(base()))
    except ValueError:
        return FSPath(path)


def read_to_string(path: PathArg, encoding: str = "utf-8") -> str:
    """Read a whole file under the autorun root as text."""
    with open(in_autorun(path), "r", encoding=encoding) as f:
        return f.read()


def traverse_dir(path: PathArg, visitor: Visitor) -> int:
    """Visit each entry of a directory under the autorun root.

    The visitor receives the entry's root-relative ``FSPath`` and the raw
    ``os.DirEntry``, in whatever order the OS enumerates them. Entries that
    cannot be inspected (removed mid-listing, permission denied) are
    skipped without interrupting the traversal. An error from the listing
    itself ends the traversal early with the entries visited so far.

    Args:
        path: Directory relative to the autorun root
        visitor: Callable invoked once per readable entry

    Returns:
        Number of entries that were skipped

    Raises:
        OSError: If the directory itself cannot be opened
    """
    skipped = 0
    with os.scandir(in_autorun(path)) as entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as e:
                logger.debug(f"Directory listing of {os.fspath(path)!r} stopped early: {e}")
                break

            try:
                entry.stat(follow_symlinks=False)
            except OSError as e:
                skipped += 1
                logger.debug(f"Skipping unreadable entry {entry.name!r}: {e}")
                continue

            visitor(relativize(entry.path), entry)

    return skipped


def list_dir(path: PathArg) -> List[FSPath]:
    """Return the readable entries of a directory, sorted."""
    found: List[FSPath] = []
    traverse_dir(path, lambda p, _entry: found.append(p))
    return sorted(found)


def exists(path: PathArg) -> bool:
    return in_autorun(path).exists()


def create_dir(path: FSPath) -> None:
    """Create a single directory; missing parents are not created."""
    os.mkdir(in_autorun(path))


def create_file(path: FSPath) -> BinaryIO:
    """Create or truncate a file and return the open binary handle.

    The parent directory must already exist.
    """
    return open(in_autorun(path), "wb")


def remove_dir(path: FSPath) -> None:
    """Recursively remove a directory and everything in it.

    A symlinked directory is unlinked; its target is left alone.
    """
    target = in_autorun(path)
    if target.is_symlink():
        os.unlink(target)
    else:
        shutil.rmtree(target)
