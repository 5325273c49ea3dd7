"""Root-relative path value type."""

from __future__ import annotations

import functools
import os
from pathlib import PurePath
from typing import Tuple, Union

PathInput = Union[str, "os.PathLike[str]", "FSPath"]


@functools.total_ordering
class FSPath:
    """A path interpreted relative to the autorun root.

    Construction does not strip or validate anything; code that builds an
    ``FSPath`` from filesystem data is expected to relativize it first (see
    ``autorun.fs.core.relativize``).

    Example:
        >>> p = FSPath("scripts") / "init.lua"
        >>> p
        FSPath('scripts/init.lua')
        >>> p.suffix
        '.lua'
    """

    __slots__ = ("_path",)

    def __init__(self, path: PathInput = ".") -> None:
        if isinstance(path, FSPath):
            path = path._path
        self._path = PurePath(path)

    @property
    def path(self) -> PurePath:
        """The wrapped ``PurePath``."""
        return self._path

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def stem(self) -> str:
        return self._path.stem

    @property
    def suffix(self) -> str:
        return self._path.suffix

    @property
    def parts(self) -> Tuple[str, ...]:
        return self._path.parts

    @property
    def parent(self) -> "FSPath":
        return FSPath(self._path.parent)

    def as_posix(self) -> str:
        return self._path.as_posix()

    def __truediv__(self, other: PathInput) -> "FSPath":
        if isinstance(other, FSPath):
            other = other._path
        return FSPath(self._path / other)

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"FSPath({self.as_posix()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FSPath):
            return NotImplemented
        return self._path == other._path

    def __lt__(self, other: "FSPath") -> bool:
        if not isinstance(other, FSPath):
            return NotImplemented
        return self._path < other._path

    def __hash__(self) -> int:
        return hash(self._path)
