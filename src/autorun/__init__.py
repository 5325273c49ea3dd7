"""
autorun - filesystem layer for the autorun working directory

Resolves the user's real home directory (also under Wine) and exposes
file operations whose paths are always relative to ``~/autorun``.
"""

__version__ = "0.1.0"

from . import fs
from .exceptions import (
    AutorunError,
    EnvironmentResolutionError,
    ErrorAction,
    HomeDirectoryError,
    MissingEnvironmentVariableError,
    SystemLibraryError,
)
from .fs import FSPath, home_dir

__all__ = [
    "__version__",
    "fs",
    "FSPath",
    "home_dir",
    "AutorunError",
    "EnvironmentResolutionError",
    "ErrorAction",
    "HomeDirectoryError",
    "MissingEnvironmentVariableError",
    "SystemLibraryError",
]
