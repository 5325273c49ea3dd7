"""Filesystem abstraction rooted at the user's autorun directory.

All paths crossing this package's boundary are relative to ``~/autorun``.

Example:
    >>> from autorun import fs
    >>> fs.traverse_dir(fs.INCLUDE_DIR, lambda path, entry: print(path))
    scripts/init.lua
"""

from .config import DEFAULT_CONFIG, FSConfig
from .core import (
    base,
    create_dir,
    create_file,
    exists,
    in_autorun,
    list_dir,
    read_to_string,
    relativize,
    remove_dir,
    traverse_dir,
)
from .environment import home_dir, resolve_home_dir, running_under_compatibility_shim
from .path import FSPath

DUMP_DIR = "lua_dumps"
LOG_DIR = "logs"
INCLUDE_DIR = "scripts"
PLUGIN_DIR = "plugins"
BIN_DIR = "bin"

AUTORUN_PATH = "autorun.lua"
HOOK_PATH = "hook.lua"
SETTINGS_PATH = "settings.toml"

__all__ = [
    "FSPath",
    "FSConfig",
    "DEFAULT_CONFIG",
    "home_dir",
    "resolve_home_dir",
    "running_under_compatibility_shim",
    "base",
    "in_autorun",
    "relativize",
    "read_to_string",
    "traverse_dir",
    "list_dir",
    "exists",
    "create_dir",
    "create_file",
    "remove_dir",
    "DUMP_DIR",
    "LOG_DIR",
    "INCLUDE_DIR",
    "PLUGIN_DIR",
    "BIN_DIR",
    "AUTORUN_PATH",
    "HOOK_PATH",
    "SETTINGS_PATH",
]
