"""Home directory resolution.

The process may be a Windows build running natively or under Wine on a
Linux host. Under Wine, ``Path.home()`` points into the Wine prefix, while
the autorun root lives in the real Unix home, so the shim case is detected
and handled separately.
"""

import ctypes
import logging
import os
import sys
import threading
from pathlib import Path
from typing import Any, Optional

from ..exceptions import (
    HomeDirectoryError,
    MissingEnvironmentVariableError,
    SystemLibraryError,
)
from .config import DEFAULT_CONFIG, FSConfig

logger = logging.getLogger(__name__)

_home_dir: Optional[Path] = None
_home_dir_lock = threading.Lock()


def _load_system_library(name: str) -> Optional[Any]:
    """Load the core system library, or return None on non-Windows interpreters.

    Raises:
        SystemLibraryError: If running on Windows and the library cannot be loaded
    """
    if sys.platform != "win32":
        return None
    try:
        return ctypes.WinDLL(name)
    except OSError as e:
        raise SystemLibraryError(
            f"Couldn't load {name} module: {e}", library=name
        ) from e


def running_under_compatibility_shim(config: Optional[FSConfig] = None) -> bool:
    """Report whether the system library is Wine's reimplementation.

    Only the presence of the marker export is checked; it is never called.
    """
    config = config or DEFAULT_CONFIG
    library = _load_system_library(config.system_library)
    if library is None:
        return False
    return hasattr(library, config.shim_marker_symbol)


def resolve_home_dir(config: Optional[FSConfig] = None) -> Path:
    """Determine the user's home directory without caching.

    Raises:
        SystemLibraryError: If the probe library cannot be loaded
        MissingEnvironmentVariableError: If the shim branch is taken and the
            user variable is unset
        HomeDirectoryError: If the native lookup fails
    """
    config = config or DEFAULT_CONFIG

    if running_under_compatibility_shim(config):
        user = os.environ.get(config.user_env_var)
        if user is None:
            raise MissingEnvironmentVariableError(
                f"Failed to get ${config.user_env_var} environment variable!",
                variable=config.user_env_var,
            )
        home = Path(config.shim_home_root) / user
        logger.debug(f"Compatibility shim detected, using host home {home}")
        return home

    try:
        home = Path.home()
    except RuntimeError as e:
        raise HomeDirectoryError(f"Couldn't get your home directory! ({e})") from e
    logger.debug(f"Using native home directory {home}")
    return home


def home_dir() -> Path:
    """Return the process-wide home directory, resolving it on first use.

    Concurrent first callers block until the single resolution finishes;
    every caller afterwards receives the same ``Path`` object.
    """
    global _home_dir

    home = _home_dir
    if home is not None:
        return home

    with _home_dir_lock:
        if _home_dir is None:
            _home_dir = resolve_home_dir()
            logger.info(f"Resolved home directory: {_home_dir}")
        return _home_dir
