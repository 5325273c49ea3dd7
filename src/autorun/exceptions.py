"""
Autorun Exception Hierarchy

This module defines the exceptions raised by the autorun filesystem layer.

Two classes of failure exist:
1. Environment resolution errors - the home directory (and therefore the
   autorun root) could not be determined. These are terminal: nothing
   downstream can run without a base path.
2. Filesystem I/O errors - these are the builtin ``OSError`` family and are
   propagated unchanged by every operation, so they are not redefined here.
"""

import time
from enum import Enum
from typing import Any, Dict, Optional


class ErrorAction(Enum):
    """What action can be taken for this error."""

    # Caller can potentially fix and retry
    USER_FIXABLE = "user_fixable"

    # Cannot be fixed on-the-fly, must terminate
    TERMINAL = "terminal"


class AutorunError(Exception):
    """
    Base exception class for all autorun errors.

    Attributes:
        error_code: Unique error code for programmatic handling
        timestamp: When the error occurred
        context: Additional context information
        user_message: User-friendly error message
        developer_message: Detailed technical error message
        suggestion: Suggested fix or next steps (if applicable)
        action: Whether the caller may recover from this error
    """

    action = ErrorAction.USER_FIXABLE

    def __init__(
        self,
        message: str,
        error_code: str = "AUTORUN_ERROR",
        context: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        suggestion: Optional[str] = None,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.timestamp = time.time()
        self.context = context or {}
        self.user_message = user_message or message
        self.developer_message = message
        self.suggestion = suggestion

    @property
    def message(self) -> str:
        return self.developer_message

    @property
    def is_terminal(self) -> bool:
        return self.action is ErrorAction.TERMINAL

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.developer_message,
            "user_message": self.user_message,
            "action": self.action.value,
            "timestamp": self.timestamp,
            "context": self.context,
            "suggestion": self.suggestion,
        }

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.developer_message}"


# =============================================================================
# ENVIRONMENT RESOLUTION ERRORS
# =============================================================================

class EnvironmentResolutionError(AutorunError):
    """
    Raised when the user's home directory cannot be determined.

    Every path this package hands out is rooted at the home directory, so
    these errors are terminal. ``step`` names the determination step that
    failed.
    """

    action = ErrorAction.TERMINAL

    def __init__(self, message: str, step: Optional[str] = None, **kwargs):
        self.step = step
        error_code = kwargs.pop("error_code", "ENVIRONMENT_ERROR")
        context = kwargs.pop("context", {})
        if step:
            context["step"] = step
        super().__init__(message, error_code=error_code, context=context, **kwargs)


class SystemLibraryError(EnvironmentResolutionError):
    """Raised when the core system library used for shim detection cannot be loaded."""

    def __init__(self, message: str, library: Optional[str] = None, **kwargs):
        self.library = library
        context = kwargs.pop("context", {})
        if library:
            context["library"] = library
        super().__init__(
            message,
            step="load_system_library",
            error_code="SYSTEM_LIBRARY_ERROR",
            context=context,
            **kwargs,
        )


class HomeDirectoryError(EnvironmentResolutionError):
    """Raised when the platform cannot report a home directory."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault(
            "suggestion", "Set the HOME (or USERPROFILE on Windows) environment variable"
        )
        super().__init__(
            message,
            step="native_home_lookup",
            error_code="HOME_DIRECTORY_ERROR",
            **kwargs,
        )


class MissingEnvironmentVariableError(EnvironmentResolutionError):
    """Raised when a variable required by the compatibility-shim branch is unset."""

    def __init__(self, message: str, variable: Optional[str] = None, **kwargs):
        self.variable = variable
        context = kwargs.pop("context", {})
        if variable:
            context["variable"] = variable
            kwargs.setdefault("suggestion", f"Export ${variable} before starting the process")
        super().__init__(
            message,
            step="shim_home_lookup",
            error_code="MISSING_ENV_VAR",
            context=context,
            **kwargs,
        )
