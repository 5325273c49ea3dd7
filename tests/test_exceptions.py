"""
Tests for the autorun.exceptions module.

This module tests:
- AutorunError base class
- Environment resolution errors and their terminal action
"""

from autorun.exceptions import (
    AutorunError,
    EnvironmentResolutionError,
    ErrorAction,
    HomeDirectoryError,
    MissingEnvironmentVariableError,
    SystemLibraryError,
)


class TestAutorunError:
    """Tests for the base AutorunError class."""

    def test_basic_creation(self):
        error = AutorunError("Something went wrong")

        assert str(error) == "[AUTORUN_ERROR] Something went wrong"
        assert error.message == "Something went wrong"
        assert error.user_message == "Something went wrong"
        assert not error.is_terminal

    def test_to_dict(self):
        error = AutorunError(
            "Test error",
            error_code="TEST001",
            context={"key": "value"},
            suggestion="Try this fix",
        )

        result = error.to_dict()

        assert result["error_type"] == "AutorunError"
        assert result["error_code"] == "TEST001"
        assert result["action"] == "user_fixable"
        assert result["context"] == {"key": "value"}
        assert result["suggestion"] == "Try this fix"


class TestEnvironmentResolutionErrors:
    """Tests for the terminal environment errors."""

    def test_all_are_terminal(self):
        errors = [
            EnvironmentResolutionError("x"),
            SystemLibraryError("x", library="kernel32"),
            HomeDirectoryError("x"),
            MissingEnvironmentVariableError("x", variable="USER"),
        ]

        for error in errors:
            assert isinstance(error, AutorunError)
            assert error.action is ErrorAction.TERMINAL
            assert error.is_terminal

    def test_system_library_error(self):
        error = SystemLibraryError("Couldn't load kernel32 module!", library="kernel32")

        assert error.error_code == "SYSTEM_LIBRARY_ERROR"
        assert error.step == "load_system_library"
        assert error.context == {"step": "load_system_library", "library": "kernel32"}

    def test_home_directory_error_has_suggestion(self):
        error = HomeDirectoryError("Couldn't get your home directory!")

        assert error.step == "native_home_lookup"
        assert "HOME" in error.suggestion

    def test_missing_variable_error(self):
        error = MissingEnvironmentVariableError(
            "Failed to get $USER environment variable!", variable="USER"
        )

        assert str(error) == "[MISSING_ENV_VAR] Failed to get $USER environment variable!"
        assert error.context["variable"] == "USER"
        assert error.context["step"] == "shim_home_lookup"
        assert "$USER" in error.suggestion
