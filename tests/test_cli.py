"""
Tests for the autorun command line interface.

Tests cover:
- Path reporting commands
- File operations through the CLI
- Exit codes for I/O and fatal environment errors
"""

import logging

import pytest
from click.testing import CliRunner

from autorun.cli import main
from autorun.exceptions import MissingEnvironmentVariableError
from autorun.fs import environment


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def runner():
    return CliRunner()


class TestPathCommands:
    """Tests for home and base."""

    def test_home(self, runner, home):
        result = runner.invoke(main, ["home"])

        assert result.exit_code == 0
        assert result.output.strip() == str(home)

    def test_base(self, runner, root):
        result = runner.invoke(main, ["base"])

        assert result.exit_code == 0
        assert result.output.strip() == str(root)


class TestFileCommands:
    """Tests for ls, cat, mkdir, touch and rmdir."""

    def test_ls(self, runner, root):
        (root / "scripts").mkdir()
        (root / "scripts" / "b.lua").write_text("")
        (root / "scripts" / "a.lua").write_text("")
        (root / "scripts" / "lib").mkdir()

        result = runner.invoke(main, ["ls", "scripts"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["scripts/a.lua", "scripts/b.lua", "scripts/lib/"]

    def test_ls_missing_directory(self, runner, root):
        result = runner.invoke(main, ["ls", "plugins"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_cat(self, runner, root):
        (root / "autorun.lua").write_text("print('hi')\n")

        result = runner.invoke(main, ["cat", "autorun.lua"])

        assert result.exit_code == 0
        assert result.output == "print('hi')\n"

    def test_mkdir_touch_rmdir(self, runner, root):
        assert runner.invoke(main, ["mkdir", "lua_dumps"]).exit_code == 0
        assert runner.invoke(main, ["touch", "lua_dumps/out.lua"]).exit_code == 0
        assert (root / "lua_dumps" / "out.lua").is_file()

        result = runner.invoke(main, ["rmdir", "lua_dumps", "--yes"])

        assert result.exit_code == 0
        assert not (root / "lua_dumps").exists()

    def test_mkdir_missing_parent(self, runner, root):
        result = runner.invoke(main, ["mkdir", "plugins/nested"])

        assert result.exit_code == 1


class TestFatalErrors:
    """Tests for environment resolution failures."""

    def test_missing_user_exits_with_diagnostic(self, runner, fresh_home_cache, monkeypatch):
        def failing_resolve():
            raise MissingEnvironmentVariableError(
                "Failed to get $USER environment variable!", variable="USER"
            )

        monkeypatch.setattr(environment, "resolve_home_dir", failing_resolve)

        result = runner.invoke(main, ["base"])

        assert result.exit_code == 2
        assert "MISSING_ENV_VAR" in result.output
        assert "Export $USER" in result.output
