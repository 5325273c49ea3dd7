"""
Shared fixtures for the autorun test suite.

The real home directory is never touched: the resolved-home singleton is
pointed at a temporary directory for every test that needs a root.
"""

import pytest

from autorun.fs import environment


@pytest.fixture
def fresh_home_cache(monkeypatch):
    """Clear the resolved-home singleton for the duration of a test."""
    monkeypatch.setattr(environment, "_home_dir", None)
    yield
    # monkeypatch restores the previous value


@pytest.fixture
def home(tmp_path, monkeypatch):
    """A temporary home directory containing an empty autorun root."""
    monkeypatch.setattr(environment, "_home_dir", tmp_path)
    (tmp_path / "autorun").mkdir()
    return tmp_path


@pytest.fixture
def root(home):
    """The autorun root inside the temporary home."""
    return home / "autorun"
