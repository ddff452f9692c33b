"""Test configuration and fixtures for graverobber."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project with included and excluded entries.

    Layout::

        a.txt                 "hello world"
        graverobber.py        the program's own file
        node_modules/x.js
        sub/b.md
    """
    (tmp_path / "a.txt").write_text("hello world")
    (tmp_path / "graverobber.py").write_text("print('I am the program')\n")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "x.js").write_text("module.exports = {}\n")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.md").write_text("# Notes\n")
    return tmp_path
