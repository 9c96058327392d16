"""
Shared test fixtures for the dirsim test suite.
"""

import pytest

from dirsim.core import Filesystem
from dirsim.execution import CommandExecutor
from dirsim.settings import Settings


@pytest.fixture
def make_filesystem():
    """Factory building a filesystem whose root holds the given subdirectories.

    Keyword arguments are passed on to Settings.

    Usage:
        def test_something(make_filesystem):
            fs = make_filesystem("sub1", "sub2", separator="/")
    """

    def _make_filesystem(*names: str, **settings) -> Filesystem:
        fs = Filesystem(Settings(**settings)) if settings else Filesystem()
        for name in names:
            fs.add_subdir(name)
        return fs

    return _make_filesystem


@pytest.fixture
def child_names():
    """Function listing a directory's child names in stored order."""

    def _child_names(directory) -> list[str]:
        return [subdir.name for subdir in directory.children]

    return _child_names


@pytest.fixture
def filesystem():
    """Fresh filesystem holding only the root directory."""
    return Filesystem()


@pytest.fixture
def executor(filesystem):
    """Executor bound to the ``filesystem`` fixture."""
    return CommandExecutor(filesystem)
