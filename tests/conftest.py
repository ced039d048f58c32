"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from branchnote.log import HookLogger


class FakePredicate:
    """Skip predicate returning a fixed exit status and counting runs."""

    def __init__(self, exit_code: int):
        self.exit_code = exit_code
        self.calls = 0

    def run(self) -> int:
        self.calls += 1
        return self.exit_code


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def message_file(temp_dir):
    """Path for a commit message file (not yet created)."""
    return temp_dir / "COMMIT_EDITMSG"


@pytest.fixture
def logger():
    """A quiet hook logger that records warnings."""
    return HookLogger()


@pytest.fixture
def predicate_true():
    """Predicate that exits with 0."""
    return FakePredicate(0)


@pytest.fixture
def predicate_false():
    """Predicate that exits with 1."""
    return FakePredicate(1)
