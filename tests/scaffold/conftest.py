"""Shared fixtures for scaffold tests."""

import os
import sys

import pytest

# Ensure tests/scaffold/ is on sys.path so test files can import the fakes
# and helpers unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from scaffold_helpers import Scaffolder  # noqa: E402


@pytest.fixture
def scaffolder():
    return Scaffolder()


@pytest.fixture
def work_dir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return str(path)
