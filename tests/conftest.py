from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared diagram fixtures used across unit and integration tests.
3. Isolation of the logging configuration between tests.
"""

import os
import sys
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree_text() -> str:
    """
    Return a typical diagram as produced by the 'tree' utility.

    The root label is followed by two top-level directories, a nested
    package and a couple of top-level files with comments.
    """
    return "\n".join([
        "myproject/",
        "├── src/",
        "│   ├── app/",
        "│   │   ├── __init__.py",
        "│   │   └── main.py  # entry point",
        "│   └── utils.py",
        "├── tests/",
        "│   └── test_main.py",
        "├── README.md",
        "└── setup.py",
    ])


@pytest.fixture
def sample_tree_lines(sample_tree_text: str) -> List[str]:
    return sample_tree_text.splitlines()


@pytest.fixture
def sample_tree_paths() -> List[str]:
    """Resolved paths expected for 'sample_tree_text', in order."""
    return [
        "src/",
        "src/app/",
        "src/app/__init__.py",
        "src/app/main.py",
        "src/utils.py",
        "tests/",
        "tests/test_main.py",
        "README.md",
        "setup.py",
    ]


@pytest.fixture(autouse=True)
def isolated_logging():
    """Drop any handler installed by the application after each test."""
    from mktree.infra.logging import reset_logging

    yield
    reset_logging()
