"""Shared pytest fixtures for matheval tests."""

from pathlib import Path

import pytest


@pytest.fixture
def profile_file(tmp_path: Path) -> Path:
    """Return path to a matheval.toml with variables a and b."""
    path = tmp_path / "matheval.toml"
    path.write_text(
        """
[variables]
a = 52
b = 18

[logging]
level = "warning"
"""
    )
    return path
