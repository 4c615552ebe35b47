"""Pytest fixtures for tests."""

import random
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from huecycle.colors import ColorHistory
from huecycle.core import ColorSpace


class RecordingSurface:
    """Surface that remembers everything painted on it."""

    def __init__(self):
        self.backgrounds: list[str] = []
        self.labels: list[tuple[str, str]] = []

    def set_background(self, hex_value: str) -> None:
        self.backgrounds.append(hex_value)

    def set_label(self, text: str, color: str) -> None:
        self.labels.append((text, color))


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def history():
    """Create an empty color history."""
    return ColorHistory()


@pytest.fixture
def color_space():
    """Create a color space with a seeded random source."""
    return ColorSpace(rng=random.Random(1234))


@pytest.fixture
def surface():
    """Create a recording surface."""
    return RecordingSurface()
