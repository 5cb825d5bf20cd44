"""Pytest configuration.

Keeps every test away from the real per-user settings.ini and
provides small sample images.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from raster_toolkit.core import Image, Pixel
from raster_toolkit.services.settings import Settings


@pytest.fixture(autouse=True)
def isolated_settings_file(tmp_path: Path, monkeypatch) -> Path:
    settings_path = tmp_path / "settings.ini"
    monkeypatch.setattr(Settings, "SETTINGS_FILE", settings_path)
    return settings_path


@pytest.fixture
def distinct_image() -> Image:
    """3x3 image where every pixel differs."""
    return Image([
        [Pixel(10 * (x * 3 + y), 20 + x, 200 - 15 * y) for y in range(3)]
        for x in range(3)
    ])


@pytest.fixture
def wide_image() -> Image:
    """4x2 image (width 4, height 2)."""
    return Image([
        [Pixel(x * 50, y * 100, 25) for y in range(2)]
        for x in range(4)
    ])
