"""Pytest configuration and shared fixtures for the Watermark Manager test suite.

Pictures are generated on the fly with Pillow into a per-test ``img`` folder,
so no binary fixtures are kept in the repository.
"""

from pathlib import Path
from typing import Callable, Tuple

import numpy as np
import pytest
from PIL import Image as PILImage

from watermark_manager.models.image import Image

BASE_COLOR = (200, 120, 40, 255)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - pipeline operations on real files")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full interactive session")


@pytest.fixture
def img_dir(tmp_path: Path) -> Path:
    """Empty image folder, the equivalent of ``./img``."""
    folder = tmp_path / "img"
    folder.mkdir()
    return folder


@pytest.fixture
def make_image(img_dir: Path) -> Callable[..., Path]:
    """Factory writing a solid-colour picture into ``img_dir`` and returning its path."""

    def _make(
        name: str = "test.jpg",
        size: Tuple[int, int] = (100, 100),
        color: Tuple[int, ...] = BASE_COLOR,
        mode: str = "RGBA",
    ) -> Path:
        path = img_dir / name
        picture = PILImage.new(mode, size, color)
        if path.suffix.lower() in (".jpg", ".jpeg"):
            picture.convert("RGB").save(path, quality=100, subsampling=0)
        else:
            picture.save(path)
        return path

    return _make


@pytest.fixture
def noisy_image() -> Image:
    """64x48 Image with random RGB and a varied alpha channel."""
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(48, 64, 4), dtype=np.uint8)
    return Image(pixels=pixels)


def solid_image(size: Tuple[int, int], color: Tuple[int, int, int, int]) -> Image:
    """In-memory Image of *size* (width, height) filled with *color*."""
    width, height = size
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[...] = color
    return Image(pixels=pixels)


@pytest.fixture
def solid() -> Callable[..., Image]:
    return solid_image
