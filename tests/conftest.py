"""Pytest configuration for image-layers tests."""

import logging

import numpy as np
import pytest
from PIL import Image

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture
def gradient_image() -> Image.Image:
    """RGBA image whose pixels are all distinct, 40x30."""
    ys, xs = np.mgrid[0:30, 0:40]
    array = np.stack(
        [xs * 6, ys * 8, (xs + ys) % 256, np.full_like(xs, 255)], axis=-1
    ).astype(np.uint8)
    return Image.fromarray(array)
