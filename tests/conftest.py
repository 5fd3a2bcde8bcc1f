import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def save_image(tmp_path):
    """Save a Pillow image under tmp_path and return its path."""

    def _save(image, name="image.png"):
        path = tmp_path / name
        image.save(path)
        return path

    return _save


@pytest.fixture
def black_image_path(save_image):
    """A solid 50x50 black PNG."""
    return save_image(Image.new("RGB", (50, 50), (0, 0, 0)), "black.png")


@pytest.fixture
def gradient_grid():
    """A 37x16 grid cycling through every sample value."""
    return (np.arange(37 * 16) % 256).astype(np.uint8).reshape(37, 16)
