from pathlib import Path

import numpy as np
from PIL import Image, ImageFilter, UnidentifiedImageError

from glyphramp.errors import DecodeError

# Terminal characters are roughly twice as tall as wide
CHAR_ASPECT = 0.5

# 3x3 Gaussian with sigma 0 reduces to the binomial kernel
GAUSSIAN_3X3 = ImageFilter.Kernel((3, 3), (1, 2, 1, 2, 4, 2, 1, 2, 1), scale=16)


def decode(path: str | Path) -> Image.Image:
    """Open and fully decode an image as RGB."""
    path = Path(path)
    try:
        with Image.open(path) as image:
            return image.convert("RGB")
    except FileNotFoundError as e:
        raise DecodeError(f"Could not load image: {path} (no such file)") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(f"Could not load image: {path} ({e})") from e
    except UnidentifiedImageError as e:
        raise DecodeError(f"Could not load image: {path} (unrecognised format)") from e
    except (OSError, SyntaxError) as e:
        # Pillow raises SyntaxError for corrupt chunks found while loading
        raise DecodeError(f"Could not load image: {path} ({e})") from e


def to_grayscale(image: Image.Image) -> Image.Image:
    return image.convert("L")


def blur(image: Image.Image) -> Image.Image:
    # Pillow refuses kernels larger than the image
    if min(image.size) < 3:
        return image.copy()
    return image.filter(GAUSSIAN_3X3)


def resize(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Area-average resize to ``(width, height)``."""
    return image.resize(size, Image.BOX)


def output_height(width: int, height: int, target_width: int, preserve_aspect: bool = True) -> int:
    if preserve_aspect:
        rows = round(target_width * (height / width) * CHAR_ASPECT)
    else:
        rows = target_width // 2
    return max(1, rows)


def to_grid(image: Image.Image) -> np.ndarray:
    """Pixel data as a read-only uint8 array: (rows, cols) for L, (rows, cols, 3) for RGB."""
    grid = np.array(image, dtype=np.uint8)
    grid.flags.writeable = False
    return grid
