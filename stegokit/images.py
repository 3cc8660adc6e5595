"""Reading and writing images as numpy pixel arrays."""

from __future__ import annotations

import os

import numpy as np
from PIL import Image, UnidentifiedImageError


class ImageError(Exception):
    """An image could not be read or written."""


def _load(path: str | os.PathLike, mode: str) -> np.ndarray:
    try:
        with Image.open(path) as image:
            return np.array(image.convert(mode), dtype=np.uint8)
    except (OSError, UnidentifiedImageError, ValueError) as exc:
        raise ImageError(f"cannot open image: {path}") from exc


def load_grayscale(path: str | os.PathLike) -> np.ndarray:
    """Load an image as a 2-D uint8 array of grey levels."""
    return _load(path, "L")


def load_color(path: str | os.PathLike) -> np.ndarray:
    """Load an image as an H x W x 3 uint8 array."""
    return _load(path, "RGB")


def save_image(path: str | os.PathLike, pixels: np.ndarray) -> None:
    """Write a grey (H x W) or colour (H x W x 3) uint8 array to ``path``.

    The file format follows the file extension.
    """
    array = np.asarray(pixels)
    if not (array.ndim == 2 or (array.ndim == 3 and array.shape[2] == 3)):
        raise ValueError(f"unsupported pixel array shape {array.shape}")
    image = Image.fromarray(np.clip(array, 0, 255).astype(np.uint8))
    try:
        image.save(path)
    except (OSError, ValueError, KeyError) as exc:
        raise ImageError(f"cannot save image: {path}") from exc