"""Flattening a 2D image into the pixel list consumed by clustering."""

import numpy as np
from PIL import Image


def flatten_pixels(img: Image.Image) -> np.ndarray:
    """Return the pixels of ``img`` as an (width*height, 3) uint8 array.

    Pixels are in row-major order, so pixel (x, y) sits at index y*width + x.
    """
    arr = np.array(img.convert("RGB"))
    return arr.reshape(-1, 3)
