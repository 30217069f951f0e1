"""Rebuild an image from cluster assignments."""

import logging

import numpy as np
from PIL import Image

from .colorspace import lab_to_rgb
from .errors import InternalError

logger = logging.getLogger(__name__)


def palette(centroids: np.ndarray) -> list[tuple[int, int, int]]:
    """LAB centroids as a list of RGB tuples."""
    return [tuple(int(c) for c in color) for color in lab_to_rgb(np.asarray(centroids))]


def reconstruct(
    width: int,
    height: int,
    assignments: np.ndarray,
    centroids: np.ndarray,
) -> Image.Image:
    """Paint every pixel with the RGB color of its assigned centroid.

    Pixel (x, y) takes ``assignments[y * width + x]``.
    """
    assignments = np.asarray(assignments)
    if len(assignments) != width * height:
        logger.error(f"got {len(assignments)} assignments for a {width}x{height} image")
        raise InternalError(
            f"expected {width * height} assignments, got {len(assignments)}"
        )
    k = len(centroids)
    bad = (assignments < 0) | (assignments >= k)
    if bad.any():
        first = int(np.flatnonzero(bad)[0])
        logger.error(f"{int(bad.sum())} assignments out of range for {k} centroids")
        raise InternalError(
            f"assignment {int(assignments[first])} at pixel {first} "
            f"is not a valid centroid index (k={k})"
        )

    palette_rgb = lab_to_rgb(np.asarray(centroids))
    quantized = palette_rgb[assignments].reshape(height, width, 3)
    return Image.fromarray(quantized, mode="RGB")
