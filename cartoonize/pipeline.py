"""End-to-end pipeline: pixels -> LAB -> multi-start k-means -> flat-color image."""

import logging
from pathlib import Path

from PIL import Image

from .codec import load_image, save_image
from .colorspace import rgb_to_lab
from .config import QuantizeConfig
from .kmeans import ClusterResult
from .optimizer import make_pool, optimize
from .pixels import flatten_pixels
from .reconstruct import palette, reconstruct

logger = logging.getLogger(__name__)


def quantize_image(
    img: Image.Image, config: QuantizeConfig | None = None
) -> "tuple[Image.Image, ClusterResult]":
    """Reduce ``img`` to ``config.clusters`` colors.

    Returns:
        Tuple of (quantized RGB image, winning clustering result)

    Raises:
        ConfigError: If the config is invalid; raised before any clustering
    """
    config = (config or QuantizeConfig()).validate()
    width, height = img.size

    pixels_lab = rgb_to_lab(flatten_pixels(img))

    with make_pool(config.max_threads) as pool:
        logger.info(
            f"Clustering {width}x{height} pixels into {config.clusters} colors "
            f"({config.total_runs} runs, {config.max_threads} threads)"
        )
        best = optimize(
            pixels_lab,
            config.clusters,
            config.max_iterations,
            config.converge,
            config.seed,
            config.runs,
            pool=pool,
        )

    logger.info(f"Best run: seed {best.seed}, score {best.score:.2f}")
    logger.info(f"Palette: {palette(best.centroids)}")

    return reconstruct(width, height, best.assignments, best.centroids), best


def cartoonize_file(input_path, output_path, config: QuantizeConfig | None = None) -> ClusterResult:
    """Load ``input_path``, quantize it and save the result to ``output_path``."""
    config = (config or QuantizeConfig()).validate()
    img = load_image(Path(input_path))
    result, best = quantize_image(img, config)
    save_image(result, Path(output_path))
    return best
