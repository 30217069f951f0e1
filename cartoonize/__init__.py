"""Make images look cartoonish using k-means color clustering in LAB space."""

__version__ = "0.1.0"

from .config import QuantizeConfig
from .errors import CartoonizeError, ConfigError, InputError, InternalError, OutputError
from .kmeans import ClusterResult, run_kmeans
from .optimizer import optimize
from .pipeline import cartoonize_file, quantize_image

__all__ = [
    "CartoonizeError",
    "ClusterResult",
    "ConfigError",
    "InputError",
    "InternalError",
    "OutputError",
    "QuantizeConfig",
    "cartoonize_file",
    "optimize",
    "quantize_image",
    "run_kmeans",
]
