"""Command line entry point: make an image look cartoonish."""

import argparse
import logging

from . import __version__
from .config import QuantizeConfig
from .errors import CartoonizeError
from .pipeline import cartoonize_file

logger = logging.getLogger("cartoonize")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cartoonize",
        description="Make an image look cartoonish using k-means color clustering",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-i", "--input", required=True, help="Input image path")
    parser.add_argument("-o", "--output", required=True, help="Output image path")
    parser.add_argument(
        "-r", "--runs", type=int, default=10,
        help="Extra k-means runs after the first one, each with the next seed",
    )
    parser.add_argument(
        "-c", "--clusters", type=int, default=10, help="Number of colors in the output"
    )
    parser.add_argument("-s", "--seed", type=int, default=0, help="Seed for k-means")
    parser.add_argument(
        "-m", "--max-iters", type=int, default=10,
        help="Max number of iterations per k-means run",
    )
    parser.add_argument(
        "--converge", type=float, default=255.0,
        help="Stop a run once the centroids move less than this in one step",
    )
    parser.add_argument(
        "-t", "--max-threads", type=int, default=1, help="Max number of threads"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every run")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> QuantizeConfig:
    return QuantizeConfig(
        clusters=args.clusters,
        runs=args.runs,
        seed=args.seed,
        max_iterations=args.max_iters,
        converge=args.converge,
        max_threads=args.max_threads,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s"
    )

    try:
        config = config_from_args(args).validate()
        cartoonize_file(args.input, args.output, config)
    except CartoonizeError as e:
        logger.error(f"Error: {e}")
        return 1

    return 0
