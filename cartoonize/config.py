"""Settings for one cartoonize invocation."""

import math
from dataclasses import dataclass

from .errors import ConfigError

# upper bound for the worker pool, runs are CPU bound so more threads never help
MAX_THREADS = 256


@dataclass
class QuantizeConfig:
    """Clustering settings; the defaults match the command line defaults."""
    clusters: int = 10
    runs: int = 10
    seed: int = 0
    max_iterations: int = 10
    converge: float = 255.0
    max_threads: int = 1

    @property
    def total_runs(self) -> int:
        """Clustering attempts made: the first one plus ``runs`` more."""
        return self.runs + 1

    def validate(self) -> "QuantizeConfig":
        """Raise ConfigError for the first out-of-range option."""
        if self.clusters < 1:
            raise ConfigError("clusters", f"must be at least 1, got {self.clusters}")
        if self.runs < 0:
            raise ConfigError("runs", f"must not be negative, got {self.runs}")
        if self.seed < 0:
            raise ConfigError("seed", f"must not be negative, got {self.seed}")
        if self.max_iterations < 1:
            raise ConfigError("max-iters", f"must be at least 1, got {self.max_iterations}")
        if not math.isfinite(self.converge) or self.converge < 0:
            raise ConfigError("converge", f"must be a finite number >= 0, got {self.converge}")
        check_thread_count(self.max_threads)
        return self


def check_thread_count(max_threads: int) -> None:
    if not 1 <= max_threads <= MAX_THREADS:
        raise ConfigError(
            "max-threads", f"must be between 1 and {MAX_THREADS}, got {max_threads}"
        )
