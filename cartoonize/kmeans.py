"""Seeded k-means (Lloyd's method) over points in LAB space."""

from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class ClusterResult:
    """Outcome of one clustering run.

    ``centroids[i]`` is the position of cluster ``i``, ``assignments[j]`` is
    the cluster of input point ``j`` and ``score`` is the total squared
    distance from every point to its centroid. Clusters may be empty.
    """
    centroids: np.ndarray
    assignments: np.ndarray
    score: float
    seed: int = -1
    iterations: int = 0

    @classmethod
    def empty(cls, k: int = 0) -> "ClusterResult":
        """Placeholder that every real result beats."""
        return cls(
            centroids=np.zeros((k, 3)),
            assignments=np.zeros(0, dtype=np.intp),
            score=float("inf"),
        )

    @property
    def k(self) -> int:
        return len(self.centroids)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ClusterResult):
            return NotImplemented
        return (
            self.score == other.score
            and self.seed == other.seed
            and self.iterations == other.iterations
            and np.array_equal(self.centroids, other.centroids)
            and np.array_equal(self.assignments, other.assignments)
        )


def squared_distances(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """(N, k) matrix of squared euclidean distances."""
    return np.stack([np.sum((points - c) ** 2, axis=1) for c in centroids], axis=1)


def assign(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Index of the nearest centroid for every point; ties go to the lowest index."""
    return np.argmin(squared_distances(points, centroids), axis=1)


def kmeans_plusplus_init(points: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
    """K-means++ initialization."""
    n_points = len(points)
    centroids = [points[rng.integers(n_points)]]
    dists = np.sum((points - centroids[0]) ** 2, axis=1)

    for _ in range(1, k):
        total = dists.sum()
        if total > 0:
            idx = rng.choice(n_points, p=dists / total)
        else:
            # fewer distinct points than clusters
            idx = rng.integers(n_points)
        centroids.append(points[idx])
        dists = np.minimum(dists, np.sum((points - points[idx]) ** 2, axis=1))

    return np.array(centroids, dtype=np.float64)


def update_centroids(points: np.ndarray, labels: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Move each centroid to the mean of its points. Empty clusters stay put."""
    k = len(centroids)
    counts = np.bincount(labels, minlength=k)
    sums = np.zeros_like(centroids)
    np.add.at(sums, labels, points)

    new_centroids = centroids.copy()
    filled = counts > 0
    new_centroids[filled] = sums[filled] / counts[filled, None]
    return new_centroids


def run_kmeans(
    points: np.ndarray,
    k: int,
    max_iters: int,
    converge: float,
    seed: int,
) -> ClusterResult:
    """Cluster ``points`` into ``k`` groups.

    Stops after ``max_iters`` update steps, or earlier once the summed
    movement of all centroids in one step is no more than ``converge``. The
    result is a pure function of the arguments.
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError(f"points must have shape (N, 3), got {points.shape}")
    if len(points) == 0:
        raise ValueError("points must not be empty")
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if max_iters < 1:
        raise ValueError(f"max_iters must be at least 1, got {max_iters}")

    rng = np.random.default_rng(seed)
    centroids = kmeans_plusplus_init(points, k, rng)

    iterations = 0
    for _ in range(max_iters):
        iterations += 1
        labels = assign(points, centroids)
        new_centroids = update_centroids(points, labels, centroids)
        movement = np.sum(np.linalg.norm(new_centroids - centroids, axis=1))
        centroids = new_centroids
        if movement <= converge:
            break

    labels = assign(points, centroids)
    score = float(np.sum((points - centroids[labels]) ** 2))

    return ClusterResult(
        centroids=centroids,
        assignments=labels,
        score=score,
        seed=seed,
        iterations=iterations,
    )
