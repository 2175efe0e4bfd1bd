import numpy as np


def random_swaps(tour, n_swaps, rng):
    """Swap ``n_swaps`` random pairs of cities in place."""
    n = tour.shape[0]
    if n < 2:
        return tour
    for _ in range(max(1, int(n_swaps))):
        i, j = rng.choice(n, size=2, replace=False)
        tour[i], tour[j] = tour[j], tour[i]
    return tour


def scramble_segment(tour, length, rng):
    """Shuffle a random contiguous segment of ``length`` cities in place."""
    n = tour.shape[0]
    length = int(min(max(2, length), n))
    if n < 2:
        return tour
    start = int(rng.integers(n - length + 1))
    seg = tour[start : start + length].copy()
    rng.shuffle(seg)
    tour[start : start + length] = seg
    return tour
