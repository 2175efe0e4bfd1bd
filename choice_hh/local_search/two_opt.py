import numpy as np
from numba import njit


@njit(cache=True)
def tour_length(dist, tour):
    n = tour.shape[0]
    if n < 2:
        return 0.0
    s = 0.0
    for i in range(n):
        s += dist[tour[i], tour[(i + 1) % n]]
    return s


@njit(cache=True)
def _reverse(tour, i, j):
    while i < j:
        tmp = tour[i]
        tour[i] = tour[j]
        tour[j] = tmp
        i += 1
        j -= 1


@njit(cache=True)
def two_opt_pass(dist, tour):
    """First-improvement 2-opt on a closed tour. Returns True if a move was applied."""
    n = tour.shape[0]
    if n < 4:
        return False
    for i in range(n - 2):
        a = tour[i]
        b = tour[i + 1]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            c = tour[j]
            d = tour[(j + 1) % n]
            # Old edges: (a -> b), (c -> d)
            # New edges: (a -> c), (b -> d)
            gain = dist[a, b] + dist[c, d] - dist[a, c] - dist[b, d]
            if gain > 1e-9:
                _reverse(tour, i + 1, j)
                return True
    return False


def two_opt(dist, tour, max_passes):
    """Apply up to ``max_passes`` first-improvement 2-opt moves in place."""
    improved = False
    for _ in range(max(1, int(max_passes))):
        if not two_opt_pass(dist, tour):
            break
        improved = True
    return improved
