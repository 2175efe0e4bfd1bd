"""Single-city relocation (or-opt with segment length one)."""

from __future__ import annotations

from numba import njit


@njit(cache=True)
def _move_city(tour, i, j):
    # place tour[i] right after the city currently at index j
    c = tour[i]
    if j > i:
        for k in range(i, j):
            tour[k] = tour[k + 1]
        tour[j] = c
    else:
        for k in range(i, j + 1, -1):
            tour[k] = tour[k - 1]
        tour[j + 1] = c


@njit(cache=True)
def relocate_pass(dist, tour):
    """Move the first city whose relocation shortens the tour. Returns True on success."""
    n = tour.shape[0]
    if n < 4:
        return False
    for i in range(n):
        c = tour[i]
        p = tour[(i - 1) % n]
        nx = tour[(i + 1) % n]
        removal_gain = dist[p, c] + dist[c, nx] - dist[p, nx]
        for j in range(n):
            if j == i or (j + 1) % n == i:
                continue
            u = tour[j]
            v = tour[(j + 1) % n]
            insert_cost = dist[u, c] + dist[c, v] - dist[u, v]
            if insert_cost - removal_gain < -1e-9:
                _move_city(tour, i, j)
                return True
    return False


def or_opt(dist, tour, max_passes):
    improved = False
    for _ in range(max(1, int(max_passes))):
        if not relocate_pass(dist, tour):
            break
        improved = True
    return improved
