import numpy as np
from numba import njit


def random_removal(tour, remove_k, rng):
    """Remove up to k random cities from the tour.
    Returns (remaining_tour, removed_cities).
    """
    n = tour.shape[0]
    count = min(int(remove_k), max(0, n - 1))
    if count <= 0:
        return tour.copy(), np.empty(0, dtype=tour.dtype)

    idxs = rng.choice(n, size=count, replace=False)
    mask = np.zeros(n, dtype=bool)
    mask[idxs] = True
    return tour[~mask].copy(), tour[idxs].copy()


@njit(cache=True)
def cheapest_insertion(dist, partial, removed):
    """Reinsert ``removed`` cities one by one at their cheapest position."""
    n = partial.shape[0] + removed.shape[0]
    buf = np.empty(n, dtype=np.int64)
    L = partial.shape[0]
    for k in range(L):
        buf[k] = partial[k]

    for r in range(removed.shape[0]):
        c = removed[r]
        if L == 0:
            buf[0] = c
            L = 1
            continue
        best_k = 0
        best_cost = np.inf
        for k in range(L):
            u = buf[k]
            v = buf[(k + 1) % L]
            cost = dist[u, c] + dist[c, v] - dist[u, v]
            if cost < best_cost:
                best_cost = cost
                best_k = k
        for k in range(L, best_k + 1, -1):
            buf[k] = buf[k - 1]
        buf[best_k + 1] = c
        L += 1
    return buf


def ruin_recreate(dist, tour, remove_k, rng):
    partial, removed = random_removal(tour, remove_k, rng)
    if removed.size == 0:
        return tour.copy()
    return cheapest_insertion(dist, partial, removed)
