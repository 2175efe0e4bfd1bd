import numpy as np


def order_crossover(parent_a, parent_b, rng):
    """OX: keep a random slice of ``parent_a``, fill the rest in ``parent_b`` order."""
    n = parent_a.shape[0]
    if n < 2:
        return parent_a.copy()
    i, j = sorted(int(x) for x in rng.choice(n, size=2, replace=False))
    child = np.full(n, -1, dtype=parent_a.dtype)
    child[i : j + 1] = parent_a[i : j + 1]
    used = np.zeros(n, dtype=bool)
    used[parent_a[i : j + 1]] = True

    pos = (j + 1) % n
    for k in range(n):
        c = parent_b[(j + 1 + k) % n]
        if used[c]:
            continue
        child[pos] = c
        used[c] = True
        pos = (pos + 1) % n
    return child
