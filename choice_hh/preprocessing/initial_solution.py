import numpy as np


def build_initial(n, rng):
    # Random permutation of the cities 0..n-1
    return rng.permutation(int(n)).astype(np.int64)
