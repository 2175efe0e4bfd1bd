import numpy as np


def _euclid(a, b):
    dx = a[:, None, 0] - b[None, :, 0]
    dy = a[:, None, 1] - b[None, :, 1]
    return np.sqrt(dx * dx + dy * dy)


def generate_instance(n_cities=60, seed=0, size=100.0):
    """Uniform random Euclidean TSP instance on a ``size`` x ``size`` square."""
    rng = np.random.default_rng(seed)
    coords = rng.uniform(0.0, size, size=(int(n_cities), 2))
    dist = _euclid(coords, coords)
    return {
        "n": int(n_cities),
        "coords": coords,
        "dist": dist,
    }
