"""Instance and configuration helpers for the command-line glue layer.

Instances are plain coordinate tables: CSV/Parquet files with ``x`` and
``y`` columns read through Pandas, or NPZ archives holding a ``coords``
array (and optionally a precomputed ``dist`` matrix).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np

from ..data.generate_data import _euclid


def load_config(path_yaml: Path) -> Dict:
    """Read a YAML (or JSON) configuration file.

    Parameters
    ----------
    path_yaml:
        Path to the configuration file.

    Returns
    -------
    dict
        Parsed configuration dictionary.  Empty files resolve to ``{}``.
    """

    import json

    import yaml

    path = Path(path_yaml)
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return {}

    if path.suffix.lower() == ".json":
        return json.loads(text)

    cfg = yaml.safe_load(text)
    return cfg or {}


def _read_frame(path_like: Path):
    """Return a Pandas ``DataFrame`` from CSV or Parquet input."""

    import pandas as pd

    path = Path(path_like)
    if path.suffix.lower() in {".parquet", ".pq"}:
        df = pd.read_parquet(path)
    else:
        df = pd.read_csv(path)
    return df


def compute_euclid(coords: np.ndarray) -> np.ndarray:
    coords = np.asarray(coords, dtype=np.float64)
    return _euclid(coords, coords)


def validate_coords(coords: np.ndarray, dist: Optional[np.ndarray] = None) -> None:
    """Sanity checks on a loaded instance; raises ``ValueError`` on bad input."""

    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError("coords must have shape (n, 2)")
    if coords.shape[0] < 2:
        raise ValueError("an instance needs at least two cities")
    if not np.all(np.isfinite(coords)):
        raise ValueError("coords contain non-finite values")
    if dist is not None:
        if dist.shape != (coords.shape[0], coords.shape[0]):
            raise ValueError("dist shape does not match the number of cities")
        if np.any(dist < 0):
            raise ValueError("dist contains negative entries")


def load_coords(path_like: Path) -> Tuple[np.ndarray, np.ndarray]:
    """Load an instance and return ``(coords, dist)``."""

    path = Path(path_like)
    if not path.exists():
        raise FileNotFoundError(path)

    dist = None
    if path.suffix.lower() == ".npz":
        with np.load(path) as npz:
            if "coords" not in npz:
                raise ValueError(f"{path} has no 'coords' array")
            coords = np.asarray(npz["coords"], dtype=np.float64)
            if "dist" in npz:
                dist = np.asarray(npz["dist"], dtype=np.float64)
    else:
        df = _read_frame(path)
        missing = {"x", "y"} - set(df.columns)
        if missing:
            raise ValueError(f"{path} is missing columns: {sorted(missing)}")
        coords = df[["x", "y"]].to_numpy(dtype=np.float64)

    if dist is None:
        dist = compute_euclid(coords)
    validate_coords(coords, dist)
    return coords, dist
