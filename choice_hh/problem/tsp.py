"""Travelling salesman domain with six low-level heuristics.

Heuristic ids:

====  =================  ==============  ==================
id    operator           type            parameter
====  =================  ==============  ==================
0     random swaps       MUTATION        intensity
1     scramble segment   MUTATION        intensity
2     ruin & recreate    RUIN_RECREATE   intensity
3     order crossover    CROSSOVER       -
4     2-opt              LOCAL_SEARCH    depth
5     or-opt relocate    LOCAL_SEARCH    depth
====  =================  ==============  ==================

The crossover recombines the source tour with the best tour seen so far.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional

import numpy as np

from ..config.config import DEFAULTS
from ..config.enums import CROSSOVER, LOCAL_SEARCH, MUTATION, RUIN_RECREATE
from ..local_search.or_opt import or_opt, relocate_pass
from ..local_search.two_opt import tour_length, two_opt, two_opt_pass
from ..operators import (
    cheapest_insertion,
    order_crossover,
    random_swaps,
    ruin_recreate,
    scramble_segment,
)
from ..preprocessing.initial_solution import build_initial
from .base import ProblemDomain

HEURISTIC_NAMES = (
    "random_swaps",
    "scramble_segment",
    "ruin_recreate",
    "order_crossover",
    "two_opt",
    "or_opt",
)
HEURISTIC_TYPES = (MUTATION, MUTATION, RUIN_RECREATE, CROSSOVER, LOCAL_SEARCH, LOCAL_SEARCH)
USES_INTENSITY = (0, 1, 2)
USES_DEPTH = (4, 5)


class TravellingSalesman(ProblemDomain):
    def __init__(
        self,
        dist: np.ndarray,
        *,
        seed: int = 1234,
        coords: Optional[np.ndarray] = None,
        n_slots: int = 2,
        params: Optional[Dict] = None,
    ) -> None:
        dist = np.asarray(dist, dtype=np.float64)
        if dist.ndim != 2 or dist.shape[0] != dist.shape[1]:
            raise ValueError("dist must be a square matrix")
        if dist.shape[0] < 2:
            raise ValueError("at least two cities are required")
        self.dist = dist
        self.coords = None if coords is None else np.asarray(coords, dtype=np.float64)
        self.n = dist.shape[0]
        self.rng = np.random.default_rng(seed)
        self.params = DEFAULTS.copy()
        self.params.update(params or {})
        self.depth_of_search = 0.2
        self.intensity_of_mutation = 0.2
        self._tours: List[Optional[np.ndarray]] = [None] * max(2, int(n_slots))
        self._values: List[float] = [math.inf] * len(self._tours)
        self._best_tour: Optional[np.ndarray] = None
        self._best_value = math.inf
        self._warm_kernels()

    def _warm_kernels(self) -> None:
        # load (or compile) the jitted kernels before the run clock starts;
        # works on a scratch tour and never draws from self.rng
        scratch = np.arange(min(self.n, 5), dtype=np.int64)
        tour_length(self.dist, scratch)
        two_opt_pass(self.dist, scratch.copy())
        relocate_pass(self.dist, scratch.copy())
        cheapest_insertion(self.dist, scratch[:-1].copy(), scratch[-1:].copy())

    # ----- heuristic catalogue -----

    def number_of_heuristics(self) -> int:
        return len(HEURISTIC_TYPES)

    def heuristics_of_type(self, heuristic_type: int) -> List[int]:
        return [h for h, t in enumerate(HEURISTIC_TYPES) if t == heuristic_type]

    def heuristics_using_depth_of_search(self) -> List[int]:
        return list(USES_DEPTH)

    def heuristics_using_intensity_of_mutation(self) -> List[int]:
        return list(USES_INTENSITY)

    def set_depth_of_search(self, value: float) -> None:
        self.depth_of_search = float(np.clip(value, 0.0, 1.0))

    def set_intensity_of_mutation(self, value: float) -> None:
        self.intensity_of_mutation = float(np.clip(value, 0.0, 1.0))

    # ----- solution memory -----

    def _check_slot(self, slot: int, *, initialised: bool = True) -> int:
        slot = int(slot)
        if slot < 0 or slot >= len(self._tours):
            raise ValueError(f"solution slot {slot} out of range")
        if initialised and self._tours[slot] is None:
            raise ValueError(f"solution slot {slot} is empty")
        return slot

    def _store(self, slot: int, tour: np.ndarray) -> float:
        value = float(tour_length(self.dist, tour))
        self._tours[slot] = tour
        self._values[slot] = value
        if value < self._best_value:
            self._best_value = value
            self._best_tour = tour.copy()
        return value

    def initialise_solution(self, slot: int) -> None:
        slot = self._check_slot(slot, initialised=False)
        self._store(slot, build_initial(self.n, self.rng))

    def function_value(self, slot: int) -> float:
        return self._values[self._check_slot(slot)]

    def copy_solution(self, source: int, target: int) -> None:
        source = self._check_slot(source)
        target = self._check_slot(target, initialised=False)
        self._tours[target] = self._tours[source].copy()
        self._values[target] = self._values[source]

    def solution(self, slot: int) -> np.ndarray:
        return self._tours[self._check_slot(slot)].copy()

    def best_solution_value(self) -> float:
        return self._best_value

    def best_solution(self) -> Optional[np.ndarray]:
        return None if self._best_tour is None else self._best_tour.copy()

    # ----- heuristics -----

    def apply_heuristic(self, heuristic_id: int, source: int, target: int) -> float:
        h = int(heuristic_id)
        if h < 0 or h >= len(HEURISTIC_TYPES):
            raise ValueError(f"unknown heuristic id {heuristic_id}")
        source = self._check_slot(source)
        target = self._check_slot(target, initialised=False)
        tour = self._tours[source].copy()

        iom = self.intensity_of_mutation
        dos = self.depth_of_search
        p = self.params
        if h == 0:
            tour = random_swaps(tour, 1 + int(iom * (p["swap_max"] - 1)), self.rng)
        elif h == 1:
            tour = scramble_segment(tour, 2 + int(iom * (self.n - 2)), self.rng)
        elif h == 2:
            k = max(1, int(iom * p["ruin_max_fraction"] * self.n))
            tour = ruin_recreate(self.dist, tour, k, self.rng)
        elif h == 3:
            tour = order_crossover(tour, self._best_tour, self.rng)
        elif h == 4:
            two_opt(self.dist, tour, 1 + int(dos * (p["ls_max_passes"] - 1)))
        else:
            or_opt(self.dist, tour, 1 + int(dos * (p["ls_max_passes"] - 1)))

        return self._store(target, tour)

    def __str__(self):
        return f"TSP(n={self.n})"
