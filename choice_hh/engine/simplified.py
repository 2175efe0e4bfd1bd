"""Simplified choice function: single memory, no pairwise term.

``score(h) = phi * f1(h) + (1 - phi) * f3(h)`` with ``f1`` the last fitness
delta of ``h`` divided by its previous duration in whole seconds plus one,
and ``f3`` the whole seconds since ``h`` was last applied.
"""

from __future__ import annotations

from ..config.enums import NS_PER_S
from .records import Outcome


class SimplifiedChoiceFunction:
    def __init__(self, *, phi: float = 0.50, phi_reward: float = 0.99, phi_step: float = 0.01) -> None:
        self.phi = float(phi)
        self.phi_reward = float(phi_reward)
        self.phi_step = float(phi_step)
        self.iteration = 0

    def bootstrap_length(self, catalog) -> int:
        return len(catalog.candidates)

    def score(self, record, now: int) -> float:
        perf = record.performance
        f1 = perf.fitness_delta / (perf.previous_duration // NS_PER_S + 1)
        f3 = (int(now) - perf.time_last_applied) // NS_PER_S
        return self.phi * f1 + (1.0 - self.phi) * f3

    def best_heuristic(self, catalog, now: int) -> int:
        # strict '>' keeps the lowest id on ties
        best_id = None
        best_score = 0.0
        for record in catalog.records:
            if record.ineligible:
                continue
            score = self.score(record, now)
            if best_id is None or score > best_score:
                best_id = record.heuristic_id
                best_score = score
        return best_id

    def select(self, catalog, rng, now: int) -> int:
        if self.iteration < self.bootstrap_length(catalog):
            idx = int(rng.integers(len(catalog.candidates)))
            choice = int(catalog.candidates[idx])
        else:
            choice = self.best_heuristic(catalog, now)
        self.iteration += 1
        return choice

    def update(self, record, outcome: Outcome) -> None:
        # each application fully replaces the previous statistics
        record.record_application(outcome.started, outcome.duration, outcome.fitness_change)
        if outcome.improved:
            self.phi = self.phi_reward
        else:
            # no floor: phi may drift below zero on long stagnation
            self.phi -= self.phi_step
