"""Modified choice function: heuristic selection with pairwise memory.

Scores every heuristic ``i`` as::

    F(i) = phi * f1(i) + phi * f2(i, last) + delta * f3(i)

where ``f1`` is an exponentially weighted fitness-change-per-tick of ``i``,
``f2`` the same quantity for ``i`` applied right after ``last`` and ``f3``
the number of ticks since ``i`` was last chosen.  ``phi`` jumps to 0.99 on an
improvement and otherwise decays by 0.01 (floor 0.01); ``delta = 1 - phi``.
"""

from __future__ import annotations

import numpy as np

from .records import Outcome

BOOTSTRAP_ITERATIONS = 2


def round_two_decimals(value: float) -> float:
    return round(float(value), 2)


class ModifiedChoiceFunction:
    def __init__(
        self,
        n_heuristics: int,
        *,
        phi: float = 0.50,
        delta: float = 0.50,
        phi_reward: float = 0.99,
        phi_step: float = 0.01,
        phi_floor: float = 0.01,
    ) -> None:
        n = int(n_heuristics)
        self.f1 = np.zeros(n, dtype=np.float64)
        self.f2 = np.zeros((n, n), dtype=np.float64)
        self.f3 = np.zeros(n, dtype=np.float64)
        self.phi = float(phi)
        self.delta = float(delta)
        self.phi_reward = float(phi_reward)
        self.phi_step = float(phi_step)
        self.phi_floor = float(phi_floor)
        self.prev_change = 0.0
        self.init_flag = 0
        self.last_heuristic = 0
        self._choice = 0

    @property
    def bootstrapping(self) -> bool:
        return self.init_flag < BOOTSTRAP_ITERATIONS

    def scores(self) -> np.ndarray:
        return (
            self.phi * self.f1
            + self.phi * self.f2[:, self.last_heuristic]
            + self.delta * self.f3
        )

    def select(self, catalog, rng, now=None) -> int:
        """Return the id of the heuristic to apply next.

        During the first two iterations the choice is uniform over the
        candidate set.  Afterwards the strict maximum of ``F`` wins, with the
        running best starting at zero: when no eligible heuristic scores above
        zero the previous choice is repeated.
        """

        if self.bootstrapping:
            idx = int(rng.integers(len(catalog.candidates)))
            self._choice = int(catalog.candidates[idx])
            return self._choice

        scores = self.scores()
        best_score = 0.0
        for record in catalog.records:
            if record.ineligible:
                continue
            i = record.heuristic_id
            if scores[i] > best_score:
                best_score = float(scores[i])
                self._choice = i
        return self._choice

    def update(self, record, outcome: Outcome) -> None:
        h = record.heuristic_id
        last = self.last_heuristic
        rate = outcome.fitness_change / outcome.duration

        if self.init_flag > 1:
            self.f1[h] = rate + self.phi * self.f1[h]
            self.f2[h, last] = self.prev_change + rate + self.phi * self.f2[h, last]
        elif self.init_flag == 1:
            # second step: seed pairwise memory without the decayed prior
            self.f1[h] = rate
            self.f2[h, last] = self.prev_change + rate + self.prev_change
            self.init_flag += 1
        else:
            self.f1[h] = rate
            self.init_flag += 1

        self.f3 += outcome.duration
        self.f3[h] = 0.0

        self._adapt_weights(outcome.fitness_change, rate)
        self.last_heuristic = h
        record.record_application(outcome.started, outcome.duration, outcome.fitness_change)

    def _adapt_weights(self, fitness_change: float, rate: float) -> None:
        if fitness_change > 0.0:
            self.phi = self.phi_reward
            self.delta = round_two_decimals(1.0 - self.phi_reward)
            self.prev_change = rate
            return
        if self.phi > self.phi_floor:
            self.phi -= self.phi_step
        self.phi = round_two_decimals(self.phi)
        self.delta = round_two_decimals(1.0 - self.phi)
        self.prev_change = 0.0
