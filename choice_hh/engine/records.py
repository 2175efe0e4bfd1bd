"""Per-heuristic identity, configuration and running statistics."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional

# f_delta of a heuristic that was never applied: the least desirable value
NEVER_APPLIED = -sys.float_info.max


@dataclass
class HeuristicConfiguration:
    """Tunables pushed to the problem before each application."""

    depth_of_search: float = 0.2
    intensity_of_mutation: float = 0.2


@dataclass
class HeuristicPerformance:
    """Statistics of the latest application of one heuristic."""

    time_last_applied: int = 0
    previous_duration: int = 1
    fitness_delta: float = NEVER_APPLIED

    def __post_init__(self) -> None:
        self.previous_duration = max(1, int(self.previous_duration))


@dataclass
class HeuristicRecord:
    heuristic_id: int
    heuristic_type: int
    configuration: HeuristicConfiguration = field(default_factory=HeuristicConfiguration)
    performance: Optional[HeuristicPerformance] = None
    ineligible: bool = False

    def record_application(self, started: int, duration: int, fitness_delta: float) -> None:
        if self.performance is None:
            self.performance = HeuristicPerformance()
        self.performance.time_last_applied = int(started)
        self.performance.previous_duration = max(1, int(duration))
        self.performance.fitness_delta = float(fitness_delta)


@dataclass(frozen=True)
class Outcome:
    """Result of applying one heuristic: objective before/after and timing.

    ``started`` and ``duration`` are in the engine's clock ticks; ``duration``
    already carries the +1 guard against zero-length applications.
    """

    before: float
    after: float
    started: int
    duration: int

    @property
    def fitness_change(self) -> float:
        # minimisation: positive means the candidate improved
        return self.before - self.after

    @property
    def improved(self) -> bool:
        return self.fitness_change > 0.0
