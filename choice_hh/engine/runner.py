"""Run driver: clock, time budget, trace and best-value reporting."""

from __future__ import annotations

import math
import time
from typing import Callable, Optional

from ..config.enums import (
    NS_PER_MS,
    STATUS_ACCEPT,
    STATUS_BEST,
    STATUS_IMPROVE,
)
from .errors import ConfigurationError


class Runner:
    """Owns the monotonic clock and the stopping rule of one solve run.

    ``clock`` returns integer nanoseconds.  The loop stops once
    ``time_limit_ms`` has elapsed or, when given, ``iteration_limit``
    iterations have been recorded.  An application in flight always
    completes; the budget is only checked at the top of each iteration.
    """

    def __init__(
        self,
        time_limit_ms: Optional[int] = 10000,
        *,
        iteration_limit: Optional[int] = None,
        clock: Callable[[], int] = time.perf_counter_ns,
        metrics=None,
        log_period: int = 1,
    ) -> None:
        if time_limit_ms is None and iteration_limit is None:
            raise ConfigurationError("either a time limit or an iteration limit is required")
        if time_limit_ms is not None and int(time_limit_ms) <= 0:
            raise ConfigurationError("time limit must be positive")
        if iteration_limit is not None and int(iteration_limit) < 0:
            raise ConfigurationError("iteration limit must be non-negative")
        self.time_limit_ms = None if time_limit_ms is None else int(time_limit_ms)
        self.iteration_limit = None if iteration_limit is None else int(iteration_limit)
        self.clock = clock
        self.metrics = metrics
        self.log_period = max(1, int(log_period))
        self.problem = None
        self.iterations = 0
        self.best_seen = math.inf
        self._start = None

    def load_problem(self, problem) -> None:
        self.problem = problem

    def start(self) -> None:
        self._start = int(self.clock())
        self.iterations = 0
        self.best_seen = math.inf

    def now(self) -> int:
        return int(self.clock())

    def elapsed_ms(self) -> int:
        if self._start is None:
            return 0
        return (self.now() - self._start) // NS_PER_MS

    def has_time_expired(self) -> bool:
        if self.iteration_limit is not None and self.iterations >= self.iteration_limit:
            return True
        if self.time_limit_ms is not None and self.elapsed_ms() >= self.time_limit_ms:
            return True
        return False

    def start_trace(self, value: float) -> None:
        self.best_seen = min(self.best_seen, float(value))

    def record(self, heuristic_id: int, value: float, status: str, phi=None) -> str:
        """Count one finished iteration and log it every ``log_period`` steps."""

        self.iterations += 1
        if status in (STATUS_IMPROVE, STATUS_ACCEPT) and value < self.best_seen:
            self.best_seen = float(value)
            status = STATUS_BEST
        if self.metrics is None:
            return status
        self.metrics.count(heuristic_id)
        if self.iterations % self.log_period == 0 or self.iterations == 1:
            self.metrics.append(
                self.iterations,
                self.elapsed_ms(),
                heuristic_id,
                status,
                value,
                self.best_seen,
                phi=phi,
            )
        return status

    def best_solution_value(self) -> float:
        if self.problem is None:
            return self.best_seen
        return float(self.problem.best_solution_value())

    def run(self, strategy, problem=None) -> float:
        """Solve the loaded problem with ``strategy`` until the budget expires."""

        if problem is not None:
            self.load_problem(problem)
        if self.problem is None:
            raise ConfigurationError("no problem loaded")
        self.start()
        strategy.solve(self.problem, self)
        return self.best_solution_value()
