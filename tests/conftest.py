import math

import pytest

from choice_hh.config.enums import CROSSOVER, LOCAL_SEARCH, MUTATION, RUIN_RECREATE


class StubProblem:
    """Scripted problem: every application returns the next value of ``values``."""

    def __init__(self, types, values=(), initial=100.0, dos_ids=(), iom_ids=(), fail_on=None):
        self.types = list(types)
        self.values = list(values)
        self.initial = float(initial)
        self.dos_ids = list(dos_ids)
        self.iom_ids = list(iom_ids)
        self.fail_on = fail_on
        self.slots = {}
        self.applied = []
        self.copies = []
        self.dos = None
        self.iom = None
        self.best = math.inf
        self._cursor = 0

    def number_of_heuristics(self):
        return len(self.types)

    def heuristics_of_type(self, heuristic_type):
        return [h for h, t in enumerate(self.types) if t == heuristic_type]

    def heuristics_using_depth_of_search(self):
        return list(self.dos_ids)

    def heuristics_using_intensity_of_mutation(self):
        return list(self.iom_ids)

    def set_depth_of_search(self, value):
        self.dos = value

    def set_intensity_of_mutation(self, value):
        self.iom = value

    def initialise_solution(self, slot):
        self.slots[slot] = self.initial
        self.best = min(self.best, self.initial)

    def function_value(self, slot):
        return self.slots[slot]

    def apply_heuristic(self, heuristic_id, source, target):
        if self.fail_on is not None and heuristic_id == self.fail_on:
            raise RuntimeError(f"heuristic {heuristic_id} failed")
        self.applied.append((heuristic_id, source, target, self.dos, self.iom))
        if self.values:
            value = self.values[min(self._cursor, len(self.values) - 1)]
        else:
            value = self.slots[source]
        self._cursor += 1
        self.slots[target] = float(value)
        self.best = min(self.best, float(value))
        return float(value)

    def copy_solution(self, source, target):
        self.copies.append((source, target))
        self.slots[target] = self.slots[source]

    def best_solution_value(self):
        return self.best

    @property
    def applied_ids(self):
        return [a[0] for a in self.applied]


class FakeClock:
    """Nanosecond clock advancing by ``step`` on every read."""

    def __init__(self, start=0, step=0):
        self.t = int(start)
        self.step = int(step)

    def __call__(self):
        now = self.t
        self.t += self.step
        return now

    def advance(self, ns):
        self.t += int(ns)


@pytest.fixture
def make_problem():
    return StubProblem


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def mixed_types():
    # 0,1 mutation; 2 crossover; 3 ruin-recreate; 4 local search
    return [MUTATION, MUTATION, CROSSOVER, RUIN_RECREATE, LOCAL_SEARCH]
