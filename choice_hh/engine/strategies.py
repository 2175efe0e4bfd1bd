"""Selection strategies: heuristic choice plus acceptance, one run each."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..config.config import DEFAULTS
from ..config.enums import (
    CANDIDATE_SLOT,
    CURRENT_SLOT,
    STATUS_ACCEPT,
    STATUS_IMPROVE,
    STATUS_REJECT,
)
from .acceptance import accept_all_moves, accept_naive
from .catalog import build_catalog
from .choice_function import ModifiedChoiceFunction
from .errors import ConfigurationError
from .records import Outcome
from .simplified import SimplifiedChoiceFunction


def _configure(problem, record) -> None:
    problem.set_depth_of_search(record.configuration.depth_of_search)
    problem.set_intensity_of_mutation(record.configuration.intensity_of_mutation)


def _status(curr_value, new_value, accepted) -> str:
    if not accepted:
        return STATUS_REJECT
    return STATUS_IMPROVE if new_value < curr_value else STATUS_ACCEPT


class RandomNaive:
    """Uniform random choice; naive acceptance through a scratch slot."""

    key = "rn"
    name = "RN_NA_HH"

    def __init__(self, rng, dos_values=None, iom_values=None, params=None):
        self.rng = rng
        self.dos_values = dos_values
        self.iom_values = iom_values
        self.params = DEFAULTS.copy()
        self.params.update(params or {})
        self.catalog = None

    def solve(self, problem, runner) -> None:
        self.catalog = build_catalog(
            problem,
            self.dos_values,
            self.iom_values,
            default_dos=self.params["default_dos"],
            default_iom=self.params["default_iom"],
        )
        candidates = self.catalog.candidates

        problem.initialise_solution(CURRENT_SLOT)
        curr_value = problem.function_value(CURRENT_SLOT)
        runner.start_trace(curr_value)

        while not runner.has_time_expired():
            h = int(candidates[int(self.rng.integers(len(candidates)))])
            _configure(problem, self.catalog[h])
            new_value = problem.apply_heuristic(h, CURRENT_SLOT, CANDIDATE_SLOT)

            accepted = accept_naive(curr_value, new_value, self.rng)
            status = _status(curr_value, new_value, accepted)
            if accepted:
                problem.copy_solution(CANDIDATE_SLOT, CURRENT_SLOT)
                curr_value = new_value
            runner.record(h, curr_value, status)

    def __str__(self):
        return self.name


def _modified_engine(catalog, p):
    return ModifiedChoiceFunction(
        len(catalog),
        phi=p["phi0"],
        delta=p["delta0"],
        phi_reward=p["phi_reward"],
        phi_step=p["phi_step"],
        phi_floor=p["phi_floor"],
    )


def _simplified_engine(catalog, p):
    return SimplifiedChoiceFunction(
        phi=p["phi0"],
        phi_reward=p["phi_reward"],
        phi_step=p["phi_step"],
    )


# variant -> (display name, engine factory, clock ticks read by the engine)
CHOICE_VARIANTS = {
    "mcf": ("MCF_AM_HH", _modified_engine, lambda runner: runner.elapsed_ms()),
    "scf": ("SCF_AM_HH", _simplified_engine, lambda runner: runner.now()),
}


class ChoiceAllMoves:
    """Choice-function selection with all-moves acceptance.

    ``variant`` picks the scoring engine: ``"mcf"`` (pairwise memory, ticks in
    elapsed milliseconds) or ``"scf"`` (single memory, nanosecond timestamps).
    """

    def __init__(self, rng, variant="scf", dos_values=None, iom_values=None, params=None):
        if variant not in CHOICE_VARIANTS:
            raise ConfigurationError(f"unknown choice function variant {variant!r}")
        self.key = variant
        self.name, self._engine_factory, self._ticks = CHOICE_VARIANTS[variant]
        self.rng = rng
        self.dos_values = dos_values
        self.iom_values = iom_values
        self.params = DEFAULTS.copy()
        self.params.update(params or {})
        self.catalog = None
        self.engine = None

    def solve(self, problem, runner) -> None:
        self.catalog = build_catalog(
            problem,
            self.dos_values,
            self.iom_values,
            start_time=self._ticks(runner),
            with_performance=True,
            default_dos=self.params["default_dos"],
            default_iom=self.params["default_iom"],
        )
        self.engine = self._engine_factory(self.catalog, self.params)

        problem.initialise_solution(CURRENT_SLOT)
        curr_value = problem.function_value(CURRENT_SLOT)
        runner.start_trace(curr_value)

        while not runner.has_time_expired():
            h = self.engine.select(self.catalog, self.rng, self._ticks(runner))
            record = self.catalog[h]
            _configure(problem, record)

            before = self._ticks(runner)
            new_value = problem.apply_heuristic(h, CURRENT_SLOT, CURRENT_SLOT)
            duration = self._ticks(runner) - before + 1  # +1 prevents / by 0

            outcome = Outcome(curr_value, new_value, before, duration)
            self.engine.update(record, outcome)

            accepted = accept_all_moves(curr_value, new_value, self.rng)
            status = _status(curr_value, new_value, accepted)
            curr_value = new_value
            runner.record(h, curr_value, status, phi=self.engine.phi)

    def __str__(self):
        return self.name


STRATEGY_KEYS = ("rn",) + tuple(CHOICE_VARIANTS)


def build_strategy(
    key: str,
    rng,
    dos_values: Optional[Sequence[float]] = None,
    iom_values: Optional[Sequence[float]] = None,
    params: Optional[Dict[str, Any]] = None,
):
    key = str(key).lower()
    if key == RandomNaive.key:
        return RandomNaive(rng, dos_values=dos_values, iom_values=iom_values, params=params)
    if key in CHOICE_VARIANTS:
        return ChoiceAllMoves(
            rng, variant=key, dos_values=dos_values, iom_values=iom_values, params=params
        )
    raise ConfigurationError(f"unknown strategy {key!r}; expected one of {list(STRATEGY_KEYS)}")
