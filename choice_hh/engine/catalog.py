"""Build the configured heuristic records for one run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..config.enums import CROSSOVER, LOCAL_SEARCH, MUTATION, OTHER, RUIN_RECREATE
from .errors import ConfigurationError, NoApplicableHeuristicsError
from .records import HeuristicConfiguration, HeuristicPerformance, HeuristicRecord

# order in which heuristic classes enter the candidate set
CANDIDATE_TYPES = (MUTATION, RUIN_RECREATE, LOCAL_SEARCH)


@dataclass
class Catalog:
    records: List[HeuristicRecord]
    candidates: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, heuristic_id: int) -> HeuristicRecord:
        return self.records[heuristic_id]

    @property
    def excluded(self) -> Tuple[int, ...]:
        return tuple(r.heuristic_id for r in self.records if r.ineligible)


def _apply_overrides(records, ids, values, attr, label):
    ids = [int(i) for i in ids]
    if values is None:
        return
    if len(values) < len(ids):
        raise ConfigurationError(
            f"insufficient override values: {len(ids)} heuristics use {label} "
            f"but only {len(values)} values were given"
        )
    # extra values beyond len(ids) are ignored
    for hid, value in zip(ids, values):
        setattr(records[hid].configuration, attr, float(value))


def candidate_heuristics(problem) -> Tuple[int, ...]:
    """Ordered mutation, ruin-recreate and local-search ids, crossover excluded."""

    crossover = set(int(h) for h in problem.heuristics_of_type(CROSSOVER))
    seen = set()
    out = []
    for htype in CANDIDATE_TYPES:
        for hid in problem.heuristics_of_type(htype):
            hid = int(hid)
            if hid in crossover or hid in seen:
                continue
            seen.add(hid)
            out.append(hid)
    return tuple(out)


def build_catalog(
    problem,
    dos_values: Optional[Sequence[float]] = None,
    iom_values: Optional[Sequence[float]] = None,
    *,
    start_time: int = 0,
    with_performance: bool = False,
    default_dos: float = 0.2,
    default_iom: float = 0.2,
) -> Catalog:
    """Create one record per heuristic reported by ``problem``.

    Every record starts from ``default_dos``/``default_iom``; the override
    sequences are then matched positionally against the problem's lists of
    heuristics that consume each parameter.  Crossover heuristics are kept in
    the catalog but flagged ``ineligible`` so no selection rule can pick them.
    """

    n = int(problem.number_of_heuristics())
    types = [OTHER] * n
    for htype in (CROSSOVER,) + CANDIDATE_TYPES:
        for hid in problem.heuristics_of_type(htype):
            if types[int(hid)] == OTHER:
                types[int(hid)] = htype

    records = []
    for hid in range(n):
        perf = HeuristicPerformance(time_last_applied=int(start_time)) if with_performance else None
        records.append(
            HeuristicRecord(
                heuristic_id=hid,
                heuristic_type=types[hid],
                configuration=HeuristicConfiguration(float(default_dos), float(default_iom)),
                performance=perf,
                ineligible=types[hid] == CROSSOVER,
            )
        )

    _apply_overrides(
        records, problem.heuristics_using_depth_of_search(), dos_values,
        "depth_of_search", "depth of search",
    )
    _apply_overrides(
        records, problem.heuristics_using_intensity_of_mutation(), iom_values,
        "intensity_of_mutation", "intensity of mutation",
    )

    candidates = candidate_heuristics(problem)
    if not candidates:
        raise NoApplicableHeuristicsError(
            "problem exposes no mutation, ruin-recreate or local-search heuristics"
        )
    return Catalog(records=records, candidates=candidates)
