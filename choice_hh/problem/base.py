"""Capabilities a problem must expose to be driven by a selection strategy."""

from __future__ import annotations

from typing import List


class ProblemDomain:
    """Minimisation problem with numbered low-level heuristics and solution slots.

    Subclasses own solution representations; strategies only ever see
    objective values, heuristic ids and slot indices.
    """

    def number_of_heuristics(self) -> int:
        raise NotImplementedError

    def heuristics_of_type(self, heuristic_type: int) -> List[int]:
        raise NotImplementedError

    def heuristics_using_depth_of_search(self) -> List[int]:
        raise NotImplementedError

    def heuristics_using_intensity_of_mutation(self) -> List[int]:
        raise NotImplementedError

    def set_depth_of_search(self, value: float) -> None:
        raise NotImplementedError

    def set_intensity_of_mutation(self, value: float) -> None:
        raise NotImplementedError

    def initialise_solution(self, slot: int) -> None:
        raise NotImplementedError

    def function_value(self, slot: int) -> float:
        raise NotImplementedError

    def apply_heuristic(self, heuristic_id: int, source: int, target: int) -> float:
        """Apply ``heuristic_id`` to ``source`` and store the result in ``target``."""
        raise NotImplementedError

    def copy_solution(self, source: int, target: int) -> None:
        raise NotImplementedError

    def best_solution_value(self) -> float:
        raise NotImplementedError
