"""Low-level TSP operators."""

from .crossover import order_crossover
from .mutation import random_swaps, scramble_segment
from .ruin_recreate import cheapest_insertion, random_removal, ruin_recreate

__all__ = [
    "cheapest_insertion",
    "order_crossover",
    "random_removal",
    "random_swaps",
    "ruin_recreate",
    "scramble_segment",
]
