"""Target-runner entry point for automatic algorithm configuration (irace).

Call shape::

    choice-hh-tune <id.configuration> <id.instance> <seed> <instance>
                   [-d V [V ...]] [-i V [V ...]] [-t MS]

The two ids are accepted and ignored.  ``seed`` seeds the problem domain and
``seed + 1`` the selection strategy.  ``instance`` is an instance file or the
index of a generated instance.  Only the best objective value is printed, the
single line the tuner reads as the cost.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..config.config import DEFAULTS
from ..engine.strategies import STRATEGY_KEYS
from .pipeline import solve


def overlay_values(values: Optional[Sequence[float]], base: Sequence[float]) -> List[float]:
    # given values replace the leading defaults; extras beyond ``base`` are dropped
    values = list(values or [])
    return [float(v) for v in values[: len(base)]] + [float(v) for v in base[len(values):]]


def instance_config(instance: str) -> Dict[str, Any]:
    path = Path(instance)
    if path.is_file():
        return {"instance": str(path.resolve())}
    try:
        return {"instance_index": int(instance)}
    except ValueError:
        raise ValueError(f"instance {instance!r} is neither a file nor an integer index") from None


def build_tuning_parser():
    import argparse

    ap = argparse.ArgumentParser(description="Choice function hyper-heuristic target runner")
    ap.add_argument("config_id", help="Configuration id (unused)")
    ap.add_argument("instance_id", help="Instance id (unused)")
    ap.add_argument("seed", type=int, help="Instance seed; the algorithm seed is seed + 1")
    ap.add_argument("instance", help="Instance file or generated instance index")
    ap.add_argument("-d", "--dos", type=float, nargs="+", default=None, help="Depth of search values")
    ap.add_argument("-i", "--iom", type=float, nargs="+", default=None, help="Intensity of mutation values")
    ap.add_argument("-t", "--time", type=int, default=DEFAULTS["time_limit_ms"], help="Time limit in milliseconds")
    ap.add_argument("--strategy", choices=STRATEGY_KEYS, default="scf", help="Selection strategy")
    ap.add_argument("--cities", type=int, default=None, help="Cities in a generated instance")
    return ap


def build_tuning_config(args) -> Dict[str, Any]:
    cfg = {
        "strategy": args.strategy,
        "time_limit_ms": args.time,
        "instance_seed": args.seed,
        "algorithm_seed": args.seed + 1,
        "dos_values": overlay_values(args.dos, DEFAULTS["dos_values"]),
        "iom_values": overlay_values(args.iom, DEFAULTS["iom_values"]),
        "n_cities": args.cities,
    }
    cfg.update(instance_config(args.instance))
    return cfg


def main(argv: Optional[list[str]] = None) -> None:
    ap = build_tuning_parser()
    args = ap.parse_args(argv)
    try:
        cfg = build_tuning_config(args)
    except ValueError as exc:
        ap.error(str(exc))

    result = solve(cfg, base_dir=Path.cwd())
    print(float(result["best_value"]))


__all__ = [
    "build_tuning_config",
    "build_tuning_parser",
    "instance_config",
    "main",
    "overlay_values",
]
