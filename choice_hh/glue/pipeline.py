"""Command line pipeline: load an instance, run a selection strategy, export results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from ..config.config import DEFAULTS
from ..data.generate_data import generate_instance
from ..engine.runner import Runner
from ..engine.strategies import STRATEGY_KEYS, build_strategy
from ..logging.metrics import Metrics, save_metrics_json, save_tour_csv
from ..problem.tsp import HEURISTIC_NAMES, TravellingSalesman
from .io import load_config, load_coords

# top-level config keys that shadow entries of ``params``
_SHORTCUTS = {
    "strategy": str,
    "time_limit_ms": int,
    "iteration_limit": int,
    "log_period": int,
    "n_cities": int,
    "instance_seed": int,
    "algorithm_seed": int,
    "dos_values": list,
    "iom_values": list,
}


def _resolve(base: Path, maybe_path: Optional[str]) -> Optional[Path]:
    if maybe_path is None:
        return None
    return (base / maybe_path).resolve()


def build_params(cfg: Dict[str, Any]) -> Dict[str, Any]:
    params = DEFAULTS.copy()
    params.update(cfg.get("params", {}))
    for key, cast in _SHORTCUTS.items():
        if cfg.get(key) is not None:
            params[key] = cast(cfg[key])
    if params["dos_values"] is not None:
        params["dos_values"] = [float(v) for v in params["dos_values"]]
    if params["iom_values"] is not None:
        params["iom_values"] = [float(v) for v in params["iom_values"]]
    return params


def build_problem(cfg: Dict[str, Any], params: Dict[str, Any], base_dir: Path) -> TravellingSalesman:
    """Load the configured instance, or generate one when no file is given.

    A generated instance is keyed by ``instance_index`` when the config names
    one, so the same index always yields the same cities whatever the seed
    of the domain's own random stream.
    """

    instance_path = _resolve(base_dir, cfg.get("instance"))
    if instance_path is not None:
        coords, dist = load_coords(instance_path)
    else:
        index = cfg.get("instance_index")
        gen_seed = params["instance_seed"] if index is None else int(index)
        data = generate_instance(params["n_cities"], seed=gen_seed)
        coords, dist = data["coords"], data["dist"]
    return TravellingSalesman(
        dist,
        coords=coords,
        seed=params["instance_seed"],
        params=params,
    )


def solve(cfg: Dict[str, Any], *, base_dir: Path) -> Dict[str, Any]:
    """Run the configured strategy to expiry without writing any files."""

    params = build_params(cfg)
    problem = build_problem(cfg, params, base_dir)

    rng = np.random.default_rng(params["algorithm_seed"])
    strategy = build_strategy(
        params["strategy"],
        rng,
        dos_values=params["dos_values"],
        iom_values=params["iom_values"],
        params=params,
    )
    metrics = Metrics()
    runner = Runner(
        params["time_limit_ms"],
        iteration_limit=params["iteration_limit"],
        metrics=metrics,
        log_period=params["log_period"],
    )

    best_value = runner.run(strategy, problem)

    meta = {
        "algorithm": str(strategy),
        "problem": str(problem),
        "instance_seed": params["instance_seed"],
        "algorithm_seed": params["algorithm_seed"],
        "iterations": runner.iterations,
        "elapsed_ms": runner.elapsed_ms(),
        "heuristic_names": list(HEURISTIC_NAMES),
        "config_version": cfg.get("version", "dev"),
    }
    return {
        "best_value": best_value,
        "best_tour": problem.best_solution(),
        "coords": problem.coords,
        "metrics": metrics,
        "params": params,
        "meta": meta,
    }


def run_pipeline(
    cfg: Dict[str, Any],
    *,
    base_dir: Path,
    outdir: Path,
) -> Dict[str, Any]:
    """Run the configured strategy to expiry and write its artefacts to ``outdir``."""

    outdir.mkdir(parents=True, exist_ok=True)
    result = solve(cfg, base_dir=base_dir)

    save_metrics_json(
        outdir / "metrics.json",
        result["metrics"],
        result["best_value"],
        result["params"],
        extra=result["meta"],
    )
    save_tour_csv(outdir / "tour.csv", result["best_tour"], result["coords"])
    result["metrics"].save_csv(outdir / "metrics_log.csv")
    return result


def load_and_run(
    config_path: Optional[Path],
    outdir: Path,
    *,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Convenience wrapper combining ``load_config`` and :func:`run_pipeline`."""

    if config_path is not None:
        cfg = load_config(config_path)
        base_dir = Path(config_path).resolve().parent
    else:
        cfg = {}
        base_dir = Path.cwd()
    for key, value in (overrides or {}).items():
        if value is not None:
            cfg[key] = value
    return run_pipeline(cfg, base_dir=base_dir, outdir=outdir)


def build_arg_parser():
    import argparse

    ap = argparse.ArgumentParser(description="Choice function hyper-heuristics")
    ap.add_argument("--config", default=None, help="Path to YAML/JSON configuration")
    ap.add_argument("--outdir", required=True, help="Output directory")
    ap.add_argument("--strategy", choices=STRATEGY_KEYS, default=None, help="Selection strategy")
    ap.add_argument("-t", "--time", type=int, default=None, help="Time limit in milliseconds")
    ap.add_argument("--iterations", type=int, default=None, help="Optional iteration cap")
    ap.add_argument("-p", "--instance", default=None, help="Instance file (CSV/Parquet/NPZ)")
    ap.add_argument("--cities", type=int, default=None, help="Cities in a generated instance")
    ap.add_argument("--insseed", type=int, default=None, help="Instance RNG seed")
    ap.add_argument(
        "--algseed",
        type=int,
        default=None,
        help="Algorithm RNG seed (defaults to insseed + 1 when only insseed is given)",
    )
    ap.add_argument("-d", "--dos", type=float, nargs="+", default=None, help="Depth of search values")
    ap.add_argument("-i", "--iom", type=float, nargs="+", default=None, help="Intensity of mutation values")
    ap.add_argument("--log-period", type=int, default=None, help="Trace every N iterations")
    return ap


def main(argv: Optional[list[str]] = None) -> Dict[str, Any]:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    algseed = args.algseed
    if algseed is None and args.insseed is not None:
        algseed = args.insseed + 1

    overrides = {
        "strategy": args.strategy,
        "time_limit_ms": args.time,
        "iteration_limit": args.iterations,
        "instance": None if args.instance is None else str(Path(args.instance).resolve()),
        "n_cities": args.cities,
        "instance_seed": args.insseed,
        "algorithm_seed": algseed,
        "dos_values": args.dos,
        "iom_values": args.iom,
        "log_period": args.log_period,
    }

    outdir = Path(args.outdir).resolve()
    cfg_path = None if args.config is None else Path(args.config).resolve()

    result = load_and_run(cfg_path, outdir, overrides=overrides)

    meta = result["meta"]
    summary = {
        "algorithm": meta["algorithm"],
        "problem": meta["problem"],
        "time_limit_ms": result["params"]["time_limit_ms"],
        "iterations": meta["iterations"],
        "best_value": float(result["best_value"]),
    }

    print("\n[DONE]")
    print(json.dumps(summary, indent=2))
    return result


def cli() -> None:
    main()


__all__ = [
    "build_arg_parser",
    "build_params",
    "build_problem",
    "cli",
    "load_and_run",
    "main",
    "run_pipeline",
    "solve",
]
