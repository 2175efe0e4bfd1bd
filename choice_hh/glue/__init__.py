"""Glue helpers exposed for CLI and integration harnesses."""

from .io import (
    compute_euclid,
    load_config,
    load_coords,
    validate_coords,
)
from .pipeline import (
    build_arg_parser,
    build_params,
    build_problem,
    load_and_run,
    main,
    run_pipeline,
    solve,
)
from .tuning import build_tuning_config, build_tuning_parser

__all__ = [
    "build_arg_parser",
    "build_params",
    "build_problem",
    "build_tuning_config",
    "build_tuning_parser",
    "compute_euclid",
    "load_and_run",
    "load_config",
    "load_coords",
    "main",
    "run_pipeline",
    "solve",
    "validate_coords",
]
