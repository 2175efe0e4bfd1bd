"""Errors raised while preparing a selection run."""


class ConfigurationError(ValueError):
    """Invalid run configuration (override values, strategy key, budgets)."""


class NoApplicableHeuristicsError(ValueError):
    """The problem exposes no mutation, ruin-recreate or local-search heuristic."""
