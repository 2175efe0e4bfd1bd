# Simple parameter defaults (extend freely)
DEFAULTS = {
    "strategy": "scf",
    "time_limit_ms": 10000,
    "iteration_limit": None,    # optional hard cap on loop iterations
    "log_period": 100,
    "default_dos": 0.2,         # baseline depth of search for every heuristic
    "default_iom": 0.2,         # baseline intensity of mutation for every heuristic
    "dos_values": [0.2, 0.2, 0.2],
    "iom_values": [0.2, 0.2, 0.2],
    "phi0": 0.50,
    "delta0": 0.50,             # paired variant only, kept at 1 - phi
    "phi_reward": 0.99,         # phi after an improving step
    "phi_step": 0.01,           # phi decrement after a non-improving step
    "phi_floor": 0.01,          # paired variant only
    "n_cities": 60,
    "instance_seed": 1234,
    "algorithm_seed": 5678,
    "swap_max": 10,             # swaps at intensity 1.0
    "ruin_max_fraction": 0.5,   # share of the tour removed at intensity 1.0
    "ls_max_passes": 20,        # local search passes at depth 1.0
}
