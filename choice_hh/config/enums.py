# Indices / enums used across modules (keep ints for JIT friendliness)

# low-level heuristic classes
MUTATION      = 0
CROSSOVER     = 1
RUIN_RECREATE = 2
LOCAL_SEARCH  = 3
OTHER         = 4
N_TYPES       = 5

TYPE_NAMES = {
    MUTATION: "MUTATION",
    CROSSOVER: "CROSSOVER",
    RUIN_RECREATE: "RUIN_RECREATE",
    LOCAL_SEARCH: "LOCAL_SEARCH",
    OTHER: "OTHER",
}

# solution memory slots
CURRENT_SLOT   = 0 # working solution
CANDIDATE_SLOT = 1 # scratch slot for solutions awaiting acceptance

# trace status labels
STATUS_BEST    = "BEST"
STATUS_IMPROVE = "IMPROVE"
STATUS_ACCEPT  = "ACCEPT"
STATUS_REJECT  = "REJECT"

# time units
NS_PER_MS = 1_000_000
NS_PER_S  = 1_000_000_000
