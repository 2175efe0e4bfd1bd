def accept_all_moves(curr_value, new_value, rng):
    """Keep every result; the move is never rejected."""
    return True


def accept_naive(curr_value, new_value, rng):
    """Accept improvements; otherwise toss a fair coin from ``rng``."""
    delta = curr_value - new_value
    if delta > 0.0:
        return True
    return bool(rng.integers(2) == 1)
