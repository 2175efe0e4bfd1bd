import numpy as np
import pytest

from choice_hh.config.enums import CROSSOVER, LOCAL_SEARCH, MUTATION
from choice_hh.engine.catalog import build_catalog
from choice_hh.engine.choice_function import ModifiedChoiceFunction, round_two_decimals
from choice_hh.engine.records import Outcome


def _catalog(make_problem, types):
    return build_catalog(make_problem(types), with_performance=True)


def _step(engine, catalog, h, before, after, duration):
    engine.update(catalog[h], Outcome(before, after, 0, duration))


def test_first_two_choices_replay_the_seeded_stream(make_problem, mixed_types):
    catalog = _catalog(make_problem, mixed_types)
    engine = ModifiedChoiceFunction(len(catalog))
    rng = np.random.default_rng(2024)
    replay = np.random.default_rng(2024)

    expected = [catalog.candidates[int(replay.integers(len(catalog.candidates)))] for _ in range(2)]
    chosen = []
    for _ in range(2):
        h = engine.select(catalog, rng)
        chosen.append(h)
        _step(engine, catalog, h, 10.0, 10.0, 1)

    assert chosen == expected
    assert not engine.bootstrapping


def test_update_rules_and_scored_selection(make_problem):
    catalog = _catalog(make_problem, [MUTATION, MUTATION, LOCAL_SEARCH])
    engine = ModifiedChoiceFunction(3)

    _step(engine, catalog, 1, 100.0, 90.0, 10)   # bootstrap, improving
    assert engine.f1[1] == pytest.approx(1.0)
    assert engine.phi == 0.99 and engine.delta == 0.01
    assert engine.prev_change == pytest.approx(1.0)
    assert engine.f3.tolist() == [10.0, 0.0, 10.0]

    _step(engine, catalog, 2, 90.0, 95.0, 5)     # bootstrap, worsening
    assert engine.f1[2] == pytest.approx(-1.0)
    # seeded as carry + rate + carry
    assert engine.f2[2, 1] == pytest.approx(1.0)
    assert engine.phi == 0.98 and engine.delta == 0.02
    assert engine.prev_change == 0.0

    _step(engine, catalog, 0, 95.0, 93.0, 2)     # regular update
    assert engine.f1[0] == pytest.approx(1.0)
    assert engine.f2[0, 2] == pytest.approx(1.0)
    assert engine.f3.tolist() == [0.0, 7.0, 2.0]
    assert engine.last_heuristic == 0

    # F0 = 0.99, F1 = 0.99 + 0.07, F2 < 0
    assert engine.scores()[1] == pytest.approx(1.06)
    assert engine.select(catalog, np.random.default_rng(0)) == 1


def test_exponential_accumulation_after_bootstrap(make_problem):
    catalog = _catalog(make_problem, [MUTATION, MUTATION])
    engine = ModifiedChoiceFunction(2)
    _step(engine, catalog, 0, 10.0, 10.0, 1)
    _step(engine, catalog, 1, 10.0, 10.0, 1)
    assert engine.phi == 0.48

    _step(engine, catalog, 0, 10.0, 6.0, 2)
    # rate 2 plus phi(0.48) * previous f1 (0)
    assert engine.f1[0] == pytest.approx(2.0)
    _step(engine, catalog, 0, 6.0, 7.0, 1)
    # rate -1 plus phi(0.99) * 2
    assert engine.f1[0] == pytest.approx(-1.0 + 0.99 * 2.0)
    # carry 2 from the improving step, rate -1, previous f2(0, 0) = 0
    assert engine.f2[0, 0] == pytest.approx(2.0 - 1.0 + 0.99 * 0.0)


def test_non_improving_updates_keep_weights_rounded_and_bounded(make_problem):
    catalog = _catalog(make_problem, [MUTATION, LOCAL_SEARCH])
    engine = ModifiedChoiceFunction(2)
    rng = np.random.default_rng(7)
    value = 50.0
    for _ in range(400):
        h = int(rng.integers(2))
        new = value + float(rng.normal())
        _step(engine, catalog, h, value, new, int(rng.integers(1, 5)))
        if new >= value:
            assert 0.01 <= engine.phi <= 0.99
            assert engine.phi == round_two_decimals(engine.phi)
            assert engine.delta == round_two_decimals(1.0 - engine.phi)
        value = new


def test_phi_stops_at_floor(make_problem):
    catalog = _catalog(make_problem, [MUTATION])
    engine = ModifiedChoiceFunction(1)
    for _ in range(200):
        _step(engine, catalog, 0, 1.0, 1.0, 1)
    assert engine.phi == 0.01
    assert engine.delta == 0.99


def test_non_positive_scores_repeat_previous_choice(make_problem):
    catalog = _catalog(make_problem, [MUTATION, MUTATION])
    engine = ModifiedChoiceFunction(2)
    rng = np.random.default_rng(3)
    for _ in range(2):
        h = engine.select(catalog, rng)
        _step(engine, catalog, h, 10.0, 10.0 + 1e6, 1)
    last = h
    engine.f1[:] = -5.0
    engine.f2[:] = 0.0
    engine.f3[:] = 0.0
    assert (engine.scores() <= 0).all()
    assert engine.select(catalog, rng) == last


def test_crossover_never_selected_even_with_best_score(make_problem):
    catalog = _catalog(make_problem, [CROSSOVER, MUTATION, LOCAL_SEARCH])
    engine = ModifiedChoiceFunction(3)
    rng = np.random.default_rng(11)
    for i in range(50):
        h = engine.select(catalog, rng)
        assert h != 0
        _step(engine, catalog, h, 10.0, 10.0 - (i % 3), 1)
        engine.f1[0] = 1e12
        engine.f3[0] += 1e12
