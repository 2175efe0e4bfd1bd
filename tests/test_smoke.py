import numpy as np

from choice_hh.data.generate_data import generate_instance
from choice_hh.engine.runner import Runner
from choice_hh.engine.strategies import STRATEGY_KEYS, build_strategy
from choice_hh.logging.metrics import Metrics
from choice_hh.problem.tsp import TravellingSalesman


def test_strategies_smoke():
    data = generate_instance(n_cities=30, seed=0)
    for key in STRATEGY_KEYS:
        problem = TravellingSalesman(data["dist"], seed=1234)
        strategy = build_strategy(key, np.random.default_rng(5678), dos_values=[0.4, 0.4], iom_values=[0.2, 0.2, 0.2])
        metrics = Metrics()
        runner = Runner(60000, iteration_limit=200, metrics=metrics, log_period=10)
        best = runner.run(strategy, problem)
        assert best < 1e12
        assert runner.iterations == 200
        assert best <= metrics.rows[0][5]


def test_fixed_seeds_reproduce_the_run():
    data = generate_instance(n_cities=25, seed=4)

    def _run():
        problem = TravellingSalesman(data["dist"], seed=11)
        strategy = build_strategy("mcf", np.random.default_rng(12))
        Runner(60000, iteration_limit=50, clock=lambda: 0).run(strategy, problem)
        return problem.solution(0).tolist(), problem.best_solution_value()

    assert _run() == _run()
