import numpy as np
import pytest

from choice_hh.glue.pipeline import build_params, build_problem
from choice_hh.glue.tuning import build_tuning_config, build_tuning_parser, main, overlay_values

TARGET_ARGS = ["1", "2024", "1234", "0", "-d", "0.1", "0.2", "-i", "0.4", "0.5", "0.6", "-t", "50"]


def test_target_runner_prints_only_the_cost(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(TARGET_ARGS)
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    assert float(lines[0]) > 0.0


def test_target_runner_argument_order():
    cfg = build_tuning_config(build_tuning_parser().parse_args(TARGET_ARGS))
    assert cfg["instance_seed"] == 1234
    assert cfg["algorithm_seed"] == 1235
    assert cfg["instance_index"] == 0
    assert cfg["time_limit_ms"] == 50
    assert cfg["strategy"] == "scf"
    assert cfg["dos_values"] == [0.1, 0.2, 0.2]
    assert cfg["iom_values"] == [0.4, 0.5, 0.6]


def test_overlay_keeps_defaults_and_drops_extras():
    assert overlay_values(None, [0.2, 0.2]) == [0.2, 0.2]
    assert overlay_values([0.9], [0.2, 0.3]) == [0.9, 0.3]
    assert overlay_values([0.1, 0.2, 0.3], [0.5, 0.5]) == [0.1, 0.2]


def test_instance_argument_file_or_index(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "cities.csv"
    path.write_text("x,y\n0,0\n3,0\n3,4\n", encoding="utf-8")

    cfg = build_tuning_config(build_tuning_parser().parse_args(["a", "b", "7", str(path)]))
    assert cfg["instance"] == str(path.resolve())
    assert "instance_index" not in cfg

    with pytest.raises(SystemExit):
        main(["a", "b", "7", "no-such-instance"])


def test_instance_index_fixes_the_cities(tmp_path):
    a = build_problem({"instance_index": 3}, build_params({"instance_seed": 1}), tmp_path)
    b = build_problem({"instance_index": 3}, build_params({"instance_seed": 2}), tmp_path)
    c = build_problem({"instance_index": 4}, build_params({"instance_seed": 1}), tmp_path)
    assert np.array_equal(a.coords, b.coords)
    assert not np.array_equal(a.coords, c.coords)
