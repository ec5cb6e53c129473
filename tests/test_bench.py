"""
Tests for the timing harness and the YAML-driven runner.
"""

from __future__ import annotations

import json
import pathlib
import sys
import time

import pandas as pd
import pytest
import yaml

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from ranksort.algorithms import rank_sort
from ranksort.bench.measure import time_sort_call
from ranksort.bench.runner import main, run_experiment


def _time(**overrides):
    kwargs = dict(
        algo_name="rank_sort",
        algo_fn=rank_sort.sort,
        a=[3, 1, 2, 8],
        config={"n": 3},
        repeats=3,
        warmup=True,
        disable_gc=True,
        timeout_seconds=10.0,
        defensive_copy=True,
    )
    kwargs.update(overrides)
    return time_sort_call(**kwargs)


# ------------------------- measure ------------------------- #


def test_measure_ok() -> None:
    res = _time(expected=[1, 2, 3])
    assert res["status"] == "ok"
    assert res["n"] == 3
    assert len(res["samples_ns"]) == 3
    assert res["error"] is None


def test_measure_mismatch() -> None:
    res = _time(expected=[3, 2, 1])
    assert res["status"] == "mismatch"
    assert res["samples_ns"] == []


def test_measure_error() -> None:
    res = _time(a=[1, "x", 2])
    assert res["status"] == "error"
    assert "warmup failed" in res["error"]


def test_measure_timeout() -> None:
    def slow(a, *, config=None):
        time.sleep(0.01)
        return sorted(a)

    res = _time(algo_fn=slow, warmup=False, timeout_seconds=0.001)
    assert res["status"] == "timeout"
    assert res["timed_out_on_repeat"] == 0
    assert len(res["samples_ns"]) == 1


def test_measure_restores_gc() -> None:
    import gc

    assert gc.isenabled()
    _time()
    assert gc.isenabled()


@pytest.mark.parametrize("kw", [{"repeats": -1}, {"timeout_seconds": 0}])
def test_measure_bad_args(kw) -> None:
    with pytest.raises(ValueError):
        _time(**kw)


# ------------------------- runner ------------------------- #


def _write_config(tmp_path: pathlib.Path, **overrides) -> pathlib.Path:
    cfg = {
        "experiment_name": "unit",
        "output_dir": str(tmp_path / "runs"),
        "seed": 1,
        "repeats": 2,
        "warmup": True,
        "disable_gc": False,
        "timeout_seconds": 10.0,
        "input_extra": 2,
        "dataset": {"dist": "few_uniques", "params": {"k": 3, "range": [0, 9]}},
        "sizes": [0, 1, 4, 8],
        "algorithms": [
            {"name": "builtin_timsort"},
            {"name": "rank_sort", "config": {"workers": 2}},
            {"name": "rank_sort_numpy"},
        ],
    }
    cfg.update(overrides)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_run_experiment_writes_outputs(tmp_path: pathlib.Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path), progress=False)

    for name in ("config_resolved.yaml", "meta.json", "results.jsonl", "summary.csv"):
        assert (run_dir / name).exists()

    meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
    assert "numpy" in meta and "machine" in meta

    summary = pd.read_csv(run_dir / "summary.csv")
    assert len(summary) == 3 * 4
    assert set(summary["algo"]) == {"builtin_timsort", "rank_sort", "rank_sort_numpy"}
    assert (summary["samples_ok"] == 2).all()

    lines = (run_dir / "results.jsonl").read_text(encoding="utf-8").splitlines()
    records = [json.loads(line) for line in lines]
    assert all("status" not in r for r in records)
    assert {r["config"]["n"] for r in records} == {0, 1, 4, 8}


def test_run_experiment_missing_keys(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"experiment_name": "x"}), encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config keys"):
        run_experiment(path, progress=False)


def test_run_experiment_unknown_algorithm(tmp_path: pathlib.Path) -> None:
    path = _write_config(tmp_path, algorithms=[{"name": "does_not_exist"}])
    with pytest.raises(ImportError):
        run_experiment(path, progress=False)


def test_run_experiment_rejects_n_in_algorithm_config(tmp_path: pathlib.Path) -> None:
    path = _write_config(tmp_path, algorithms=[{"name": "rank_sort", "config": {"n": 3}}])
    with pytest.raises(ValueError, match="'n' is set per size"):
        run_experiment(path, progress=False)


def test_run_experiment_bad_sizes(tmp_path: pathlib.Path) -> None:
    with pytest.raises(ValueError):
        run_experiment(_write_config(tmp_path, sizes=[]), progress=False)
    with pytest.raises(ValueError):
        run_experiment(_write_config(tmp_path, sizes=[4, -1]), progress=False)


def test_main_missing_config(tmp_path: pathlib.Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.yaml")])


def test_main_runs(tmp_path: pathlib.Path) -> None:
    main([str(_write_config(tmp_path, sizes=[3])), "--no-progress"])
    assert len(list((tmp_path / "runs").iterdir())) == 1
