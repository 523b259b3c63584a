from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest
import yaml

from combsort.bench.runner import run_experiment
from combsort.validate import ORACLE_NAME


def _write_config(tmp_path: Path, **overrides) -> Path:
    cfg = {
        "experiment_name": "unit",
        "output_dir": str(tmp_path / "runs"),
        "seed": 1,
        "repeats": 2,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 30.0,
        "validate": True,
        "dataset": {"dist": "random", "params": {"range": [-50, 50]}},
        "sizes": [0, 10, 40],
        "algorithms": [
            {"name": "comb"},
            {"name": "comb", "label": "comb_desc", "config": {"ascending": False}},
            {"name": "builtin_timsort"},
        ],
    }
    cfg.update(overrides)
    path = tmp_path / "exp.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_run_writes_all_artifacts(tmp_path: Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path), show_progress=False)

    for name in ("results.jsonl", "summary.csv", "meta.json", "config_resolved.yaml"):
        assert (run_dir / name).exists(), name

    lines = [json.loads(l) for l in (run_dir / "results.jsonl").read_text().splitlines()]
    assert all("time_ns" in rec for rec in lines), "no failures expected"
    assert len(lines) == 3 * 3 * 2

    summary = pd.read_csv(run_dir / "summary.csv")
    assert set(summary["label"]) == {"comb", "comb_desc", "builtin_timsort"}
    assert set(summary["n"]) == {0, 10, 40}
    assert (summary["samples_ok"] == 2).all()

    meta = json.loads((run_dir / "meta.json").read_text())
    assert "python" in meta["versions"] and "machine" in meta
    assert meta["oracle"] == ORACLE_NAME


def test_missing_keys_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"experiment_name": "x"}), encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config keys"):
        run_experiment(path, show_progress=False)


def test_duplicate_labels_rejected(tmp_path: Path) -> None:
    path = _write_config(tmp_path, algorithms=[{"name": "comb"}, {"name": "comb"}])
    with pytest.raises(ValueError, match="Duplicate algorithm label"):
        run_experiment(path, show_progress=False)


def test_unknown_algorithm_rejected(tmp_path: Path) -> None:
    path = _write_config(tmp_path, algorithms=[{"name": "quantum_bogosort"}])
    with pytest.raises(ImportError, match="quantum_bogosort"):
        run_experiment(path, show_progress=False)


def test_erroring_algorithm_is_skipped_for_larger_sizes(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        algorithms=[{"name": "comb", "config": {"gap": "wide"}}, {"name": "comb_reversed"}],
    )
    run_dir = run_experiment(path, show_progress=False)
    lines = [json.loads(l) for l in (run_dir / "results.jsonl").read_text().splitlines()]

    failures = [rec for rec in lines if rec.get("status") == "error"]
    assert len(failures) == 1
    assert failures[0]["label"] == "comb"
    assert failures[0]["n"] == 0
    assert not any(rec["label"] == "comb" and "time_ns" in rec for rec in lines)
    assert sum(1 for rec in lines if rec["label"] == "comb_reversed") == 3 * 2


def test_meta_has_no_oracle_without_validation(tmp_path: Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path, validate=False, sizes=[5]), show_progress=False)
    meta = json.loads((run_dir / "meta.json").read_text())
    assert "oracle" not in meta
