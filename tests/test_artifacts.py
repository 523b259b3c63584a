from __future__ import annotations

import json
from pathlib import Path

from combsort.bench.artifacts import SUMMARY_COLUMNS, RunDirectory, environment_info, summarize_results


def test_run_directories_are_unique(tmp_path: Path) -> None:
    first = RunDirectory(tmp_path, "exp")
    second = RunDirectory(tmp_path, "exp")
    assert first.path != second.path
    assert first.path.is_dir() and second.path.is_dir()


def test_summary_from_results(tmp_path: Path) -> None:
    run = RunDirectory(tmp_path, "exp")
    for t in (10, 20, 30, 40):
        run.append_result({"label": "comb", "algo": "comb", "n": 8, "time_ns": t})
    run.append_result({"label": "slow", "algo": "comb", "n": 8, "status": "timeout"})

    summary = run.write_summary()
    assert list(summary.columns) == SUMMARY_COLUMNS
    assert len(summary) == 1
    row = summary.iloc[0]
    assert (row["label"], row["n"], row["samples_ok"]) == ("comb", 8, 4)
    assert (row["median_ns"], row["min_ns"], row["max_ns"], row["iqr_ns"]) == (25, 10, 40, 15)
    assert run.summary_path.exists()


def test_summary_of_missing_or_failed_runs(tmp_path: Path) -> None:
    assert summarize_results(tmp_path / "none.jsonl").empty

    path = tmp_path / "failed.jsonl"
    path.write_text(json.dumps({"label": "x", "algo": "x", "n": 1, "status": "error"}) + "\n")
    assert summarize_results(path).empty


def test_environment_info_shape() -> None:
    info = environment_info()
    assert set(info["versions"]) == {"python", "numpy", "pandas", "psutil"}
    assert info["machine"]["logical_cpus"] >= 1
