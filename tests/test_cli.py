from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import yaml
from flask import Flask

from combsort.cli import main, parse_int_list
from combsort.logging_setup import configure_logging


def test_parse_int_list_accepts_mixed_separators(caplog) -> None:
    assert parse_int_list(["[5, 2", "8;1]", "9", "x3", "-4"]) == [5, 2, 8, 1, 9, -4]
    assert "'x3' is not an integer" in caplog.text


def test_sort_json_output(capsys) -> None:
    assert main(["sort", "5", "2", "8", "1", "9", "3", "--desc", "--json"]) == 0
    body = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert body["sortedArray"] == [9, 8, 5, 3, 2, 1]
    assert body["ascending"] is False
    assert body["gap"] == 4


def test_sort_with_gap_and_negatives(capsys) -> None:
    assert main(["sort", "3", "-1", "2", "--gap", "2", "--json"]) == 0
    body = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert body["sortedArray"] == [-1, 2, 3]
    assert body["gap"] == 2


def test_sort_without_integers_fails() -> None:
    assert main(["sort", "a,b"]) == 2


def test_bench_missing_config(tmp_path: Path) -> None:
    assert main(["bench", str(tmp_path / "missing.yaml")]) == 2


def test_bench_bad_config_reports_failure(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"experiment_name": "x"}), encoding="utf-8")
    assert main(["bench", str(path), "--no-progress"]) == 1


def test_bench_unknown_algorithm_reports_failure(tmp_path: Path) -> None:
    cfg = {
        "experiment_name": "x",
        "output_dir": str(tmp_path / "runs"),
        "seed": 0,
        "repeats": 1,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 5.0,
        "dataset": {"dist": "sorted"},
        "sizes": [3],
        "algorithms": [{"name": "bogus"}],
    }
    path = tmp_path / "exp.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    assert main(["bench", str(path), "--no-progress"]) == 1


def test_bench_malformed_yaml_reports_failure(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("sizes: [1, 2\n", encoding="utf-8")
    assert main(["bench", str(path), "--no-progress"]) == 1


@pytest.fixture
def clean_env(monkeypatch):
    for var in ("PORT", "COMBSORT_PORT", "COMBSORT_HOST", "COMBSORT_LOG_LEVEL", "COMBSORT_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    yield monkeypatch
    configure_logging("INFO")


def test_serve_missing_config_reports_failure(tmp_path: Path, clean_env) -> None:
    assert main(["serve", "--config", str(tmp_path / "nope.yaml")]) == 1


def test_serve_resolves_settings_before_running(tmp_path: Path, clean_env) -> None:
    calls = []
    clean_env.setattr(Flask, "run", lambda self, **kwargs: calls.append(kwargs))

    log_file = tmp_path / "server.log"
    path = tmp_path / "server.yaml"
    path.write_text(
        f"host: 127.0.0.1\nport: 8000\nlog_file: {log_file.as_posix()}\n", encoding="utf-8"
    )

    assert main(["--log-level", "DEBUG", "serve", "--config", str(path), "--port", "9001"]) == 0
    assert calls == [{"host": "127.0.0.1", "port": 9001}]

    logger = logging.getLogger("combsort")
    assert logger.level == logging.DEBUG
    assert "Server starting on http://127.0.0.1:9001" in log_file.read_text(encoding="utf-8")
