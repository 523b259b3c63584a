"""
Run directory layout for benchmark experiments.

    <output_dir>/<YYYYmmdd_HHMMSS>_<experiment_name>[_<k>]/
        config_resolved.yaml
        meta.json
        results.jsonl
        summary.csv
"""

from __future__ import annotations

import datetime as _dt
import json
import os
import platform
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd
import psutil
import yaml

SUMMARY_COLUMNS = ["label", "algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]

__all__ = ["RunDirectory", "environment_info", "summarize_results", "SUMMARY_COLUMNS"]


def _short_commit() -> Optional[str]:
    try:
        sha = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            check=True,
        ).stdout
    except (OSError, subprocess.CalledProcessError):
        return None
    return sha.strip() or None


def environment_info() -> Dict[str, Any]:
    """Interpreter, library and machine facts recorded next to every run."""
    mem = psutil.virtual_memory()
    return {
        "versions": {
            "python": platform.python_version(),
            "numpy": np.__version__,
            "pandas": pd.__version__,
            "psutil": psutil.__version__,
        },
        "git_commit": _short_commit(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "logical_cpus": psutil.cpu_count(logical=True),
            "physical_cpus": psutil.cpu_count(logical=False),
            "memory_gb": round(mem.total / 2**30, 2),
            "os": platform.platform(),
        },
        "started_at": _dt.datetime.now().isoformat(timespec="seconds"),
        "argv": sys.argv,
        "pid": os.getpid(),
        "cwd": os.getcwd(),
    }


def summarize_results(results_path: Path) -> pd.DataFrame:
    """Median, IQR, min and max of `time_ns` per (label, algo, n)."""
    empty = pd.DataFrame(columns=SUMMARY_COLUMNS)
    if not results_path.exists() or results_path.stat().st_size == 0:
        return empty
    df = pd.read_json(results_path, lines=True)
    if "time_ns" not in df.columns:
        return empty
    timed = df.dropna(subset=["time_ns"])
    if timed.empty:
        return empty

    by_run = timed.groupby(["label", "algo", "n"])["time_ns"]
    out = by_run.agg(samples_ok="count", median_ns="median", min_ns="min", max_ns="max")
    out["iqr_ns"] = by_run.quantile(0.75) - by_run.quantile(0.25)
    out = out.reset_index()
    ns_cols = ["median_ns", "iqr_ns", "min_ns", "max_ns"]
    out[ns_cols] = out[ns_cols].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["label", "n"], ignore_index=True)


class RunDirectory:
    """A fresh, uniquely named directory holding one experiment's outputs."""

    def __init__(self, output_dir: Path, experiment_name: str) -> None:
        output_dir.mkdir(parents=True, exist_ok=True)
        stem = f"{_dt.datetime.now():%Y%m%d_%H%M%S}_{experiment_name}"
        path = output_dir / stem
        k = 1
        while path.exists():
            k += 1
            path = output_dir / f"{stem}_{k}"
        path.mkdir()
        self.path = path

    @property
    def results_path(self) -> Path:
        return self.path / "results.jsonl"

    @property
    def summary_path(self) -> Path:
        return self.path / "summary.csv"

    @property
    def meta_path(self) -> Path:
        return self.path / "meta.json"

    @property
    def config_path(self) -> Path:
        return self.path / "config_resolved.yaml"

    def write_config(self, cfg: Dict[str, Any]) -> None:
        self.config_path.write_text(yaml.safe_dump(cfg, sort_keys=False), encoding="utf-8")

    def write_meta(self, meta: Dict[str, Any]) -> None:
        self.meta_path.write_text(json.dumps(meta, indent=2), encoding="utf-8")

    def append_result(self, record: Dict[str, Any]) -> None:
        line = json.dumps(record, separators=(",", ":"), ensure_ascii=False)
        with self.results_path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")

    def write_summary(self) -> pd.DataFrame:
        summary = summarize_results(self.results_path)
        summary.to_csv(self.summary_path, index=False)
        return summary
