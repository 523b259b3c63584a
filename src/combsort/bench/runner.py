"""
Experiment runner: sweeps input sizes and times each configured sort entry point.

    combsort bench experiments/configs/comb_scaling.yaml

Config keys (YAML mapping):
    experiment_name, output_dir, seed, repeats, warmup, disable_gc,
    timeout_seconds, dataset ({dist, params}), sizes, algorithms, validate (optional)

Each `algorithms` entry is {name, label?, config?}. `name` picks a module in
`combsort.algorithms`; `label` tells apart several entries for the same module
(e.g. `comb` ascending and descending).

Behaviour:
- One dataset per size, shared by every algorithm (each gets its own copy).
- With `validate: true` the last output is compared with the oracle and a
  mismatch counts as an error.
- After a timeout or error an entry is dropped for every larger size.
- Outputs go to a `RunDirectory` (see `combsort.bench.artifacts`).
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Sequence

import numpy as np
import pandas as pd
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from combsort.bench.artifacts import RunDirectory, environment_info
from combsort.bench.measure import Measurement, SortFn, time_sort_call
from combsort.datasets import make_dataset
from combsort.validate import ORACLE_NAME, equals_oracle, first_order_violation_index

logger = logging.getLogger(__name__)
_console = Console()

REQUIRED_KEYS = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
)

__all__ = ["AlgoEntry", "load_experiment", "run_experiment"]


@dataclass(frozen=True)
class AlgoEntry:
    label: str
    name: str
    sort_fn: SortFn
    config: Dict[str, Any]

    @property
    def ascending(self) -> bool:
        return self.config.get("ascending", True) is not False


def load_experiment(config_path: Path) -> Dict[str, Any]:
    with config_path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Experiment config must be a YAML mapping: {config_path}")
    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")
    sizes = cfg["sizes"]
    if not isinstance(sizes, list) or not sizes or any(
        isinstance(n, bool) or not isinstance(n, int) or n < 0 for n in sizes
    ):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    if not isinstance(cfg["algorithms"], list) or not cfg["algorithms"]:
        raise ValueError("Config 'algorithms' must be a non-empty list")
    return cfg


def _load_entries(raw: Sequence[Any]) -> List[AlgoEntry]:
    entries: List[AlgoEntry] = []
    labels = set()
    for item in raw:
        if not isinstance(item, dict) or not isinstance(item.get("name"), str) or not item["name"]:
            raise ValueError(f"Each algorithm needs a string 'name'; got {item!r}")
        name = item["name"]
        label = str(item.get("label") or name)
        if label in labels:
            raise ValueError(f"Duplicate algorithm label in config: {label}")
        labels.add(label)

        module_path = f"combsort.algorithms.{name}"
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise ImportError(f"Unknown algorithm module '{module_path}': {e}") from e
        sort_fn = getattr(module, "sort", None)
        if not callable(sort_fn):
            raise AttributeError(f"{module_path} must define `sort(a, *, config=None)`")

        config = item.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{label}': 'config' must be a mapping")
        entries.append(AlgoEntry(label=label, name=name, sort_fn=sort_fn, config=config))
    return entries


def _check_against_oracle(entry: AlgoEntry, a: List[int], m: Measurement) -> None:
    if m.output is None or equals_oracle(a, m.output, ascending=entry.ascending):
        return
    i = first_order_violation_index(m.output, ascending=entry.ascending)
    if i is None:
        m.fail("validation failed: output is not a permutation of the input")
    else:
        m.fail(f"validation failed: out of order at index {i}: {m.output[i]}, {m.output[i + 1]}")


def _render_summary(summary: pd.DataFrame, sizes: Sequence[int]) -> Table:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    distinct = sorted(set(sizes))
    shown = sorted({distinct[0], distinct[len(distinct) // 2], distinct[-1]})
    for n in shown:
        table.add_column(f"n={n}", justify="right")

    cells = {(r.label, r.n): (r.median_ns, r.iqr_ns) for r in summary.itertuples(index=False)}
    for label in summary["label"].unique():
        row = [str(label)]
        for n in shown:
            if (label, n) in cells:
                med, iqr = cells[(label, n)]
                row.append(f"{med / 1e6:.2f} ± {iqr / 1e6:.2f}")
            else:
                row.append("—")
        table.add_row(*row)
    return table


def run_experiment(config_path: Path, *, show_progress: bool = True) -> Path:
    """Run the experiment described by `config_path`; return the run directory."""
    cfg = load_experiment(config_path)
    entries = _load_entries(cfg["algorithms"])
    sizes: List[int] = list(cfg["sizes"])
    dataset_spec = dict(cfg["dataset"])
    validate = bool(cfg.get("validate", False))
    timing = dict(
        repeats=int(cfg["repeats"]),
        warmup=bool(cfg["warmup"]),
        disable_gc=bool(cfg["disable_gc"]),
        timeout_seconds=float(cfg["timeout_seconds"]),
    )

    run = RunDirectory(Path(cfg["output_dir"]), str(cfg["experiment_name"]))
    run.write_config(cfg)
    meta = environment_info()
    if validate:
        meta["oracle"] = ORACLE_NAME
    run.write_meta(meta)
    logger.info("Run directory: %s", run.path)
    logger.info("Algorithms: %s", ", ".join(e.label for e in entries))

    rng = np.random.default_rng(int(cfg["seed"]))
    active = list(entries)

    for n in tqdm(sizes, desc="Sizes", unit="n", disable=not show_progress):
        data = make_dataset(n, dataset_spec, rng)

        for entry in list(active):
            m = time_sort_call(
                algo_name=entry.label,
                algo_fn=entry.sort_fn,
                a=data,
                config=entry.config,
                keep_output=validate,
                **timing,
            )
            base = {"label": entry.label, "algo": entry.name, "n": n, "config": entry.config}
            for trial, t_ns in enumerate(m.samples_ns):
                run.append_result({**base, "dataset": dataset_spec, "trial": trial, "time_ns": t_ns})

            if m.ok and validate:
                _check_against_oracle(entry, data, m)
            if not m.ok:
                active.remove(entry)
                logger.warning("%s: %s at n=%d (%s); skipping larger sizes", entry.label, m.status, n, m.error)
                run.append_result(
                    {**base, "status": m.status, "error": m.error, "timed_out_on_repeat": m.timed_out_on_repeat}
                )

    summary = run.write_summary()
    _console.print()
    _console.print(_render_summary(summary, sizes))
    _console.print()
    _console.print(f"[bold green]Done.[/bold green] Results in {run.path}")
    return run.path
