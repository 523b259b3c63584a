"""
Timing harness for sort entry points.

A sample is a single `algo_fn(a, config=...)` call bracketed by
`time.perf_counter_ns`. Input copies, garbage collection and the warmup call
stay outside the bracket.

    m = time_sort_call(algo_name="comb", algo_fn=comb.sort, a=data, config={},
                       repeats=5, warmup=True, disable_gc=True, timeout_seconds=10)
    m.status          # "ok" | "timeout" | "error"
    m.samples_ns      # one entry per completed call
"""

from __future__ import annotations

import gc
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

SortFn = Callable[..., List[int]]

__all__ = ["Measurement", "time_sort_call"]


@dataclass
class Measurement:
    algo: str
    repeats: int
    samples_ns: List[int] = field(default_factory=list)
    status: str = "ok"
    error: Optional[str] = None
    timed_out_on_repeat: Optional[int] = None
    output: Optional[List[int]] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def fail(self, message: str) -> "Measurement":
        self.status = "error"
        self.error = message
        return self


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: SortFn,
    a: List[int],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool = True,
    keep_output: bool = False,
) -> Measurement:
    """
    Call `algo_fn(a, config=config)` `repeats` times and record each duration.

    `timeout_seconds` is a per-call budget checked after the call returns:
    the first slow call ends sampling with status "timeout" (the call is not
    interrupted). An exception ends sampling with status "error". With
    `disable_gc` the collector is emptied and switched off for the loop and
    switched back on afterwards if it was on before. `keep_output` stores the
    last result so the caller can validate it.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    m = Measurement(algo=algo_name, repeats=repeats)

    def fresh_input() -> List[int]:
        return list(a) if defensive_copy else a

    if warmup and repeats > 0:
        try:
            algo_fn(fresh_input(), config=config)
        except Exception as e:
            logger.warning("%s: warmup failed on n=%d: %r", algo_name, len(a), e)
            return m.fail(f"warmup failed: {e!r}")

    budget_ns = int(timeout_seconds * 1e9)
    gc_was_enabled = gc.isenabled()
    if disable_gc:
        gc.collect()
        gc.disable()
    try:
        for rep in range(repeats):
            arg = fresh_input()
            start = time.perf_counter_ns()
            try:
                out = algo_fn(arg, config=config)
            except Exception as e:
                logger.warning("%s: repeat %d failed on n=%d: %r", algo_name, rep, len(a), e)
                m.fail(f"run failed at repeat {rep}: {e!r}")
                break
            took = time.perf_counter_ns() - start

            m.samples_ns.append(took)
            if keep_output:
                m.output = out
            if took > budget_ns:
                logger.info("%s: n=%d over budget on repeat %d", algo_name, len(a), rep)
                m.status = "timeout"
                m.timed_out_on_repeat = rep
                break
    finally:
        if disable_gc and gc_was_enabled:
            gc.enable()
    return m
