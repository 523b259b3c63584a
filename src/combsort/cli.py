"""
Command-line entry point.

    combsort sort 5 2 8 1 9 3 [--desc] [--gap N] [--json]
    combsort sort "[5, 2, 8; 1]"
    combsort serve [--config server.yaml] [--host H] [--port P]
    combsort bench experiments/configs/comb_scaling.yaml
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import yaml
from rich.console import Console

from combsort.api import create_app
from combsort.api.payload import SortRequest, sort_response
from combsort.engine import sort_with_metadata
from combsort.logging_setup import configure_logging
from combsort.settings import LOG_LEVELS, load_settings

logger = logging.getLogger(__name__)
_console = Console()

_SEPARATORS = re.compile(r"[\s,;]+")

__all__ = ["main", "parse_int_list"]


def parse_int_list(tokens: Sequence[str]) -> List[int]:
    """
    Parse integers out of free-form tokens.

    Tokens may hold several numbers separated by whitespace, commas or
    semicolons, and may be wrapped in square brackets. Anything that is not
    an integer is skipped with a warning.
    """
    out: List[int] = []
    for token in tokens:
        for part in _SEPARATORS.split(token):
            part = part.strip("[]")
            if not part:
                continue
            try:
                out.append(int(part))
            except ValueError:
                logger.warning("'%s' is not an integer and will be skipped", part)
    return out


def _cmd_sort(args: argparse.Namespace) -> int:
    values = parse_int_list(args.values)
    if not values:
        _console.print("[bold red]No integers to sort.[/bold red]")
        return 2

    result = sort_with_metadata(values, ascending=not args.desc, custom_gap=args.gap)
    if args.json:
        req = SortRequest(values=values, ascending=not args.desc, gap=args.gap)
        print(json.dumps(sort_response(req, result)))
        return 0

    direction = "ascending" if result.ascending else "descending"
    _console.print(f"[bold]Original:[/bold] {values}")
    _console.print(f"[bold]Sorted ({direction}):[/bold] {result.as_list()}")
    _console.print(
        f"initial gap {result.initial_gap}, {result.execution_time_ms:.3f} ms, "
        f"finished {result.completion_timestamp.isoformat(timespec='seconds')}"
    )
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    settings = load_settings(args.config, host=args.host, port=args.port, log_level=args.log_level)
    configure_logging(settings.log_level, settings.log_file)
    logger.info("Server starting on http://%s:%d", settings.host, settings.port)
    app = create_app(settings)
    try:
        app.run(host=settings.host, port=settings.port)
    finally:
        logger.info("Server is shutting down")
    return 0


def _cmd_bench(args: argparse.Namespace) -> int:
    from combsort.bench.runner import run_experiment

    config_path = Path(args.config).resolve()
    if not config_path.exists():
        _console.print(f"[bold red]Config file not found:[/bold red] {config_path}")
        return 2
    run_experiment(config_path, show_progress=not args.no_progress)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="combsort", description="Comb sort engine, server and benchmarks.")
    p.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Logging level (default INFO)")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("sort", help="Sort integers given on the command line")
    s.add_argument("values", nargs="+", help="Integers; commas, semicolons and brackets are allowed")
    s.add_argument("--desc", action="store_true", help="Sort in descending order")
    s.add_argument("--gap", type=int, default=None, help="First gap; ignored unless 1 <= gap <= len")
    s.add_argument("--json", action="store_true", help="Print the API-style JSON result")
    s.set_defaults(func=_cmd_sort)

    v = sub.add_parser("serve", help="Run the HTTP API")
    v.add_argument("--config", default=None, help="YAML settings file")
    v.add_argument("--host", default=None)
    v.add_argument("--port", type=int, default=None)
    v.set_defaults(func=_cmd_serve)

    b = sub.add_parser("bench", help="Run a benchmark experiment from a YAML config")
    b.add_argument("config", help="Path to YAML experiment config")
    b.add_argument("--no-progress", action="store_true", help="Hide the tqdm progress bar")
    b.set_defaults(func=_cmd_bench)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command != "serve":
        configure_logging(args.log_level or "INFO")
    try:
        return args.func(args)
    except (ValueError, OSError, ImportError, AttributeError, yaml.YAMLError) as e:
        _console.print(f"[bold red]{args.command} failed:[/bold red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
