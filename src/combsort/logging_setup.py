"""Console (rich) and optional file logging for the CLI and the server."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

FILE_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"

__all__ = ["configure_logging", "FILE_FORMAT"]


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the `combsort` logger and return it.

    Calling this again replaces the handlers installed by the previous call.
    """
    root = logging.getLogger("combsort")
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    console = RichHandler(rich_tracebacks=True, show_path=False)
    console.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(console)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(fh)

    # Flask's per-request lines are noise next to our own.
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    return root
