"""Lightweight logging setup for the TUI."""

import logging
import sys
from typing import Optional


def configure_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    # Configure root logger once. A running Textual app owns the terminal, so
    # the TUI passes a file; stderr is used otherwise.
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[handler],
    )
    # asyncio and textual are chatty at DEBUG; keep them at WARNING
    for noisy in ("asyncio", "textual"):
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))
