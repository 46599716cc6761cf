# logging_config.py
from __future__ import annotations
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_LEVELS = ("debug", "info", "warning", "error")


def parse_level(name: str) -> int:
    """'debug' / 'INFO' / ... -> logging constant. Unknown names raise ValueError."""
    key = name.strip().lower()
    if key not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {name!r}; pick one of {', '.join(LOG_LEVELS)}")
    return getattr(logging, key.upper())


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Route every module logger (they all propagate to root) to stdout, and
    to log_file when given. Safe to call again; old handlers are replaced."""
    if isinstance(level, str):
        level = parse_level(level)

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    root.setLevel(level)

    fmt = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for h in handlers:
        h.setFormatter(fmt)
        root.addHandler(h)
    return root
