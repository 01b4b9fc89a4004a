"""Logging utilities tailored for the ferryman solver."""

from __future__ import annotations

import logging
from typing import Optional, TextIO, Union

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value."""

    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name not in LEVEL_NAMES:
        raise ValueError(f"Unknown log level '{level}'")
    return logging.getLevelName(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure root logging with the solver's formatter.

    ``level`` may be numeric or one of ``LEVEL_NAMES`` in any case, which is
    how the CLI passes ``--log-level`` through. Search and validation log their
    statistics at DEBUG, so pass ``"debug"`` to follow the expansion order.
    Records go to ``stream`` when given, otherwise to stderr.
    """

    numeric = resolve_level(level)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``ferryman`` namespace, configuring defaults on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "ferryman")
