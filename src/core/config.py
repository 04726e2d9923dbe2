"""Centralized configuration, read once from environment variables at import time."""

import logging
import os

# Database configuration
DATABASE_URL: str = os.environ.get("DATABASE_URL", "sqlite:///./synergy_squares.db")
DB_ECHO: bool = os.environ.get("DB_ECHO", "false").lower() == "true"


def _positive_int(name: str, default: str) -> int:
    """Read an environment variable that must hold an integer of at least 1."""
    raw = os.environ.get(name, default)
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


# Squares on the board at level 1. Doubles on every completed level.
INITIAL_SQUARE_COUNT: int = _positive_int("INITIAL_SQUARE_COUNT", "4")

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    """Install the root handler. Safe to call more than once (basicConfig is a no-op after the first call)."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
