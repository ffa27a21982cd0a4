"""Misc utilities shared across watch_core modules."""

from __future__ import annotations

from typing import Any

from watchdog.observers import Observer
from watchdog.observers.polling import PollingObserver

from .config import LOGGER


def safe_print(*args: Any, **kwargs: Any) -> None:
    """Best-effort print for banner lines; a closed stdout is not an error."""
    try:
        print(*args, **kwargs)
    except (OSError, ValueError):
        pass


def create_observer(use_polling: bool) -> Observer:
    """Create a watchdog observer based on configuration."""
    if use_polling:
        LOGGER.info("[watch_mode] Using polling observer for filesystem events")
        return PollingObserver()
    return Observer()


__all__ = ["safe_print", "create_observer"]
