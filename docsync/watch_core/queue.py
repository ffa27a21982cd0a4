"""Debounced change queue used by the watcher."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from .config import LOGGER


@dataclass(frozen=True)
class ChangeEvent:
    """One filesystem notification that may affect the docs output."""

    kind: str  # add | change | unlink | addDir | unlinkDir
    path: Path
    is_directory: bool = False


class SyncState(str, Enum):
    IDLE = "idle"
    PENDING_SYNC = "pending_sync"


class ChangeQueue:
    """Collects change events and flushes them after a debounce interval.

    Every event re-arms the deadline, so a burst of changes collapses into a
    single callback that fires ``delay`` seconds after the last one. The
    queue never runs the callback on its own; the owner polls
    :meth:`flush_if_due`, which keeps all passes on one thread.
    """

    def __init__(
        self,
        process_cb: Callable[[List[ChangeEvent]], None],
        delay: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._process_cb = process_cb
        self._delay = delay
        self._clock = clock
        self._events: List[ChangeEvent] = []
        self._deadline: Optional[float] = None

    @property
    def state(self) -> SyncState:
        return SyncState.IDLE if self._deadline is None else SyncState.PENDING_SYNC

    def add(self, event: ChangeEvent) -> None:
        if self._deadline is not None:
            LOGGER.debug("Debounce timer re-armed", extra={"pending": len(self._events) + 1})
        self._events.append(event)
        self._deadline = self._clock() + self._delay

    def time_until_due(self) -> Optional[float]:
        """Seconds left before the pending flush, or None when idle."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._clock())

    def is_due(self) -> bool:
        return self._deadline is not None and self._clock() >= self._deadline

    def flush_if_due(self) -> bool:
        if not self.is_due():
            return False
        self._flush()
        return True

    def _flush(self) -> None:
        batch = list(self._events)
        self._events.clear()
        try:
            self._process_cb(batch)
        except Exception as exc:
            # A failed resync must not stop the watcher
            LOGGER.error(
                f"[error] Sync failed: {exc}",
                extra={"error": str(exc), "batch_size": len(batch)},
                exc_info=True,
            )
        finally:
            self._deadline = None


__all__ = ["ChangeEvent", "ChangeQueue", "SyncState"]
