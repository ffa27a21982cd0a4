"""Watch loop: initial sync, observer wiring and the debounce state machine."""

from __future__ import annotations

import queue
import threading
import time
from typing import Callable, List, Optional

from watchdog.observers.api import BaseObserver

from docsync.sync_core.config import SyncConfig
from docsync.sync_core.pipeline import generate_navigation_manifest, run_sync
from .config import IDLE_WAIT_SECS, LOGGER
from .handler import SyncEventHandler
from .queue import ChangeEvent, ChangeQueue, SyncState
from .utils import create_observer


def full_pass(config: SyncConfig) -> None:
    report = run_sync(config)
    generate_navigation_manifest(config)
    LOGGER.info(f"[watch] Sync complete: {report.summary()}")


class WatchController:
    """Keeps the docs directory in step with the source tree.

    Observer callbacks only fill ``inbox``; :meth:`step` is the single
    consumer that feeds the debounce queue and runs every pass, so two
    passes never overlap.
    """

    def __init__(
        self,
        config: SyncConfig,
        *,
        sync_fn: Callable[[SyncConfig], None] = full_pass,
        observer_factory: Optional[Callable[[], BaseObserver]] = None,
        clock: Callable[[], float] = time.monotonic,
        idle_wait: float = IDLE_WAIT_SECS,
    ):
        self.config = config
        self._sync_fn = sync_fn
        self._observer_factory = observer_factory or (
            lambda: create_observer(config.use_polling)
        )
        self._idle_wait = idle_wait
        self._observer: Optional[BaseObserver] = None
        self._stopping = threading.Event()
        self.inbox: "queue.Queue[ChangeEvent]" = queue.Queue()
        self.changes = ChangeQueue(self._resync, delay=config.debounce_secs, clock=clock)
        self.handler = SyncEventHandler(config, self.inbox)
        self.passes = 0

    @property
    def state(self) -> SyncState:
        return self.changes.state

    def initial_sync(self) -> None:
        """Synchronous first pass; errors propagate to the caller."""
        LOGGER.info("[watch] Initial sync...")
        self._sync_fn(self.config)

    def _resync(self, batch: List[ChangeEvent]) -> None:
        self.passes += 1
        LOGGER.info(f"[watch] Change detected ({len(batch)} event(s)), syncing...")
        self._sync_fn(self.config)

    def start(self) -> None:
        obs = self._observer_factory()
        obs.schedule(self.handler, str(self.config.source_root), recursive=True)
        obs.start()
        self._observer = obs
        LOGGER.info("[watch] Watching for changes...")

    def step(self) -> bool:
        """Wait for events or the debounce deadline; return True if a pass ran."""
        wait = self.changes.time_until_due()
        if wait is None:
            wait = self._idle_wait
        try:
            event = self.inbox.get(timeout=wait)
        except queue.Empty:
            pass
        else:
            self.changes.add(event)
            while True:
                try:
                    self.changes.add(self.inbox.get_nowait())
                except queue.Empty:
                    break
        return self.changes.flush_if_due()

    def run_forever(self) -> None:
        while not self._stopping.is_set():
            self.step()

    def stop(self) -> None:
        """Ask the loop to exit; safe to call from a signal handler."""
        self._stopping.set()

    def close(self) -> None:
        if self._observer is not None:
            self._observer.stop()
            self._observer.join()
            self._observer = None

    def run(self) -> None:
        self.initial_sync()
        self.start()
        try:
            self.run_forever()
        except KeyboardInterrupt:
            LOGGER.info("[watch] Stopping watcher...")
        finally:
            self.close()


__all__ = ["WatchController", "full_pass"]
