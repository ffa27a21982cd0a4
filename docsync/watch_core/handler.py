"""Watchdog event handler responsible for enqueueing relevant changes."""

from __future__ import annotations

import os
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from docsync.sync_core.config import SyncConfig
from docsync.sync_core.exclusions import Excluder
from .config import LOGGER
from .queue import ChangeEvent

_LABELS = {
    "add": "File added",
    "change": "File changed",
    "unlink": "File deleted",
    "addDir": "Directory added",
    "unlinkDir": "Directory deleted",
}


class SyncEventHandler(FileSystemEventHandler):
    """Turns watchdog callbacks into ChangeEvents on a thread-safe inbox.

    The handler runs on the observer thread, so it only filters and hands
    events over; it never touches the docs directory itself.
    """

    def __init__(self, config: SyncConfig, inbox):
        super().__init__()
        self.config = config
        self.root = config.source_root
        self.inbox = inbox
        self.excl = Excluder(config)

    def _relevant(self, p: Path, is_dir: bool) -> bool:
        if not self.excl.is_watched_path(p):
            return False
        if is_dir:
            return not self.excl.exclude_dir(p.name)
        return self.excl.has_included_extension(p.name)

    def _maybe_enqueue(self, kind: str, src_path, is_dir: bool) -> None:
        p = Path(os.fsdecode(src_path))
        if not self._relevant(p, is_dir):
            return
        try:
            rel = p.relative_to(self.root).as_posix()
        except ValueError:
            rel = str(p)
        LOGGER.info(f"[watch] {_LABELS[kind]}: {rel}")
        self.inbox.put(ChangeEvent(kind, p, is_dir))

    def on_created(self, event: FileSystemEvent) -> None:
        kind = "addDir" if event.is_directory else "add"
        self._maybe_enqueue(kind, event.src_path, event.is_directory)

    def on_modified(self, event: FileSystemEvent) -> None:
        # directory mtime bumps accompany every child write; the child event is enough
        if not event.is_directory:
            self._maybe_enqueue("change", event.src_path, False)

    def on_deleted(self, event: FileSystemEvent) -> None:
        kind = "unlinkDir" if event.is_directory else "unlink"
        self._maybe_enqueue(kind, event.src_path, event.is_directory)

    def on_moved(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            self._maybe_enqueue("unlinkDir", event.src_path, True)
            self._maybe_enqueue("addDir", event.dest_path, True)
        else:
            self._maybe_enqueue("unlink", event.src_path, False)
            self._maybe_enqueue("add", event.dest_path, False)


__all__ = ["SyncEventHandler"]
