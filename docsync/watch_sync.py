#!/usr/bin/env python3
"""
watch_sync.py - Watch mode for the docs sync.

Runs one full sync, then watches the repository and re-syncs (debounced)
whenever Markdown files or folders change. Stop with Ctrl+C.

    python -m docsync.watch_sync
"""
from __future__ import annotations

import signal
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from docsync.logger import DocSyncError  # noqa: E402
from docsync.sync_core.config import SyncConfig, load_config  # noqa: E402
from docsync.watch_core.config import LOGGER  # noqa: E402
from docsync.watch_core.controller import WatchController  # noqa: E402
from docsync.watch_core.utils import safe_print  # noqa: E402

logger = LOGGER


def watch(config: SyncConfig) -> None:
    controller = WatchController(config)
    signal.signal(signal.SIGTERM, lambda *_: controller.stop())

    safe_print(f"Watching: {config.source_root}")
    safe_print(f"Target: {config.target_root}")
    safe_print("Press Ctrl+C to stop\n")
    controller.run()


def main() -> int:
    load_dotenv(Path.cwd() / ".env")
    try:
        config = load_config()
        watch(config)
    except DocSyncError as exc:
        logger.error(f"[error] {exc}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
