"""Watch command: auto-resync the docs directory on file changes (daemon mode)."""
from __future__ import annotations

import argparse
import sys

from cli.core import config_from_args


def cmd_watch(args: argparse.Namespace) -> None:
    """Sync once, then watch the repository and resync on changes."""
    from docsync.watch_core.controller import WatchController

    config = config_from_args(args)
    mode = "polling" if config.use_polling else "native"
    print(f"Watching {config.source_root} → {config.target_root}", file=sys.stderr)
    print(f"Watch mode: {mode}, debounce={config.debounce_secs}s", file=sys.stderr)
    print("Press Ctrl+C to stop", file=sys.stderr)

    WatchController(config).run()
