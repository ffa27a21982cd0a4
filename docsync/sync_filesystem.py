#!/usr/bin/env python3
"""
sync_filesystem.py - Mirror repository Markdown into the docs directory once.

Scans the repository, skips system folders and files, copies every .md/.mdx
file into docs/ (adding frontmatter where missing), creates index pages for
folders and writes sidebars.js if it does not exist yet.

Run from the repository root:

    python -m docsync.sync_filesystem

Configuration comes from the environment (see sync_core/config.py); a .env
file in the working directory is honoured.
"""
from __future__ import annotations

import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure project root is on sys.path when run as a script
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from docsync.logger import DocSyncError, get_logger  # noqa: E402
from docsync.sync_core.config import SyncConfig, load_config  # noqa: E402
from docsync.sync_core.pipeline import (  # noqa: E402
    SyncReport,
    generate_navigation_manifest,
    run_sync,
)

logger = get_logger("docsync.sync_filesystem")


def sync_once(config: SyncConfig) -> SyncReport:
    """Full pass followed by the sidebar manifest."""
    report = run_sync(config)
    generate_navigation_manifest(config)
    return report


def main() -> int:
    load_dotenv(Path.cwd() / ".env")
    try:
        config = load_config()
        logger.info(f"Repository root: {config.source_root}")
        logger.info(f"Docs directory: {config.target_root}")
        report = sync_once(config)
    except DocSyncError as exc:
        logger.error(f"[error] {exc}", exc_info=True)
        return 1
    logger.info(f"Filesystem sync complete: {report.summary()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
