"""Sync commands: sync, sidebars."""
from __future__ import annotations

import argparse
import sys

from cli.core import config_from_args, output_json


def cmd_sync(args: argparse.Namespace) -> None:
    """Mirror the repository's Markdown into the docs directory once."""
    from docsync.sync_core.pipeline import generate_navigation_manifest, run_sync

    config = config_from_args(args)
    print(f"Syncing {config.source_root} → {config.target_root}", file=sys.stderr)
    report = run_sync(config)
    manifest_written = generate_navigation_manifest(config)
    output_json({
        "ok": True,
        "source_root": str(config.source_root),
        "target_root": str(config.target_root),
        "synced": len(report.synced),
        "created_indexes": len(report.created_indexes),
        "skipped_dirs": report.skipped_dirs,
        "manifest_written": manifest_written,
    })


def cmd_sidebars(args: argparse.Namespace) -> None:
    """Write sidebars.js if the repository has none."""
    from docsync.sync_core.pipeline import generate_navigation_manifest

    config = config_from_args(args)
    written = generate_navigation_manifest(config)
    output_json({
        "ok": True,
        "manifest": str(config.manifest_path),
        "written": written,
    })
