"""Shared helpers for CLI commands."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Ensure project root is on sys.path (fallback for development mode)
try:
    import docsync  # noqa: F401
except ImportError:
    ROOT_DIR = Path(__file__).resolve().parent.parent
    if str(ROOT_DIR) not in sys.path:
        sys.path.insert(0, str(ROOT_DIR))

from docsync.sync_core.config import SyncConfig, load_config


def config_from_args(args: argparse.Namespace) -> SyncConfig:
    """Resolve config: CLI arg > env (.env honoured) > default."""
    path = getattr(args, "path", None)
    load_dotenv(Path(path or ".").resolve() / ".env")

    overrides = {}
    if getattr(args, "no_frontmatter", False):
        overrides["add_frontmatter"] = False
    if getattr(args, "no_index", False):
        overrides["create_index_files"] = False
    if getattr(args, "debounce", None) is not None:
        overrides["debounce_secs"] = args.debounce
    if getattr(args, "polling", False):
        overrides["use_polling"] = True

    return load_config(
        source_root=path,
        target_root=getattr(args, "target", None),
        **overrides,
    )


def output_json(data: Any) -> None:
    """Write JSON to stdout; single place for all commands."""
    json.dump(data, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
