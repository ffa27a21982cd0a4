"""CLI entry point: argparse dispatcher for all subcommands."""
from __future__ import annotations

import argparse
import json
import sys
import traceback


# ---------------------------------------------------------------------------
# Command registry: command name → (module_path, function_name)
# Lazy-imported at dispatch time to keep startup fast.
# ---------------------------------------------------------------------------
COMMANDS = {
    "sync":     ("cli.commands.sync",  "cmd_sync"),
    "sidebars": ("cli.commands.sync",  "cmd_sidebars"),
    "watch":    ("cli.commands.watch", "cmd_watch"),
}


# ---------------------------------------------------------------------------
# Shared argparse helpers
# ---------------------------------------------------------------------------
def _add_root_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("path", nargs="?", default=None,
                   help="Repository root (default: $DOCSYNC_SOURCE_ROOT or cwd)")
    p.add_argument("-t", "--target",
                   help="Docs directory, absolute or relative to the root (default: docs)")


# ---------------------------------------------------------------------------
# Parser builder
# ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    from cli._version import __version__

    parser = argparse.ArgumentParser(
        prog="docsync",
        description="Mirror repository Markdown into a Docusaurus docs directory",
    )
    parser.add_argument("--debug", action="store_true", help="Show stack traces on error")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    # sync
    p = sub.add_parser("sync", help="One-shot sync of Markdown into the docs directory")
    _add_root_args(p)
    p.add_argument("--no-frontmatter", action="store_true",
                   help="Copy files as-is without injecting frontmatter")
    p.add_argument("--no-index", action="store_true",
                   help="Do not create index.md for folders")

    # sidebars
    p = sub.add_parser("sidebars", help="Write sidebars.js if it does not exist")
    p.add_argument("path", nargs="?", default=None, help="Repository root")

    # watch
    p = sub.add_parser("watch", help="Sync, then resync on file changes (daemon)")
    _add_root_args(p)
    p.add_argument("--debounce", type=float, help="Debounce window in seconds")
    p.add_argument("--polling", action="store_true", help="Use the polling observer")

    return parser


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    entry = COMMANDS.get(args.command)
    if not entry:
        parser.print_help()
        sys.exit(1)

    mod_path, fn_name = entry
    try:
        import importlib
        mod = importlib.import_module(mod_path)
        fn = getattr(mod, fn_name)
        fn(args)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as exc:
        json.dump({"ok": False, "error": str(exc)}, sys.stdout, default=str)
        sys.stdout.write("\n")
        if args.debug:
            traceback.print_exc(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
