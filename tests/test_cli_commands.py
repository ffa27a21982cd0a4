#!/usr/bin/env python3
"""
Test CLI commands - parsing, dispatch and exit codes.

These tests verify that:
1. Subcommands parse their optional overrides
2. sync/sidebars report JSON and write the expected files
3. Errors surface as {"ok": false} with a non-zero exit
4. watch wires its flags into the controller config
"""
from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from cli.main import build_parser, main

from conftest import write_tree


def _last_json(out: str) -> dict:
    start = out.rfind("\n{")
    return json.loads(out[start + 1:] if start >= 0 else out)


class TestParser:
    def test_sync_flags(self):
        args = build_parser().parse_args(["sync", "/r", "-t", "site", "--no-frontmatter", "--no-index"])
        assert args.command == "sync"
        assert args.path == "/r"
        assert args.target == "site"
        assert args.no_frontmatter and args.no_index

    def test_watch_flags(self):
        args = build_parser().parse_args(["watch", "--debounce", "0.5", "--polling"])
        assert args.path is None
        assert args.debounce == 0.5
        assert args.polling

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestDispatch:
    def test_sync_writes_docs_and_reports(self, repo, capsys):
        write_tree(repo, {"guide/intro.md": "# Hello", "node_modules/x.md": "x"})

        main(["sync", str(repo)])

        result = _last_json(capsys.readouterr().out)
        assert result["ok"] is True
        assert result["synced"] == 1
        assert result["manifest_written"] is True
        assert "node_modules" in result["skipped_dirs"]
        assert (repo / "docs/guide/intro.md").exists()
        assert (repo / "sidebars.js").exists()

    def test_sync_no_frontmatter(self, repo, capsys):
        write_tree(repo, {"a.md": "# raw"})

        main(["sync", str(repo), "--no-frontmatter", "--no-index"])

        assert (repo / "docs/a.md").read_text(encoding="utf-8") == "# raw"

    def test_sidebars_does_not_clobber(self, repo, capsys):
        (repo / "sidebars.js").write_text("// mine\n", encoding="utf-8")

        main(["sidebars", str(repo)])

        result = _last_json(capsys.readouterr().out)
        assert result == {"ok": True, "manifest": str(repo.resolve() / "sidebars.js"), "written": False}
        assert (repo / "sidebars.js").read_text(encoding="utf-8") == "// mine\n"

    def test_missing_root_exits_non_zero(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as info:
            main(["sync", str(tmp_path / "missing")])

        assert info.value.code == 1
        result = _last_json(capsys.readouterr().out)
        assert result["ok"] is False
        assert "source root" in result["error"]

    def test_watch_builds_controller_from_flags(self, repo):
        with patch("docsync.watch_core.controller.WatchController.run") as run:
            main(["watch", str(repo), "--debounce", "0.25", "--polling", "-t", "out"])

        assert run.called

    def test_watch_config_reaches_controller(self, repo):
        seen = {}

        def fake_run(self):
            seen["config"] = self.config

        with patch("docsync.watch_core.controller.WatchController.run", fake_run):
            main(["watch", str(repo), "--debounce", "0.25", "--polling", "-t", "out"])

        cfg = seen["config"]
        assert cfg.debounce_secs == 0.25
        assert cfg.use_polling is True
        assert cfg.target_root == repo.resolve() / "out"
