"""End-to-end watch mode against a real (polling) watchdog observer."""
import threading
import time

import pytest

from docsync.sync_core.config import SyncConfig
from docsync.watch_core.controller import WatchController

from conftest import write_tree


def _wait_for(predicate, timeout=15.0, interval=0.05):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return False


@pytest.mark.integration
def test_new_markdown_file_is_mirrored(repo):
    write_tree(repo, {"guide/intro.md": "# Hello"})
    cfg = SyncConfig(
        source_root=repo,
        target_root=repo / "docs",
        debounce_secs=0.2,
        use_polling=True,
    )
    ctl = WatchController(cfg, idle_wait=0.05)
    worker = threading.Thread(target=ctl.run, daemon=True)
    worker.start()
    try:
        # initial pass + manifest happen before the observer starts
        assert _wait_for(lambda: ctl._observer is not None)
        assert (repo / "docs/guide/intro.md").exists()
        assert (repo / "sidebars.js").exists()

        time.sleep(0.3)
        write_tree(repo, {"guide/added-later.md": "# Later"})

        out = repo / "docs/guide/added-later.md"
        expected = "---\ntitle: added later\n---\n\n# Later"
        assert _wait_for(
            lambda: out.exists() and out.read_text(encoding="utf-8") == expected
        ), "watcher did not resync"
        assert ctl.passes >= 1
    finally:
        ctl.stop()
        worker.join(timeout=10)
    assert not worker.is_alive()
