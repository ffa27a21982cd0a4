import sys
from pathlib import Path
from typing import Dict

import pytest

# Ensure repository root is on sys.path so `import docsync...` works locally
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from docsync.sync_core.config import default_config  # noqa: E402


def write_tree(root: Path, files: Dict[str, str]) -> None:
    """Create files (and their parent folders) from a {relpath: content} map."""
    for rel, content in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding="utf-8")


def snapshot(root: Path) -> Dict[str, bytes]:
    """Every file below root as {relpath: bytes}."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def repo(tmp_path):
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def config(repo):
    return default_config(repo)
