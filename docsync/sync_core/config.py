#!/usr/bin/env python3
"""
sync_core/config.py - Environment-based configuration and constants for docs sync.

This module centralizes the default exclusion lists, the included file
extensions, environment variable parsing and the immutable SyncConfig value
passed to the synchronizer and the watcher.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import FrozenSet, Iterable, Mapping, Optional, Tuple

from docsync.logger import ConfigurationError, get_logger, safe_bool

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------
def _env_flag(env: Mapping[str, str], key: str, default: bool) -> bool:
    """Boolean from the environment; unknown spellings keep the default."""
    return safe_bool(env.get(key), default, logger=logger, context=key)


def _safe_float_env(env: Mapping[str, str], key: str, default: float) -> float:
    """Parse a float from the environment, rejecting garbage loudly."""
    val = env.get(key)
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be a number, got {val!r}") from exc


def _split_csv(val: str | None) -> list[str]:
    if not val:
        return []
    return [p.strip() for p in val.split(",") if p.strip()]


def _normalize_ext(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else "." + ext


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
# Directory names never mirrored (the generator's own folders plus the
# content directory itself).
_DEFAULT_EXCLUDE_DIRS: Tuple[str, ...] = (
    "node_modules",
    ".git",
    ".github",
    "build",
    ".docusaurus",
    "static",
    "src",
    "docs",
    ".cache-loader",
    "versioned_docs",
    "versioned_sidebars",
)

# File names never mirrored
_DEFAULT_EXCLUDE_FILES: Tuple[str, ...] = (
    "package.json",
    "package-lock.json",
    "docusaurus.config.js",
    "sidebars.js",
    "babel.config.js",
    ".gitignore",
    ".npmrc",
    "README.md",  # root README is the repo landing page, not a doc
    "LICENSE",
    ".DS_Store",
)

_DEFAULT_EXTENSIONS: Tuple[str, ...] = (".md", ".mdx")

HIDDEN_PREFIX = "."
INDEX_FILE_NAME = "index.md"
INDEX_FILE_NAMES: Tuple[str, ...] = ("index.md", "index.mdx")
DEFAULT_TARGET_DIR = "docs"
DEFAULT_MANIFEST_NAME = "sidebars.js"
DEFAULT_DEBOUNCE_SECS = 1.0


# ---------------------------------------------------------------------------
# Configuration value
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SyncConfig:
    """Immutable settings for one sync or watch run."""

    source_root: Path
    target_root: Path
    exclude_dirs: FrozenSet[str] = field(default_factory=lambda: frozenset(_DEFAULT_EXCLUDE_DIRS))
    exclude_files: FrozenSet[str] = field(default_factory=lambda: frozenset(_DEFAULT_EXCLUDE_FILES))
    include_extensions: Tuple[str, ...] = _DEFAULT_EXTENSIONS
    add_frontmatter: bool = True
    create_index_files: bool = True
    manifest_name: str = DEFAULT_MANIFEST_NAME
    debounce_secs: float = DEFAULT_DEBOUNCE_SECS
    use_polling: bool = False

    def __post_init__(self) -> None:
        # Coerce so callers may hand in plain lists/strings
        object.__setattr__(self, "source_root", Path(self.source_root).resolve())
        object.__setattr__(self, "target_root", Path(self.target_root).resolve())
        object.__setattr__(self, "exclude_dirs", frozenset(self.exclude_dirs))
        object.__setattr__(self, "exclude_files", frozenset(self.exclude_files))
        object.__setattr__(
            self,
            "include_extensions",
            tuple(dict.fromkeys(_normalize_ext(e) for e in self.include_extensions)),
        )
        if not self.include_extensions:
            raise ConfigurationError("at least one included extension is required")
        if self.debounce_secs < 0:
            raise ConfigurationError(
                f"debounce window must not be negative, got {self.debounce_secs}"
            )
        if not self.manifest_name or "/" in self.manifest_name or os.sep in self.manifest_name:
            raise ConfigurationError(f"invalid manifest file name: {self.manifest_name!r}")

    @property
    def manifest_path(self) -> Path:
        return self.source_root / self.manifest_name

    def with_roots(
        self,
        source_root: Optional[Path] = None,
        target_root: Optional[Path] = None,
    ) -> "SyncConfig":
        """Copy of this config pointed at other roots."""
        return replace(
            self,
            source_root=source_root if source_root is not None else self.source_root,
            target_root=target_root if target_root is not None else self.target_root,
        )


def default_config(source_root: Path | str, target_root: Path | str | None = None) -> SyncConfig:
    """Built-in defaults with no environment lookups."""
    src = Path(source_root)
    return SyncConfig(
        source_root=src,
        target_root=Path(target_root) if target_root is not None else src / DEFAULT_TARGET_DIR,
    )


def load_config(
    source_root: Path | str | None = None,
    target_root: Path | str | None = None,
    env: Optional[Mapping[str, str]] = None,
    **overrides,
) -> SyncConfig:
    """Resolve configuration: explicit argument > environment > default."""
    env = os.environ if env is None else env

    src = Path(source_root or env.get("DOCSYNC_SOURCE_ROOT") or os.getcwd())
    tgt_raw = target_root or env.get("DOCSYNC_TARGET_DIR") or DEFAULT_TARGET_DIR
    tgt = Path(tgt_raw)
    if not tgt.is_absolute():
        tgt = src / tgt

    use_defaults = _env_flag(env, "DOCSYNC_DEFAULT_EXCLUDES", True)
    exclude_dirs: Iterable[str] = list(_DEFAULT_EXCLUDE_DIRS) if use_defaults else []
    exclude_files: Iterable[str] = list(_DEFAULT_EXCLUDE_FILES) if use_defaults else []
    exclude_dirs = [*exclude_dirs, *_split_csv(env.get("DOCSYNC_EXCLUDE_DIRS"))]
    exclude_files = [*exclude_files, *_split_csv(env.get("DOCSYNC_EXCLUDE_FILES"))]

    extensions = _split_csv(env.get("DOCSYNC_EXTENSIONS")) or list(_DEFAULT_EXTENSIONS)

    values = dict(
        source_root=src,
        target_root=tgt,
        exclude_dirs=frozenset(exclude_dirs),
        exclude_files=frozenset(exclude_files),
        include_extensions=tuple(extensions),
        add_frontmatter=_env_flag(env, "DOCSYNC_ADD_FRONTMATTER", True),
        create_index_files=_env_flag(env, "DOCSYNC_CREATE_INDEX", True),
        manifest_name=env.get("DOCSYNC_MANIFEST") or DEFAULT_MANIFEST_NAME,
        debounce_secs=_safe_float_env(env, "DOCSYNC_DEBOUNCE_SECS", DEFAULT_DEBOUNCE_SECS),
        use_polling=_env_flag(env, "DOCSYNC_USE_POLLING", False),
    )
    values.update({k: v for k, v in overrides.items() if v is not None})
    return SyncConfig(**values)


__all__ = [
    "SyncConfig",
    "default_config",
    "load_config",
    "HIDDEN_PREFIX",
    "INDEX_FILE_NAME",
    "INDEX_FILE_NAMES",
    "DEFAULT_TARGET_DIR",
    "DEFAULT_MANIFEST_NAME",
    "DEFAULT_DEBOUNCE_SECS",
]
