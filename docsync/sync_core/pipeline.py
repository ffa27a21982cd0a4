#!/usr/bin/env python3
"""
sync_core/pipeline.py - Mirror the source tree into the docs directory.

Exports the two operations the watcher builds on:

    run_sync                      one full pass over the source tree
    generate_navigation_manifest  write sidebars.js unless it already exists
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional

from docsync.logger import ContextLogger, SyncError, get_logger
from docsync.sync_core.config import INDEX_FILE_NAME, INDEX_FILE_NAMES, SyncConfig
from docsync.sync_core.exclusions import Excluder
from docsync.sync_core.frontmatter import ensure_frontmatter, render_index, render_sidebars

LOGGER = get_logger("docsync.sync")


@dataclass
class SyncReport:
    """What one pass did; paths are POSIX strings relative to their root."""

    synced: List[str] = field(default_factory=list)
    skipped_dirs: List[str] = field(default_factory=list)
    created_indexes: List[str] = field(default_factory=list)
    skipped_files: int = 0

    def summary(self) -> str:
        return (
            f"{len(self.synced)} file(s) synced, "
            f"{len(self.created_indexes)} index file(s) created, "
            f"{len(self.skipped_dirs)} dir(s) skipped"
        )


@dataclass
class _Frame:
    source: Path
    target: Path
    real: str
    entries: Iterator[str]
    is_root: bool = False


def _rel(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SyncError(f"cannot create directory {path}: {exc}", path=str(path)) from exc


def _list_dir(path: Path) -> Iterator[str]:
    # Sorted so repeated passes (and generated sidebars) are reproducible
    try:
        return iter(sorted(os.listdir(path)))
    except OSError as exc:
        raise SyncError(f"cannot list directory {path}: {exc}", path=str(path)) from exc


def _sync_file(source: Path, target: Path, config: SyncConfig) -> None:
    # utf-8-sig drops a leading BOM so the frontmatter marker opens the output
    try:
        with open(source, "r", encoding="utf-8-sig", newline="") as fh:
            content = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SyncError(f"cannot read {source}: {exc}", path=str(source)) from exc

    if config.add_frontmatter:
        content = ensure_frontmatter(content, source.name)

    _ensure_dir(target.parent)
    try:
        with open(target, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        raise SyncError(f"cannot write {target}: {exc}", path=str(target)) from exc


def _create_index(target_dir: Path, config: SyncConfig, report: SyncReport) -> None:
    if any((target_dir / name).exists() for name in INDEX_FILE_NAMES):
        return
    index_path = target_dir / INDEX_FILE_NAME
    try:
        index_path.write_text(render_index(target_dir.name), encoding="utf-8")
    except OSError as exc:
        raise SyncError(f"cannot write {index_path}: {exc}", path=str(index_path)) from exc
    rel = _rel(index_path, config.target_root)
    report.created_indexes.append(rel)
    LOGGER.info(f"[created_index] {rel}")


def run_sync(
    config: SyncConfig,
    source_root: Optional[Path] = None,
    target_root: Optional[Path] = None,
) -> SyncReport:
    """Copy every qualifying document from the source tree into the target tree.

    Directories are walked with an explicit stack; a directory's index page
    is considered once its whole subtree is done. Nothing is ever deleted
    and the source tree is never written to.

    Raises:
        SyncError: on the first read, write or mkdir failure. The pass is
            not resumed; re-running it is safe.
    """
    if source_root is not None or target_root is not None:
        config = config.with_roots(source_root, target_root)

    src, dst = config.source_root, config.target_root
    if not src.is_dir():
        raise SyncError(f"source root is not a directory: {src}", path=str(src))

    log = ContextLogger(LOGGER, source_root=str(src), target_root=str(dst))
    log.debug("sync pass started")

    excl = Excluder(config)
    report = SyncReport()
    target_real = os.path.realpath(dst)

    _ensure_dir(dst)
    stack: List[_Frame] = [
        _Frame(src, dst, os.path.realpath(src), _list_dir(src), is_root=True)
    ]

    while stack:
        frame = stack[-1]
        name = next(frame.entries, None)
        if name is None:
            stack.pop()
            if not frame.is_root and config.create_index_files:
                _create_index(frame.target, config, report)
            continue

        source_path = frame.source / name
        rel = _rel(source_path, src)
        try:
            is_dir = source_path.is_dir()
            is_file = not is_dir and source_path.is_file()
        except OSError as exc:
            raise SyncError(f"cannot stat {source_path}: {exc}", path=str(source_path)) from exc

        if is_dir:
            if excl.exclude_dir(name):
                report.skipped_dirs.append(rel)
                LOGGER.info(f"[skipped_dir] {rel}")
                continue
            real = os.path.realpath(source_path)
            if real == target_real:
                # output nested under the input without a matching exclusion
                report.skipped_dirs.append(rel)
                LOGGER.info(f"[skipped_dir] {rel} (target directory)")
                continue
            if any(real == f.real for f in stack):
                report.skipped_dirs.append(rel)
                LOGGER.warning(f"[skipped_dir] {rel} (symlink cycle)")
                continue
            target_dir = frame.target / name
            _ensure_dir(target_dir)
            stack.append(_Frame(source_path, target_dir, real, _list_dir(source_path)))
        elif is_file:
            if not excl.should_sync_file(name):
                report.skipped_files += 1
                continue
            _sync_file(source_path, frame.target / name, config)
            report.synced.append(rel)
            LOGGER.info(f"[synced] {rel}")

    log.debug("sync pass finished", synced=len(report.synced))
    return report


def generate_navigation_manifest(config: SyncConfig) -> bool:
    """Write the sidebar manifest unless one exists; return True when written."""
    path = config.manifest_path
    if path.exists():
        LOGGER.info(f"[sidebars] {path.name} exists, skipped")
        return False
    try:
        path.write_text(render_sidebars(), encoding="utf-8")
    except OSError as exc:
        raise SyncError(f"cannot write {path}: {exc}", path=str(path)) from exc
    LOGGER.info(f"[sidebars] generated {path.name}")
    return True


__all__ = ["SyncReport", "run_sync", "generate_navigation_manifest"]
