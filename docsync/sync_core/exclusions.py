#!/usr/bin/env python3
"""
sync_core/exclusions.py - File and directory exclusion logic.

This module provides the Excluder class which decides, purely by name, which
entries of the source tree are mirrored into the docs directory.
"""
from __future__ import annotations

import os
from pathlib import Path

from docsync.sync_core.config import HIDDEN_PREFIX, SyncConfig


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


class Excluder:
    """Handles file and directory exclusion based on names."""

    def __init__(self, config: SyncConfig):
        self.config = config
        self.dir_names = config.exclude_dirs
        self.file_names = config.exclude_files
        self.extensions = config.include_extensions

    def exclude_dir(self, name: str) -> bool:
        """Check if a directory should be skipped (never descended into)."""
        return name in self.dir_names or is_hidden(name)

    def exclude_file(self, name: str) -> bool:
        """Check if a file name is on the deny list or hidden."""
        return name in self.file_names or is_hidden(name)

    def has_included_extension(self, name: str) -> bool:
        return os.path.splitext(name)[1].lower() in self.extensions

    def should_sync_file(self, name: str) -> bool:
        """Check if a file should be mirrored into the docs directory."""
        return self.has_included_extension(name) and not self.exclude_file(name)

    def is_watched_path(self, path: Path | str) -> bool:
        """Check whether a path under the source root can affect the output.

        Paths outside the source root, inside the target tree, or below an
        excluded/hidden directory are ignored.
        """
        p = Path(path)
        try:
            rel = p.relative_to(self.config.source_root)
        except ValueError:
            return False
        target = self.config.target_root
        if p == target or target in p.parents:
            return False
        # every component but the last is a directory on the way down
        for part in rel.parts[:-1]:
            if self.exclude_dir(part):
                return False
        return True


__all__ = ["Excluder", "is_hidden"]
