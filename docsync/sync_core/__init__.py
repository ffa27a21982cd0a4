"""
Sync package - mirror repository Markdown into the Docusaurus docs directory.

This package contains the modules behind sync_filesystem.py:
- config: Environment-based configuration, defaults and SyncConfig
- exclusions: Name-based file and directory exclusion
- frontmatter: Frontmatter detection and generated page bodies
- pipeline: The sync pass and sidebar manifest generation

Usage:
    from docsync.sync_core.config import load_config
    from docsync.sync_core.pipeline import run_sync, generate_navigation_manifest
"""
from docsync.sync_core import config
from docsync.sync_core import exclusions
from docsync.sync_core import frontmatter
from docsync.sync_core import pipeline

__all__ = [
    "config",
    "exclusions",
    "frontmatter",
    "pipeline",
]
