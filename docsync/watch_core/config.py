"""Shared configuration and logging helpers for watch_sync."""

from __future__ import annotations

from docsync.logger import get_logger


LOGGER = get_logger("docsync.watch")

# Longest the consumer loop blocks while idle before re-checking for shutdown
IDLE_WAIT_SECS = 1.0
