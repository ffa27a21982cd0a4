"""Core building blocks for the watch_sync entrypoint.

Modules:
    config: shared constants and logger
    queue: debounced change queue and the Idle/PendingSync state
    handler: watchdog event handler logic
    controller: initial sync, observer wiring and the consumer loop
    utils: observer factory and console helpers
"""

from . import config, queue, handler, controller, utils

__all__ = [
    "config",
    "queue",
    "handler",
    "controller",
    "utils",
]
