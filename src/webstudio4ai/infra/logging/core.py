from __future__ import annotations

"""
Logging Bootstrap.

configure_logging() installs a single tagged QueueHandler on the root logger.
The real sinks (stderr, rotating file) hang off a QueueListener thread, so a
slow disk never stalls the interactive shell. Calling it again is a no-op
unless force=True, which tears the previous listener down first.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from webstudio4ai.infra.fs import get_user_data_dir
from webstudio4ai.infra.logging.config import (
    _LEVEL_MAP,
    CONSOLE_FORMAT,
    DATE_FORMAT,
    FILE_FORMAT,
    LoggingConfig,
)
from webstudio4ai.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_webstudio4ai_configured"
_QUEUE_LISTENER_ATTR: str = "_webstudio4ai_queue_listener"


def get_default_log_path(file_name: str = "webstudio4ai.log") -> str:
    return os.path.join(get_user_data_dir(), "logs", file_name)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route root logging through a queue to the sinks described by cfg.

    Args:
        cfg: Level, console switch and log file settings.
        force: Rebuild the handlers even if logging is already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level = _LEVEL_MAP.get(str(cfg.level or "").strip().upper(), logging.INFO)
    root.setLevel(level)
    _reset(root)

    try:
        sinks = _build_sinks(cfg, level)
    except Exception:
        _install_emergency_console(root)
        return root

    if not sinks:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()
    atexit.register(_stop_listener, listener)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)
    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def _build_sinks(cfg: LoggingConfig, level: int) -> List[logging.Handler]:
    sinks: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(level)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        _tag_handler(console)
        sinks.append(console)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level,
            logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            sinks.append(fh)

    return sinks


def _install_emergency_console(root: logging.Logger) -> None:
    """Last resort when the regular sinks cannot be built."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
    _tag_handler(sh)
    root.addHandler(sh)
    root.warning("Logging setup failed. Writing to stderr only.")


def _reset(root: logging.Logger) -> None:
    """Drop our previous handlers and stop the listener feeding them."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()
    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # QueueListener.stop() fails on a listener that was never started or already stopped
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
