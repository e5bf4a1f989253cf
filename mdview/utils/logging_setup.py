from __future__ import annotations

import logging
from pathlib import Path

from mdview.utils.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT


def configure_logging(level: str = DEFAULT_LOG_LEVEL, log_file: Path | None = None) -> None:
    """
    Install console (and optionally file) handlers on the root logger.

    Unknown level names fall back to INFO. Calling this twice replaces the handlers
    installed by the previous call instead of stacking them.
    """
    root_logger = logging.getLogger()
    resolved = logging.getLevelName(level.strip().upper()) if level else logging.INFO
    if not isinstance(resolved, int):
        resolved = logging.INFO
    root_logger.setLevel(resolved)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_mdview", False):
            root_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._mdview = True  # type: ignore[attr-defined]
        root_logger.addHandler(handler)
