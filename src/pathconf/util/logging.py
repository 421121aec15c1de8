"""Logging setup for applications embedding pathconf."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def configure_logging(*, level: int = logging.INFO, log_path: Path | None = None) -> logging.Logger:
    """Attach stream and optional file handlers to the ``pathconf`` logger.

    The library itself only emits records through module loggers and never
    installs handlers. Applications call this once during bootstrap, before
    ``PathResolver.load``, when they want the discovery and loading messages
    on stdout (and in ``log_path``). Repeated calls do not add duplicate
    handlers; ``level`` is applied on every call.
    """

    logger = logging.getLogger("pathconf")
    logger.setLevel(level)

    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    if not has_stream:
        stream_handler = logging.StreamHandler(stream=sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path and str(log_path.absolute()) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging"]
