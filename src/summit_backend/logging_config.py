"""Logging setup shared by the app factory and the launcher."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

APP_LOGGER = "summit_backend"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[Path] = None,
    loggers: Iterable[str] = (APP_LOGGER,),
) -> None:
    """Attach handlers to the root logger once, then apply ``level`` to the service loggers.

    Handlers are only added when the root logger has none (uvicorn or pytest may
    already own it). The named loggers always take ``level`` so ``SUMMIT_LOG_LEVEL``
    controls this package's output either way.
    """
    for name in loggers:
        logging.getLogger(name).setLevel(_level(level))

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_level(level))
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
