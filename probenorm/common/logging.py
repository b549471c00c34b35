# probenorm/common/logging.py
from __future__ import annotations

import logging
from typing import Optional


def get_logger(name: str = "probenorm", level: Optional[int | str] = None) -> logging.Logger:
    """
    Return a named logger. If nothing has configured the root logger yet
    (e.g. not running under Uvicorn), add a basicConfig once.
    Level defaults to settings.log_level.
    """
    if level is None:
        from probenorm.common.settings import get_settings
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
