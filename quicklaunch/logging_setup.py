#===============================================================================
#  QuickLaunch | logging_setup.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Rotating file log under <data dir>/logs plus stderr.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

from .constants import LOG_FILE_NAME, LOG_LEVEL_ENV

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _level_from_env(default: int) -> int:
    value = (os.getenv(LOG_LEVEL_ENV) or "").strip().upper()
    if not value:
        return default
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else default


def setup_logging(data_dir: Path, level: int = logging.INFO) -> Optional[Path]:
    """Configure root logging. Returns the log file path, or None if stderr-only."""
    level = _level_from_env(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = []

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    log_path: Optional[Path] = Path(data_dir) / "logs" / LOG_FILE_NAME
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=1_000_000,
            backupCount=2,
            encoding="utf-8",
            delay=True,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    except OSError:
        # No writable log folder: keep going with stderr only
        log_path = None

    logging.basicConfig(level=level, handlers=handlers, force=True)
    return log_path
