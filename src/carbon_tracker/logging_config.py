"""
Logging-Konfiguration.

Ohne Logdatei geht alles nach stderr, damit die Menüs auf stdout sauber bleiben.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Richtet den Paket-Logger 'carbon_tracker' ein.
    Mehrfacher Aufruf ersetzt die vorhandenen Handler.
    """
    root = logging.getLogger("carbon_tracker")
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    if log_file is not None:
        handler: logging.Handler = RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False
    return root
