"""
Entry point für den Carbon-Footprint-Tracker.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import AppConfig
from .controller import TrackerController
from .logging_config import setup_logging
from .persistence import TextFileRepository
from .view import ConsoleView

logger = logging.getLogger(__name__)


def main(config: Optional[AppConfig] = None) -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Konfiguration (Dateien im Arbeitsverzeichnis)
    - Logging einrichten
    - Komponenten erstellen
    - Controller starten
    """
    config = config or AppConfig()
    setup_logging(config.log_level, config.log_file)

    try:
        # Bausteine der App erstellen.
        repo = TextFileRepository(config)
        view = ConsoleView()
        controller = TrackerController(repo, view, config)

        # App starten.
        controller.starte_app()

    except (KeyboardInterrupt, EOFError):
        # Sauberer Abbruch per Strg+C oder Ende der Eingabe.
        print("\nApplication terminated.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        logger.exception("Unexpected error")
        print(f"\nERROR: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
