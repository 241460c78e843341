"""
Konfiguration der Anwendung.

Alle Dateien liegen im Datenverzeichnis (Standard: aktuelles Arbeitsverzeichnis).
Es werden keine Umgebungsvariablen oder Kommandozeilen-Parameter gelesen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True, slots=True)
class AppConfig:
    """
    Einstellungen für Dateien, Anzeige und Logging.
    """
    data_dir: Path = field(default_factory=Path.cwd)
    admin_accounts_file: str = "AdminAccounts.txt"
    user_accounts_file: str = "UserAccounts.txt"
    user_logs_file: str = "UserLogs.txt"

    # Maximale Balkenlänge im Wochendiagramm.
    chart_max_width: int = 100

    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @property
    def admin_accounts_path(self) -> Path:
        return self.data_dir / self.admin_accounts_file

    @property
    def user_accounts_path(self) -> Path:
        return self.data_dir / self.user_accounts_file

    @property
    def user_logs_path(self) -> Path:
        return self.data_dir / self.user_logs_file
