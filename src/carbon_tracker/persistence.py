"""
Persistence layer (Textdateien)

Drei Dateien, eine Zeile pro Datensatz, Felder mit Komma getrennt:
- AdminAccounts.txt: username,password
- UserAccounts.txt: username,password
- UserLogs.txt: username,mon,tue,wed,thu,fri,sat,sun

- AccountRepository: Schnittstelle (laden / speichern)
- TextFileRepository: Datei-Repository
- DelimitedSerializer: Mapping zwischen Zeilen und Datensätzen

Kommas in Namen oder Passwörtern werden nicht maskiert.
Solche Zeilen sind danach nicht mehr lesbar (bekannte Einschränkung).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from .config import AppConfig
from .domain import AppState, DAYS_PER_WEEK, format_number, parse_float

logger = logging.getLogger(__name__)

SEPARATOR = ","


class AccountRepository(Protocol):
    """
    Schnittstelle für Persistenz.
    """
    def load_into(self, state: AppState) -> None:
        """Füllt den Zustand aus den Dateien."""
        ...

    def save_accounts_and_logs(self, state: AppState) -> None:
        """Schreibt Nutzerkonten und Wochenlogs."""
        ...

    def save_logs(self, state: AppState) -> None:
        """Schreibt nur die Wochenlogs."""
        ...

    def save_admin_accounts(self, state: AppState) -> None:
        """Schreibt nur die Admin-Konten."""
        ...


class FileStorage:
    """
    Klasse für Dateihandling beim laden und speichern.
    - Nur lesen/schreiben.
    - UTF-8 wird fest genutzt.
    """

    def exists(self, pfad: Path) -> bool:
        return pfad.is_file()

    def read_lines(self, pfad: Path) -> List[str]:
        """
        Liest eine Datei zeilenweise.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - OSError bei Leseproblemen
        """
        with open(pfad, "r", encoding="utf-8") as f:
            return f.read().splitlines()

    def write_lines(self, pfad: Path, lines: Iterable[str]) -> None:
        """
        Überschreibt eine Datei komplett.
        Jede Zeile endet mit einem Zeilenumbruch.
        """
        with open(pfad, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")


class DelimitedSerializer:
    """
    Wandelt Zeilen <-> Datensätze.
    - Falsche Feldanzahl: Zeile wird übersprungen (None).
    - Zahlen, die nicht lesbar sind: ValueError.
    """

    def parse_account(self, line: str) -> Optional[Tuple[str, str]]:
        """Zeile 'username,password' lesen."""
        parts = line.split(SEPARATOR)
        if len(parts) != 2:
            return None
        return parts[0], parts[1]

    def parse_log(self, line: str) -> Optional[Tuple[str, List[float]]]:
        """
        Zeile 'username,mon,...,sun' lesen.
        Alle 7 Werte werden gelesen, bevor etwas zurückgegeben wird.
        """
        parts = line.split(SEPARATOR)
        if len(parts) != DAYS_PER_WEEK + 1:
            return None
        values = [parse_float(p) for p in parts[1:]]
        return parts[0], values

    def format_account(self, username: str, password: str) -> str:
        return f"{username}{SEPARATOR}{password}"

    def format_log(self, username: str, values: List[float]) -> str:
        return SEPARATOR.join([username] + [format_number(v) for v in values])


class TextFileRepository:
    """
    Repository für die drei Textdateien.
    - FileStorage für Datei-Zugriff
    - DelimitedSerializer für Mapping
    """

    def __init__(
        self,
        config: AppConfig,
        storage: Optional[FileStorage] = None,
        serializer: Optional[DelimitedSerializer] = None
    ) -> None:
        self._config = config
        self._storage = storage or FileStorage()
        self._serializer = serializer or DelimitedSerializer()

    def load_into(self, state: AppState) -> None:
        """
        Lädt alle drei Dateien in den Zustand.
        - Fehlende Dateien werden ignoriert.
        - Ein Zahlenfehler im Log bricht das ganze Laden ab.
          Bis dahin gelesene Daten bleiben im Zustand.
        """
        self._load_accounts(self._config.admin_accounts_path, state.admin_accounts)
        self._load_accounts(self._config.user_accounts_path, state.user_accounts)

        pfad = self._config.user_logs_path
        if not self._storage.exists(pfad):
            return
        for line in self._storage.read_lines(pfad):
            record = self._serializer.parse_log(line)
            if record is None:
                logger.debug("Skipping malformed log line in %s", pfad.name)
                continue
            username, values = record
            state.user_logs[username] = values
        logger.debug("Loaded %d weekly logs", len(state.user_logs))

    def _load_accounts(self, pfad: Path, target: Dict[str, str]) -> None:
        """Liest eine Konto-Datei. Spätere Zeilen überschreiben frühere."""
        if not self._storage.exists(pfad):
            return
        for line in self._storage.read_lines(pfad):
            record = self._serializer.parse_account(line)
            if record is None:
                logger.debug("Skipping malformed account line in %s", pfad.name)
                continue
            username, password = record
            target[username] = password
        logger.debug("Loaded %d accounts from %s", len(target), pfad.name)

    def save_accounts_and_logs(self, state: AppState) -> None:
        """
        Schreibt Nutzerkonten und alle Wochenlogs.
        Admin-Konten werden hier nicht geschrieben.
        """
        self._storage.write_lines(
            self._config.user_accounts_path,
            [self._serializer.format_account(u, p) for u, p in state.user_accounts.items()],
        )
        self.save_logs(state)

    def save_logs(self, state: AppState) -> None:
        """Schreibt die Wochenlogs aller Nutzer."""
        self._storage.write_lines(
            self._config.user_logs_path,
            [self._serializer.format_log(u, v) for u, v in state.user_logs.items()],
        )
        logger.info("Saved %d weekly logs to %s", len(state.user_logs), self._config.user_logs_path)

    def save_admin_accounts(self, state: AppState) -> None:
        """Schreibt die Admin-Konten (nur bei der Ersteinrichtung)."""
        self._storage.write_lines(
            self._config.admin_accounts_path,
            [self._serializer.format_account(u, p) for u, p in state.admin_accounts.items()],
        )
        logger.info("Saved %d admin accounts", len(state.admin_accounts))
