"""
Domain beinhaltet die Entities + Enums

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder Datei-Logik.

- Entities sind Dataclasses.
- Der Ressourcen-Katalog lebt nur im Speicher.
- Ein Wochenlog hat immer genau 7 Werte (Montag..Sonntag).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
DAYS_PER_WEEK = len(DAYS)


class TrackerError(Exception):
    """Basis für alle fachlichen Fehler. Die Nachricht wird dem Nutzer gezeigt."""


class ValidationError(TrackerError):
    """Eingabe konnte nicht übernommen werden."""


class DuplicateResourceError(TrackerError):
    """Ressourcen-ID ist schon vergeben."""


class ResourceNotFoundError(TrackerError):
    """Ressourcen-ID ist unbekannt."""


class Role(Enum):
    """Rollen im System."""
    Admin = "Admin"
    User = "User"


def format_number(value: float) -> str:
    """
    Formatiert eine Zahl für Anzeige und Datei.
    - Ganze Werte ohne Nachkommastelle (12 statt 12.0).
    - Sonst kürzeste eindeutige Darstellung.
    """
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def parse_float(raw: str) -> float:
    """
    Liest eine Zahl aus Text.
    - Leerzeichen am Rand sind erlaubt.
    - Unterstriche (1_000) sind nicht erlaubt.
    Fehler: ValueError
    """
    s = raw.strip()
    if "_" in s:
        raise ValueError(f"could not convert string to float: {raw!r}")
    return float(s)


def empty_week() -> List[float]:
    """Neues Wochenlog mit 7 Nullen."""
    return [0.0] * DAYS_PER_WEEK


@dataclass(slots=True)
class Resource:
    """
    Eine Umwelt-Ressource im Katalog.
    Die ID ändert sich nach dem Anlegen nicht mehr.
    """
    id: str
    type: str
    impact: float

    def matches_id(self, other_id: str) -> bool:
        """ID-Vergleich ohne Groß/Klein."""
        return self.id.casefold() == other_id.casefold()

    def __str__(self) -> str:
        return f"ID: {self.id}, Type: {self.type}, Environmental Impact (CO2e): {format_number(self.impact)}"


@dataclass(slots=True)
class AppState:
    """
    Kompletter Zustand einer Programmausführung.
    - admin_accounts / user_accounts: Benutzername -> Passwort
    - user_logs: Benutzername -> 7 Werte
    Benutzernamen sind case-sensitiv. Gleiche Namen in beiden Rollen sind erlaubt.
    """
    admin_accounts: Dict[str, str] = field(default_factory=dict)
    user_accounts: Dict[str, str] = field(default_factory=dict)
    user_logs: Dict[str, List[float]] = field(default_factory=dict)

    def has_accounts(self) -> bool:
        """Wahr, sobald es irgendein Konto gibt."""
        return bool(self.admin_accounts or self.user_accounts)

    def reconcile_logs(self) -> List[str]:
        """
        Legt fehlende Wochenlogs an.
        Jeder Nutzer ohne Log bekommt 7 Nullen.
        Gibt die ergänzten Namen zurück.
        """
        added = []
        for username in self.user_accounts:
            if username not in self.user_logs:
                self.user_logs[username] = empty_week()
                added.append(username)
        return added
