"""
Application/Use-Case layer

Hier liegen die Anwendungsfälle beider Rollen:
- CredentialStore: Anmeldung und Ersteinrichtung
- ResourceCatalog: Ressourcen anlegen, anzeigen, ändern, suchen (Admin)
- WeeklyLogStore: Tageswerte eintragen, Wochendiagramm vorbereiten (User)

Fehler werden als TrackerError geworfen. Der Controller zeigt sie an.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .domain import (
    AppState,
    DAYS,
    DAYS_PER_WEEK,
    DuplicateResourceError,
    Resource,
    ResourceNotFoundError,
    Role,
    ValidationError,
    empty_week,
    parse_float,
)

logger = logging.getLogger(__name__)

MSG_INVALID_ID = "Invalid ID. It cannot be empty."
MSG_DUPLICATE_ID = "Resource ID already exists. Please use a unique ID."
MSG_INVALID_IMPACT = "Invalid impact. Enter a numeric value."
MSG_NOT_FOUND = "Resource not found."
MSG_INVALID_DAY = "Invalid day. Please enter a number between 1 and 7."
MSG_INVALID_FOOTPRINT = "Invalid input. Please enter a numeric value."


class ResourceCatalog:
    """
    Ressourcen-Katalog im Speicher.
    - Reihenfolge = Reihenfolge beim Anlegen.
    - IDs sind eindeutig ohne Groß/Klein. Geprüft wird nur beim Anlegen.
    - Es wird nichts gespeichert.
    """

    def __init__(self) -> None:
        self._resources: List[Resource] = []

    def __len__(self) -> int:
        return len(self._resources)

    def check_new_id(self, resource_id: str) -> None:
        """
        Prüft eine neue ID.
        - leer oder nur Leerzeichen -> ValidationError
        - schon vorhanden -> DuplicateResourceError
        """
        if not resource_id or not resource_id.strip():
            raise ValidationError(MSG_INVALID_ID)
        if self.find(resource_id) is not None:
            raise DuplicateResourceError(MSG_DUPLICATE_ID)

    def add(self, resource_id: str, resource_type: str, impact: str) -> Resource:
        """Legt eine Ressource an. impact ist der eingegebene Text."""
        self.check_new_id(resource_id)
        value = self._parse_impact(impact)

        resource = Resource(id=resource_id, type=resource_type, impact=value)
        self._resources.append(resource)
        logger.debug("Added resource %s", resource_id)
        return resource

    def all(self) -> List[Resource]:
        return list(self._resources)

    def find(self, resource_id: str) -> Optional[Resource]:
        """Erster Treffer ohne Groß/Klein oder None."""
        for r in self._resources:
            if r.matches_id(resource_id):
                return r
        return None

    def get(self, resource_id: str) -> Resource:
        resource = self.find(resource_id)
        if resource is None:
            raise ResourceNotFoundError(MSG_NOT_FOUND)
        return resource

    def update(self, resource_id: str, new_type: str, new_impact: str) -> Resource:
        """
        Ändert Typ und Impact.
        Beide Werte werden erst gesetzt, wenn der Impact gültig ist.
        """
        resource = self.get(resource_id)
        value = self._parse_impact(new_impact)

        resource.type = new_type
        resource.impact = value
        logger.debug("Updated resource %s", resource.id)
        return resource

    def search(self, type_substring: str) -> List[Resource]:
        """Alle Ressourcen, deren Typ den Text enthält (ohne Groß/Klein)."""
        needle = type_substring.casefold()
        return [r for r in self._resources if needle in r.type.casefold()]

    def _parse_impact(self, raw: str) -> float:
        try:
            return parse_float(raw)
        except ValueError:
            raise ValidationError(MSG_INVALID_IMPACT) from None


@dataclass(slots=True)
class ChartRow:
    """Eine Zeile im Wochendiagramm."""
    day: str
    bar_length: int
    footprint: float


def bar_length(footprint: float, max_width: int) -> int:
    """
    Balkenlänge für einen Tageswert.
    - abgerundet, nie unter 0
    - höchstens max_width
    """
    if math.isnan(footprint):
        return 0
    if math.isinf(footprint):
        return max_width if footprint > 0 else 0
    return max(0, min(math.floor(footprint), max_width))


class WeeklyLogStore:
    """
    Wochenlogs aller Nutzer.
    Die Map wird mit dem AppState geteilt. Änderungen sind sofort im Zustand.
    """

    def __init__(self, logs: Dict[str, List[float]]) -> None:
        self._logs = logs

    def parse_day(self, raw: str) -> int:
        """Tag 1..7 aus Text. Sonst ValidationError."""
        try:
            day = int(raw.strip())
        except ValueError:
            raise ValidationError(MSG_INVALID_DAY) from None
        if not (1 <= day <= DAYS_PER_WEEK):
            raise ValidationError(MSG_INVALID_DAY)
        return day

    def log_daily(self, username: str, day: int, footprint: str) -> float:
        """
        Setzt den Wert für einen Tag.
        Der letzte Eintrag pro Tag gewinnt.
        """
        if not (1 <= day <= DAYS_PER_WEEK):
            raise ValidationError(MSG_INVALID_DAY)
        try:
            value = parse_float(footprint)
        except ValueError:
            raise ValidationError(MSG_INVALID_FOOTPRINT) from None

        self._week_of(username)[day - 1] = value
        logger.debug("Logged %s for %s on day %d", value, username, day)
        return value

    def week(self, username: str) -> List[float]:
        """Kopie der 7 Werte."""
        return list(self._week_of(username))

    def chart_rows(self, username: str, max_width: int) -> List[ChartRow]:
        """Baut die 7 Zeilen (Montag..Sonntag) für das Diagramm."""
        return [
            ChartRow(day=day, bar_length=bar_length(value, max_width), footprint=value)
            for day, value in zip(DAYS, self._week_of(username))
        ]

    def _week_of(self, username: str) -> List[float]:
        """Log des Nutzers. Fehlt es, wird es mit Nullen angelegt."""
        if username not in self._logs:
            self._logs[username] = empty_week()
        return self._logs[username]


@dataclass(slots=True)
class AdminSession:
    """Sitzung eines Admins. Der Katalog lebt nur so lange wie die Sitzung."""
    username: str
    catalog: ResourceCatalog = field(default_factory=ResourceCatalog)

    @property
    def role(self) -> Role:
        return Role.Admin


@dataclass(slots=True)
class UserSession:
    """Sitzung eines Nutzers mit Zugriff auf die geteilten Wochenlogs."""
    username: str
    logs: WeeklyLogStore

    @property
    def role(self) -> Role:
        return Role.User


Session = Union[AdminSession, UserSession]


class CredentialStore:
    """
    Konten im Speicher (Klartext).
    - Admins werden zuerst geprüft, dann Nutzer.
    - Name und Passwort müssen exakt passen.
    """

    def __init__(self, state: AppState) -> None:
        self._state = state

    def needs_setup(self) -> bool:
        """Ersteinrichtung, wenn es weder Admins noch Nutzer gibt."""
        return not self._state.has_accounts()

    def register_admin(self, username: str, password: str) -> None:
        self._state.admin_accounts[username] = password

    def register_user(self, username: str, password: str) -> None:
        """Neuer Nutzer bekommt ein leeres Wochenlog."""
        self._state.user_accounts[username] = password
        self._state.user_logs[username] = empty_week()

    def authenticate(self, username: str, password: str) -> Optional[Session]:
        """Liefert die passende Sitzung oder None."""
        admins = self._state.admin_accounts
        if username in admins and admins[username] == password:
            logger.info("Admin %s logged in", username)
            return AdminSession(username=username)

        users = self._state.user_accounts
        if username in users and users[username] == password:
            logger.info("User %s logged in", username)
            return UserSession(username=username, logs=WeeklyLogStore(self._state.user_logs))

        logger.info("Failed login for %r", username)
        return None
