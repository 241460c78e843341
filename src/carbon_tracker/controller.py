"""
Controller layer

Der TrackerController steuert die App. Er verbindet Repository, Services und View.

Aufgaben:
- Konten und Wochenlogs laden
- Ersteinrichtung beim ersten Start
- Anmeldung (ohne Versuchslimit)
- Menü der Rolle anzeigen und Eingaben verarbeiten
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import AppConfig
from .domain import AppState, TrackerError
from .persistence import AccountRepository
from .service import AdminSession, CredentialStore, Session, UserSession
from .view import ConsoleView

logger = logging.getLogger(__name__)


class TrackerController:
    """
    Hauptcontroller für den Tracker.

    Der Zustand gehört dem Controller und wird an die Services weitergegeben.
    Gespeichert wird nur im User-Menü (Save and Exit) und bei der Ersteinrichtung.
    Der Ressourcen-Katalog des Admins wird nie gespeichert.
    """

    def __init__(
        self,
        repo: AccountRepository,
        view: ConsoleView,
        config: Optional[AppConfig] = None,
    ) -> None:
        self._repo = repo
        self._view = view
        self._config = config or AppConfig()
        self._state = AppState()
        self._credentials = CredentialStore(self._state)

    @property
    def state(self) -> AppState:
        return self._state

    def starte_app(self) -> None:
        """
        Startet die Anwendung.

        - Daten laden
        - ggf. Ersteinrichtung
        - Anmeldung
        - Menü der Rolle
        """
        self.load_state()

        if self._credentials.needs_setup():
            self.setup_accounts()

        session = self.login()

        # Geschlossene Menge an Sitzungen.
        if isinstance(session, AdminSession):
            self.run_admin_menu(session)
        elif isinstance(session, UserSession):
            self.run_user_menu(session)

    def load_state(self) -> None:
        """
        Lädt die Dateien.
        Bei einem Fehler bleibt der bis dahin gelesene Stand erhalten.
        Danach bekommt jeder Nutzer ein Wochenlog.
        """
        try:
            self._repo.load_into(self._state)
        except (OSError, ValueError) as e:
            logger.info("Loading data failed", exc_info=True)
            self._view.show_message(f"Error while loading data: {e}")

        added = self._state.reconcile_logs()
        if added:
            logger.debug("Created empty weekly logs for %s", ", ".join(added))

    def setup_accounts(self) -> None:
        """
        Ersteinrichtung: genau ein Admin und ein User.
        Beide Konten werden sofort gespeichert.
        """
        admin_name = self._view.prompt("Enter Admin Username: ")
        admin_password = self._view.prompt("Enter Admin Password: ")
        self._credentials.register_admin(admin_name, admin_password)
        self._view.clear()

        user_name = self._view.prompt("Enter User Username: ")
        user_password = self._view.prompt("Enter User Password: ")
        self._credentials.register_user(user_name, user_password)
        self._view.clear()

        self._repo.save_admin_accounts(self._state)
        self._repo.save_accounts_and_logs(self._state)
        logger.info("First-run setup completed")

    def login(self) -> Session:
        """
        Fragt so lange nach Name und Passwort, bis es passt.
        """
        self._view.show_message("Welcome to Environmental Resource Management System!")
        while True:
            username = self._view.prompt("Enter admin/user: ")
            password = self._view.prompt("Enter password: ")
            self._view.clear()

            session = self._credentials.authenticate(username, password)
            if session is not None:
                return session
            self._view.show_message("Invalid username or password. Try again.")

    # --- Admin ---

    def run_admin_menu(self, session: AdminSession) -> None:
        """Menü-Schleife für Admins. Endet mit '5'."""
        while True:
            self._view.render_admin_menu()
            choice = self._view.prompt("Enter your choice: ").strip()

            if choice == "1":
                self.add_resource(session)
            elif choice == "2":
                self.view_resources(session)
            elif choice == "3":
                self.update_resource(session)
            elif choice == "4":
                self.search_resource(session)
            elif choice == "5":
                break
            else:
                self._view.show_message("Invalid choice. Please try again.")

    def add_resource(self, session: AdminSession) -> None:
        """
        Legt eine Ressource an.
        Die ID wird geprüft, bevor Typ und Impact abgefragt werden.
        """
        catalog = session.catalog
        resource_id = self._view.prompt("Enter Resource ID: ")
        try:
            catalog.check_new_id(resource_id)
            resource_type = self._view.prompt("Enter Resource Type: ")
            impact = self._view.prompt("Enter Environmental Impact (CO2e): ")
            catalog.add(resource_id, resource_type, impact)
        except TrackerError as e:
            self._view.show_message(str(e))
            return

        self._view.show_message("Resource added successfully!")

    def view_resources(self, session: AdminSession) -> None:
        """Zeigt alle Ressourcen."""
        resources = session.catalog.all()
        if not resources:
            self._view.show_message("No resources available.")
            return
        self._view.render_resources("Resources", resources)

    def update_resource(self, session: AdminSession) -> None:
        """Ändert Typ und Impact einer Ressource."""
        catalog = session.catalog
        resource_id = self._view.prompt("Enter Resource ID to update: ")
        try:
            catalog.get(resource_id)
            new_type = self._view.prompt("Enter new Resource Type: ")
            new_impact = self._view.prompt("Enter new Environmental Impact (CO2e): ")
            catalog.update(resource_id, new_type, new_impact)
        except TrackerError as e:
            self._view.show_message(str(e))
            return

        self._view.show_message("Resource updated successfully!")

    def search_resource(self, session: AdminSession) -> None:
        """Sucht Ressourcen nach Typ (Teiltext, ohne Groß/Klein)."""
        search_type = self._view.prompt("Enter Resource Type to search: ")
        found = session.catalog.search(search_type)
        if not found:
            self._view.show_message("No matching resources found.")
            return
        self._view.render_resources("Search results", found)

    # --- User ---

    def run_user_menu(self, session: UserSession) -> None:
        """Menü-Schleife für Nutzer. Endet mit '3' (speichern)."""
        while True:
            self._view.render_user_menu()
            choice = self._view.prompt("Enter your choice: ").strip()

            if choice == "1":
                self.log_daily_footprint(session)
            elif choice == "2":
                self.display_weekly_footprint(session)
            elif choice == "3":
                self.save_and_exit()
                break
            else:
                self._view.show_message("Invalid choice. Please try again.")

    def log_daily_footprint(self, session: UserSession) -> None:
        """Trägt einen Tageswert ein. Erst Tag, dann Wert."""
        raw_day = self._view.prompt("Enter day of the week (1=Monday, ..., 7=Sunday): ")
        try:
            day = session.logs.parse_day(raw_day)
            footprint = self._view.prompt("Enter your carbon footprint (CO2e): ")
            session.logs.log_daily(session.username, day, footprint)
        except TrackerError as e:
            self._view.show_message(str(e))
            return

        self._view.show_message("Carbon footprint logged successfully!")

    def display_weekly_footprint(self, session: UserSession) -> None:
        """Zeigt das Wochendiagramm des angemeldeten Nutzers."""
        rows = session.logs.chart_rows(session.username, self._config.chart_max_width)
        self._view.render_weekly_chart(rows)

    def save_and_exit(self) -> None:
        """
        Speichert die Wochenlogs aller Nutzer.
        Ein Schreibfehler wird gemeldet, das Programm endet trotzdem.
        """
        self._view.show_message("Saving your data...")
        try:
            self._repo.save_logs(self._state)
        except OSError as e:
            logger.error("Saving weekly logs failed: %s", e)
            self._view.show_message(f"Error while saving data: {e}")
            return
        self._view.show_message("Data saved successfully! Exiting...")
