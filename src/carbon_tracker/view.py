"""
UI layer für die Console

Diese View macht die komplette Ein- und Ausgabe.
- Menüs für Admin und User
- Ressourcen-Listen
- Wochendiagramm als ASCII-Tabelle
"""

from __future__ import annotations

from typing import Iterable, List

from .domain import Resource
from .service import ChartRow

CHART_BORDER = "+------------+------------------------------------+----------------+"
CHART_HEADER = "| Day        | Chart                              | Footprint (%)  |"


class ConsoleView:
    """
    View für die Konsole.
    Tests ersetzen prompt/show_message durch eine Skript-Variante.
    """

    def render_admin_menu(self) -> None:
        """Zeigt das Admin-Menü."""
        print()
        print("╔═══════════════════════════════════════╗")
        print("║            ADMIN MENU                 ║")
        print("╠═══════════════════════════════════════╣")
        print("║  1) Add Resource                      ║")
        print("║  2) View Resources                    ║")
        print("║  3) Update Resource                   ║")
        print("║  4) Search Resource                   ║")
        print("║  5) Exit                              ║")
        print("╚═══════════════════════════════════════╝")

    def render_user_menu(self) -> None:
        """Zeigt das User-Menü."""
        print()
        print("╔═══════════════════════════════════════╗")
        print("║            USER MENU                  ║")
        print("╠═══════════════════════════════════════╣")
        print("║  1) Log Daily Carbon Footprint        ║")
        print("║  2) View Weekly Carbon Footprint      ║")
        print("║  3) Save and Exit                     ║")
        print("╚═══════════════════════════════════════╝")

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def clear(self) -> None:
        """Leert das Terminal (ANSI)."""
        print("\033[2J\033[H", end="", flush=True)

    def render_resources(self, title: str, resources: Iterable[Resource]) -> None:
        """Überschrift plus eine Zeile pro Ressource."""
        self.show_message(f"\n{title}:")
        for r in resources:
            self.show_message(str(r))

    def render_weekly_chart(self, rows: List[ChartRow]) -> None:
        """
        Zeichnet das Wochendiagramm.
        Das '%' hinter dem Wert ist nur eine Beschriftung. Die Einheit ist CO2e.
        """
        self.show_message("\nWeekly Carbon Footprint Bar Chart:")
        for line in self._build_chart(rows):
            self.show_message(line)

    def _build_chart(self, rows: List[ChartRow]) -> List[str]:
        """
        Baut die Tabelle.
        Lange Balken sprengen die Spalte, werden aber nicht gekürzt.
        """
        lines = [CHART_BORDER, CHART_HEADER, CHART_BORDER]
        for row in rows:
            bar = "#" * row.bar_length
            lines.append(f"| {row.day:<10} | {bar:<35} | {row.footprint:14.1f}% |")
        lines.append(CHART_BORDER)
        return lines
