"""
carbon_tracker package

Konsolen-Anwendung für Umwelt-Ressourcen und den wöchentlichen CO2e-Fußabdruck.
Zwei Rollen: Admin (Ressourcen-Katalog) und User (Wochenlog).

Schichtenarchitektur:
- domain.py: Entitäten, Enums, Fehler
- persistence.py: Textdateien (Komma-getrennt)
- service.py: Anmeldung, Katalog, Wochenlog
- view.py: ASCII-Ausgabe
- controller.py: Menü-Orchestrierung
- config.py / logging_config.py: Einstellungen und Logging
- main.py: Einstiegspunkt
"""

__version__ = "1.0.0"
