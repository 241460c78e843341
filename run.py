"""
Startskript für den Carbon-Footprint-Tracker.

Dieses Skript ermöglicht den Start mit:
    python run.py
    oder je nach installation python3 run.py

Es fügt das src-Verzeichnis zum Python-Pfad hinzu.
So kann die Anwendung ohne Installation ausgeführt werden.
Die Datendateien landen im aktuellen Arbeitsverzeichnis.
"""
from __future__ import annotations

import sys
from pathlib import Path

# Stelle sicher, dass "src" im sys.path ist
repo_root = Path(__file__).resolve().parent
src_path = repo_root / "src"
sys.path.insert(0, str(src_path))

from carbon_tracker.main import main

if __name__ == "__main__":
    main()
