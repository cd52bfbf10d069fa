"""
Centralized path helpers for the data assets shipped inside the package.
"""
from __future__ import annotations
from pathlib import Path

# This file lives at pokearena/core/paths.py
PACKAGE_ROOT = Path(__file__).resolve().parents[1]
ASSETS = PACKAGE_ROOT / "assets"
SPECIES_FILE = ASSETS / "species.json"
MOVES_FILE = ASSETS / "moves.json"
