"""Runtime loader for move data.

Provides simple cached access to the move catalog in assets/moves.json.
"""
from __future__ import annotations
import json
from functools import lru_cache
from typing import Dict, Any, Tuple

from pokearena.core.paths import MOVES_FILE

@lru_cache(maxsize=None)
def _catalog() -> Tuple[Dict[str, Any], ...]:
    return tuple(json.loads(MOVES_FILE.read_text(encoding="utf-8")))

def all_moves() -> Tuple[Dict[str, Any], ...]:
    """Every move in catalog order (copies)."""
    return tuple(dict(m) for m in _catalog())

__all__ = ["all_moves"]
