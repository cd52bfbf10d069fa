"""Runtime loader utilities for species data.

Provides cached access to the species catalog shipped in assets/species.json.
Entries are immutable; battle-ready copies are produced by pokearena.battle.factory.
"""
from __future__ import annotations
import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional, Tuple

from pokearena.core.paths import SPECIES_FILE
from pokearena.core.types import ElementType, normalize_type

class SpeciesNotFound(Exception):
    pass

@dataclass(frozen=True)
class BaseStats:
    hp: int
    attack: int
    defense: int
    speed: int

@dataclass(frozen=True)
class Species:
    id: int
    name: str
    types: Tuple[ElementType, ...]
    base_stats: BaseStats
    move_pool: Tuple[str, ...]

def _parse(raw: dict) -> Species:
    return Species(
        id=int(raw["id"]),
        name=raw["name"],
        types=tuple(normalize_type(t) for t in raw["types"]),
        base_stats=BaseStats(**raw["base_stats"]),
        move_pool=tuple(raw["move_pool"]),
    )

@lru_cache(maxsize=None)
def all_species() -> Tuple[Species, ...]:
    """Catalog order, as listed in the asset file."""
    return tuple(_parse(r) for r in json.loads(SPECIES_FILE.read_text(encoding="utf-8")))

@lru_cache(maxsize=None)
def _by_name() -> Dict[str, Species]:
    return {s.name.lower(): s for s in all_species()}

@lru_cache(maxsize=None)
def _by_id() -> Dict[int, Species]:
    return {s.id: s for s in all_species()}

def get_species(species_id: int) -> Species:
    try:
        return _by_id()[species_id]
    except KeyError:
        raise SpeciesNotFound(f"Species id {species_id} not found") from None

def find_by_name(name: str) -> Optional[Species]:
    return _by_name().get(str(name).strip().lower())

# Simple CLI for debugging
if __name__ == "__main__":
    import sys
    if len(sys.argv) == 2:
        q = sys.argv[1]
        res = get_species(int(q)) if q.isdigit() else find_by_name(q)
        print(res if res else f"Not found {q}")
    else:
        print(f"Loaded {len(all_species())} species")
