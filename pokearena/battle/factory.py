"""Factory helpers for constructing Battler instances from species data.

Shared across battle service, session tests, etc.
"""
from __future__ import annotations
import random
from typing import Dict, List, Optional
from .core import Battler, Move
from pokearena.data.loader import Species, BaseStats
from pokearena.data.moves import all_moves

def derive_stat(base: int, level: int, is_hp: bool = False) -> int:
    if is_hp:
        return int(((2*base)*level)/100 + level + 10)
    return int(((2*base)*level)/100 + 5)

def derive_stats(base: BaseStats, level: int) -> Dict[str,int]:
    return {
        "hp": derive_stat(base.hp, level, is_hp=True),
        "atk": derive_stat(base.attack, level),
        "def": derive_stat(base.defense, level),
        "speed": derive_stat(base.speed, level),
    }

def learnable_moves(species: Species) -> List[Move]:
    """Catalog moves named in the species pool, in catalog order."""
    pool = {n.lower() for n in species.move_pool}
    return [
        Move(name=md["name"], type=md["type"], category=md["category"],
             power=int(md.get("power") or 0), accuracy=int(md.get("accuracy", 100)))
        for md in all_moves() if md["name"].lower() in pool
    ]

def battler_from_species(species: Species, level: int, move_count: int = 4,
                         rng: Optional[random.Random] = None) -> Battler:
    rng = rng or random.Random()
    available = learnable_moves(species)
    k = max(0, min(move_count, len(available)))
    moves = rng.sample(available, k) if k else []
    return Battler(
        species_id=species.id,
        name=species.name,
        level=level,
        types=tuple(species.types),
        stats=derive_stats(species.base_stats, level),
        moves=moves,
    )

__all__ = ["battler_from_species","derive_stats","derive_stat","learnable_moves"]
