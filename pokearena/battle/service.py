"""Battle service: the seven operations exposed by the tool layer.

Owns one :class:`BattleSession`; species lookups, random generation and
type-chart queries share the session's random source.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, List, Union
import random
from pokearena.core.logging import logger
from pokearena.core.types import ElementType, normalize_type
from pokearena.data.loader import Species, all_species
from .core import BattleCore, Battler, DamagePolicy, Effect, chart_entry, chart_row, classify_effectiveness
from .factory import battler_from_species
from .session import BattleSession, Battle, AttackReport, BattleStatus, resolve_species

LOOKUP_MOVE_RANGE = (2, 4)  # randint bounds, inclusive

@dataclass(frozen=True)
class TypeMatchup:
    attacking: ElementType
    defending: ElementType
    multiplier: float
    effect: Optional[Effect]

@dataclass(frozen=True)
class TypeBreakdown:
    attacking: ElementType
    super_effective: Tuple[str, ...]
    not_very_effective: Tuple[str, ...]
    no_effect: Tuple[str, ...]

class BattleService:
    def __init__(self, rng: Optional[random.Random] = None, policy: Optional[DamagePolicy] = None,
                 session: Optional[BattleSession] = None):
        self.session = session or BattleSession(BattleCore(rng, policy))

    @property
    def rng(self):
        return self.session.rng

    # ---------------- Lookups -----------------
    def list_species(self) -> Tuple[Species, ...]:
        return all_species()

    def _spawn(self, species: Species, level: Optional[int]) -> Battler:
        lv = level if level is not None else self.session.random_level()
        count = self.rng.randint(*LOOKUP_MOVE_RANGE)
        b = battler_from_species(species, lv, count, self.rng)
        logger.debug("SpeciesGenerated", name=b.name, level=lv, moves=len(b.moves))
        return b

    def get_species(self, name: str, level: Optional[int] = None) -> Battler:
        return self._spawn(resolve_species(name), level)

    def get_random_species(self, level: Optional[int] = None) -> Battler:
        return self._spawn(self.rng.choice(all_species()), level)

    # ---------------- Battle -----------------
    def start_battle(self, pokemon1_name: str, pokemon2_name: str,
                     pokemon1_level: Optional[int] = None, pokemon2_level: Optional[int] = None) -> Battle:
        return self.session.start(pokemon1_name, pokemon2_name, pokemon1_level, pokemon2_level)

    def attack(self, attacker_name: str, move_name: str) -> AttackReport:
        return self.session.attack(attacker_name, move_name)

    def battle_status(self) -> Optional[BattleStatus]:
        return self.session.status()

    # ---------------- Type chart -----------------
    def type_effectiveness(self, attacking_type: str,
                           defending_type: Optional[str] = None) -> Union[TypeMatchup, TypeBreakdown]:
        atk = normalize_type(attacking_type)
        if defending_type is not None:
            dfn = normalize_type(defending_type)
            mult = chart_entry(atk, dfn)
            return TypeMatchup(atk, dfn, mult, classify_effectiveness(mult))
        supers: List[str] = []
        nots: List[str] = []
        zeros: List[str] = []
        for t, m in chart_row(atk).items():
            if m > 1:
                supers.append(t)
            elif m == 0:
                zeros.append(t)
            elif m < 1:
                nots.append(t)
        return TypeBreakdown(atk, tuple(supers), tuple(nots), tuple(zeros))

__all__ = ["BattleService","TypeMatchup","TypeBreakdown"]
