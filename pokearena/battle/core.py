"""Battle core: type chart, combatant data classes and the damage model.

All randomness is drawn from ``BattleCore.rng`` so a seeded ``random.Random``
(or any object with ``random``/``uniform``/``randint``/``randrange``/``sample``)
makes every roll reproducible.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict, List, Literal
import math
import random

from pokearena.core.types import ElementType, normalize_type

# attacking type -> {defending type: multiplier}; omitted pairs are 1x
_TYPE_CHART: Dict[str, Dict[str, float]] = {
    "normal":  {"rock": 0.5, "ghost": 0.0, "steel": 0.5},
    "fire":    {"fire": 0.5, "water": 0.5, "grass": 2.0, "ice": 2.0, "bug": 2.0, "rock": 0.5, "dragon": 0.5, "steel": 2.0},
    "water":   {"fire": 2.0, "water": 0.5, "grass": 0.5, "ground": 2.0, "rock": 2.0, "dragon": 0.5},
    "electric":{"water": 2.0,"electric": 0.5,"grass": 0.5,"ground": 0.0,"flying": 2.0,"dragon": 0.5},
    "grass":   {"fire": 0.5, "water": 2.0, "grass": 0.5, "poison": 0.5, "ground": 2.0, "flying": 0.5, "bug": 0.5, "rock": 2.0, "dragon": 0.5, "steel": 0.5},
    "ice":     {"fire": 0.5,"water": 0.5,"grass": 2.0,"ice": 0.5,"ground": 2.0,"flying": 2.0,"dragon": 2.0,"steel": 0.5},
    "fighting":{"normal": 2.0,"ice": 2.0,"poison": 0.5,"flying": 0.5,"psychic": 0.5,"bug": 0.5,"rock": 2.0,"ghost": 0.0,"dark": 2.0,"steel": 2.0,"fairy": 0.5},
    "poison":  {"grass": 2.0,"poison": 0.5,"ground": 0.5,"rock": 0.5,"ghost": 0.5,"steel": 0.0,"fairy": 2.0},
    "ground":  {"fire": 2.0,"electric": 2.0,"grass": 0.5,"poison": 2.0,"flying": 0.0,"bug": 0.5,"rock": 2.0,"steel": 2.0},
    "flying":  {"electric": 0.5,"grass": 2.0,"fighting": 2.0,"bug": 2.0,"rock": 0.5,"steel": 0.5},
    "psychic": {"fighting": 2.0,"poison": 2.0,"psychic": 0.5,"dark": 0.0,"steel": 0.5},
    "bug":     {"fire": 0.5,"grass": 2.0,"fighting": 0.5,"poison": 0.5,"flying": 0.5,"psychic": 2.0,"ghost": 0.5,"dark": 2.0,"steel": 0.5,"fairy": 0.5},
    "rock":    {"fire": 2.0,"ice": 2.0,"fighting": 0.5,"ground": 0.5,"flying": 2.0,"bug": 2.0,"steel": 0.5},
    "ghost":   {"normal": 0.0,"psychic": 2.0,"ghost": 2.0,"dark": 0.5},
    "dragon":  {"dragon": 2.0,"steel": 0.5,"fairy": 0.0},
    "dark":    {"fighting": 0.5,"psychic": 2.0,"ghost": 2.0,"dark": 0.5,"fairy": 0.5},
    "steel":   {"fire": 0.5,"water": 0.5,"electric": 0.5,"ice": 2.0,"rock": 2.0,"steel": 0.5,"fairy": 2.0},
    "fairy":   {"fire": 0.5,"fighting": 2.0,"poison": 0.5,"dragon": 2.0,"dark": 2.0,"steel": 0.5},
}

STAB_MULTIPLIER = 1.5
RANDOM_RANGE = (0.85, 1.0)

Effect = Literal["super_effective", "not_very_effective", "no_effect"]

_EFFECT_TEXT = {
    "super_effective": "Super effective!",
    "not_very_effective": "Not very effective...",
    "no_effect": "No effect!",
}

def classify_effectiveness(mult: float) -> Optional[Effect]:
    """None means neutral (exactly 1x)."""
    if mult == 0:
        return "no_effect"
    if mult > 1:
        return "super_effective"
    if mult < 1:
        return "not_very_effective"
    return None

def effect_text(effect: Optional[Effect]) -> str:
    return _EFFECT_TEXT.get(effect, "") if effect else ""

def chart_entry(attacking: str, defending: str) -> float:
    return _TYPE_CHART[normalize_type(attacking)].get(normalize_type(defending), 1.0)

def chart_row(attacking: str) -> Dict[str, float]:
    """Non-neutral entries for one attacking type (copy)."""
    return dict(_TYPE_CHART[normalize_type(attacking)])

# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Move:
    name: str
    type: ElementType
    category: str  # physical | special
    power: int = 0
    accuracy: int = 100

@dataclass
class Battler:
    species_id: int
    name: str
    level: int
    types: Tuple[ElementType, ...]
    stats: Dict[str, int]  # hp / atk / def / speed
    moves: List[Move] = field(default_factory=list)
    status: str = "none"
    current_hp: Optional[int] = None  # lazily initialized to max HP

    def __post_init__(self):
        max_hp = int(self.stats.get("hp", 1))
        if self.current_hp is None:
            self.current_hp = max_hp
        self.current_hp = max(0, min(int(self.current_hp), max_hp))

    @property
    def max_hp(self) -> int:
        return int(self.stats["hp"])

    def is_fainted(self) -> bool:
        return (self.current_hp or 0) <= 0

    def find_move(self, name: str) -> Optional[Move]:
        wanted = name.strip().lower()
        for mv in self.moves:
            if mv.name.lower() == wanted:
                return mv
        return None

@dataclass(frozen=True)
class DamagePolicy:
    """Balance knobs applied on top of the base formula.

    Defaults keep battles multi-turn: the effectiveness product is capped at 2x
    before it multiplies damage, and the final figure is halved.
    """
    effectiveness_cap: Optional[float] = 2.0
    halve_damage: bool = True

@dataclass(frozen=True)
class DamageResult:
    damage: int
    stab: bool
    effectiveness: float         # raw chart product, used for reporting
    applied_multiplier: float    # after the policy cap
    random_factor: float

    @property
    def effect(self) -> Optional[Effect]:
        return classify_effectiveness(self.effectiveness)

class BattleCore:
    def __init__(self, rng: Optional[random.Random] = None, policy: Optional[DamagePolicy] = None):
        self.rng = rng or random.Random()
        self.policy = policy or DamagePolicy()

    # ------------------------------------------------------------------
    # Mechanics
    # ------------------------------------------------------------------
    def get_effectiveness(self, move_type: str, target_types: Tuple[str, ...]) -> float:
        mult = 1.0
        offense = _TYPE_CHART.get(move_type.lower(), {})
        for t in target_types:
            mult *= offense.get(t.lower(), 1.0)
        return mult

    def accuracy_check(self, move: Move) -> bool:
        # uniform [0, 100); a roll at or above accuracy misses
        return self.rng.random() * 100 < move.accuracy

    def calc_damage(self, user: Battler, target: Battler, move: Move) -> DamageResult:
        base = ((2 * user.level + 10) / 250) * (user.stats["atk"] / target.stats["def"]) * move.power + 2
        stab = move.type in user.types
        eff = self.get_effectiveness(move.type, target.types)
        cap = self.policy.effectiveness_cap
        applied = eff if cap is None else min(eff, cap)
        rand = self.rng.uniform(*RANDOM_RANGE)
        raw = base * (STAB_MULTIPLIER if stab else 1.0) * applied * rand
        if self.policy.halve_damage:
            raw /= 2
        return DamageResult(
            damage=max(0, math.floor(raw)),
            stab=stab,
            effectiveness=eff,
            applied_multiplier=applied,
            random_factor=rand,
        )

    def apply_damage(self, target: Battler, amount: int) -> int:
        """Subtract ``amount`` (floored at 0 HP); returns the new HP."""
        old = int(target.current_hp if target.current_hp is not None else target.max_hp)
        target.current_hp = max(0, old - int(amount))
        return target.current_hp

__all__ = [
    "BattleCore", "Battler", "Move", "DamagePolicy", "DamageResult",
    "classify_effectiveness", "effect_text", "chart_entry", "chart_row",
]
