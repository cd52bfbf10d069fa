"""Battle session orchestration for a single 1v1 battle.

Holds at most one :class:`Battle`; ``start`` replaces whatever was there.
Every public call runs under one lock so concurrent callers still observe
strictly alternating turns.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal, Tuple
import threading
from .core import BattleCore, Battler, Move, DamageResult, Effect, classify_effectiveness
from .factory import battler_from_species
from pokearena.core.errors import NotFound, NoActiveBattle, WrongTurn, UnknownMove
from pokearena.core.logging import logger
from pokearena.data.loader import Species, find_by_name

Side = Literal["player1", "player2"]
BATTLE_MOVE_COUNT = 4
RANDOM_LEVEL_RANGE = (20, 70)  # randrange bounds: 20..69

def _other(side: Side) -> Side:
    return "player2" if side == "player1" else "player1"

def resolve_species(name: str) -> Species:
    sp = find_by_name(name)
    if sp is None:
        raise NotFound("Pokémon", name)
    return sp

@dataclass(frozen=True)
class HealthSnapshot:
    name: str
    current_hp: int
    max_hp: int

    @classmethod
    def of(cls, b: Battler) -> "HealthSnapshot":
        return cls(b.name, int(b.current_hp or 0), b.max_hp)

@dataclass
class Battle:
    player1: Battler
    player2: Battler
    turn: int = 1
    current: Side = "player1"
    active: bool = True
    winner: Optional[str] = None

    def side(self, which: Side) -> Battler:
        return self.player1 if which == "player1" else self.player2

    def actor(self) -> Battler:
        return self.side(self.current)

@dataclass(frozen=True)
class AttackReport:
    turn: int
    attacker: str
    defender: str
    move: Move
    defender_types: Tuple[str, ...]
    hit: bool
    damage: int
    effectiveness: float
    effect: Optional[Effect]
    stab: bool
    player1: HealthSnapshot
    player2: HealthSnapshot
    fainted: bool
    winner: Optional[str]
    next_actor: Optional[str]

@dataclass(frozen=True)
class BattleStatus:
    active: bool
    turn: int
    player1: HealthSnapshot
    player2: HealthSnapshot
    current: str
    winner: Optional[str]

class BattleSession:
    def __init__(self, core: Optional[BattleCore] = None):
        self.core = core or BattleCore()
        self.battle: Optional[Battle] = None
        self._lock = threading.Lock()

    @property
    def rng(self):
        return self.core.rng

    def random_level(self) -> int:
        return self.rng.randrange(*RANDOM_LEVEL_RANGE)

    def start(self, name1: str, name2: str, level1: Optional[int] = None, level2: Optional[int] = None) -> Battle:
        with self._lock:
            # resolve both before touching state
            sp1 = resolve_species(name1)
            sp2 = resolve_species(name2)
            lv1 = level1 if level1 is not None else self.random_level()
            lv2 = level2 if level2 is not None else self.random_level()
            b1 = battler_from_species(sp1, lv1, BATTLE_MOVE_COUNT, self.rng)
            b2 = battler_from_species(sp2, lv2, BATTLE_MOVE_COUNT, self.rng)
            first: Side = "player1" if b1.stats["speed"] >= b2.stats["speed"] else "player2"
            self.battle = Battle(player1=b1, player2=b2, current=first)
            logger.info("BattleStart", p1=b1.name, lv1=lv1, p2=b2.name, lv2=lv2, first=self.battle.actor().name)
            return self.battle

    def _resolve_attacker(self, battle: Battle, attacker_name: str) -> Side:
        wanted = attacker_name.strip().lower()
        matches = [s for s in ("player1", "player2") if battle.side(s).name.lower() == wanted]
        if not matches:
            raise NotFound("Pokémon", attacker_name, detail=f'"{attacker_name}" is not in the current battle')
        # mirror match: the name means whoever is due to act
        if battle.current in matches:
            return battle.current
        return matches[0]

    def attack(self, attacker_name: str, move_name: str) -> AttackReport:
        with self._lock:
            battle = self.battle
            if battle is None or not battle.active:
                raise NoActiveBattle()
            side = self._resolve_attacker(battle, attacker_name)
            attacker = battle.side(side)
            if side != battle.current:
                raise WrongTurn(battle.actor().name, attacker.name)
            move = attacker.find_move(move_name)
            if move is None:
                raise UnknownMove(attacker.name, move_name)
            defender = battle.side(_other(side))
            turn = battle.turn

            if not self.core.accuracy_check(move):
                battle.turn += 1
                battle.current = _other(battle.current)
                logger.info("AttackMissed", turn=turn, attacker=attacker.name, move=move.name)
                return self._report(battle, turn, attacker, defender, move, None)

            result = self.core.calc_damage(attacker, defender, move)
            self.core.apply_damage(defender, result.damage)
            logger.info("AttackResolved", turn=turn, attacker=attacker.name, move=move.name,
                        damage=result.damage, eff=result.effectiveness, hp=defender.current_hp)
            if defender.is_fainted():
                battle.active = False
                battle.winner = attacker.name
                logger.info("BattleEnded", turn=turn, winner=attacker.name, loser=defender.name)
            else:
                battle.turn += 1
                battle.current = _other(battle.current)
            return self._report(battle, turn, attacker, defender, move, result)

    def _report(self, battle: Battle, turn: int, attacker: Battler, defender: Battler,
                move: Move, result: Optional[DamageResult]) -> AttackReport:
        if result is None:
            eff = self.core.get_effectiveness(move.type, defender.types)
        else:
            eff = result.effectiveness
        return AttackReport(
            turn=turn,
            attacker=attacker.name,
            defender=defender.name,
            move=move,
            defender_types=tuple(defender.types),
            hit=result is not None,
            damage=result.damage if result else 0,
            effectiveness=eff,
            effect=classify_effectiveness(eff),
            stab=result.stab if result else move.type in attacker.types,
            player1=HealthSnapshot.of(battle.player1),
            player2=HealthSnapshot.of(battle.player2),
            fainted=defender.is_fainted(),
            winner=battle.winner,
            next_actor=battle.actor().name if battle.active else None,
        )

    def status(self) -> Optional[BattleStatus]:
        with self._lock:
            battle = self.battle
            if battle is None:
                return None
            return BattleStatus(
                active=battle.active,
                turn=battle.turn,
                player1=HealthSnapshot.of(battle.player1),
                player2=HealthSnapshot.of(battle.player2),
                current=battle.actor().name,
                winner=battle.winner,
            )

__all__ = ["BattleSession","Battle","AttackReport","BattleStatus","HealthSnapshot","resolve_species"]
