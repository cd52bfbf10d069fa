"""Plain-text rendering of service results, as returned to tool callers."""
from __future__ import annotations
from typing import Iterable, Optional, Union

from pokearena.battle.core import Battler, effect_text
from pokearena.battle.service import TypeMatchup, TypeBreakdown
from pokearena.battle.session import Battle, AttackReport, BattleStatus, HealthSnapshot
from pokearena.data.loader import Species

def fmt_mult(x: float) -> str:
    return f"{x:g}"

def _title(s: str) -> str:
    return s[:1].upper() + s[1:]

def _hp_line(h: HealthSnapshot) -> str:
    return f"{h.name}: {h.current_hp}/{h.max_hp} HP"

def species_list(species: Iterable[Species]) -> str:
    lines = []
    for s in species:
        b = s.base_stats
        lines.append(f"{s.name} [{'/'.join(s.types)}] — HP{b.hp} ATK{b.attack} DEF{b.defense} SPD{b.speed}")
    return "Available Pokémon:\n" + "\n".join(lines)

def battler_card(b: Battler, verb: str = "Found") -> str:
    return "\n".join([
        f"{verb} {b.name} (Lv. {b.level})!",
        f"Types: {', '.join(b.types)}",
        f"HP: {b.current_hp}/{b.max_hp}",
        f"ATK:{b.stats['atk']} DEF:{b.stats['def']} SPD:{b.stats['speed']}",
        f"Moves: {', '.join(f'{m.name} ({m.type})' for m in b.moves)}",
    ])

def battle_started(battle: Battle) -> str:
    p1, p2 = battle.player1, battle.player2
    def roster(b: Battler) -> str:
        return f"{b.name}: HP {b.current_hp}/{b.max_hp} | Moves: {', '.join(m.name for m in b.moves)}"
    return "\n\n".join([
        "Battle Started!",
        f"{p1.name} (Lv. {p1.level}) vs {p2.name} (Lv. {p2.level})",
        roster(p1),
        roster(p2),
        f"{battle.actor().name} will go first!",
    ])

def attack_report(r: AttackReport) -> str:
    if not r.hit:
        return f"Turn {r.turn}: {r.attacker} used {r.move.name}... but it missed!"
    mv = r.move
    eff = f"- Type Effectiveness: {fmt_mult(r.effectiveness)}x"
    if r.effect:
        eff += f" ({effect_text(r.effect)})"
    lines = [
        f"Turn {r.turn}: {r.attacker} used {mv.name}!",
        "",
        "Combat Details:",
        f"- Move Type: {_title(mv.type)} ({mv.power} power, {mv.accuracy}% accuracy)",
        f"- Category: {_title(mv.category)}",
        f"- Defender Types: {', '.join(_title(t) for t in r.defender_types)}",
        eff,
        f"- STAB Bonus: {'Yes (1.5x)' if r.stab else 'No'}",
        f"- Damage Dealt: {r.damage}",
        "",
        f"{r.defender} took {r.damage} damage.",
        "",
        _hp_line(r.player1),
        _hp_line(r.player2),
    ]
    if r.fainted:
        lines += ["", f"{r.defender} fainted! {r.winner} wins!"]
    return "\n".join(lines)

def battle_status(st: Optional[BattleStatus]) -> str:
    if st is None:
        return "No active battle."
    header = "Battle Active" if st.active else "Battle Over"
    return "\n".join([f"{header} — Turn {st.turn}", _hp_line(st.player1), _hp_line(st.player2)])

def type_result(res: Union[TypeMatchup, TypeBreakdown]) -> str:
    if isinstance(res, TypeMatchup):
        return f"{res.attacking} → {res.defending}: {fmt_mult(res.multiplier)}× damage. {effect_text(res.effect)}".rstrip()
    parts = [f"Effectiveness for {res.attacking}:"]
    if res.super_effective:
        parts.append(f"• Super (×2): {', '.join(res.super_effective)}")
    if res.not_very_effective:
        parts.append(f"• Not very (×0.5): {', '.join(res.not_very_effective)}")
    if res.no_effect:
        parts.append(f"• No effect (×0): {', '.join(res.no_effect)}")
    return "\n".join(parts)

__all__ = [
    "species_list", "battler_card", "battle_started", "attack_report",
    "battle_status", "type_result", "fmt_mult",
]
