"""Rich rendering for the interactive console.

Tool output is shown verbatim inside a panel; while a battle exists a second
panel shows both combatants with type badges and HP bars.
"""
from __future__ import annotations
from typing import Optional, Tuple

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text
from rich.table import Table
from rich.box import ROUNDED, HEAVY

from pokearena.battle.core import Battler
from pokearena.battle.session import Battle
from pokearena.core.types import type_abbreviation, type_color

console = Console()

GREEN = (46, 204, 113)
YELLOW = (241, 196, 15)
RED = (231, 76, 60)

def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t

def _mix(c1: Tuple[int,int,int], c2: Tuple[int,int,int], t: float) -> Tuple[int,int,int]:
    return (int(_lerp(c1[0], c2[0], t)), int(_lerp(c1[1], c2[1], t)), int(_lerp(c1[2], c2[2], t)))

def hp_color(cur: int, max_hp: int) -> Tuple[int,int,int]:
    """green above half, blending to yellow, then to red near zero"""
    ratio = max(0, min(cur, max_hp)) / max(max_hp, 1)
    if ratio >= 0.5:
        return _mix(YELLOW, GREEN, (ratio - 0.5) / 0.5)
    return _mix(RED, YELLOW, ratio / 0.5)

def hp_bar(cur: int, max_hp: int, width: int = 24) -> Text:
    if max_hp <= 0:
        max_hp = 1
    cur = max(0, min(cur, max_hp))
    filled = max(0, min(int(round(cur / max_hp * width)), width))
    r, g, b = hp_color(cur, max_hp)
    bar = Text("[")
    bar.append("█" * filled, style=f"rgb({r},{g},{b})")
    bar.append("░" * (width - filled), style="grey50")
    bar.append(f"] {cur}/{max_hp}")
    return bar

def type_badges(types: Tuple[str, ...]) -> Text:
    badges = Text()
    for i, t in enumerate(types):
        if i:
            badges.append("/")
        badges.append(type_abbreviation(t), style=type_color(t) or "")
    return badges

def _battler_row(b: Battler, acting: bool) -> Tuple[Text, Text, Text]:
    name = Text(("▶ " if acting else "  ") + f"{b.name} Lv{b.level}", style="bold" if acting else "")
    return name, type_badges(b.types), hp_bar(int(b.current_hp or 0), b.max_hp)

def battle_panel(battle: Battle) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column()
    table.add_column()
    table.add_column()
    for side in ("player1", "player2"):
        b = battle.side(side)  # type: ignore[arg-type]
        table.add_row(*_battler_row(b, battle.active and battle.current == side))
    if battle.active:
        title = f"Turn {battle.turn}"
    else:
        title = f"Battle Over · {battle.winner} wins"
    return Panel(table, title=title, box=HEAVY, expand=False)

def show_output(text: str, battle: Optional[Battle] = None, title: Optional[str] = None):
    parts = [Panel(Text(text), title=title, box=ROUNDED, expand=False)]
    if battle is not None:
        parts.append(battle_panel(battle))
    console.print(Group(*parts))

def show_error(msg: str):
    console.print(Text(msg, style="bold red"))

def show_help(lines):
    console.print(Panel(Text("\n".join(lines)), title="Commands", box=ROUNDED, expand=False))
