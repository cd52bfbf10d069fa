"""Tool registry: name -> (argument model, handler) over one BattleService.

``Toolkit.call`` is the synchronous call/response boundary shared by the MCP
server and the interactive console. Handlers return rendered text; engine
errors propagate unchanged.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Type
from pydantic import BaseModel, ValidationError

from pokearena.battle.service import BattleService
from pokearena.core.errors import InvalidArguments, UnknownTool
from pokearena.core.logging import logger
from . import render
from .schemas import (
    NoArgs, SpeciesLookupArgs, RandomSpeciesArgs, StartBattleArgs,
    AttackArgs, TypeEffectivenessArgs,
)

@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    args_model: Type[BaseModel]
    handler: Callable[[BattleService, Any], str]

def _list_all(svc: BattleService, a: NoArgs) -> str:
    return render.species_list(svc.list_species())

def _get_by_name(svc: BattleService, a: SpeciesLookupArgs) -> str:
    return render.battler_card(svc.get_species(a.name, a.level), verb="Found")

def _get_random(svc: BattleService, a: RandomSpeciesArgs) -> str:
    return render.battler_card(svc.get_random_species(a.level), verb="Generated")

def _start(svc: BattleService, a: StartBattleArgs) -> str:
    battle = svc.start_battle(a.pokemon1_name, a.pokemon2_name, a.pokemon1_level, a.pokemon2_level)
    return render.battle_started(battle)

def _attack(svc: BattleService, a: AttackArgs) -> str:
    return render.attack_report(svc.attack(a.attacker_name, a.move_name))

def _status(svc: BattleService, a: NoArgs) -> str:
    return render.battle_status(svc.battle_status())

def _types(svc: BattleService, a: TypeEffectivenessArgs) -> str:
    return render.type_result(svc.type_effectiveness(a.attacking_type, a.defending_type))

TOOLS: List[ToolSpec] = [
    ToolSpec("list_all_pokemon",
             "List every species in the catalog with its types and base stats.",
             NoArgs, _list_all),
    ToolSpec("get_pokemon_by_name",
             "Look up a species by name (case-insensitive) and scale it to a level with 2-4 random moves.",
             SpeciesLookupArgs, _get_by_name),
    ToolSpec("get_random_pokemon",
             "Generate a random species at the given (or a random) level with 2-4 random moves.",
             RandomSpeciesArgs, _get_random),
    ToolSpec("start_battle",
             "Start a battle between two species, replacing any current battle. The faster one acts first.",
             StartBattleArgs, _start),
    ToolSpec("attack",
             "Execute an attack in the current battle. The attacker must be the Pokemon whose turn it is "
             "(determined by speed on turn 1, then alternating). Returns damage dealt, effectiveness, and "
             "updated HP for both Pokemon. If the defender faints, the battle ends.",
             AttackArgs, _attack),
    ToolSpec("get_battle_status",
             "Show the current turn and both combatants' HP.",
             NoArgs, _status),
    ToolSpec("get_type_effectiveness",
             "Query the type chart for one matchup, or list all non-neutral matchups of an attacking type.",
             TypeEffectivenessArgs, _types),
]

def _describe(err: ValidationError) -> str:
    parts = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {e.get('msg')}")
    return "; ".join(parts)

class Toolkit:
    def __init__(self, service: Optional[BattleService] = None):
        self.service = service or BattleService()
        self._tools: Dict[str, ToolSpec] = {t.name: t for t in TOOLS}

    def tools(self) -> List[ToolSpec]:
        return list(self._tools.values())

    def get(self, name: str) -> ToolSpec:
        entry = self._tools.get(name)
        if entry is None:
            raise UnknownTool(name)
        return entry

    def validate(self, name: str, args: Optional[Mapping[str, Any]] = None) -> BaseModel:
        entry = self.get(name)
        try:
            return entry.args_model.model_validate(dict(args or {}))
        except ValidationError as e:
            raise InvalidArguments(name, _describe(e)) from None

    def call(self, name: str, args: Optional[Mapping[str, Any]] = None) -> str:
        entry = self.get(name)
        parsed = self.validate(name, args)
        logger.debug("ToolCall", tool=name, args=parsed.model_dump(exclude_none=True))
        return entry.handler(self.service, parsed)

__all__ = ["Toolkit","ToolSpec","TOOLS"]
