"""Argument models for the seven tools.

Field names follow the wire contract (``pokemon1_name``, ``attacking_type`` ...).
Levels are bounded here; the battle core trusts whatever reaches it.
"""
from __future__ import annotations
from typing import Annotated, Optional
from pydantic import BaseModel, Field

Level = Optional[Annotated[int, Field(ge=1, le=100)]]

class NoArgs(BaseModel):
    pass

class SpeciesLookupArgs(BaseModel):
    name: str = Field(min_length=1, description="Species name (case-insensitive)")
    level: Level = None

class RandomSpeciesArgs(BaseModel):
    level: Level = None

class StartBattleArgs(BaseModel):
    pokemon1_name: str = Field(min_length=1)
    pokemon2_name: str = Field(min_length=1)
    pokemon1_level: Level = None
    pokemon2_level: Level = None

class AttackArgs(BaseModel):
    attacker_name: str = Field(min_length=1, description="Combatant whose turn it is")
    move_name: str = Field(min_length=1, description="One of the attacker's assigned moves")

class TypeEffectivenessArgs(BaseModel):
    # matched case-insensitively against the chart by the service
    attacking_type: str = Field(min_length=1)
    defending_type: Optional[str] = None

__all__ = [
    "NoArgs", "SpeciesLookupArgs", "RandomSpeciesArgs", "StartBattleArgs",
    "AttackArgs", "TypeEffectivenessArgs",
]
