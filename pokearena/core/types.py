"""Elemental types: the closed set, badge colors and short labels.

Anything arriving as free text goes through ``normalize_type`` first; the
rest of the engine only ever sees lowercase names from ``ELEMENT_TYPES``.
"""
from __future__ import annotations
from typing import Dict, Literal, Optional, Tuple, cast, get_args

from .errors import UnknownType

ElementType = Literal[
    "normal", "fire", "water", "electric", "grass", "ice",
    "fighting", "poison", "ground", "flying", "psychic", "bug",
    "rock", "ghost", "dragon", "dark", "steel", "fairy",
]
ELEMENT_TYPES: Tuple[str, ...] = get_args(ElementType)

def normalize_type(name: str) -> ElementType:
    t = str(name).strip().lower()
    if t not in ELEMENT_TYPES:
        raise UnknownType(t)
    return cast(ElementType, t)

TYPE_COLORS_HEX: Dict[str, str] = {
    "normal": "#A8A77A",
    "fire": "#EE8130",
    "water": "#6390F0",
    "electric": "#F7D02C",
    "grass": "#7AC74C",
    "ice": "#96D9D6",
    "fighting": "#C22E28",
    "poison": "#A33EA1",
    "ground": "#E2BF65",
    "flying": "#A98FF3",
    "psychic": "#F95587",
    "bug": "#A6B91A",
    "rock": "#B6A136",
    "ghost": "#735797",
    "dragon": "#6F35FC",
    "dark": "#705746",
    "steel": "#B7B7CE",
    "fairy": "#D685AD",
}

TYPE_ABBREVIATIONS: Dict[str, str] = {
    "normal": "NRM",
    "fire": "FIR",
    "water": "WTR",
    "grass": "GRS",
    "electric": "ELE",
    "ice": "ICE",
    "fighting": "FGT",
    "poison": "PSN",
    "ground": "GRN",
    "flying": "FLY",
    "psychic": "PSY",
    "bug": "BUG",
    "rock": "RCK",
    "ghost": "GHO",
    "dragon": "DRA",
    "dark": "DRK",
    "steel": "STL",
    "fairy": "FAI",
}

def type_abbreviation(type_name: str) -> str:
    return TYPE_ABBREVIATIONS.get(type_name.lower(), type_name[:3].upper())

def type_color(type_name: str) -> Optional[str]:
    return TYPE_COLORS_HEX.get(type_name.lower())

__all__ = [
    'ElementType','ELEMENT_TYPES','normalize_type',
    'TYPE_COLORS_HEX','TYPE_ABBREVIATIONS',
    'type_abbreviation','type_color',
]
