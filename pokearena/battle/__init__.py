"""
Battle system package.
Modules:
- core.py (type chart, Battler/Move, damage model)
- factory.py (stat scaling, battlers from species)
- session.py (single-battle turn state machine)
- service.py (operations used by the tool layer)
"""
from .service import BattleService
__all__ = ["BattleService"]
