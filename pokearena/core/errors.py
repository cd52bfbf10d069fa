"""
Error classes for clearer exception sources.

Engine errors are caller-input errors: they are raised before any state is
touched, so a failed call leaves the battle exactly as it was.
"""
from __future__ import annotations

class ArenaError(Exception):
    pass

class NotFound(ArenaError):
    def __init__(self, kind: str, name: str, detail: str | None = None):
        super().__init__(detail or f'{kind} "{name}" not found')
        self.kind = kind
        self.name = name

class UnknownMove(ArenaError):
    def __init__(self, battler: str, move: str):
        super().__init__(f'{battler} doesn\'t know "{move}"')
        self.battler = battler
        self.move = move

class UnknownType(ArenaError):
    def __init__(self, type_name: str):
        super().__init__(f'Unknown type "{type_name}"')
        self.type_name = type_name

class NoActiveBattle(ArenaError):
    def __init__(self):
        super().__init__("No active battle. Use `start_battle` first.")

class WrongTurn(ArenaError):
    def __init__(self, expected: str, attempted: str):
        super().__init__(f"It's {expected}'s turn, not {attempted}'s.")
        self.expected = expected
        self.attempted = attempted

# Tool boundary
class InvalidArguments(ArenaError):
    def __init__(self, tool: str, detail: str):
        super().__init__(f"Invalid arguments for '{tool}': {detail}")
        self.tool = tool
        self.detail = detail

class UnknownTool(ArenaError):
    def __init__(self, tool: str):
        super().__init__(f'Tool "{tool}" not recognized')
        self.tool = tool
