from __future__ import annotations
import argparse
import random
import shlex
from typing import Any, Dict, List, Optional, Tuple

from pokearena import __version__
from pokearena.core.errors import ArenaError
from pokearena.core.logging import logger
from pokearena.system.settings import Settings, TRANSPORTS

HELP_LINES = [
    "list                          all species",
    "info NAME [LEVEL]             look up a species",
    "random [LEVEL]                generate a random species",
    "battle NAME1 NAME2 [L1] [L2]  start a battle",
    "attack NAME MOVE              attack (move names may contain spaces)",
    "status                        current battle status",
    "types ATTACKING [DEFENDING]   type chart lookup",
    "help / quit",
]

# tools whose output is followed by the battle panel
_BATTLE_TOOLS = {"start_battle", "attack", "get_battle_status"}

class CommandError(ArenaError):
    pass

def _level(tok: str) -> int:
    try:
        return int(tok)
    except ValueError:
        raise CommandError(f'Level must be a number, got "{tok}"') from None

def parse_command(line: str) -> Tuple[str, Dict[str, Any]]:
    """Translate a console line into (tool name, arguments).

    ``help`` and ``quit`` come back as pseudo-tools with no arguments.
    """
    try:
        words = shlex.split(line)
    except ValueError as e:
        raise CommandError(str(e)) from None
    if not words:
        return "help", {}
    cmd, rest = words[0].lower(), words[1:]
    if cmd in {"quit", "exit", "q"}:
        return "quit", {}
    if cmd in {"help", "?"}:
        return "help", {}
    if cmd == "list":
        return "list_all_pokemon", {}
    if cmd == "status":
        return "get_battle_status", {}
    if cmd == "info":
        if not 1 <= len(rest) <= 2:
            raise CommandError("usage: info NAME [LEVEL]")
        args: Dict[str, Any] = {"name": rest[0]}
        if len(rest) == 2:
            args["level"] = _level(rest[1])
        return "get_pokemon_by_name", args
    if cmd == "random":
        if len(rest) > 1:
            raise CommandError("usage: random [LEVEL]")
        return "get_random_pokemon", ({"level": _level(rest[0])} if rest else {})
    if cmd == "battle":
        if not 2 <= len(rest) <= 4:
            raise CommandError("usage: battle NAME1 NAME2 [L1] [L2]")
        args = {"pokemon1_name": rest[0], "pokemon2_name": rest[1]}
        if len(rest) >= 3:
            args["pokemon1_level"] = _level(rest[2])
        if len(rest) == 4:
            args["pokemon2_level"] = _level(rest[3])
        return "start_battle", args
    if cmd == "attack":
        if len(rest) < 2:
            raise CommandError("usage: attack NAME MOVE")
        return "attack", {"attacker_name": rest[0], "move_name": " ".join(rest[1:])}
    if cmd == "types":
        if not 1 <= len(rest) <= 2:
            raise CommandError("usage: types ATTACKING [DEFENDING]")
        args = {"attacking_type": rest[0]}
        if len(rest) == 2:
            args["defending_type"] = rest[1]
        return "get_type_effectiveness", args
    raise CommandError(f'Unknown command "{cmd}" (try help)')

def play(settings: Settings, seed: Optional[int] = None):
    from pokearena.battle.service import BattleService
    from pokearena.tools.registry import Toolkit
    from pokearena.ui import console as ui

    service = BattleService(rng=random.Random(seed), policy=settings.damage_policy())
    kit = Toolkit(service)
    ui.show_help(HELP_LINES)
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        try:
            tool, args = parse_command(line)
            if tool == "quit":
                break
            if tool == "help":
                ui.show_help(HELP_LINES)
                continue
            text = kit.call(tool, args)
        except ArenaError as e:
            ui.show_error(str(e))
            continue
        battle = service.session.battle if tool in _BATTLE_TOOLS else None
        ui.show_output(text, battle=battle, title=tool)
    print("Goodbye!")

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pokearena", description="Turn-based creature battle arena.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--log-level", choices=["DEBUG","INFO","WARN","ERROR"], help="override the configured log level")
    sub = p.add_subparsers(dest="command")
    serve = sub.add_parser("serve", help="run the MCP server (default)")
    serve.add_argument("--transport", choices=TRANSPORTS)
    serve.add_argument("--host")
    serve.add_argument("--port", type=int)
    pl = sub.add_parser("play", help="interactive console")
    pl.add_argument("--seed", type=int, help="seed the random source for a reproducible session")
    return p

def apply_overrides(settings: Settings, ns: argparse.Namespace) -> Settings:
    d = settings.data
    if ns.log_level:
        d.log_level = ns.log_level
        d.debug = True
    if getattr(ns, "transport", None):
        d.transport = ns.transport
    if getattr(ns, "host", None):
        d.host = ns.host
    if getattr(ns, "port", None):
        d.port = ns.port
    d.normalize()
    return settings

def main(argv: Optional[List[str]] = None):
    ns = build_parser().parse_args(argv)
    settings = apply_overrides(Settings.load(), ns)
    logger.set_level(settings.effective_log_level())  # type: ignore[arg-type]
    if ns.command == "play":
        play(settings, seed=ns.seed)
    else:
        from pokearena.server import run
        run(settings)

if __name__ == "__main__":
    main()
