"""MCP server exposing the battle tools over stdio, streamable HTTP, or both.

All tools share one BattleService, so a battle started by one client call is
the battle every later call sees.
"""
from typing import Annotated, Optional

import anyio
from mcp.server.fastmcp import FastMCP
from pydantic import Field
from starlette.requests import Request
from starlette.responses import JSONResponse

from pokearena import __version__
from pokearena.battle.service import BattleService
from pokearena.core.logging import logger
from pokearena.system.settings import Settings
from pokearena.tools.registry import Toolkit

SERVER_NAME = "pokearena"

LevelArg = Optional[Annotated[int, Field(ge=1, le=100, description="Level 1-100")]]

_TRANSPORT_NAMES = {"stdio": "stdio", "http": "streamable-http"}

def discovery(mcp: FastMCP) -> dict:
    return {
        "status": "Pokemon MCP Server is running!",
        "version": __version__,
        "endpoints": {
            "health": "GET /",
            "mcp": f"POST,GET,DELETE {mcp.settings.streamable_http_path}",
        },
    }

def build_server(service: Optional[BattleService] = None, settings: Optional[Settings] = None) -> FastMCP:
    settings = settings or Settings.load()
    if service is None:
        service = BattleService(policy=settings.damage_policy())
    kit = Toolkit(service)
    desc = {t.name: t.description for t in kit.tools()}
    mcp = FastMCP(SERVER_NAME, host=settings.data.host, port=settings.data.port)

    @mcp.tool(name="list_all_pokemon", description=desc["list_all_pokemon"])
    def list_all_pokemon() -> str:
        return kit.call("list_all_pokemon")

    @mcp.tool(name="get_pokemon_by_name", description=desc["get_pokemon_by_name"])
    def get_pokemon_by_name(name: str, level: LevelArg = None) -> str:
        return kit.call("get_pokemon_by_name", {"name": name, "level": level})

    @mcp.tool(name="get_random_pokemon", description=desc["get_random_pokemon"])
    def get_random_pokemon(level: LevelArg = None) -> str:
        return kit.call("get_random_pokemon", {"level": level})

    @mcp.tool(name="start_battle", description=desc["start_battle"])
    def start_battle(pokemon1_name: str, pokemon2_name: str,
                     pokemon1_level: LevelArg = None, pokemon2_level: LevelArg = None) -> str:
        return kit.call("start_battle", {
            "pokemon1_name": pokemon1_name, "pokemon2_name": pokemon2_name,
            "pokemon1_level": pokemon1_level, "pokemon2_level": pokemon2_level,
        })

    @mcp.tool(name="attack", description=desc["attack"])
    def attack(attacker_name: str, move_name: str) -> str:
        return kit.call("attack", {"attacker_name": attacker_name, "move_name": move_name})

    @mcp.tool(name="get_battle_status", description=desc["get_battle_status"])
    def get_battle_status() -> str:
        return kit.call("get_battle_status")

    @mcp.tool(name="get_type_effectiveness", description=desc["get_type_effectiveness"])
    def get_type_effectiveness(attacking_type: str, defending_type: Optional[str] = None) -> str:
        return kit.call("get_type_effectiveness", {"attacking_type": attacking_type, "defending_type": defending_type})

    @mcp.custom_route("/", methods=["GET"])
    async def health(request: Request) -> JSONResponse:
        return JSONResponse(discovery(mcp))

    return mcp

async def serve_both(mcp) -> None:
    """stdio plus HTTP; an HTTP startup failure leaves stdio running alone."""
    async def _http():
        try:
            await mcp.run_streamable_http_async()
        # uvicorn exits instead of raising when the port cannot be bound
        except (OSError, SystemExit) as e:
            logger.warn("HttpTransportFailed", error=str(e) or type(e).__name__, fallback="stdio")

    async with anyio.create_task_group() as tg:
        tg.start_soon(_http)
        await mcp.run_stdio_async()
        tg.cancel_scope.cancel()

def run(settings: Optional[Settings] = None):
    settings = settings or Settings.load()
    logger.set_level(settings.effective_log_level())  # type: ignore[arg-type]
    transport = settings.data.transport
    mcp = build_server(settings=settings)
    logger.info("ServerStart", version=__version__, transport=transport,
                host=settings.data.host, port=settings.data.port)
    if transport == "both":
        anyio.run(serve_both, mcp)
    else:
        mcp.run(transport=_TRANSPORT_NAMES[transport])  # type: ignore[arg-type]
