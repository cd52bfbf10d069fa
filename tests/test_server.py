import asyncio

import anyio
import pytest
from mcp.server.fastmcp.exceptions import ToolError
from starlette.testclient import TestClient

from conftest import DummyRng
from pokearena import __version__
from pokearena.battle.service import BattleService
from pokearena.server import build_server, serve_both


def _call(mcp, name, args=None):
    result = asyncio.run(mcp.call_tool(name, args or {}))
    # newer FastMCP releases return (content, structured) pairs
    if isinstance(result, tuple):
        result = result[0]
    return "".join(c.text for c in result)


def test_server_lists_all_tools(settings, service):
    mcp = build_server(service=service, settings=settings)
    tools = {t.name: t for t in asyncio.run(mcp.list_tools())}
    assert set(tools) == {
        "list_all_pokemon", "get_pokemon_by_name", "get_random_pokemon",
        "start_battle", "attack", "get_battle_status", "get_type_effectiveness",
    }
    assert set(tools["start_battle"].inputSchema["required"]) == {"pokemon1_name", "pokemon2_name"}
    assert set(tools["attack"].inputSchema["required"]) == {"attacker_name", "move_name"}
    assert tools["get_type_effectiveness"].inputSchema["required"] == ["attacking_type"]


def test_type_lookup_ignores_case(settings, service):
    mcp = build_server(service=service, settings=settings)
    out = _call(mcp, "get_type_effectiveness", {"attacking_type": "Fire", "defending_type": "GRASS"})
    assert out == "fire → grass: 2× damage. Super effective!"
    out = _call(mcp, "get_type_effectiveness", {"attacking_type": "Ghost"})
    assert out.startswith("Effectiveness for ghost:")


def test_unknown_type_reaches_caller(settings, service):
    mcp = build_server(service=service, settings=settings)
    with pytest.raises(ToolError, match='Unknown type "plasma"'):
        _call(mcp, "get_type_effectiveness", {"attacking_type": "plasma"})
    with pytest.raises(ToolError, match='Unknown type "plasma"'):
        _call(mcp, "get_type_effectiveness", {"attacking_type": "fire", "defending_type": "Plasma"})


def test_battle_flow_over_mcp(settings):
    mcp = build_server(service=BattleService(rng=DummyRng()), settings=settings)
    with pytest.raises(ToolError, match="No active battle"):
        _call(mcp, "attack", {"attacker_name": "Mewtwo", "move_name": "Ice Beam"})
    out = _call(mcp, "start_battle", {"pokemon1_name": "mewtwo", "pokemon1_level": 100,
                                      "pokemon2_name": "Pikachu", "pokemon2_level": 5})
    assert out.startswith("Battle Started!") and out.endswith("Mewtwo will go first!")
    with pytest.raises(ToolError, match="It's Mewtwo's turn, not Pikachu's."):
        _call(mcp, "attack", {"attacker_name": "pikachu", "move_name": "Tackle"})
    out = _call(mcp, "attack", {"attacker_name": "MEWTWO", "move_name": "ice beam"})
    assert out.endswith("Pikachu fainted! Mewtwo wins!")
    assert _call(mcp, "get_battle_status").startswith("Battle Over — Turn 1")
    with pytest.raises(ToolError, match="No active battle"):
        _call(mcp, "attack", {"attacker_name": "Mewtwo", "move_name": "Ice Beam"})


def test_level_bounds_over_mcp(settings, service):
    mcp = build_server(service=service, settings=settings)
    with pytest.raises(ToolError):
        _call(mcp, "get_pokemon_by_name", {"name": "pikachu", "level": 0})
    assert _call(mcp, "get_pokemon_by_name", {"name": "PIKACHU", "level": 50}).startswith("Found Pikachu (Lv. 50)!")


def test_health_endpoint(settings, service):
    mcp = build_server(service=service, settings=settings)
    client = TestClient(mcp.streamable_http_app())
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "Pokemon MCP Server is running!"
    assert body["version"] == __version__
    assert body["endpoints"] == {"health": "GET /", "mcp": "POST,GET,DELETE /mcp"}


class FakeServer:
    def __init__(self, http_fails: bool):
        self.http_fails = http_fails
        self.stdio_done = False

    async def run_streamable_http_async(self):
        if self.http_fails:
            raise SystemExit(1)
        await anyio.sleep_forever()

    async def run_stdio_async(self):
        await anyio.sleep(0.01)
        self.stdio_done = True


def test_both_transports_fall_back_to_stdio(capsys):
    fake = FakeServer(http_fails=True)
    anyio.run(serve_both, fake)
    assert fake.stdio_done
    assert "HttpTransportFailed" in capsys.readouterr().err


def test_both_transports_stop_with_stdio():
    fake = FakeServer(http_fails=False)
    anyio.run(serve_both, fake)
    assert fake.stdio_done
