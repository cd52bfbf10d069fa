from rich.console import Console

from pokearena.battle.session import BattleSession
from pokearena.battle.core import BattleCore
from pokearena.ui import console as ui
from conftest import DummyRng


def test_hp_bar_fill():
    bar = ui.hp_bar(12, 24, width=10)
    assert bar.plain == "[█████░░░░░] 12/24"
    assert ui.hp_bar(0, 24, width=4).plain == "[░░░░] 0/24"


def test_hp_color_gradient():
    assert ui.hp_color(100, 100) == ui.GREEN
    assert ui.hp_color(50, 100) == ui.YELLOW
    assert ui.hp_color(0, 100) == ui.RED


def test_battle_panel_renders(monkeypatch):
    s = BattleSession(BattleCore(DummyRng()))
    s.start("Pikachu", "Squirtle", 50, 50)
    rec = Console(record=True, width=100)
    monkeypatch.setattr(ui, "console", rec)
    ui.show_output("Battle Started!", battle=s.battle, title="start_battle")
    text = rec.export_text()
    assert "Battle Started!" in text
    assert "Turn 1" in text
    assert "ELE" in text and "WTR" in text
    assert "95/95" in text
