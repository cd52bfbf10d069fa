# Ensure project root is on sys.path for tests
import sys, pathlib
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

import random
import pytest


class DummyRng:
    """Deterministic stand-in for random.Random.

    Every accuracy roll returns ``roll`` (0.0 always hits), damage rolls take
    the top of the range, sampling keeps catalog order.
    """
    def __init__(self, roll: float = 0.0):
        self.roll = roll
    def random(self): return self.roll
    def uniform(self, a, b): return b
    def randint(self, a, b): return b
    def randrange(self, a, b): return a
    def sample(self, population, k): return list(population)[:k]
    def choice(self, seq): return seq[0]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def dummy_rng():
    return DummyRng()


@pytest.fixture
def service(rng):
    from pokearena.battle.service import BattleService
    return BattleService(rng=rng)


@pytest.fixture
def sure_service(dummy_rng):
    """Service whose attacks always hit for maximum rolled damage."""
    from pokearena.battle.service import BattleService
    return BattleService(rng=dummy_rng)


@pytest.fixture
def settings(tmp_path):
    from pokearena.system.settings import Settings
    return Settings.load(path=tmp_path / "settings.json", env={})
