import os
import random
import sys

import pytest

# Ensure the repo root (containing the `bubblepop` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from bubblepop.api import GameConfig
from bubblepop.store.highscores import HighScoreStore
from bubblepop.store.settings import SettingsStore


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def config():
    return GameConfig()


@pytest.fixture()
def area():
    return (480.0, 800.0)


@pytest.fixture()
def highscores(tmp_path):
    return HighScoreStore(tmp_path / "highscores.yaml")


@pytest.fixture()
def settings(tmp_path):
    return SettingsStore(tmp_path / "settings.yaml")
