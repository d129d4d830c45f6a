import pytest

from state.persistence import ScoreStore


class ScriptedRandom:
    """Randomness source that hands out a fixed list of colors in order."""

    def __init__(self, colors):
        self.colors = list(colors)
        self.calls = 0

    def choice(self, seq):
        color = self.colors[self.calls]
        self.calls += 1
        return color


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def store(tmp_path):
    return ScoreStore(tmp_path / "highscores.json")
