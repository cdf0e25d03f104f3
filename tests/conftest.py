from datetime import datetime

import pytest

from lucky_vault.scores import ScoreStore
from lucky_vault.session_log import SessionLog
from lucky_vault.words import WordStore


class ScriptedInput:
    """Feeds canned lines to the game, then behaves like a closed console."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


class FixedRandom:
    def __init__(self, index):
        self.index = index

    def randrange(self, stop):
        assert 0 <= self.index < stop
        return self.index


def fixed_clock():
    return datetime(2024, 3, 1, 12, 30, 45)


@pytest.fixture()
def words() -> WordStore:
    return WordStore.from_lines(["PERU", "CHAD"])


@pytest.fixture()
def scores(tmp_path) -> ScoreStore:
    return ScoreStore.load_or_init(tmp_path / "highscore.txt")


@pytest.fixture()
def log(tmp_path) -> SessionLog:
    return SessionLog(tmp_path / "logs", clock=fixed_clock)


@pytest.fixture()
def output():
    return []


@pytest.fixture()
def scripted():
    return ScriptedInput


@pytest.fixture()
def fixed_random():
    return FixedRandom
