import pytest


class ScriptedRng:
    """Hands out a fixed sequence of characters, ignoring the alphabet."""

    def __init__(self, chars):
        self.chars = list(chars)
        self.calls = 0

    def choice(self, seq):
        char = self.chars[self.calls]
        self.calls += 1
        return char


class CyclingRng:
    """Alternates between the first two characters of the alphabet."""

    def __init__(self):
        self.calls = 0

    def choice(self, seq):
        char = seq[self.calls % 2]
        self.calls += 1
        return char


class StuckRng:
    """Always returns the first character of the alphabet."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def cycling_rng():
    return CyclingRng()


@pytest.fixture
def stuck_rng():
    return StuckRng()
