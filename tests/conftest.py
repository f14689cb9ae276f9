import matplotlib
import pytest

matplotlib.use("Agg")


class FixedRandom:
    """Stand-in for random.Random: first element for every choice, fixed draw for randint."""

    def __init__(self, draw=9):
        self.draw = draw

    def choice(self, seq):
        return seq[0]

    def randint(self, a, b):
        return self.draw


@pytest.fixture
def fixed_random():
    return FixedRandom
