import pytest


class StubRandom:
    """Returns queued values from uniform() and records the bounds asked for."""

    def __init__(self, *values):
        self.values = list(values) or [0.0]
        self.calls = []

    def uniform(self, a, b):
        self.calls.append((a, b))
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


@pytest.fixture
def stub_rng():
    return StubRandom(50.0, -120.0, 199.0)


@pytest.fixture
def session(stub_rng):
    from session import GameSession
    return GameSession(400, 800, rng=stub_rng)
