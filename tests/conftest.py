import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from bird_flop.physics_engine import GameEngine
from bird_flop.session import SessionController


class FixedRandom(random.Random):
    """A random source that always returns the same value."""

    def __init__(self, value: float):
        super().__init__()
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, surface, engine, time_of_day, now_ms):
        self.frames.append(("draw", engine.bird.y))

    def draw_idle(self, surface, engine, time_of_day, now_ms):
        self.frames.append(("idle", engine.bird.y))


@pytest.fixture
def engine():
    return GameEngine(width=480, height=800, rng=random.Random(1234))


@pytest.fixture
def controller():
    return SessionController(480, 800, rng=random.Random(1234))
