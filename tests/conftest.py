import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


class MemoryScores:
    """High score store kept in memory, recording every save."""

    def __init__(self, initial=0):
        self.initial = initial
        self.saved = []

    def load(self):
        return self.initial

    def save(self, score):
        self.saved.append(score)
        return True


class FakeSetTimer:
    """Stand-in for pygame.time.set_timer that records its calls."""

    def __init__(self):
        self.calls = []

    def __call__(self, event, millis, loops=0):
        self.calls.append((event, millis, loops))

    @property
    def scheduled(self):
        return [(event, millis) for event, millis, _ in self.calls if millis > 0]

    @property
    def cancelled(self):
        return [event for event, millis, _ in self.calls if millis == 0]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scores():
    return MemoryScores()


@pytest.fixture
def set_timer():
    return FakeSetTimer()


@pytest.fixture
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()
