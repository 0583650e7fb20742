import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest


class FakeInput:
    def __init__(self, held=(), closed=False):
        self.held = set(held)
        self.closed = closed

    def is_held(self, action):
        return action in self.held

    def close_requested(self):
        return self.closed


class FakeRng:
    """Returns scripted uniform draws; choice always picks the last option."""

    def __init__(self, uniforms=(0.0,)):
        self.uniforms = list(uniforms)

    def uniform(self, low, high):
        value = self.uniforms.pop(0) if len(self.uniforms) > 1 else self.uniforms[0]
        assert low <= value < high
        return value

    def choice(self, options):
        return options[-1]


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def fake_input():
    return FakeInput()


@pytest.fixture
def pygame_font():
    pygame.font.init()
    yield
    pygame.font.quit()
