"""Shared fixtures for BounceStack tests."""

import pytest

from bouncestack.core.events import EventBus
from bouncestack.game.entities import Ball, Platform, Playfield
from bouncestack.game.state import new_game
from bouncestack.graphics.surface import BufferSurface
from bouncestack.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def playfield() -> Playfield:
    return Playfield(width=400, height=600)


@pytest.fixture
def ball() -> Ball:
    return Ball(x=200, y=100, radius=15, dy=2, gravity=0.5)


@pytest.fixture
def platform() -> Platform:
    return Platform(x=125, y=500, width=150, height=20, speed=3)


@pytest.fixture
def state(settings):
    return new_game(settings)


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def surface(settings) -> BufferSurface:
    return BufferSurface(int(settings.playfield.width), int(settings.playfield.height))
