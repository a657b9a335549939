"""Tests for the simulator keyboard mapping."""

import pytest

pygame = pytest.importorskip("pygame")

from bouncestack.core.events import Event, EventBus, EventType
from bouncestack.game.state import new_game
from bouncestack.simulator.window import SimulatorWindow


@pytest.fixture
def window(settings):
    window = SimulatorWindow(settings, new_game(settings), EventBus())
    window._running = True
    return window


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


def test_space_locks(window):
    window._handle_keydown(key_down(pygame.K_SPACE))

    assert len(window.event_bus.get_history(EventType.LOCK_TRIGGER)) == 1
    assert window._running


def test_down_accelerates_while_held(window):
    window._handle_keydown(key_down(pygame.K_DOWN))
    window._handle_keyup(key_up(pygame.K_DOWN))

    types = [event.type for event in window.event_bus.get_history()]
    assert types == [EventType.ACCELERATE_PRESS, EventType.ACCELERATE_RELEASE]


def test_space_release_is_ignored(window):
    window._handle_keyup(key_up(pygame.K_SPACE))

    assert window.event_bus.get_history() == []


@pytest.mark.parametrize("key", [pygame.K_q, pygame.K_ESCAPE])
def test_quit_keys_stop_the_window(window, key):
    window._handle_keydown(key_down(key))

    assert not window._running
    assert window.event_bus.get_history() == []


def test_keys_reach_the_game_state(window):
    window._wire_events()

    window._handle_keydown(key_down(pygame.K_DOWN))
    window._handle_keydown(key_down(pygame.K_SPACE))

    assert len(window.state.intents) == 2


def test_camera_shift_moves_surface(window):
    window._wire_events()

    window.event_bus.emit(Event(EventType.CAMERA_SHIFT, data={"offset": 50}))
    window._on_camera_shift(Event(EventType.CAMERA_SHIFT, data={"offset": 25}))

    assert window.surface.camera_offset == 75
