"""
Game state and the step/render functions that drive it.

Input never touches the state directly. Input events are turned into
intents by IntentQueue and update() applies them at the start of the
next tick, so the simulation has a single writer.
"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Deque, List, Optional
import logging

from bouncestack.core.events import Event, EventBus, EventType
from bouncestack.game.entities import Ball, Platform, Playfield, Tower
from bouncestack.game.physics import BallStep, update_ball, update_platform
from bouncestack.game.stacking import LockOutcome, lock_platform, spawn_next_platform
from bouncestack.graphics.primitives import Color
from bouncestack.graphics.surface import Surface
from bouncestack.settings import Settings

logger = logging.getLogger(__name__)

BACKGROUND: Color = (0, 0, 0)
BALL_COLOR: Color = (255, 0, 0)
PLATFORM_COLOR: Color = (0, 0, 255)


class Intent(Enum):
    """Player intents, applied in arrival order."""
    ACCELERATE_ON = auto()
    ACCELERATE_OFF = auto()
    LOCK = auto()


@dataclass
class GameState:
    """Everything the simulation reads and writes."""
    settings: Settings
    playfield: Playfield
    ball: Ball
    platform: Platform
    tower: Tower = field(default_factory=Tower)
    intents: Deque[Intent] = field(default_factory=deque)
    ticks: int = 0


class IntentQueue:
    """Turns input events into intents on a game state."""

    EVENT_INTENTS = {
        EventType.ACCELERATE_PRESS: Intent.ACCELERATE_ON,
        EventType.ACCELERATE_RELEASE: Intent.ACCELERATE_OFF,
        EventType.LOCK_TRIGGER: Intent.LOCK,
    }

    def __init__(self, state: GameState) -> None:
        self.state = state
        self._unsubscribers: List[Callable[[], None]] = []

    def attach(self, bus: EventBus) -> None:
        """Start listening to input events on the bus."""
        for event_type in self.EVENT_INTENTS:
            self._unsubscribers.append(bus.subscribe(event_type, self.on_event))

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def on_event(self, event: Event) -> None:
        intent = self.EVENT_INTENTS.get(event.type)
        if intent is not None:
            self.state.intents.append(intent)


def new_game(settings: Settings) -> GameState:
    """Build the initial state: ball at its spawn point, base platform moving."""
    playfield = Playfield(settings.playfield.width, settings.playfield.height)

    ball = Ball(
        x=playfield.center_x,
        y=settings.ball.spawn_y,
        radius=settings.ball.radius,
        dy=settings.ball.spawn_dy,
        gravity=settings.ball.gravity,
        spawn_y=settings.ball.spawn_y,
        spawn_dy=settings.ball.spawn_dy,
    )

    tower = Tower()
    platform = spawn_next_platform(tower, playfield, settings.platform, settings.platform.width)

    return GameState(
        settings=settings,
        playfield=playfield,
        ball=ball,
        platform=platform,
        tower=tower,
    )


def lock_and_advance(state: GameState, bus: Optional[EventBus] = None) -> Optional[LockOutcome]:
    """Lock the current platform and spawn the next one.

    Emits PLATFORM_LOCKED and CAMERA_SHIFT for every lock, and
    DEGENERATE_LOCK when the platform missed the tower entirely.
    Returns None if the current platform was already locked.
    """
    outcome = lock_platform(state.platform, state.tower)
    if outcome is None:
        return None

    locked = outcome.locked
    if bus is not None:
        bus.emit(Event(
            EventType.PLATFORM_LOCKED,
            data={"x": locked.x, "y": locked.y, "width": locked.width, "index": outcome.index},
            source="stacking",
        ))
        if outcome.degenerate:
            bus.emit(Event(
                EventType.DEGENERATE_LOCK,
                data={"index": outcome.index, "y": locked.y},
                source="stacking",
            ))
        bus.emit(Event(
            EventType.CAMERA_SHIFT,
            data={"offset": state.settings.platform.camera_shift},
            source="stacking",
        ))

    state.platform = spawn_next_platform(
        state.tower, state.playfield, state.settings.platform, locked.width
    )
    return outcome


def apply_intents(state: GameState, bus: Optional[EventBus] = None) -> None:
    """Drain queued intents into the state."""
    while state.intents:
        intent = state.intents.popleft()
        if intent is Intent.ACCELERATE_ON:
            state.ball.accelerated = True
        elif intent is Intent.ACCELERATE_OFF:
            state.ball.accelerated = False
        elif intent is Intent.LOCK:
            lock_and_advance(state, bus)


def update(state: GameState, bus: Optional[EventBus] = None) -> BallStep:
    """Advance the game by one tick."""
    apply_intents(state, bus)

    step = update_ball(state.ball, state.platform, state.playfield)
    update_platform(state.platform, state.playfield.width)

    state.ticks += 1
    return step


def render(state: GameState, surface: Surface) -> None:
    """Draw the whole scene: ball, current platform, then the tower."""
    playfield = state.playfield
    surface.clear_surface(playfield.width, playfield.height, BACKGROUND)

    ball = state.ball
    surface.draw_circle(ball.x, ball.y, ball.radius, BALL_COLOR)

    platform = state.platform
    surface.draw_rect(platform.x, platform.y, platform.width, platform.height, PLATFORM_COLOR)

    for locked in state.tower:
        surface.draw_rect(locked.x, locked.y, locked.width, locked.height, PLATFORM_COLOR)
