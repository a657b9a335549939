"""
Frame driver.

run() turns a game state into a lazy, endless sequence of rendered frames.
Simulation advances in fixed ticks from a time accumulator, so physics
does not depend on how fast frames are actually produced. The scheduler
decides how long to wait between frames, which lets tests run the game
without a display clock.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional
import logging

from bouncestack.core.events import EventBus, tick_event
from bouncestack.game.state import GameState, apply_intents, render, update
from bouncestack.graphics.surface import Surface

logger = logging.getLogger(__name__)


class Scheduler(ABC):
    """Source of frame timing."""

    @abstractmethod
    def wait_next_frame(self) -> float:
        """Wait for the next refresh and return the elapsed seconds."""
        ...


class FixedScheduler(Scheduler):
    """Reports a constant frame time without waiting."""

    def __init__(self, frame_seconds: float) -> None:
        if frame_seconds <= 0:
            raise ValueError(f"frame_seconds must be positive, got {frame_seconds}")
        self.frame_seconds = frame_seconds

    def wait_next_frame(self) -> float:
        return self.frame_seconds


class FixedTimestep:
    """Accumulates elapsed time and hands it out in whole ticks.

    At most max_steps ticks are released per frame; time beyond that is
    dropped so a long stall cannot snowball into ever longer frames.
    """

    def __init__(self, step: float, max_steps: int = 5) -> None:
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        self.step = step
        self.max_steps = max_steps
        self._accumulator = 0.0

    @property
    def pending(self) -> float:
        """Time accumulated but not yet simulated."""
        return self._accumulator

    def advance(self, elapsed: float) -> int:
        """Add elapsed seconds and return how many ticks to run now."""
        self._accumulator += max(0.0, elapsed)

        steps = 0
        while self._accumulator >= self.step and steps < self.max_steps:
            self._accumulator -= self.step
            steps += 1

        if steps == self.max_steps and self._accumulator >= self.step:
            logger.debug(f"Dropping {self._accumulator:.3f}s of simulation time")
            self._accumulator = 0.0

        return steps


@dataclass(frozen=True)
class Frame:
    """One rendered frame."""
    index: int
    steps: int
    surface: Surface


def run(
    state: GameState,
    surface: Surface,
    scheduler: Scheduler,
    bus: Optional[EventBus] = None,
) -> Iterator[Frame]:
    """Yield rendered frames forever.

    Each frame applies queued intents, runs the ticks owed by the
    accumulator, renders the state and then, when the next frame is
    requested, waits on the scheduler.
    The first frame always runs exactly one tick. Calling run() again
    starts a new sequence.
    """
    settings = state.settings
    timestep = FixedTimestep(settings.tick_seconds, settings.max_steps_per_frame)

    index = 0
    elapsed = timestep.step
    while True:
        # Input from between frames lands this frame even when it owes no ticks
        apply_intents(state, bus)

        steps = timestep.advance(elapsed)
        for _ in range(steps):
            update(state, bus)

        render(state, surface)

        if bus is not None:
            bus.emit(tick_event(index, steps))

        yield Frame(index=index, steps=steps, surface=surface)

        index += 1
        elapsed = scheduler.wait_next_frame()
