"""
Simulator window using pygame.

Owns the display clock, maps the keyboard to input events and presents
the frames produced by the frame driver.
"""

import pygame
import asyncio
import logging

from ..core.events import EventBus, EventType, Event, accelerate_event, lock_event
from ..core.loop import Scheduler, run as run_frames
from ..game.state import GameState, IntentQueue
from ..graphics.surface import BufferSurface
from ..settings import Settings

logger = logging.getLogger(__name__)


class ClockScheduler(Scheduler):
    """Waits on a pygame clock capped at the configured fps."""

    def __init__(self, fps: int) -> None:
        self.fps = fps
        self._clock = pygame.time.Clock()

    def wait_next_frame(self) -> float:
        return self._clock.tick(self.fps) / 1000.0

    def get_fps(self) -> float:
        return self._clock.get_fps()


class SimulatorWindow:
    """
    Desktop window running the game.

    Keyboard Mapping:
        DOWN ARROW: Accelerate the ball (held)
        SPACE: Lock the moving platform
        ESC / Q: Exit simulator
    """

    def __init__(
        self,
        settings: Settings,
        state: GameState,
        event_bus: EventBus | None = None
    ) -> None:
        self.settings = settings
        self.state = state
        self.event_bus = event_bus or EventBus()

        self.surface = BufferSurface(
            int(settings.playfield.width), int(settings.playfield.height)
        )
        self.intents = IntentQueue(state)

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._scheduler: ClockScheduler | None = None
        self._running = False

        logger.info("SimulatorWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.settings.window_title)

        scale = self.settings.window_scale
        size = (self.surface.width * scale, self.surface.height * scale)
        self._screen = pygame.display.set_mode(size, pygame.DOUBLEBUF)
        self._scheduler = ClockScheduler(self.settings.fps)

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _wire_events(self) -> None:
        self.intents.attach(self.event_bus)
        self.event_bus.subscribe(EventType.CAMERA_SHIFT, self._on_camera_shift)
        self.event_bus.subscribe(EventType.DEGENERATE_LOCK, self._on_degenerate_lock)

    def _on_camera_shift(self, event: Event) -> None:
        self.surface.shift_camera(event.data.get("offset", 0.0))

    def _on_degenerate_lock(self, event: Event) -> None:
        logger.warning(f"Tower collapsed to zero width at level {event.data.get('index')}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.KEYUP:
                self._handle_keyup(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.stop()
        elif key == pygame.K_DOWN:
            self.event_bus.emit(accelerate_event(True))
        elif key == pygame.K_SPACE:
            self.event_bus.emit(lock_event())

    def _handle_keyup(self, event: pygame.event.Event) -> None:
        """Handle key release."""
        if event.key == pygame.K_DOWN:
            self.event_bus.emit(accelerate_event(False))

    def _present(self) -> None:
        """Blit the frame buffer to the window."""
        if not self._screen:
            return

        frame = pygame.surfarray.make_surface(self.surface.buffer.swapaxes(0, 1))
        if self.settings.window_scale != 1:
            frame = pygame.transform.scale(frame, self._screen.get_size())
        self._screen.blit(frame, (0, 0))
        pygame.display.flip()

    async def run(self) -> None:
        """Main simulator loop."""
        self._init_pygame()
        self._wire_events()
        self._running = True

        logger.info("Simulator started")

        frames = run_frames(self.state, self.surface, self._scheduler, self.event_bus)
        for frame in frames:
            self._present()

            # Input lands between frames and is applied at the start of the next frame
            self._handle_events()
            if not self._running:
                break

            if self.settings.debug and frame.index % 300 == 0:
                logger.debug(
                    f"Frame {frame.index}: fps={self._scheduler.get_fps():.1f} "
                    f"tower={len(self.state.tower)}"
                )

            # Yield to other tasks
            await asyncio.sleep(0)

        self.event_bus.emit(Event(EventType.SHUTDOWN, source="simulator"))
        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        self.intents.detach()
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the simulator."""
        self._running = False
