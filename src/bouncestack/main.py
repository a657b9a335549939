"""
Main entry point for BounceStack.

Runs the pygame simulator, or a headless session when
BOUNCESTACK_ENV=headless.
"""

import asyncio
import logging
import sys
from itertools import islice
from pathlib import Path
from typing import Optional

from bouncestack.core.events import EventBus, EventType, lock_event
from bouncestack.core.loop import FixedScheduler, run
from bouncestack.game.state import GameState, IntentQueue, new_game
from bouncestack.graphics.surface import BufferSurface
from bouncestack.settings import Settings, get_settings


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure logging to the console and optionally a file."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        # Truncate on each run for fresh logs
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info(f"Logging to file: {log_file}")


def run_headless(settings: Settings) -> GameState:
    """Run a fixed number of frames without a display.

    With headless_lock_interval > 0 the platform is locked every that many
    frames, which is enough to watch the tower grow in the log.
    """
    logger = logging.getLogger(__name__)

    event_bus = EventBus()
    state = new_game(settings)
    surface = BufferSurface(int(settings.playfield.width), int(settings.playfield.height))

    IntentQueue(state).attach(event_bus)
    event_bus.subscribe(
        EventType.CAMERA_SHIFT,
        lambda event: surface.shift_camera(event.data.get("offset", 0.0)),
    )

    scheduler = FixedScheduler(settings.tick_seconds)
    interval = settings.headless_lock_interval
    frames = run(state, surface, scheduler, event_bus)

    for frame in islice(frames, settings.headless_frames):
        if interval and (frame.index + 1) % interval == 0:
            event_bus.emit(lock_event(source="headless"))

    logger.info(
        f"Headless run finished: {settings.headless_frames} frames, "
        f"{state.ticks} ticks, tower widths {state.tower.widths}"
    )
    return state


async def run_simulator(settings: Settings) -> None:
    """Run the pygame simulator."""
    from bouncestack.simulator.window import SimulatorWindow

    window = SimulatorWindow(settings=settings, state=new_game(settings))
    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug, settings.log_file)

    logger = logging.getLogger(__name__)
    logger.info("BounceStack starting...")

    try:
        if settings.is_simulator:
            logger.info("Running in simulator mode")
            logger.info("Controls: DOWN - accelerate, SPACE - lock platform, Q/ESC - quit")
            asyncio.run(run_simulator(settings))
        else:
            logger.info("Running headless")
            run_headless(settings)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("BounceStack stopped")


if __name__ == "__main__":
    main()
