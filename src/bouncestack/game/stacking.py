"""Locking the current platform onto the tower."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from bouncestack.game.entities import LockedPlatform, Platform, Playfield, Tower
from bouncestack.settings import PlatformSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LockOutcome:
    """Result of locking a platform."""
    locked: LockedPlatform
    index: int
    degenerate: bool = False


def overlap(current: Platform, previous: LockedPlatform) -> Tuple[float, float]:
    """Horizontal intersection of two platforms.

    Returns:
        (left, width); width is zero or negative when they do not overlap
    """
    left = max(current.x, previous.x)
    right = min(current.right, previous.right)
    return left, right - left


def lock_platform(platform: Platform, tower: Tower) -> Optional[LockOutcome]:
    """Lock the platform, clip it to the tower top and push it on the tower.

    Does nothing and returns None if the platform is already locked.
    """
    if platform.locked:
        return None

    platform.locked = True
    degenerate = False

    previous = tower.top
    if previous is not None:
        left, width = overlap(platform, previous)
        if width > 0:
            platform.x = left
            platform.width = width
        else:
            platform.width = 0
            degenerate = True

    snapshot = platform.snapshot()
    tower.append(snapshot)

    if degenerate:
        logger.warning(f"Platform {len(tower) - 1} missed the tower (y={snapshot.y})")
    else:
        logger.info(
            f"Platform {len(tower) - 1} locked at x={snapshot.x:.1f} width={snapshot.width:.1f}"
        )

    return LockOutcome(locked=snapshot, index=len(tower) - 1, degenerate=degenerate)


def spawn_next_platform(
    tower: Tower,
    playfield: Playfield,
    settings: PlatformSettings,
    width: float,
) -> Platform:
    """Create the next moving platform one step above the tower top.

    An empty tower gets the base platform near the bottom edge. The new
    platform is centered and keeps the given width.
    """
    top = tower.top
    if top is None:
        y = playfield.height - settings.base_offset
    else:
        y = top.y - settings.step

    return Platform(
        x=(playfield.width - width) / 2,
        y=y,
        width=width,
        height=settings.height,
        speed=settings.speed,
    )
