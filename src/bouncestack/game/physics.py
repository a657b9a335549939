"""Per-tick kinematics for the ball and the moving platform.

One call advances one fixed tick. Velocities are in world units per tick,
so callers that want frame-rate independence run these from a fixed
timestep accumulator (see bouncestack.core.loop).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from bouncestack.game.entities import Ball, Platform, Playfield

logger = logging.getLogger(__name__)

# Fraction of speed kept after bouncing off the platform
BOUNCE_DAMPING = 0.9
# Gravity multiplier while the player holds accelerate
BOOST_FACTOR = 2.0


@dataclass
class BallStep:
    """What happened to the ball during one tick."""
    bounced: bool = False
    hit_ceiling: bool = False
    respawned: bool = False


def update_ball(
    ball: Ball,
    platform: Platform,
    playfield: Playfield,
    accelerated: Optional[bool] = None,
) -> BallStep:
    """Advance the ball by one tick and resolve its collisions.

    Args:
        ball: Ball to update in place
        platform: Current (unlocked) platform, the only collider
        playfield: Bounds for the ceiling and the respawn check
        accelerated: Override for ball.accelerated

    Returns:
        BallStep flags describing which collision branches fired
    """
    if accelerated is None:
        accelerated = ball.accelerated

    step = BallStep()

    ball.dy += ball.gravity * BOOST_FACTOR if accelerated else ball.gravity
    ball.y += ball.dy

    if (
        ball.bottom >= platform.y
        and platform.contains_x(ball.x)
        and ball.dy > 0
    ):
        ball.y = platform.y - ball.radius
        ball.dy = -ball.dy * BOUNCE_DAMPING
        step.bounced = True

    if ball.top < 0:
        ball.y = ball.radius
        ball.dy = -ball.dy
        step.hit_ceiling = True

    # Checked last so it wins over a bounce in the same tick
    if ball.top > playfield.height:
        ball.respawn(playfield.center_x)
        step.respawned = True
        logger.debug(f"Ball respawned at ({ball.x}, {ball.y})")

    return step


def update_platform(platform: Platform, playfield_width: float) -> None:
    """Slide the platform one tick, reversing at either wall.

    x is not clamped, so the platform may overshoot a wall by up to one
    speed unit before it turns around.
    """
    if platform.locked:
        return

    platform.x += platform.speed
    if platform.x <= 0 or platform.right >= playfield_width:
        platform.speed = -platform.speed
