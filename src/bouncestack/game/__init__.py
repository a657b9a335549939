"""Simulation: entities, physics, stacking and the game state."""

from bouncestack.game.entities import Ball, LockedPlatform, Platform, Playfield, Tower
from bouncestack.game.physics import BallStep, update_ball, update_platform
from bouncestack.game.stacking import LockOutcome, lock_platform, overlap, spawn_next_platform
from bouncestack.game.state import (
    GameState,
    Intent,
    IntentQueue,
    lock_and_advance,
    new_game,
    render,
    update,
)

__all__ = [
    # Entities
    "Ball",
    "LockedPlatform",
    "Platform",
    "Playfield",
    "Tower",
    # Physics
    "BallStep",
    "update_ball",
    "update_platform",
    # Stacking
    "LockOutcome",
    "lock_platform",
    "overlap",
    "spawn_next_platform",
    # State
    "GameState",
    "Intent",
    "IntentQueue",
    "lock_and_advance",
    "new_game",
    "render",
    "update",
]
