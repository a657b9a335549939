"""BounceStack: land the ball, lock the platform, build the tower."""

__version__ = "0.1.0"
