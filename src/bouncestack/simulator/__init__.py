"""Desktop simulator (requires pygame)."""

from .window import SimulatorWindow, ClockScheduler

__all__ = ["SimulatorWindow", "ClockScheduler"]
