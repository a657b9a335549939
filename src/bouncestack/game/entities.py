"""Game entities: the ball, the moving platform and the tower."""

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class Playfield:
    """Simulation area in world units, y grows downwards."""
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.width / 2


@dataclass
class Ball:
    """Bouncing ball. Only moves vertically."""
    x: float
    y: float
    radius: float
    dy: float
    gravity: float
    accelerated: bool = False
    spawn_y: float = 100.0
    spawn_dy: float = 2.0

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    @property
    def top(self) -> float:
        return self.y - self.radius

    def respawn(self, x: float) -> None:
        """Put the ball back at its spawn point."""
        self.x = x
        self.y = self.spawn_y
        self.dy = self.spawn_dy


@dataclass(frozen=True)
class LockedPlatform:
    """Snapshot of a platform after it was locked into the tower."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class Platform:
    """The current platform, sliding left and right until locked."""
    x: float
    y: float
    width: float
    height: float
    speed: float
    locked: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width

    def contains_x(self, x: float) -> bool:
        return self.x <= x <= self.right

    def snapshot(self) -> LockedPlatform:
        return LockedPlatform(x=self.x, y=self.y, width=self.width, height=self.height)


class Tower:
    """Append-only stack of locked platforms, bottom first."""

    def __init__(self, entries: Optional[List[LockedPlatform]] = None) -> None:
        self._entries: List[LockedPlatform] = []
        for entry in entries or []:
            self.append(entry)

    def append(self, entry: LockedPlatform) -> None:
        """Add a platform on top.

        Raises:
            ValueError: if the entry is not strictly above the current top
        """
        top = self.top
        if top is not None and entry.y >= top.y:
            raise ValueError(
                f"Tower entry at y={entry.y} is not above the top at y={top.y}"
            )
        self._entries.append(entry)

    @property
    def top(self) -> Optional[LockedPlatform]:
        """Most recently locked platform, or None for an empty tower."""
        return self._entries[-1] if self._entries else None

    @property
    def widths(self) -> List[float]:
        return [entry.width for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LockedPlatform]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> LockedPlatform:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"Tower({len(self._entries)} platforms, top={self.top})"
