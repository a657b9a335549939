"""Tests for locking platforms onto the tower."""

import random

import pytest

from bouncestack.game.entities import LockedPlatform, Platform, Tower
from bouncestack.game.stacking import lock_platform, overlap, spawn_next_platform


def moving(x, y, width=150.0):
    return Platform(x=x, y=y, width=width, height=20, speed=3)


class TestOverlap:

    def test_partial_overlap(self):
        left, width = overlap(moving(125, 500), LockedPlatform(100, 550, 150, 20))
        assert (left, width) == (125, 125)

    def test_contained(self):
        left, width = overlap(moving(120, 500, 50), LockedPlatform(100, 550, 150, 20))
        assert (left, width) == (120, 50)

    def test_disjoint_is_not_positive(self):
        _, width = overlap(moving(400, 500), LockedPlatform(0, 550, 150, 20))
        assert width <= 0

    def test_touching_edges_is_zero(self):
        _, width = overlap(moving(150, 500), LockedPlatform(0, 550, 150, 20))
        assert width == 0


class TestLockPlatform:

    def test_first_lock_keeps_platform(self):
        tower = Tower()
        platform = moving(37, 550)

        outcome = lock_platform(platform, tower)

        assert platform.locked
        assert outcome.index == 0
        assert not outcome.degenerate
        assert tower.top == LockedPlatform(37, 550, 150, 20)

    def test_clips_to_previous(self):
        tower = Tower([LockedPlatform(100, 550, 150, 20)])
        platform = moving(125, 500)

        outcome = lock_platform(platform, tower)

        assert outcome.locked == LockedPlatform(125, 500, 125, 20)
        assert (platform.x, platform.width) == (125, 125)
        assert len(tower) == 2

    def test_no_overlap_collapses_width(self):
        tower = Tower([LockedPlatform(0, 550, 150, 20)])
        platform = moving(400, 500)

        outcome = lock_platform(platform, tower)

        assert outcome.degenerate
        assert outcome.locked.width == 0
        assert tower.top.width == 0

    def test_second_lock_is_noop(self):
        tower = Tower([LockedPlatform(100, 550, 150, 20)])
        platform = moving(125, 500)

        lock_platform(platform, tower)
        entries = list(tower)

        assert lock_platform(platform, tower) is None
        assert list(tower) == entries

    def test_snapshot_is_detached(self):
        tower = Tower()
        platform = moving(10, 550)
        lock_platform(platform, tower)

        platform.x = 999

        assert tower.top.x == 10


class TestSpawn:

    def test_empty_tower_uses_base(self, playfield, settings):
        platform = spawn_next_platform(Tower(), playfield, settings.platform, 150)

        assert platform.y == 550
        assert platform.x == 125
        assert platform.speed == 3
        assert platform.height == 20
        assert not platform.locked

    def test_stacks_one_step_above_top(self, playfield, settings):
        tower = Tower([LockedPlatform(125, 500, 125, 20)])

        platform = spawn_next_platform(tower, playfield, settings.platform, 125)

        assert platform.y == 450
        assert platform.x == 137.5
        assert platform.width == 125

    def test_zero_width_is_centered(self, playfield, settings):
        platform = spawn_next_platform(Tower(), playfield, settings.platform, 0)

        assert platform.x == 200
        assert platform.width == 0


class TestTower:

    def test_rejects_entry_not_above_top(self):
        tower = Tower([LockedPlatform(0, 550, 150, 20)])

        with pytest.raises(ValueError):
            tower.append(LockedPlatform(0, 550, 150, 20))

    def test_iteration_is_bottom_first(self):
        entries = [LockedPlatform(0, 550 - 50 * i, 150, 20) for i in range(3)]
        tower = Tower(entries)

        assert list(tower) == entries
        assert tower[0].y == 550
        assert tower.top.y == 450


def test_widths_never_grow(playfield, settings):
    rng = random.Random(1234)
    tower = Tower()
    platform = spawn_next_platform(tower, playfield, settings.platform, settings.platform.width)

    for _ in range(40):
        platform.x = rng.uniform(-20, playfield.width)
        outcome = lock_platform(platform, tower)
        platform = spawn_next_platform(tower, playfield, settings.platform, outcome.locked.width)

    widths = tower.widths
    assert len(widths) == 40
    assert all(upper <= lower for lower, upper in zip(widths, widths[1:]))
    ys = [entry.y for entry in tower]
    assert all(lower - upper == settings.platform.step for lower, upper in zip(ys, ys[1:]))
