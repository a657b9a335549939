"""Core framework components for BounceStack."""

from .events import EventBus, Event, EventType

__all__ = ["EventBus", "Event", "EventType"]
