"""Happenings - spawn announcements as typed events."""

from happenings.emitter import EventEmitter
from happenings.engine import Happenings, create_happenings

__all__ = [
    "EventEmitter",
    "Happenings",
    "create_happenings",
]
