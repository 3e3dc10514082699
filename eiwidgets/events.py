"""Input events delivered to widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .geometry import Point


class EventType(enum.Enum):
    """Kind of an event."""

    NONE = enum.auto()
    APP = enum.auto()
    CLOSE = enum.auto()
    KEYDOWN = enum.auto()
    KEYUP = enum.auto()
    MOUSE_BUTTONDOWN = enum.auto()
    MOUSE_BUTTONUP = enum.auto()
    MOUSE_MOVE = enum.auto()


_MOUSE_TYPES = frozenset(
    {EventType.MOUSE_BUTTONDOWN, EventType.MOUSE_BUTTONUP, EventType.MOUSE_MOVE}
)


class MouseButton(enum.Enum):
    """Mouse button involved in an event."""

    NONE = enum.auto()
    LEFT = enum.auto()
    MIDDLE = enum.auto()
    RIGHT = enum.auto()


@dataclass(frozen=True)
class Event:
    """An input event with its parameters."""

    type: EventType
    where: Point | None = None
    button: MouseButton = MouseButton.NONE
    key_code: int | None = None
    modifiers: frozenset = field(default_factory=frozenset)
    user_param: object = None

    @property
    def is_mouse(self) -> bool:
        return self.type in _MOUSE_TYPES

    @classmethod
    def mouse(
        cls, kind: EventType, where: Point, button: MouseButton = MouseButton.NONE
    ) -> Event:
        """Build a mouse event at ``where``."""
        if kind not in _MOUSE_TYPES:
            raise ValueError(f"not a mouse event type: {kind!r}")
        return cls(type=kind, where=where, button=button)