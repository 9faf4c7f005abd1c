"""Input events delivered from the terminal: keys, mouse actions and quit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Optional


class Key(IntEnum):
    """Codes for special keys; printable keys use their character code."""

    TAB = 9
    ENTER = 10
    ESC = 27
    BACKSPACE = 127
    UP = 256
    DOWN = 257
    LEFT = 258
    RIGHT = 259
    DELETE = 330


class EventType(Enum):
    NONE = auto()
    KEY = auto()
    MOUSE = auto()
    QUIT = auto()


class MouseButton(IntEnum):
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2
    SCROLL_UP = 64
    SCROLL_DOWN = 65


class MouseAction(Enum):
    PRESS = auto()
    RELEASE = auto()
    DRAG = auto()


@dataclass(frozen=True)
class Event:
    """One input event; mouse coordinates are 0-based column and row."""

    type: EventType
    key: Optional[int] = None
    button: Optional[MouseButton] = None
    action: Optional[MouseAction] = None
    x: int = 0
    y: int = 0


def key_event(code: int) -> Event:
    """Build a key press event for ``code``."""
    return Event(EventType.KEY, key=int(code))


def mouse_event(button: MouseButton | int, action: MouseAction, x: int, y: int) -> Event:
    """Build a mouse event; raises ValueError for an unknown button."""
    return Event(
        EventType.MOUSE,
        button=MouseButton(button),
        action=MouseAction(action),
        x=x,
        y=y,
    )


def quit_event() -> Event:
    """Build an event asking the application to exit."""
    return Event(EventType.QUIT)