"""Timing helpers, easing curves and time-based property animations."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator

Clock = Callable[[], int]
EasingFn = Callable[[float], float]

MICROSECONDS_PER_SECOND = 1_000_000


def get_time_us() -> int:
    """Return the current wall-clock time in microseconds."""
    return time.time_ns() // 1000


def delta_time(start_us: int, end_us: int) -> float:
    """Return the time between two microsecond timestamps, in seconds."""
    return (end_us - start_us) / MICROSECONDS_PER_SECOND


def ease_linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2.0 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return -1.0 + (4.0 - 2.0 * t) * t


class Easing(Enum):
    """Named easing curves."""

    LINEAR = "linear"
    IN = "in"
    OUT = "out"
    IN_OUT = "in_out"


_EASING_FUNCTIONS: dict[Easing, EasingFn] = {
    Easing.LINEAR: ease_linear,
    Easing.IN: ease_in,
    Easing.OUT: ease_out,
    Easing.IN_OUT: ease_in_out,
}


def get_easing_function(easing: Easing) -> EasingFn:
    """Return the curve for ``easing``; unknown values fall back to linear."""
    return _EASING_FUNCTIONS.get(easing, ease_linear)


@dataclass(eq=False)
class Animation:
    """Interpolates a value from ``start_value`` to ``end_value`` over time."""

    start_value: float
    end_value: float
    duration_ms: int
    easing: Easing = Easing.LINEAR
    clock: Clock = field(default=get_time_us, repr=False)
    current_value: float = field(init=False)
    start_time_us: int = field(init=False, default=0)
    active: bool = field(init=False, default=False)
    completed: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if self.duration_ms < 0:
            raise ValueError("duration_ms must not be negative")
        self.current_value = self.start_value
        self._ease = get_easing_function(self.easing)

    @property
    def duration_us(self) -> int:
        return self.duration_ms * 1000

    @property
    def value(self) -> float:
        return self.current_value

    @property
    def is_complete(self) -> bool:
        return self.completed

    def start(self) -> None:
        """Begin (or restart) the animation from its start value."""
        self.start_time_us = self.clock()
        self.current_value = self.start_value
        self.active = True
        self.completed = False

    def update(self) -> bool:
        """Advance to the current time; return True while still running."""
        if not self.active or self.completed:
            return False

        elapsed_us = self.clock() - self.start_time_us
        if elapsed_us >= self.duration_us:
            self.current_value = self.end_value
            self.completed = True
            self.active = False
            return False

        eased = self._ease(elapsed_us / self.duration_us)
        self.current_value = self.start_value + (self.end_value - self.start_value) * eased
        return True


@dataclass
class AnimationManager:
    """Drives a collection of animations together."""

    clock: Clock = field(default=get_time_us, repr=False)
    animations: list[Animation] = field(default_factory=list)
    last_update_time_us: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.last_update_time_us = self.clock()

    def __len__(self) -> int:
        return len(self.animations)

    def __iter__(self) -> Iterator[Animation]:
        return iter(self.animations)

    def add(self, anim: Animation) -> None:
        """Register an animation; the newest comes first."""
        self.animations.insert(0, anim)

    def update(self) -> bool:
        """Update every animation; return True if any is still running."""
        self.last_update_time_us = self.clock()
        results = [anim.update() for anim in self.animations]
        return any(results)

    def cleanup(self) -> None:
        """Drop animations that have completed."""
        self.animations = [anim for anim in self.animations if not anim.completed]

    def clear(self) -> None:
        """Drop all animations."""
        self.animations.clear()


@dataclass
class FrameLimiter:
    """Decides whether enough time has passed to draw another frame."""

    target_fps: int
    last_frame_time_us: int = 0
    clock: Clock = field(default=get_time_us, repr=False)

    def __post_init__(self) -> None:
        if self.target_fps <= 0:
            raise ValueError("target_fps must be positive")

    @property
    def frame_duration_us(self) -> int:
        return MICROSECONDS_PER_SECOND // self.target_fps

    def should_render(self) -> bool:
        """Return True, and record the time, when a new frame is due."""
        now = self.clock()
        if now - self.last_frame_time_us >= self.frame_duration_us:
            self.last_frame_time_us = now
            return True
        return False