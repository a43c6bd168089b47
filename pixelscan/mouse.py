"""Synthesised mouse input: moves, drags, clicks, scrolling and smooth motion."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from enum import IntEnum
from typing import Protocol

from pixelscan.deadbeef import DeadbeefRandom
from pixelscan.geometry import Point, SignedPoint, Size

# Pause between the two clicks of a double click, in milliseconds.
_DOUBLE_CLICK_DELAY_MS = 200

# Wheel "buttons" in X11 numbering.
_WHEEL_UP = 4
_WHEEL_DOWN = 5
_WHEEL_LEFT = 6
_WHEEL_RIGHT = 7


class MouseButton(IntEnum):
    """Mouse buttons (X11 numbering)."""

    LEFT = 1
    CENTER = 2
    RIGHT = 3


class WheelDirection(IntEnum):
    """Scroll wheel directions."""

    DOWN = -1
    UP = 1


def button_is_valid(button: int) -> bool:
    """Whether ``button`` is one of the three mouse buttons."""
    return button in (MouseButton.LEFT, MouseButton.RIGHT, MouseButton.CENTER)


def crude_hypot(x: float, y: float) -> float:
    """A fast, rough approximation of the length of the vector (x, y)."""
    big = abs(x)
    small = abs(y)
    if big > small:
        big, small = small, big
    return (math.sqrt(2) - 1.0) * small + big


class _PointLike(Protocol):
    x: int
    y: int


class MouseBackend:
    """A virtual screen with a pointer that records every event it receives.

    Events are kept in :attr:`events` as ``("move", x, y)`` and
    ``("button", number, down)`` tuples. The pointer stays on the screen.
    """

    def __init__(self, width: int = 1920, height: int = 1080, start: Point | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive: {width}x{height}")
        self._size = Size(width, height)
        start = start if start is not None else Point()
        self._x, self._y = self._clamp(start.x, start.y)
        self.events: list[tuple] = []

    def _clamp(self, x: int, y: int) -> tuple[int, int]:
        return (
            min(max(x, 0), self._size.width - 1),
            min(max(y, 0), self._size.height - 1),
        )

    def move(self, point: SignedPoint) -> None:
        """Place the pointer at ``point``."""
        self._x, self._y = self._clamp(point.x, point.y)
        self.events.append(("move", point.x, point.y))

    def button(self, number: int, down: bool) -> None:
        """Press or release button ``number``."""
        self.events.append(("button", int(number), bool(down)))

    def position(self) -> Point:
        """Return where the pointer is."""
        return Point(self._x, self._y)

    def screen_size(self) -> Size:
        """Return the size of the main display."""
        return self._size


class Mouse:
    """Drives a :class:`MouseBackend`.

    ``sleep`` takes seconds; ``rng`` supplies the randomness of smooth motion.
    """

    def __init__(
        self,
        backend: MouseBackend | None = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: DeadbeefRandom | None = None,
    ) -> None:
        self.backend = backend if backend is not None else MouseBackend()
        self._sleep = sleep
        self.rng = rng if rng is not None else DeadbeefRandom()

    def _sleep_ms(self, milliseconds: float) -> None:
        self._sleep(milliseconds / 1000.0)

    def move(self, point: _PointLike) -> None:
        """Move the pointer to ``point`` at once."""
        self.backend.move(SignedPoint(point.x, point.y))

    def drag(self, point: _PointLike, button: int = MouseButton.LEFT) -> None:
        """Move the pointer to ``point`` while ``button`` is held."""
        self.move(point)

    def position(self) -> Point:
        """Return the pointer's position."""
        return self.backend.position()

    def toggle(self, down: bool, button: int = MouseButton.LEFT) -> None:
        """Press (``down``) or release ``button`` where the pointer is."""
        self.backend.button(button, down)

    def click(self, button: int = MouseButton.LEFT) -> None:
        """Press and release ``button``."""
        self.toggle(True, button)
        self.toggle(False, button)

    def double_click(self, button: int = MouseButton.LEFT) -> None:
        """Click ``button`` twice with a short pause between."""
        self.click(button)
        self._sleep_ms(_DOUBLE_CLICK_DELAY_MS)
        self.click(button)

    def scroll(self, x: int, y: int) -> None:
        """Scroll ``x`` steps horizontally and ``y`` steps vertically.

        Positive ``y`` scrolls up and positive ``x`` scrolls left.
        """
        ydir = _WHEEL_DOWN if y < 0 else _WHEEL_UP
        xdir = _WHEEL_RIGHT if x < 0 else _WHEEL_LEFT
        for _ in range(abs(x)):
            self.backend.button(xdir, True)
            self.backend.button(xdir, False)
        for _ in range(abs(y)):
            self.backend.button(ydir, True)
            self.backend.button(ydir, False)

    def smoothly_move(self, end_point: Point, speed: float = 3.0) -> bool:
        """Move the pointer to ``end_point`` along a human-like path.

        Each step waits a random time between 0.7 and ``speed`` milliseconds.
        Returns ``False`` if the path leaves the screen, ``True`` otherwise.
        """
        start = self.position()
        x, y = start.x, start.y
        size = self.backend.screen_size()
        velo_x = velo_y = 0.0

        while (distance := crude_hypot(x - end_point.x, y - end_point.y)) > 1.0:
            gravity = self.rng.uniform(5.0, 500.0)
            velo_x += gravity * (end_point.x - x) / distance
            velo_y += gravity * (end_point.y - y) / distance

            velo_distance = crude_hypot(velo_x, velo_y)
            velo_x /= velo_distance
            velo_y /= velo_distance

            x += math.floor(velo_x + 0.5)
            y += math.floor(velo_y + 0.5)

            if x < 0 or y < 0 or x >= size.width or y >= size.height:
                return False

            self.backend.move(SignedPoint(x, y))
            self._sleep_ms(self.rng.uniform(0.7, speed))

        return True