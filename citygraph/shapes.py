"""Concrete drawable shapes and their per-form state flags."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Any, Sequence

from citygraph.style import FormStyle


class StateType(IntEnum):
    """Kinds of boolean state a form can carry."""

    TEST = 0


class FormState:
    """A set of boolean flags, one per :class:`StateType`, all off at start."""

    def __init__(self) -> None:
        self._states = {state_type: False for state_type in StateType}

    def set(self, state_type: StateType, status: bool) -> None:
        """Turn the flag for ``state_type`` on or off."""
        self._states[StateType(state_type)] = bool(status)

    def get(self, state_type: StateType) -> bool:
        """Current value of the flag for ``state_type``."""
        return self._states[StateType(state_type)]

    def __repr__(self) -> str:
        flags = ", ".join(f"{k.name}={v}" for k, v in self._states.items())
        return f"FormState({flags})"


BoundingBox = tuple[float, float, float, float]


class Circle:
    """A circle given by its centre and radius."""

    def __init__(self, x: float, y: float, r: float, style: FormStyle | None = None) -> None:
        if x < 0 or y < 0 or r <= 0:
            raise ValueError(f"invalid circle coordinates (x: {x}, y: {y}, r: {r})")
        self.x = x
        self.y = y
        self.r = r
        self.style = style
        self.state = FormState()

    def bounding_box(self) -> BoundingBox:
        """Smallest axis-aligned box holding the circle as (x, y, w, h)."""
        return (self.x - self.r, self.y - self.r, self.r * 2, self.r * 2)

    def translate(self, x: float, y: float) -> None:
        """Move the centre to (x, y)."""
        self.x = x
        self.y = y

    def displacement_distance(self) -> float:
        """Area of the circle."""
        return math.pi * self.r * self.r

    def __repr__(self) -> str:
        return f"Circle(x={self.x!r}, y={self.y!r}, r={self.r!r})"


class Line:
    """A segment between (x, y) and (x2, y2)."""

    def __init__(
        self, x: float, y: float, x2: float, y2: float, style: FormStyle | None = None
    ) -> None:
        self.x = x
        self.y = y
        self.x2 = x2
        self.y2 = y2
        self.style = style
        self.state = FormState()

    def bounding_box(self) -> BoundingBox:
        """Smallest axis-aligned box holding the segment as (x, y, w, h)."""
        return (
            min(self.x, self.x2),
            min(self.y, self.y2),
            abs(self.x - self.x2),
            abs(self.y - self.y2),
        )

    def translate(self, x: float, y: float) -> None:
        """Move the first end to (x, y), keeping the segment's direction and length."""
        dx = x - self.x
        dy = y - self.y
        self.x += dx
        self.y += dy
        self.x2 += dx
        self.y2 += dy

    def displacement_distance(self) -> float:
        """Ten times the length of the segment."""
        return 10.0 * math.hypot(self.x2 - self.x, self.y2 - self.y)

    def __repr__(self) -> str:
        return f"Line(x={self.x!r}, y={self.y!r}, x2={self.x2!r}, y2={self.y2!r})"


class Rect:
    """An axis-aligned rectangle with its top-left corner at (x, y)."""

    def __init__(
        self, x: float, y: float, w: float, h: float, style: FormStyle | None = None
    ) -> None:
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.style = style
        self.state = FormState()

    def bounding_box(self) -> BoundingBox:
        """The rectangle itself as (x, y, w, h)."""
        return (self.x, self.y, self.w, self.h)

    def translate(self, x: float, y: float) -> None:
        """Move the top-left corner to (x, y)."""
        self.x = x
        self.y = y

    def displacement_distance(self) -> float:
        """Area of the rectangle."""
        return self.w * self.h

    def __repr__(self) -> str:
        return f"Rect(x={self.x!r}, y={self.y!r}, w={self.w!r}, h={self.h!r})"


class Text:
    """A text label anchored at (x, y)."""

    def __init__(self, x: float, y: float, text: str, style: FormStyle | None = None) -> None:
        if text is None:
            raise ValueError("text form requires a string")
        self.x = x
        self.y = y
        self.text = str(text)
        self.style = style
        self.state = FormState()

    def bounding_box(self) -> BoundingBox:
        """The anchor point with zero width and height."""
        return (self.x, self.y, 0, 0)

    def translate(self, x: float, y: float) -> None:
        """Move the anchor to (x, y)."""
        self.x = x
        self.y = y

    def displacement_distance(self) -> float:
        """Twelve times the number of characters."""
        return 12.0 * len(self.text)

    def __repr__(self) -> str:
        return f"Text(x={self.x!r}, y={self.y!r}, text={self.text!r})"


class AnimatedForm:
    """A circle that travels along a sequence of path points."""

    def __init__(
        self,
        x: float,
        y: float,
        r: float,
        path_points: Sequence[Any],
        style: FormStyle | None = None,
    ) -> None:
        if x < 0 or y < 0 or r <= 0:
            raise ValueError(f"invalid animated form coordinates (x: {x}, y: {y}, r: {r})")
        if path_points is None:
            raise ValueError("path_points cannot be None")
        if len(path_points) <= 0:
            raise ValueError("path_points is empty")
        self.x = x
        self.y = y
        self.r = r
        self.path_points = path_points
        self.style = style

    def __repr__(self) -> str:
        return (
            f"AnimatedForm(x={self.x!r}, y={self.y!r}, r={self.r!r}, "
            f"points={len(self.path_points)})"
        )