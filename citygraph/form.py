"""A tagged wrapper that gives every shape one common interface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, Union

from citygraph.shapes import AnimatedForm, Circle, FormState, Line, Rect, Text
from citygraph.style import FormStyle

Shape = Union[Circle, Rect, Text, Line, AnimatedForm]

_NAMES = {
    "CIRCLE": "Circle",
    "RECT": "Rectangle",
    "LINE": "Line",
    "TEXT": "Text",
    "ANIMATED": "Animated",
}


class FormType(Enum):
    """The kinds of drawable form."""

    CIRCLE = 0
    RECT = 1
    TEXT = 2
    LINE = 3
    ANIMATED = 4


@dataclass
class Form:
    """A drawable form: its kind, its identifier and the shape it wraps."""

    form_type: FormType
    form_id: int
    shape: Shape

    @classmethod
    def create(
        cls,
        form_type: FormType,
        form_id: int,
        x: float,
        y: float,
        wr: float = 0.0,
        h: float = 0.0,
        text: str | None = None,
        style: FormStyle | None = None,
    ) -> "Form":
        """Build a static form.

        ``wr`` is the radius of a circle, the width of a rectangle or the
        second x of a line; ``h`` is the height of a rectangle or the second
        y of a line. ``text`` is used by text forms only.
        """
        if form_type is FormType.CIRCLE:
            shape: Shape = Circle(x, y, wr, style)
        elif form_type is FormType.RECT:
            shape = Rect(x, y, wr, h, style)
        elif form_type is FormType.LINE:
            shape = Line(x, y, wr, h, style)
        elif form_type is FormType.TEXT:
            shape = Text(x, y, text, style)
        elif form_type is FormType.ANIMATED:
            raise ValueError("use Form.animated for animated forms")
        else:
            raise ValueError(f"undefined form type: {form_type!r}")
        return cls(form_type, form_id, shape)

    @classmethod
    def animated(
        cls, form_id: int, x: float, y: float, r: float, path_points: Sequence[Any]
    ) -> "Form":
        """Build a circle of radius ``r`` that follows ``path_points``."""
        shape = AnimatedForm(x, y, r, path_points, FormStyle())
        return cls(FormType.ANIMATED, form_id, shape)

    @property
    def name(self) -> str:
        """Human-readable name of the form's kind."""
        return _NAMES.get(self.form_type.name, "Unknown")

    @property
    def style(self) -> FormStyle | None:
        """The style of the wrapped shape."""
        return self.shape.style

    @property
    def state(self) -> FormState:
        """The state flags of the wrapped shape."""
        if self.form_type is FormType.ANIMATED:
            raise ValueError("animated forms carry no state")
        return self.shape.state

    @property
    def text(self) -> str | None:
        """The string of a text form, ``None`` for any other kind."""
        if self.form_type is not FormType.TEXT:
            return None
        return self.shape.text

    @property
    def path_points(self) -> Sequence[Any] | None:
        """The path of an animated form, ``None`` for any other kind."""
        if self.form_type is not FormType.ANIMATED:
            return None
        return self.shape.path_points

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Smallest axis-aligned box holding the form as (x, y, w, h)."""
        if self.form_type is FormType.ANIMATED:
            raise ValueError("animated forms have no bounding box")
        return self.shape.bounding_box()

    def coordinates(self) -> tuple[float, float]:
        """The reference point of the form."""
        return (self.shape.x, self.shape.y)

    def dimensions(self) -> tuple[float, float]:
        """Size-like values: (r, r) for circles, (w, h) for rectangles,
        (0, 0) for text, the second end point for lines.

        Animated forms have no fixed size and give (0.0, 0.0).
        """
        shape = self.shape
        if self.form_type is FormType.CIRCLE:
            return (shape.r, shape.r)
        if self.form_type is FormType.RECT:
            return (shape.w, shape.h)
        if self.form_type is FormType.TEXT:
            _, _, w, h = shape.bounding_box()
            return (w, h)
        if self.form_type is FormType.LINE:
            return (shape.x2, shape.y2)
        return (0.0, 0.0)

    def translate(self, x: float, y: float) -> None:
        """Move the form's reference point to (x, y)."""
        if self.form_type is FormType.ANIMATED:
            raise ValueError("animated forms cannot be translated")
        self.shape.translate(x, y)