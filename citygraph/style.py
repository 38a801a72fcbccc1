"""Visual style attributes shared by every drawable form."""

from __future__ import annotations

DEFAULT_BORDER_COLOR = "#000000"
DEFAULT_FILL_COLOR = "#000000"
DEFAULT_FONT_FAMILY = "Arial"
DEFAULT_FONT_WEIGHT = "normal"
DEFAULT_TEXT_ANCHOR = "start"
DEFAULT_FONT_SIZE = "12px"
DEFAULT_STROKE_WIDTH = "2"

_TEXT_ANCHORS = {"m": "middle", "f": "end"}
_FONT_WEIGHTS = {"b": "bold", "i": "italic"}


def resolve_text_anchor(code: str | None) -> str:
    """Map a one-letter anchor code ("m", "f") to its SVG text-anchor value."""
    return _TEXT_ANCHORS.get(code, "start") if code is not None else "start"


def resolve_font_weight(code: str | None) -> str:
    """Map a one-letter weight code ("b", "i") to its SVG font-weight value."""
    return _FONT_WEIGHTS.get(code, "normal") if code is not None else "normal"


class FormStyle:
    """Colours, font and stroke settings of a form.

    The text anchor and font weight are given as one-letter codes and stored
    in their resolved SVG form.
    """

    def __init__(
        self,
        border_color: str | None = None,
        fill_color: str | None = None,
        font_family: str | None = None,
        font_weight: str | None = None,
        text_anchor: str | None = None,
        font_size: str | None = None,
        stroke_width: str | None = None,
    ) -> None:
        self.border_color = border_color
        self.fill_color = fill_color
        self.font_family = font_family
        self.text_anchor = resolve_text_anchor(text_anchor)
        self.font_weight = resolve_font_weight(font_weight)
        self.font_size = font_size
        self.stroke_width = stroke_width

    def __repr__(self) -> str:
        return (
            f"FormStyle(border_color={self.border_color!r}, "
            f"fill_color={self.fill_color!r}, font_family={self.font_family!r}, "
            f"font_weight={self.font_weight!r}, text_anchor={self.text_anchor!r}, "
            f"font_size={self.font_size!r}, stroke_width={self.stroke_width!r})"
        )


def style_border_color(style: FormStyle | None) -> str:
    """Border colour of the style, or the default when unset."""
    if style is None or style.border_color is None:
        return DEFAULT_BORDER_COLOR
    return style.border_color


def style_fill_color(style: FormStyle | None) -> str:
    """Fill colour of the style, or the default when unset."""
    if style is None or style.fill_color is None:
        return DEFAULT_FILL_COLOR
    return style.fill_color


def style_font_family(style: FormStyle | None) -> str:
    """Font family of the style, or the default when unset."""
    if style is None or style.font_family is None:
        return DEFAULT_FONT_FAMILY
    return style.font_family


def style_font_weight(style: FormStyle | None) -> str:
    """Font weight of the style, or the default when unset."""
    if style is None or style.font_weight is None:
        return DEFAULT_FONT_WEIGHT
    return style.font_weight


def style_text_anchor(style: FormStyle | None) -> str:
    """Text anchor of the style, or the default when unset."""
    if style is None or style.text_anchor is None:
        return DEFAULT_TEXT_ANCHOR
    return style.text_anchor


def style_font_size(style: FormStyle | None) -> str | None:
    """Font size of the style; the default applies only when there is no style."""
    if style is None:
        return DEFAULT_FONT_SIZE
    return style.font_size


def style_stroke_width(style: FormStyle | None) -> str:
    """Stroke width of the style, or the default when unset."""
    if style is None or style.stroke_width is None:
        return DEFAULT_STROKE_WIDTH
    return style.stroke_width