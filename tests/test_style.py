import pytest

from citygraph.style import (
    FormStyle,
    resolve_font_weight,
    resolve_text_anchor,
    style_border_color,
    style_fill_color,
    style_font_family,
    style_font_size,
    style_font_weight,
    style_stroke_width,
    style_text_anchor,
)


@pytest.mark.parametrize(
    "code, expected",
    [("m", "middle"), ("f", "end"), ("x", "start"), (None, "start")],
)
def test_resolve_text_anchor(code, expected):
    assert resolve_text_anchor(code) == expected


@pytest.mark.parametrize(
    "code, expected",
    [("b", "bold"), ("i", "italic"), ("z", "normal"), (None, "normal")],
)
def test_resolve_font_weight(code, expected):
    assert resolve_font_weight(code) == expected


def test_constructor_resolves_codes():
    style = FormStyle("#111111", "#222222", "Mono", "b", "m", "14px", "3")
    assert style.font_weight == "bold"
    assert style.text_anchor == "middle"
    assert style.border_color == "#111111"
    assert style.fill_color == "#222222"


def test_accessors_return_set_values():
    style = FormStyle("#111111", "#222222", "Mono", "i", "f", "14px", "3")
    assert style_border_color(style) == "#111111"
    assert style_fill_color(style) == "#222222"
    assert style_font_family(style) == "Mono"
    assert style_font_weight(style) == "italic"
    assert style_text_anchor(style) == "end"
    assert style_font_size(style) == "14px"
    assert style_stroke_width(style) == "3"


def test_defaults_without_style():
    assert style_border_color(None) == "#000000"
    assert style_fill_color(None) == "#000000"
    assert style_font_family(None) == "Arial"
    assert style_font_weight(None) == "normal"
    assert style_text_anchor(None) == "start"
    assert style_font_size(None) == "12px"
    assert style_stroke_width(None) == "2"


def test_defaults_for_unset_fields():
    style = FormStyle()
    assert style_border_color(style) == "#000000"
    assert style_fill_color(style) == "#000000"
    assert style_font_family(style) == "Arial"
    assert style_stroke_width(style) == "2"
    # font size falls back only when there is no style at all
    assert style_font_size(style) is None


def test_changing_colors():
    style = FormStyle("#ffffff", "#ffffff", stroke_width="1px")
    style.border_color = "red"
    style.fill_color = "blue"
    style.stroke_width = "5"
    assert style_border_color(style) == "red"
    assert style_fill_color(style) == "blue"
    assert style_stroke_width(style) == "5"