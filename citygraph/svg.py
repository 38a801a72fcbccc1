"""Export of drawable forms as a single SVG document."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from citygraph.dirpath import Dir
from citygraph.form import Form, FormType
from citygraph.style import (
    DEFAULT_FONT_SIZE,
    FormStyle,
    style_border_color,
    style_fill_color,
    style_font_family,
    style_font_size,
    style_font_weight,
    style_stroke_width,
    style_text_anchor,
)

SVG_HEADER = "<svg viewBox='0 0 10500 3500' xmlns='http://www.w3.org/2000/svg'>\n"
SVG_FOOTER = "</svg>"
DEFAULT_EXPORT_PATH = "./output.svg"
ANIMATED_RADIUS = 10.0


def _num(value: float) -> str:
    return f"{value:.6f}"


def _point_xy(point: Any) -> tuple[float, float]:
    if isinstance(point, (tuple, list)):
        x, y = point
        return float(x), float(y)
    return float(point.x), float(point.y)


def _circle(form_id: int, x: float, y: float, r: float, style: FormStyle | None) -> str:
    return (
        f"\t<circle id='{form_id}' r='{_num(r)}' cx='{_num(x)}' cy='{_num(y)}' "
        f"fill='{style_fill_color(style)}' stroke='{style_border_color(style)}' "
        f"stroke-width='{style_stroke_width(style)}' fill-opacity='0.5'/>\n"
    )


def _rect(
    form_id: int, x: float, y: float, w: float, h: float, style: FormStyle | None
) -> str:
    return (
        f"\t<rect id='{form_id}' width='{_num(w)}' height='{_num(h)}' "
        f"x='{_num(x)}' y='{_num(y)}' fill='{style_fill_color(style)}' "
        f"stroke='{style_border_color(style)}' "
        f"stroke-width='{style_stroke_width(style)}' fill-opacity='0.5'/>\n"
    )


def _text(form_id: int, x: float, y: float, text: str | None, style: FormStyle | None) -> str:
    content = text if text is not None else "INVALID"
    font_size = style_font_size(style) or DEFAULT_FONT_SIZE
    return (
        f"\t<text id='{form_id}' x='{_num(x)}' y='{_num(y)}' "
        f"fill='{style_fill_color(style)}' stroke='{style_border_color(style)}' "
        f"stroke-width='{style_stroke_width(style)}' "
        f"text-anchor='{style_text_anchor(style)}' "
        f"font-weight='{style_font_weight(style)}' font-size='{font_size}' "
        f"font-family='{style_font_family(style)}'><![CDATA[ {content} ]]></text>\n"
    )


def _line(
    form_id: int, x1: float, y1: float, x2: float, y2: float, style: FormStyle | None
) -> str:
    return (
        f"\t<line id='{form_id}' x1='{_num(x1)}' y1='{_num(y1)}' "
        f"x2='{_num(x2)}' y2='{_num(y2)}' stroke='{style_border_color(style)}' "
        f"stroke-width='{style_stroke_width(style)}'/>\n"
    )


def _path_data(points: Iterable[Any]) -> str:
    commands = []
    for point in points:
        if point is None:
            continue
        x, y = _point_xy(point)
        prefix = "M" if not commands else "L"
        commands.append(f"{prefix} {_num(x)} {_num(y)}")
    return " ".join(commands)


def _animated(form_id: int, r: float, style: FormStyle | None, points: Any) -> str:
    has_path = points is not None and len(points) > 1
    parts = [f"\t<g id='animated_{form_id}'>\n"]
    if has_path:
        parts.append(
            f"\t\t<path id='path_{form_id}' d='{_path_data(points)}' "
            f"stroke='{style_border_color(style)}' stroke-width='5' fill='none'/>\n"
        )
    parts.append(
        f"\t\t<circle id='{form_id}' r='{_num(r)}' fill='{style_fill_color(style)}' "
        f"stroke='{style_border_color(style)}' "
        f"stroke-width='{style_stroke_width(style)}' fill-opacity='0.8'>\n"
    )
    if has_path:
        parts.append(
            "\t\t\t<animateMotion dur='5s' repeatCount='indefinite'>\n"
            f"\t\t\t\t<mpath href='#path_{form_id}'/>\n"
            "\t\t\t</animateMotion>\n"
        )
    parts.append("\t\t</circle>\n")
    parts.append("\t</g>\n")
    return "".join(parts)


def _render_form(form: Form, form_id: int) -> str:
    x, y = form.coordinates()
    style = form.style
    if form.form_type is FormType.ANIMATED:
        return _animated(form_id, ANIMATED_RADIUS, style, form.path_points)
    wr, h = form.dimensions()
    if form.form_type is FormType.CIRCLE:
        return _circle(form_id, x, y, wr, style)
    if form.form_type is FormType.RECT:
        return _rect(form_id, x, y, wr, h, style)
    if form.form_type is FormType.LINE:
        return _line(form_id, x, y, wr, h, style)
    if form.form_type is FormType.TEXT:
        return _text(form_id, x, y, form.text, style)
    raise ValueError(f"invalid form type: {form.form_type!r}")


class SvgExporter:
    """Collects forms and writes them, in insertion order, to one SVG file.

    The exporter never changes the forms it is given.
    """

    def __init__(self, directory: Dir | None = None) -> None:
        self.directory = directory if directory is not None else Dir.parse(DEFAULT_EXPORT_PATH)
        self.forms: list[Form] = []

    def add_forms(self, forms: Iterable[Form]) -> None:
        """Append forms to the export list."""
        self.forms.extend(forms)

    def reset(self) -> None:
        """Empty the export list."""
        self.forms.clear()

    def _elements(self) -> Iterator[str]:
        yield SVG_HEADER
        for form_id, form in enumerate(self.forms, start=1):
            yield _render_form(form, form_id)
        yield SVG_FOOTER

    def render(self) -> str:
        """The SVG document; element ids are numbered from 1 in list order."""
        return "".join(self._elements())

    def export(self) -> None:
        """Write the SVG document to the exporter's directory."""
        with self.directory.open_writable() as svg_file:
            svg_file.write(self.render())