import pytest

from citygraph.dirpath import Dir
from citygraph.form import Form, FormType
from citygraph.style import FormStyle
from citygraph.svg import SVG_FOOTER, SVG_HEADER, SvgExporter


def _rect_form(x=1.0, y=2.0, w=3.0, h=4.0, style=None):
    return Form.create(FormType.RECT, -1, x, y, w, h, None, style)


def test_empty_document_is_header_and_footer():
    exporter = SvgExporter()
    assert exporter.render() == (
        "<svg viewBox='0 0 10500 3500' xmlns='http://www.w3.org/2000/svg'>\n</svg>"
    )


def test_default_directory_is_output_svg():
    exporter = SvgExporter()
    assert exporter.directory.file_name == "output"
    assert exporter.directory.file_ext == "svg"


def test_rect_element():
    style = FormStyle("red", "blue", None, None, None, None, "1px")
    exporter = SvgExporter()
    exporter.add_forms([_rect_form(style=style)])
    body = exporter.render()
    assert (
        "\t<rect id='1' width='3.000000' height='4.000000' x='1.000000' y='2.000000' "
        "fill='blue' stroke='red' stroke-width='1px' fill-opacity='0.5'/>\n"
    ) in body


def test_circle_element_uses_radius_and_defaults():
    exporter = SvgExporter()
    exporter.add_forms([Form.create(FormType.CIRCLE, 7, 5.0, 6.0, 2.0, 0.0, None, None)])
    body = exporter.render()
    assert (
        "\t<circle id='1' r='2.000000' cx='5.000000' cy='6.000000' fill='#000000' "
        "stroke='#000000' stroke-width='2' fill-opacity='0.5'/>\n"
    ) in body


def test_line_element_uses_both_ends():
    exporter = SvgExporter()
    exporter.add_forms([Form.create(FormType.LINE, -1, 1.0, 2.0, 3.0, 4.0, None, None)])
    body = exporter.render()
    assert "x1='1.000000' y1='2.000000' x2='3.000000' y2='4.000000'" in body
    assert body.count("<line ") == 1


def test_text_element_defaults():
    exporter = SvgExporter()
    exporter.add_forms([Form.create(FormType.TEXT, -1, 1.0, 2.0, 0, 0, "hello", None)])
    body = exporter.render()
    assert "<![CDATA[ hello ]]></text>" in body
    assert "font-size='12px'" in body
    assert "font-family='Arial'" in body
    assert "text-anchor='start'" in body


def test_text_style_codes_are_resolved():
    style = FormStyle(None, None, "Mono", "b", "m", "20px", None)
    exporter = SvgExporter()
    exporter.add_forms([Form.create(FormType.TEXT, -1, 0.0, 0.0, 0, 0, "x", style)])
    body = exporter.render()
    assert "text-anchor='middle'" in body
    assert "font-weight='bold'" in body
    assert "font-size='20px'" in body
    assert "font-family='Mono'" in body


def test_ids_are_numbered_in_order():
    exporter = SvgExporter()
    exporter.add_forms([_rect_form(), _rect_form()])
    exporter.add_forms([_rect_form()])
    body = exporter.render()
    assert [body.index(f"id='{n}'") for n in (1, 2, 3)] == sorted(
        body.index(f"id='{n}'") for n in (1, 2, 3)
    )
    assert "id='4'" not in body


def test_render_is_repeatable():
    exporter = SvgExporter()
    exporter.add_forms([_rect_form()])
    first = exporter.render()
    second = exporter.render()
    assert first == second
    assert second.count("<rect ") == 1
    assert "id='1'" in second
    assert "id='2'" not in second


def test_animated_form_with_path():
    exporter = SvgExporter()
    exporter.add_forms([Form.animated(0, 1.0, 2.0, 10, [(1.0, 2.0), (3.0, 4.0)])])
    body = exporter.render()
    assert "<g id='animated_1'>" in body
    assert "d='M 1.000000 2.000000 L 3.000000 4.000000'" in body
    assert "<mpath href='#path_1'/>" in body
    assert "r='10.000000'" in body


def test_animated_form_with_single_point_has_no_motion():
    exporter = SvgExporter()
    exporter.add_forms([Form.animated(0, 1.0, 2.0, 10, [(1.0, 2.0)])])
    body = exporter.render()
    assert "<path" not in body
    assert "animateMotion" not in body
    assert "fill-opacity='0.8'" in body


def test_animated_uses_border_color_for_path():
    form = Form.animated(0, 1.0, 2.0, 10, [(0.0, 0.0), (5.0, 5.0)])
    form.style.border_color = "green"
    exporter = SvgExporter()
    exporter.add_forms([form])
    assert "stroke='green' stroke-width='5' fill='none'" in exporter.render()


def test_reset_clears_forms():
    exporter = SvgExporter()
    exporter.add_forms([_rect_form()])
    exporter.reset()
    assert exporter.forms == []
    assert exporter.render() == SVG_HEADER + SVG_FOOTER


def test_export_writes_render(tmp_path):
    exporter = SvgExporter(Dir.combine(str(tmp_path), "map.svg"))
    exporter.add_forms([_rect_form()])
    exporter.export()
    written = (tmp_path / "map.svg").read_text(encoding="utf-8")
    assert written == exporter.render()
    assert written.startswith(SVG_HEADER)
    assert written.endswith(SVG_FOOTER)


def test_export_to_missing_directory_raises(tmp_path):
    exporter = SvgExporter(Dir.combine(str(tmp_path / "missing"), "map.svg"))
    with pytest.raises(OSError):
        exporter.export()