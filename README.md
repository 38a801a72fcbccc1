# citygraph

Building blocks for drawing a city map as SVG: styled geometric forms,
file path handling, command-line option parsing and an SVG exporter that
can animate a marker along a path.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `citygraph.style`

`FormStyle(border_color, fill_color, font_family, font_weight, text_anchor,
font_size, stroke_width)` holds the drawing attributes of a form. Every
argument may be `None`. The text anchor and font weight are given as
one-letter codes and stored resolved:

- `resolve_text_anchor`: `"m"` → `middle`, `"f"` → `end`, anything else
  (including `None`) → `start`.
- `resolve_font_weight`: `"b"` → `bold`, `"i"` → `italic`, anything else
  → `normal`.

The helpers `style_border_color`, `style_fill_color`, `style_font_family`,
`style_font_weight`, `style_text_anchor` and `style_stroke_width` return the
style's value, or a default (`#000000`, `#000000`, `Arial`, `normal`,
`start`, `2`) when the style is `None` or the field is unset.
`style_font_size` returns the default `12px` only when the style itself is
`None`; otherwise it returns the stored value, which may be `None`.

### `citygraph.dirpath`

`Dir` is a frozen dataclass with `path` (the directory part, ending in
`/`, or empty), `file_name` and `file_ext`.

- `Dir.parse("in/t2/c1.geo")` splits a path at its last `/` and the last
  `.` after it; an empty string raises `ValueError`.
- `Dir.combine(path, file)` joins a directory and a file name, adding a
  `/` only when needed.
- `full_path()` rebuilds the path as `path + name.ext`; `str(d)` gives the
  same.
- `exists()` tells whether the file can be opened for reading.
- `open_readable()` and `open_writable()` open the file as UTF-8 text.

### `citygraph.shapes`

`Circle`, `Rect`, `Line` and `Text` each have `bounding_box()` returning
`(x, y, w, h)`, `translate(x, y)` and `displacement_distance()`:

| shape    | bounding box                   | translate moves          | displacement distance   |
|----------|--------------------------------|--------------------------|-------------------------|
| `Circle` | centre ± r, size `2r`          | the centre               | area `π r²`             |
| `Rect`   | the rectangle itself           | the top-left corner      | area `w · h`            |
| `Line`   | min corner, absolute extents   | the first end, keeping the segment | `10 ×` length  |
| `Text`   | the anchor, size `0 × 0`       | the anchor               | `12 ×` character count  |

A `Circle` with a negative `x` or `y` or a radius `<= 0` raises
`ValueError`, as does a `Text` built with `None` for its string.
`AnimatedForm(x, y, r, path_points, style)` raises `ValueError` for the
same coordinate rules and for a missing or empty path. Each static shape
carries a `FormState`, a set of boolean flags keyed by `StateType`
(`set(state_type, status)`, `get(state_type)`), all off at start.

### `citygraph.form`

`Form` wraps a shape with a `FormType` (`CIRCLE`, `RECT`, `TEXT`, `LINE`,
`ANIMATED`) and an id.

- `Form.create(form_type, form_id, x, y, wr, h, text, style)`: `wr` is the
  radius of a circle, the width of a rectangle or the second x of a line;
  `h` is the height of a rectangle or the second y of a line; `text` is
  used by text forms. Asking for `ANIMATED` here raises `ValueError`.
- `Form.animated(form_id, x, y, r, path_points)` builds a marker that
  follows `path_points`, with an empty `FormStyle` whose colours can be set
  afterwards (for example `form.style.border_color = "#ff0000"`).
- `coordinates()`, `dimensions()`, `bounding_box()` and `translate(x, y)`
  delegate to the shape. `dimensions()` gives `(r, r)` for circles,
  `(w, h)` for rectangles, `(0, 0)` for text, the second end point for
  lines and `(0.0, 0.0)` for animated forms. `bounding_box()` and
  `translate()` raise `ValueError` for animated forms.
- Properties: `name` (`Circle`, `Rectangle`, `Line`, `Text`, `Animated`),
  `style`, `state` (raises `ValueError` for animated forms), `text`
  (`None` unless a text form) and `path_points` (`None` unless animated).

### `citygraph.args`

`ArgManager` handles options given as `-x value` pairs:

```python
from citygraph.args import ArgManager, ArgType, ArgumentError

args = ArgManager()
args.add("-e", False, "Base input directory", ArgType.STR, "./")
args.add("-f", True, "Map file", ArgType.STR, "")
args.add("-n", False, "Scale", ArgType.DOUBLE, "1.0")

try:
    args.parse(["-f", "c1.geo", "-n", "2.5"])  # program name excluded
except ArgumentError as err:
    print(err)
    if err.usage:
        print(err.usage)

print(args.value("-f"), args.value("-n"))  # c1.geo 2.5
```

`ArgType` is `DIR` (parsed into a `Dir`), `STR`, `DOUBLE` or `INT`. Numbers
are read from the leading part of the value, and a value with no leading
number reads as `0`. `parse` raises `ArgumentError` when fewer tokens are
given than there are mandatory options, when an option has no value, when
two options follow each other, or when an option is unknown; tokens that
are neither an option nor its value are skipped. `usage()` lists the
declared options one per line; `value()` raises `KeyError` for an
undeclared option.

### `citygraph.svg`

`SvgExporter(directory=None)` collects forms and writes them, in the order
added, to one SVG file (by default `./output.svg`). `add_forms(forms)`
appends, `reset()` empties the list, `render()` returns the document and
`export()` writes it. Element ids are numbered from 1 each time the
document is rendered. Animated forms are drawn as a path with a circle of
radius 10 moving along it; their path points may be `(x, y)` pairs or
objects with `x` and `y` attributes. The exporter never changes the forms
it is given.

## Example

```python
from citygraph.dirpath import Dir
from citygraph.form import Form, FormType
from citygraph.style import FormStyle
from citygraph.svg import SvgExporter

style = FormStyle("#000000", "#ffcc00", None, None, None, None, "1px")
block = Form.create(FormType.RECT, -1, 10, 20, 100, 50, None, style)
label = Form.create(FormType.TEXT, -1, 10, 15, 0, 0, "b.01", None)
route = Form.animated(0, 10, 20, 10, [(10, 20), (110, 20), (110, 70)])
route.style.border_color = "#0000ff"

exporter = SvgExporter(Dir.combine(".", "map.svg"))
exporter.add_forms([block, label, route])
print(exporter.render())
exporter.export()  # the target directory must already exist
```

## What this package does not do

There is no command to run: the package is a library. It does not read map
description or query files, build a street graph or find routes; the path
an animated form follows must be supplied by the caller as a list of points.