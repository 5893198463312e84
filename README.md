# chartkit

chartkit holds the geometry and data handling behind SVG charts. It has no
dependencies. It does not draw anything. It works out the values a renderer
needs to draw a chart:

- where each part of the chart goes,
- path data for lines,
- rectangles for bars,
- SVG elements for point markers,
- the rows shown in legends and tooltips.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `chartkit.projection`

- `Rect` is an axis-aligned box in SVG space. It has `width`, `height`, `centre_x`, `centre_y`, `shrink` and `contains`.
- `Projection(bounds, range_x, range_y)` maps data coordinates to SVG coordinates with `position_to_svg`, and back again with `svg_to_position`. Data has its zero at the bottom left; SVG has its zero at the top left.
- If a range is zero in size, or is missing, a span of 0.5 is used in its place.
- `svg_zero()` gives the SVG position of the data origin.

### `chartkit.padding`

- `Padding` holds padding in CSS order: top, right, bottom, left.
- Build one with `zero`, `sides`, `hv` or `uniform`.
- `apply` shrinks a `Rect` by the padding.
- `to_css_style` gives the padding as a CSS value, for example `"1.1px 2.2px 3.3px 4.4px"`.
- `format_number` writes a number in its shortest round-trip form, never in exponent form.

### `chartkit.ranges`

- `tick_position` gives the position of a tick value as a float. It accepts real numbers, `datetime` objects (as timestamps), and objects that have a `position()` method.
- `Range` tracks the smallest and largest values seen.
  - Values whose position is NaN are ignored.
  - `maybe_update` returns a copy of the range, extended by every value that is not `None`.

### `chartkit.interpolation`

- `Interpolation` builds SVG path data from points. It can be linear, one of four `Step` kinds, or monotone cubic (Steffen's method).
- `Interpolation.parse` reads names such as `"linear"`, `"step-horizontal-middle"` and `"monotone"`.
- A NaN point breaks the line into separate segments.

### `chartkit.data`

- `Data` indexes your records by X value.
- It answers nearest-point queries: `nearest_index`, `nearest_data_x`, `nearest_data_y` and `nearest_position_x`.
- `series_positions` gives the positions of one series for drawing.

### `chartkit.markers`

- `Marker` and `MarkerShape` describe the marker drawn at each point of a line.
- `marker_diameter` gives the marker size, which is proportional to the line width.
- `marker_svg` returns the SVG element for one marker.

### `chartkit.lines`

- `Line` and `Bar` describe how to draw one series.
  - `Line.stroke` gives the SVG stroke value.
  - `Line.path` gives the path data.
- `bar_rects` places the bars of one series within each X group.
- `SeriesItem` is a line or bar that has been resolved to an id and a colour.
- `taster_bounds` and `snippet_width` size the small sample drawing shown beside a series name.

### `chartkit.series`

- `Series` gathers lines, bars and `Stack`s that share the same X and Y axes.
- Stacked lines add together the values below them, leaving out values that are zero, NaN or infinite.
- `Series.use_data(records)` returns a `ChartData`. It holds:
  - the X and Y ranges, extended by the series' optional minimum and maximum values,
  - the series items, sorted by name,
  - nearest-value lookups.

### `chartkit.axes`

- `AxisMarker` gives the line coordinates of an edge or a zero line, or `None` when the line falls outside the inner area.

### `chartkit.guides`

- `XGuideLine` and `YGuideLine` place guide lines at the mouse position or at the nearest data.
- `guide_visible` says whether a guide line is shown.

### `chartkit.tooltip`

- `Tooltip` sorts and formats the rows of values under the cursor (`rows`), and gives the heading for the X value (`heading`).

### `chartkit.labels`

- `Edge` and `Anchor` name the edges of the chart and positions along them.
- `RotatedLabel` gives the size and the rotated text position of an edge label.

### `chartkit.layout`

- `Legend` and `InsetLegend` give legend sizes and bounds.
- `Layout.compose` lays out edge components of known sizes around an inner area of known size.
- `option_bounds` stacks the components of one edge outwards from the inner area.

## Example

```python
from chartkit.series import Series
from chartkit.lines import Line
from chartkit.projection import Rect, Projection

records = [
    {"t": 1.0, "a": 2.0, "b": 3.0},
    {"t": 4.0, "a": 5.0, "b": 6.0},
    {"t": 7.0, "a": 8.0, "b": 9.0},
]

series = (
    Series(lambda r: r["t"])
    .line(Line(lambda r: r["a"]).with_name("butterflies"))
    .line(Line(lambda r: r["b"]).with_name("dragonflies"))
)
chart = series.use_data(records)

bounds = Rect.from_points(10.0, 10.0, 90.0, 90.0)
proj = Projection(bounds, chart.range_x.positions(), chart.range_y.positions())
print(proj.position_to_svg(4.0, 5.0))
print(chart.nearest_data_x(3.2))  # 4.0
```

## What it does not do

- It does not render a chart or write an SVG document. The one exception is `marker_svg`, which returns single elements.
- It has no reactive or UI layer.
- It does not generate or format axis ticks. Tooltips and labels take formatting functions from the caller.
- It does not work out an aspect ratio. `Layout.compose` needs the inner width and height to be given.
- Colours are plain values, such as CSS strings. The package does not handle colour gradients or interpolate colour schemes. A `Stack` picks colours spread evenly across its scheme.