# xlsxparts

Small, dependency-free building blocks for some of the XML parts inside an
`.xlsx` package. Each module reads or writes one kind of part with the
standard library's `xml.etree.ElementTree`.

## What is included

- `xlsxparts.color`: `Argb` (four 0..255 channels) and `XlsxColor`, whose
  value is an `Argb`, an indexed palette number, a `(theme, tint)` pair of
  strings, or `None`. `XlsxColor.to_element(node)` builds a colour element
  (`color` by default) and `XlsxColor.from_element(element)` reads one.
  `from_argb_string` parses `AARRGGBB` or `RRGGBB` text (any other length
  gives all channels zero) and `to_argb_string` formats upper-case `AARRGGBB`.
- `xlsxparts.contenttypes`: `ContentTypes`, the `[Content_Types].xml` part.
  It starts with defaults for `rels` and `xml`; `add_default`,
  `add_override` and helpers such as `add_workbook`, `add_styles`,
  `add_worksheet_name(name)` or `add_chart_name(name)` add entries.
  `to_xml()` returns the part as bytes with entries sorted by key;
  `load_xml(data)` replaces all entries, logging a warning on malformed XML
  and keeping what was read before the fault.
- `xlsxparts.cellrange`: `CellRange` (1-based, frozen) with
  `from_string("A1:C5")` (`$` markers allowed), `to_string(row_abs, col_abs)`,
  `is_valid`, `row_count`, `column_count`; and `column_to_letters(n)`.
- `xlsxparts.conditionalformatting`: `ConditionalFormatting` holding
  `ranges` and `rules` (`CfRule`), with `HighlightRuleType`,
  `ValueObjectType`, `DxfFormat` and `CfValueObject`. Rules are added with
  `add_highlight_cells_rule`, `add_data_bar_rule`, `add_2color_scale_rule`
  and `add_3color_scale_rule`; ranges with `add_cell`, `add_range` and
  `add_cell_range` (a `CellRange` or A1 text).
- `xlsxparts.cfxml`: `write_conditional_formatting(formatting)` builds a
  `<conditionalFormatting>` element; `read_conditional_formatting(element,
  dxf_formats)` reads one back, taking each rule's format from
  `dxf_formats` by its `dxfId` when that list is given.
- `xlsxparts.chart`: the chart model — `Chart`, `Series`, `Axis`,
  `ChartType`, `ChartAxisPos`, `AxisType`, `AxisPos` — with
  `Chart.add_series`, `set_axis_title`, `set_chart_legend`,
  `set_gridlines_enable`, and `escape_sheet_name`, which quotes sheet names
  holding spaces, quotes or operator characters.
- `xlsxparts.chartaxes`: `write_axes(parent, chart)`,
  `read_axis(element, chart)`, `axis_pos_string(pos)` and `axis_name(axis)`.
- `xlsxparts.chartwrite`: `write_chart(chart)` returns a chart part
  (`c:chartSpace`) as bytes.
- `xlsxparts.chartread`: `read_chart(data)` parses a chart part into a
  `Chart`.

## Install

```
pip install xlsxparts
```

## Examples

Content types:

```python
from xlsxparts.contenttypes import ContentTypes

types = ContentTypes()
types.add_workbook()
types.add_worksheet_name("sheet1")
xml_bytes = types.to_xml()
```

Conditional formatting:

```python
from xlsxparts.conditionalformatting import (
    ConditionalFormatting, DxfFormat, HighlightRuleType,
)
from xlsxparts.cfxml import write_conditional_formatting, read_conditional_formatting

cf = ConditionalFormatting()
cf.add_cell_range("A1:A10")
cf.add_highlight_cells_rule(
    HighlightRuleType.GREATER_THAN, "100", "", DxfFormat({"font_color": "FF0000"}), False,
)
element = write_conditional_formatting(cf)
again = read_conditional_formatting(element)
```

`add_highlight_cells_rule` returns the new `CfRule`. It raises
`ValueError` when the format is missing or empty, and for
`HighlightRuleType.TIME_PERIOD`, which is not supported. Text, blank and
error rules write their formula relative to the first cell of the first
range, so such a formatting needs at least one range before it is written.

Charts:

```python
from xlsxparts.chart import Chart, ChartAxisPos, ChartType
from xlsxparts.chartwrite import write_chart
from xlsxparts.chartread import read_chart

chart = Chart(chart_type=ChartType.BAR)
chart.add_series("A1:C5", "Sheet 1", True, False, False)
chart.set_axis_title(ChartAxisPos.BOTTOM, "Month")
chart.set_chart_legend(ChartAxisPos.RIGHT, False)

data = write_chart(chart)
again = read_chart(data)
```

`add_series` returns the series it added and raises `ValueError` for an
invalid range. `write_chart` adds default axes to bar, line, scatter and
area charts that have none; stock, radar, of-pie, surface and bubble charts
are written without a chart-type element. `read_chart` raises `ValueError`
for malformed XML or an unknown chart-type element.

## What it does not do

The package works on single parts only. It does not open or write `.xlsx`
files (the zip container), and has no workbook, worksheet, shared-string,
style, drawing or relationship parts. Cell values and formulas are not
evaluated. Only the pieces of a chart listed above are kept: layout
children, series references, axes with ids, positions and titles, the chart
title, gridlines and the legend.

## Tests

```
pip install -e ".[test]"
pytest
```