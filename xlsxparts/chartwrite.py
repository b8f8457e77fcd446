"""Serialising a chart model to its ``chartSpace`` XML part."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Callable, Dict

from .chart import Axis, AxisPos, AxisType, Chart, ChartAxisPos, ChartType, Series
from .chartaxes import write_axes

CHART_NAMESPACE = "http://schemas.openxmlformats.org/drawingml/2006/chart"
DRAWING_NAMESPACE = "http://schemas.openxmlformats.org/drawingml/2006/main"
RELATIONSHIPS_NAMESPACE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
_EMPTY_LAYOUT = "<c:layout />"

_XY_CHARTS = (ChartType.SCATTER, ChartType.BUBBLE)


def _write_title(parent: ET.Element, title: str) -> None:
    if not title:
        return
    element = ET.SubElement(parent, "c:title")
    tx = ET.SubElement(element, "c:tx")
    rich = ET.SubElement(tx, "c:rich")
    ET.SubElement(rich, "a:bodyPr")
    ET.SubElement(rich, "a:lstStyle")
    paragraph = ET.SubElement(rich, "a:p")
    ppr = ET.SubElement(paragraph, "a:pPr", {"lvl": "0"})
    ET.SubElement(ppr, "a:defRPr", {"b": "0"})
    run = ET.SubElement(paragraph, "a:r")
    ET.SubElement(run, "a:t").text = title
    ET.SubElement(element, "c:overlay", {"val": "0"})


def _write_legend(parent: ET.Element, chart: Chart) -> None:
    if chart.legend_pos is ChartAxisPos.NONE:
        return
    legend = ET.SubElement(parent, "c:legend")
    ET.SubElement(legend, "c:legendPos", {"val": chart.legend_pos.value or "r"})
    ET.SubElement(legend, "c:overlay", {"val": "1" if chart.legend_overlay else "0"})


def _write_ref(parent: ET.Element, outer: str, ref_kind: str, formula: str) -> None:
    wrapper = ET.SubElement(parent, outer)
    ref = ET.SubElement(wrapper, ref_kind)
    ET.SubElement(ref, "c:f").text = formula


def _write_series(parent: ET.Element, chart: Chart, series: Series, index: int) -> None:
    element = ET.SubElement(parent, "c:ser")
    ET.SubElement(element, "c:idx", {"val": str(index)})
    ET.SubElement(element, "c:order", {"val": str(index)})
    if series.swap_header:
        header1, header2 = series.header_h_ref, series.header_v_ref
    else:
        header1, header2 = series.header_v_ref, series.header_h_ref
    if header1:
        _write_ref(element, "c:tx", "c:strRef", header1)
    if header2:
        _write_ref(element, "c:cat", "c:strRef", header2)
    if series.number_ref:
        outer = "c:yVal" if chart.chart_type in _XY_CHARTS else "c:val"
        _write_ref(element, outer, "c:numRef", series.number_ref)


def _write_all_series(parent: ET.Element, chart: Chart) -> None:
    for index, series in enumerate(chart.series):
        _write_series(parent, chart, series, index)


def _write_axis_ids(parent: ET.Element, chart: Chart) -> None:
    for axis in chart.axes:
        ET.SubElement(parent, "c:axId", {"val": str(axis.axis_id)})


def _titled_default_axes(chart: Chart, bottom_type: AxisType) -> None:
    chart.axes.append(
        Axis.with_title(bottom_type, AxisPos.BOTTOM, 0, 1, chart.axis_names.get(AxisPos.BOTTOM, ""))
    )
    chart.axes.append(
        Axis.with_title(AxisType.VAL, AxisPos.LEFT, 1, 0, chart.axis_names.get(AxisPos.LEFT, ""))
    )


def _write_pie(parent: ET.Element, chart: Chart) -> None:
    element = ET.SubElement(parent, "c:" + chart.chart_type.value)
    ET.SubElement(element, "c:varyColors", {"val": "1"})
    _write_all_series(element, chart)


def _write_bar(parent: ET.Element, chart: Chart) -> None:
    element = ET.SubElement(parent, "c:" + chart.chart_type.value)
    ET.SubElement(element, "c:barDir", {"val": "col"})
    _write_all_series(element, chart)
    if not chart.axes:
        _titled_default_axes(chart, AxisType.CAT)
    _write_axis_ids(element, chart)


def _write_line(parent: ET.Element, chart: Chart) -> None:
    element = ET.SubElement(parent, "c:" + chart.chart_type.value)
    _write_all_series(element, chart)
    if not chart.axes:
        _titled_default_axes(chart, AxisType.CAT)
        if chart.chart_type is ChartType.LINE_3D:
            chart.axes.append(Axis(AxisType.SER, AxisPos.BOTTOM, 2, 0))
    _write_axis_ids(element, chart)


def _write_scatter(parent: ET.Element, chart: Chart) -> None:
    element = ET.SubElement(parent, "c:scatterChart")
    ET.SubElement(element, "c:scatterStyle")
    _write_all_series(element, chart)
    if not chart.axes:
        _titled_default_axes(chart, AxisType.VAL)
    _write_axis_ids(element, chart)


def _write_area(parent: ET.Element, chart: Chart) -> None:
    element = ET.SubElement(parent, "c:" + chart.chart_type.value)
    _write_all_series(element, chart)
    if not chart.axes:
        chart.axes.append(Axis(AxisType.CAT, AxisPos.BOTTOM, 0, 1))
        chart.axes.append(Axis(AxisType.VAL, AxisPos.LEFT, 1, 0))
    _write_axis_ids(element, chart)


def _write_doughnut(parent: ET.Element, chart: Chart) -> None:
    element = ET.SubElement(parent, "c:doughnutChart")
    ET.SubElement(element, "c:varyColors", {"val": "1"})
    _write_all_series(element, chart)
    ET.SubElement(element, "c:holeSize", {"val": "50"})


_TYPE_WRITERS: Dict[ChartType, Callable[[ET.Element, Chart], None]] = {
    ChartType.AREA: _write_area,
    ChartType.AREA_3D: _write_area,
    ChartType.LINE: _write_line,
    ChartType.LINE_3D: _write_line,
    ChartType.SCATTER: _write_scatter,
    ChartType.PIE: _write_pie,
    ChartType.PIE_3D: _write_pie,
    ChartType.DOUGHNUT: _write_doughnut,
    ChartType.BAR: _write_bar,
    ChartType.BAR_3D: _write_bar,
}


def write_chart(chart: Chart) -> bytes:
    """Serialise ``chart`` as a chart part.

    Bar, line, scatter and area charts without axes get default axes,
    which are added to ``chart.axes``.  Stock, radar, of-pie, surface and
    bubble charts are written without a chart-type element.  The chart's
    ``layout`` is inserted verbatim into ``c:layout``.
    """
    root = ET.Element(
        "c:chartSpace",
        {
            "xmlns:c": CHART_NAMESPACE,
            "xmlns:a": DRAWING_NAMESPACE,
            "xmlns:r": RELATIONSHIPS_NAMESPACE,
        },
    )
    chart_element = ET.SubElement(root, "c:chart")
    _write_title(chart_element, chart.title)

    plot_area = ET.SubElement(chart_element, "c:plotArea")
    ET.SubElement(plot_area, "c:layout")
    writer = _TYPE_WRITERS.get(chart.chart_type)
    if writer is not None:
        writer(plot_area, chart)
    write_axes(plot_area, chart)

    _write_legend(chart_element, chart)

    text = ET.tostring(root, encoding="unicode")
    text = text.replace(_EMPTY_LAYOUT, f"<c:layout>{chart.layout}</c:layout>", 1)
    return (_DECLARATION + text).encode("utf-8")