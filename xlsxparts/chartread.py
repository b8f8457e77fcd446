"""Reading a chart model back from its ``chartSpace`` XML part."""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET
from typing import Dict, List, Union

from .chart import Chart, ChartAxisPos, ChartType, Series
from .chartaxes import read_axis

_AXIS_ELEMENTS = {"catAx", "valAx", "dateAx", "serAx"}

_CHART_TYPES = {chart_type.value: chart_type for chart_type in ChartType if chart_type.value}

_LEGEND_POSITIONS = {
    "r": ChartAxisPos.RIGHT,
    "l": ChartAxisPos.LEFT,
    "t": ChartAxisPos.TOP,
    "b": ChartAxisPos.BOTTOM,
}


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if _local(child.tag) == name]


def _first_formula(element: ET.Element) -> str:
    for formula in _children(element, "f"):
        return formula.text or ""
    return ""


class _Reader:
    """Walks a parsed chart part, keeping the document's namespace prefixes."""

    def __init__(self, prefixes: Dict[str, str]) -> None:
        self._prefixes = prefixes

    def qualified_name(self, tag: str) -> str:
        if not tag.startswith("{"):
            return tag
        uri, local = tag[1:].split("}", 1)
        prefix = self._prefixes.get(uri, "")
        return f"{prefix}:{local}" if prefix else local

    def subtree(self, element: ET.Element) -> str:
        """Rebuild the markup of the children of ``element``, without text."""
        parts: List[str] = []
        for child in element:
            name = self.qualified_name(child.tag)
            attrs = "".join(f' {_local(key)}="{value}"' for key, value in child.attrib.items())
            parts.append(f"<{name}{attrs}>{self.subtree(child)}</{name}>")
        return "".join(parts)

    def read_chart(self, element: ET.Element, chart: Chart) -> None:
        for child in element:
            name = _local(child.tag)
            if name == "plotArea":
                self.read_plot_area(child, chart)
            elif name == "title":
                _read_chart_title(child, chart)
            elif name == "legend":
                _read_legend(child, chart)

    def read_plot_area(self, element: ET.Element, chart: Chart) -> None:
        for child in element:
            name = _local(child.tag)
            if name == "layout":
                chart.layout = self.subtree(child)
            elif name.endswith("Chart"):
                _read_type_chart(child, chart)
            elif name in _AXIS_ELEMENTS:
                read_axis(child, chart)
            elif name == "legend":
                _read_legend(child, chart)


def _read_type_chart(element: ET.Element, chart: Chart) -> None:
    name = _local(element.tag)
    chart_type = _CHART_TYPES.get(name)
    if chart_type is None:
        chart.chart_type = ChartType.NO_STATEMENT
        raise ValueError(f"undefined chart type: {name!r}")
    chart.chart_type = chart_type
    for child in _children(element, "ser"):
        chart.series.append(_read_series(child))


def _read_series(element: ET.Element) -> Series:
    series = Series()
    for child in element:
        name = _local(child.tag)
        if name == "tx":
            for ref in _children(child, "strRef"):
                series.header_v_ref = _first_formula(ref)
        elif name in ("cat", "xVal"):
            for ref in child:
                ref_name = _local(ref.tag)
                if ref_name == "numRef":
                    series.ax_ref = _first_formula(ref)
                elif ref_name == "strRef":
                    series.header_h_ref = _first_formula(ref)
        elif name in ("val", "yVal"):
            for ref in _children(child, "numRef"):
                series.number_ref = _first_formula(ref)
    return series


def _read_chart_title(element: ET.Element, chart: Chart) -> None:
    for tx in _children(element, "tx"):
        for rich in _children(tx, "rich"):
            for paragraph in _children(rich, "p"):
                for run in _children(paragraph, "r"):
                    for text in _children(run, "t"):
                        chart.title = text.text or ""
                        return


def _read_legend(element: ET.Element, chart: Chart) -> None:
    for child in element:
        name = _local(child.tag)
        if name == "legendPos":
            value = child.get("val", "").lower()
            chart.legend_pos = _LEGEND_POSITIONS.get(value, ChartAxisPos.NONE)
        elif name == "overlay":
            chart.legend_overlay = child.get("val", "") == "1"


def read_chart(data: Union[bytes, str]) -> Chart:
    """Parse a chart part into a :class:`Chart`.

    Raises ValueError for malformed XML or an unknown chart-type element.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    prefixes: Dict[str, str] = {}
    root = None
    try:
        for event, item in ET.iterparse(io.BytesIO(data), events=("start-ns", "start")):
            if event == "start-ns":
                prefix, uri = item
                prefixes.setdefault(uri, prefix)
            elif root is None:
                root = item
    except ET.ParseError as exc:
        raise ValueError(f"malformed chart part: {exc}") from exc

    chart = Chart()
    if root is None:
        return chart
    reader = _Reader(prefixes)
    for element in root.iter():
        if _local(element.tag) == "chart":
            reader.read_chart(element, chart)
    return chart