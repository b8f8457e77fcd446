"""Reading and writing the axis elements of a chart's plot area."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Optional

from .chart import Axis, AxisPos, AxisType, Chart

_AXIS_TYPES = {
    AxisType.CAT.value: AxisType.CAT,
    AxisType.VAL.value: AxisType.VAL,
    AxisType.DATE.value: AxisType.DATE,
    AxisType.SER.value: AxisType.SER,
}

_AXIS_POSITIONS = {
    AxisPos.LEFT.value: AxisPos.LEFT,
    AxisPos.RIGHT.value: AxisPos.RIGHT,
    AxisPos.TOP.value: AxisPos.TOP,
    AxisPos.BOTTOM.value: AxisPos.BOTTOM,
}


def _local(tag: str) -> str:
    """Strip a ``{namespace}`` or ``prefix:`` from a tag."""
    return tag.rsplit("}", 1)[-1].rsplit(":", 1)[-1]


def _children(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if _local(child.tag) == name]


def _to_uint(text: Optional[str]) -> int:
    try:
        value = int(text or "")
    except ValueError:
        return 0
    return value if value >= 0 else 0


def axis_pos_string(pos: AxisPos) -> str:
    """The ``axPos`` code of a position: ``l``, ``r``, ``t``, ``b`` or empty."""
    return AxisPos(pos).value


def axis_name(axis: Optional[Axis]) -> str:
    """The title of ``axis`` at its own position, or an empty string."""
    if axis is None or not axis_pos_string(axis.pos):
        return ""
    return axis.names.get(axis.pos, "")


def _write_title(parent: ET.Element, axis: Axis) -> None:
    title = ET.SubElement(parent, "c:title")
    tx = ET.SubElement(title, "c:tx")
    rich = ET.SubElement(tx, "c:rich")
    ET.SubElement(rich, "a:bodyPr")
    ET.SubElement(rich, "a:lstStyle")
    paragraph = ET.SubElement(rich, "a:p")
    ppr = ET.SubElement(paragraph, "a:pPr", {"lvl": "0"})
    ET.SubElement(ppr, "a:defRPr", {"b": "0"})
    run = ET.SubElement(paragraph, "a:r")
    ET.SubElement(run, "a:t").text = axis_name(axis)
    ET.SubElement(title, "c:overlay", {"val": "0"})


def _write_axis(parent: ET.Element, axis: Axis, chart: Chart) -> ET.Element:
    element = ET.SubElement(parent, "c:" + axis.type.value)
    ET.SubElement(element, "c:axId", {"val": str(axis.axis_id)})
    scaling = ET.SubElement(element, "c:scaling")
    ET.SubElement(scaling, "c:orientation", {"val": "minMax"})
    ax_pos = ET.SubElement(element, "c:axPos")
    pos = axis_pos_string(axis.pos)
    if pos:
        ax_pos.set("val", pos)
    if chart.major_gridlines_enabled:
        ET.SubElement(element, "c:majorGridlines")
    if chart.minor_gridlines_enabled:
        ET.SubElement(element, "c:minorGridlines")
    _write_title(element, axis)
    ET.SubElement(element, "c:crossAx", {"val": str(axis.cross_ax)})
    return element


def write_axes(parent: ET.Element, chart: Chart) -> List[ET.Element]:
    """Append an element for each typed axis of ``chart`` to ``parent``.

    Axes without a type are skipped.  Returns the elements appended.
    """
    return [
        _write_axis(parent, axis, chart)
        for axis in chart.axes
        if axis.type is not AxisType.NONE
    ]


def _read_title(title: ET.Element, axis: Axis) -> None:
    for tx in _children(title, "tx"):
        for rich in _children(tx, "rich"):
            for paragraph in _children(rich, "p"):
                for run in _children(paragraph, "r"):
                    for text in _children(run, "t"):
                        axis.names[axis.pos] = text.text or ""


def read_axis(element: ET.Element, chart: Chart) -> Axis:
    """Read a ``catAx``, ``valAx``, ``dateAx`` or ``serAx`` element into ``chart``.

    The axis is appended to ``chart.axes`` and returned; gridline elements
    switch on the chart's gridlines.  Raises ValueError for any other element.
    """
    name = _local(element.tag)
    axis_type = _AXIS_TYPES.get(name)
    if axis_type is None:
        raise ValueError(f"not an axis element: {name!r}")
    axis = Axis(type=axis_type)
    chart.axes.append(axis)

    for child in element:
        child_name = _local(child.tag)
        if child_name == "axId":
            axis.axis_id = _to_uint(child.get("val"))
        elif child_name == "axPos":
            pos = _AXIS_POSITIONS.get(child.get("val", ""))
            if pos is not None:
                axis.pos = pos
        elif child_name == "majorGridlines":
            chart.major_gridlines_enabled = True
        elif child_name == "minorGridlines":
            chart.minor_gridlines_enabled = True
        elif child_name == "title":
            _read_title(child, axis)
        elif child_name == "crossAx":
            axis.cross_ax = _to_uint(child.get("val"))
    return axis