"""Reading and writing ``conditionalFormatting`` elements of a worksheet."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Optional, Sequence

from .cellrange import CellRange
from .color import XlsxColor
from .conditionalformatting import (
    CfRule,
    CfValueObject,
    ConditionalFormatting,
    DxfFormat,
    ValueObjectType,
    _arg,
)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _to_int(text: Optional[str]) -> int:
    try:
        return int(text or "")
    except ValueError:
        return 0


def _write_value_object(parent: ET.Element, cfvo: CfValueObject) -> None:
    element = ET.SubElement(parent, "cfvo", {"type": cfvo.type.value, "val": cfvo.value})
    if not cfvo.gte:
        element.set("gte", "0")


def _write_rule(rule: CfRule, ranges: Sequence[CellRange]) -> ET.Element:
    element = ET.Element("cfRule", {"type": rule.type})
    if rule.dxf_format.dxf_index is not None:
        element.set("dxfId", str(rule.dxf_format.dxf_index))
    element.set("priority", str(rule.priority))
    if rule.stop_if_true:
        element.set("stopIfTrue", "1")
    if not rule.above_average:
        element.set("aboveAverage", "0")
    if rule.percent:
        element.set("percent", "1")
    if rule.bottom:
        element.set("bottom", "1")
    for name, value in (
        ("operator", rule.operator),
        ("text", rule.text),
        ("timePeriod", rule.time_period),
        ("rank", rule.rank),
        ("stdDev", rule.std_dev),
    ):
        if value is not None:
            element.set(name, value)
    if rule.equal_average:
        element.set("equalAverage", "1")

    if rule.type == "dataBar":
        bar = ET.SubElement(element, "dataBar")
        if rule.hide_data:
            bar.set("showValue", "0")
        for cfvo in rule.value_objects[:2]:
            _write_value_object(bar, cfvo)
        bar.append((rule.colors[0] if rule.colors else XlsxColor()).to_element())
    elif rule.type == "colorScale":
        scale = ET.SubElement(element, "colorScale")
        for cfvo in rule.value_objects[:3]:
            _write_value_object(scale, cfvo)
        colors = list(rule.colors[:3])
        colors += [XlsxColor()] * (2 - len(colors))
        for color in colors:
            scale.append(color.to_element())

    if rule.formula1_template is not None:
        if not ranges:
            raise ValueError("a rule with a cell-relative formula needs at least one range")
        start_cell = ranges[0].to_string().split(":")[0]
        ET.SubElement(element, "formula").text = _arg(rule.formula1_template, start_cell)
    elif rule.formula1 is not None:
        ET.SubElement(element, "formula").text = rule.formula1
    for formula in (rule.formula2, rule.formula3):
        if formula is not None:
            ET.SubElement(element, "formula").text = formula
    return element


def write_conditional_formatting(formatting: ConditionalFormatting) -> ET.Element:
    """Build the ``conditionalFormatting`` element for ``formatting``."""
    root = ET.Element(
        "conditionalFormatting",
        {"sqref": " ".join(cell_range.to_string() for cell_range in formatting.ranges)},
    )
    for rule in formatting.rules:
        root.append(_write_rule(rule, formatting.ranges))
    return root


def _read_value_object(element: ET.Element) -> CfValueObject:
    try:
        vo_type = ValueObjectType(element.get("type", ""))
    except ValueError:
        vo_type = ValueObjectType.PERCENTILE
    return CfValueObject(vo_type, element.get("val", ""), element.get("gte") != "0")


def _read_data_bar(element: ET.Element, rule: CfRule) -> None:
    if element.get("showValue") == "0":
        rule.hide_data = True
    for child in element:
        name = _local(child.tag)
        if name == "cfvo":
            rule.value_objects[1:] = [_read_value_object(child)] if rule.value_objects else []
            if not rule.value_objects:
                rule.value_objects.append(_read_value_object(child))
        elif name == "color":
            rule.colors = [XlsxColor.from_element(child)]


def _read_color_scale(element: ET.Element, rule: CfRule) -> None:
    for child in element:
        name = _local(child.tag)
        if name == "cfvo":
            cfvo = _read_value_object(child)
            if len(rule.value_objects) < 2:
                rule.value_objects.append(cfvo)
            else:
                rule.value_objects[2:] = [cfvo]
        elif name == "color":
            color = XlsxColor.from_element(child)
            if len(rule.colors) < 2:
                rule.colors.append(color)
            else:
                rule.colors[2:] = [color]


def _read_rule(element: ET.Element, dxf_formats: Optional[Sequence[DxfFormat]]) -> CfRule:
    rule = CfRule(type=element.get("type", ""))
    if "dxfId" in element.attrib:
        index = _to_int(element.get("dxfId"))
        if dxf_formats is None:
            rule.dxf_format = DxfFormat(dxf_index=index)
        elif 0 <= index < len(dxf_formats):
            found = dxf_formats[index]
            rule.dxf_format = DxfFormat(dict(found.properties), index)
        else:
            rule.dxf_format = DxfFormat()
    rule.priority = _to_int(element.get("priority"))
    rule.stop_if_true = element.get("stopIfTrue") == "1"
    rule.above_average = element.get("aboveAverage") != "0"
    rule.percent = element.get("percent") == "1"
    rule.bottom = element.get("bottom") == "1"
    rule.equal_average = element.get("equalAverage") == "1"
    rule.operator = element.get("operator")
    rule.text = element.get("text")
    rule.time_period = element.get("timePeriod")
    rule.rank = element.get("rank")
    rule.std_dev = element.get("stdDev")

    for child in element:
        name = _local(child.tag)
        if name == "formula":
            text = child.text or ""
            if rule.formula1 is None:
                rule.formula1 = text
            elif rule.formula2 is None:
                rule.formula2 = text
            elif rule.formula3 is None:
                rule.formula3 = text
        elif name == "dataBar":
            _read_data_bar(child, rule)
        elif name == "colorScale":
            _read_color_scale(child, rule)
    return rule


def read_conditional_formatting(
    element: ET.Element, dxf_formats: Optional[Sequence[DxfFormat]] = None
) -> ConditionalFormatting:
    """Read a ``conditionalFormatting`` element.

    ``dxf_formats`` is the workbook's list of differential formats; when
    given, a rule's ``dxfId`` picks its format from it.
    """
    if _local(element.tag) != "conditionalFormatting":
        raise ValueError(f"expected conditionalFormatting, got {_local(element.tag)!r}")
    formatting = ConditionalFormatting()
    for part in element.get("sqref", "").split(" "):
        if part:
            formatting.add_cell_range(part)
    for child in element:
        if _local(child.tag) == "cfRule":
            formatting.rules.append(_read_rule(child, dxf_formats))
    return formatting