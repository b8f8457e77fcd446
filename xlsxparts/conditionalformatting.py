"""Conditional formatting rules applied to cells and ranges of a worksheet."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Union

from .cellrange import CellRange
from .color import Argb, ThemeRef, XlsxColor

ColorLike = Union[XlsxColor, Argb, int, ThemeRef, None]

_PLACEHOLDER = re.compile(r"%(\d{1,2})")


def _arg(template: str, value: str) -> str:
    """Replace every occurrence of the lowest-numbered ``%N`` marker with ``value``."""
    numbers = [int(n) for n in _PLACEHOLDER.findall(template) if 1 <= int(n) <= 99]
    if not numbers:
        return template
    lowest = min(numbers)
    return _PLACEHOLDER.sub(
        lambda match: value if int(match.group(1)) == lowest else match.group(0), template
    )


class HighlightRuleType(IntEnum):
    """The kinds of highlight rule a cell range can carry."""

    LESS_THAN = 0
    LESS_THAN_OR_EQUAL = 1
    EQUAL = 2
    NOT_EQUAL = 3
    GREATER_THAN_OR_EQUAL = 4
    GREATER_THAN = 5
    BETWEEN = 6
    NOT_BETWEEN = 7

    CONTAINS_TEXT = 8
    NOT_CONTAINS_TEXT = 9
    BEGINS_WITH = 10
    ENDS_WITH = 11

    TIME_PERIOD = 12

    DUPLICATE = 13
    UNIQUE = 14

    BLANKS = 15
    NO_BLANKS = 16
    ERRORS = 17
    NO_ERRORS = 18

    TOP = 19
    TOP_PERCENT = 20
    BOTTOM = 21
    BOTTOM_PERCENT = 22

    ABOVE_AVERAGE = 23
    ABOVE_OR_EQUAL_AVERAGE = 24
    BELOW_AVERAGE = 25
    BELOW_OR_EQUAL_AVERAGE = 26
    ABOVE_STD_DEV1 = 27
    ABOVE_STD_DEV2 = 28
    ABOVE_STD_DEV3 = 29
    BELOW_STD_DEV1 = 30
    BELOW_STD_DEV2 = 31
    BELOW_STD_DEV3 = 32

    EXPRESSION = 33


class ValueObjectType(Enum):
    """How a colour-scale or data-bar threshold value is interpreted."""

    FORMULA = "formula"
    MAX = "max"
    MIN = "min"
    NUM = "num"
    PERCENT = "percent"
    PERCENTILE = "percentile"


@dataclass
class DxfFormat:
    """A differential format: the style changes a matching rule applies."""

    properties: Dict[str, Any] = field(default_factory=dict)
    dxf_index: Optional[int] = None

    def is_empty(self) -> bool:
        return not self.properties


@dataclass
class CfValueObject:
    """A threshold of a data bar or colour scale."""

    type: ValueObjectType
    value: str = ""
    gte: bool = True


@dataclass
class CfRule:
    """One conditional formatting rule."""

    type: str = ""
    dxf_format: DxfFormat = field(default_factory=DxfFormat)
    priority: int = 1
    stop_if_true: bool = False
    above_average: bool = True
    equal_average: bool = False
    percent: bool = False
    bottom: bool = False
    hide_data: bool = False
    operator: Optional[str] = None
    text: Optional[str] = None
    time_period: Optional[str] = None
    rank: Optional[str] = None
    std_dev: Optional[str] = None
    formula1_template: Optional[str] = None
    formula1: Optional[str] = None
    formula2: Optional[str] = None
    formula3: Optional[str] = None
    value_objects: List[CfValueObject] = field(default_factory=list)
    colors: List[XlsxColor] = field(default_factory=list)


_CELL_IS_OPERATORS = {
    HighlightRuleType.LESS_THAN: "lessThan",
    HighlightRuleType.LESS_THAN_OR_EQUAL: "lessThanOrEqual",
    HighlightRuleType.EQUAL: "equal",
    HighlightRuleType.NOT_EQUAL: "notEqual",
    HighlightRuleType.GREATER_THAN_OR_EQUAL: "greaterThanOrEqual",
    HighlightRuleType.GREATER_THAN: "greaterThan",
    HighlightRuleType.BETWEEN: "between",
    HighlightRuleType.NOT_BETWEEN: "notBetween",
}

_TEXT_RULES = {
    HighlightRuleType.CONTAINS_TEXT: (
        "containsText", "containsText", 'NOT(ISERROR(SEARCH("%1",%2)))'
    ),
    HighlightRuleType.NOT_CONTAINS_TEXT: (
        "notContainsText", "notContains", 'ISERROR(SEARCH("%2",%1))'
    ),
    HighlightRuleType.BEGINS_WITH: ("beginsWith", "beginsWith", 'LEFT(%2,LEN("%1"))="%1"'),
    HighlightRuleType.ENDS_WITH: ("endsWith", "endsWith", 'RIGHT(%2,LEN("%1"))="%1"'),
}

_CHECK_RULES = {
    HighlightRuleType.ERRORS: ("containsErrors", "ISERROR(%1)"),
    HighlightRuleType.NO_ERRORS: ("notContainsErrors", "NOT(ISERROR(%1))"),
    HighlightRuleType.BLANKS: ("containsBlanks", "LEN(TRIM(%1))=0"),
    HighlightRuleType.NO_BLANKS: ("notContainsBlanks", "LEN(TRIM(%1))>0"),
}

_RANK_RULES = {
    HighlightRuleType.TOP,
    HighlightRuleType.TOP_PERCENT,
    HighlightRuleType.BOTTOM,
    HighlightRuleType.BOTTOM_PERCENT,
}

_BELOW_AVERAGE = {
    HighlightRuleType.BELOW_AVERAGE,
    HighlightRuleType.BELOW_OR_EQUAL_AVERAGE,
    HighlightRuleType.BELOW_STD_DEV1,
    HighlightRuleType.BELOW_STD_DEV2,
    HighlightRuleType.BELOW_STD_DEV3,
}

_STD_DEV = {
    HighlightRuleType.ABOVE_STD_DEV1: "1",
    HighlightRuleType.BELOW_STD_DEV1: "1",
    HighlightRuleType.ABOVE_STD_DEV2: "2",
    HighlightRuleType.BELOW_STD_DEV2: "2",
    HighlightRuleType.ABOVE_STD_DEV3: "3",
    HighlightRuleType.BELOW_STD_DEV3: "3",
}


def _strip_equals(formula: str) -> str:
    return formula[1:] if formula.startswith("=") else formula


def _as_color(color: ColorLike) -> XlsxColor:
    return color if isinstance(color, XlsxColor) else XlsxColor(color)


@dataclass
class ConditionalFormatting:
    """A set of rules together with the cell ranges they apply to."""

    ranges: List[CellRange] = field(default_factory=list)
    rules: List[CfRule] = field(default_factory=list)

    def add_highlight_cells_rule(
        self,
        rule_type: HighlightRuleType,
        formula1: str = "",
        formula2: str = "",
        format: Optional[DxfFormat] = None,
        stop_if_true: bool = False,
    ) -> CfRule:
        """Add a highlight rule that applies ``format`` to matching cells.

        Raises ValueError when the format is empty or the rule type is
        not supported.
        """
        if format is None or format.is_empty():
            raise ValueError("a highlight rule needs a non-empty format")
        rule_type = HighlightRuleType(rule_type)
        rule = CfRule()
        skip_formula = False

        if rule_type in _CELL_IS_OPERATORS:
            rule.type = "cellIs"
            rule.operator = _CELL_IS_OPERATORS[rule_type]
        elif rule_type in _TEXT_RULES:
            rule.type, rule.operator, template = _TEXT_RULES[rule_type]
            rule.formula1_template = _arg(template, formula1)
            rule.text = formula1
            skip_formula = True
        elif rule_type is HighlightRuleType.TIME_PERIOD:
            raise ValueError("time period rules are not supported")
        elif rule_type is HighlightRuleType.DUPLICATE:
            rule.type = "duplicateValues"
        elif rule_type is HighlightRuleType.UNIQUE:
            rule.type = "uniqueValues"
        elif rule_type in _CHECK_RULES:
            rule.type, rule.formula1_template = _CHECK_RULES[rule_type]
            skip_formula = True
        elif rule_type in _RANK_RULES:
            rule.type = "top10"
            rule.bottom = rule_type in (HighlightRuleType.BOTTOM, HighlightRuleType.BOTTOM_PERCENT)
            rule.percent = rule_type in (
                HighlightRuleType.TOP_PERCENT,
                HighlightRuleType.BOTTOM_PERCENT,
            )
            rule.rank = formula1 or "10"
            skip_formula = True
        elif HighlightRuleType.ABOVE_AVERAGE <= rule_type <= HighlightRuleType.BELOW_STD_DEV3:
            rule.type = "aboveAverage"
            rule.above_average = rule_type not in _BELOW_AVERAGE
            rule.equal_average = rule_type in (
                HighlightRuleType.ABOVE_OR_EQUAL_AVERAGE,
                HighlightRuleType.BELOW_OR_EQUAL_AVERAGE,
            )
            rule.std_dev = _STD_DEV.get(rule_type)
        else:
            rule.type = "expression"

        rule.dxf_format = format
        rule.stop_if_true = stop_if_true
        if not skip_formula:
            if formula1:
                rule.formula1 = _strip_equals(formula1)
            if formula2:
                rule.formula2 = _strip_equals(formula2)
        self.rules.append(rule)
        return rule

    def add_data_bar_rule(
        self,
        color: ColorLike,
        type1: ValueObjectType = ValueObjectType.MIN,
        val1: str = "0",
        type2: ValueObjectType = ValueObjectType.MAX,
        val2: str = "0",
        show_data: bool = True,
        stop_if_true: bool = False,
    ) -> CfRule:
        """Add a data bar drawn in ``color`` between two thresholds."""
        rule = CfRule(
            type="dataBar",
            stop_if_true=stop_if_true,
            hide_data=not show_data,
            value_objects=[CfValueObject(type1, val1), CfValueObject(type2, val2)],
            colors=[_as_color(color)],
        )
        self.rules.append(rule)
        return rule

    def add_2color_scale_rule(
        self, min_color: ColorLike, max_color: ColorLike, stop_if_true: bool = False
    ) -> CfRule:
        """Add a two-colour scale from the minimum to the maximum value."""
        rule = CfRule(
            type="colorScale",
            stop_if_true=stop_if_true,
            value_objects=[
                CfValueObject(ValueObjectType.MIN, "0"),
                CfValueObject(ValueObjectType.MAX, "0"),
            ],
            colors=[_as_color(min_color), _as_color(max_color)],
        )
        self.rules.append(rule)
        return rule

    def add_3color_scale_rule(
        self,
        min_color: ColorLike,
        mid_color: ColorLike,
        max_color: ColorLike,
        stop_if_true: bool = False,
    ) -> CfRule:
        """Add a three-colour scale with its midpoint at the 50th percent."""
        rule = CfRule(
            type="colorScale",
            stop_if_true=stop_if_true,
            value_objects=[
                CfValueObject(ValueObjectType.MIN, "0"),
                CfValueObject(ValueObjectType.PERCENT, "50"),
                CfValueObject(ValueObjectType.MAX, "0"),
            ],
            colors=[_as_color(min_color), _as_color(mid_color), _as_color(max_color)],
        )
        self.rules.append(rule)
        return rule

    def add_cell(self, row: int, col: int) -> None:
        self.ranges.append(CellRange(row, col, row, col))

    def add_range(self, first_row: int, first_col: int, last_row: int, last_col: int) -> None:
        self.ranges.append(CellRange(first_row, first_col, last_row, last_col))

    def add_cell_range(self, cell_range: Union[CellRange, str]) -> None:
        """Add a range given as a :class:`CellRange` or in A1 notation."""
        if isinstance(cell_range, str):
            cell_range = CellRange.from_string(cell_range)
        self.ranges.append(cell_range)