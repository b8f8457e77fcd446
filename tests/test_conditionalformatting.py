import pytest

from xlsxparts.cellrange import CellRange
from xlsxparts.color import Argb, XlsxColor
from xlsxparts.conditionalformatting import (
    CfValueObject,
    ConditionalFormatting,
    DxfFormat,
    HighlightRuleType,
    ValueObjectType,
)


@pytest.fixture
def bold():
    return DxfFormat({"font_bold": True})


def test_dxf_format_empty():
    assert DxfFormat().is_empty()
    assert not DxfFormat({"font_bold": True}).is_empty()


def test_cell_is_rule_strips_equals(bold):
    cf = ConditionalFormatting()
    rule = cf.add_highlight_cells_rule(HighlightRuleType.GREATER_THAN, "=5", "", bold)
    assert rule.type == "cellIs"
    assert rule.operator == "greaterThan"
    assert rule.formula1 == "5"
    assert rule.formula2 is None
    assert cf.rules == [rule]


def test_between_keeps_both_formulas(bold):
    cf = ConditionalFormatting()
    rule = cf.add_highlight_cells_rule(HighlightRuleType.BETWEEN, "1", "=9", bold, True)
    assert (rule.formula1, rule.formula2) == ("1", "9")
    assert rule.operator == "between"
    assert rule.stop_if_true


def test_empty_format_raises():
    cf = ConditionalFormatting()
    with pytest.raises(ValueError):
        cf.add_highlight_cells_rule(HighlightRuleType.EQUAL, "1", "", DxfFormat())
    with pytest.raises(ValueError):
        cf.add_highlight_cells_rule(HighlightRuleType.EQUAL, "1")
    assert cf.rules == []


def test_time_period_raises(bold):
    cf = ConditionalFormatting()
    with pytest.raises(ValueError):
        cf.add_highlight_cells_rule(HighlightRuleType.TIME_PERIOD, "", "", bold)
    assert cf.rules == []


def test_contains_text_fills_text_only(bold):
    cf = ConditionalFormatting()
    rule = cf.add_highlight_cells_rule(HighlightRuleType.CONTAINS_TEXT, "abc", "", bold)
    assert rule.type == "containsText"
    assert rule.operator == "containsText"
    assert rule.text == "abc"
    assert rule.formula1 is None
    assert rule.formula1_template == 'NOT(ISERROR(SEARCH("abc",%2)))'


def test_begins_with_substitutes_every_marker(bold):
    cf = ConditionalFormatting()
    rule = cf.add_highlight_cells_rule(HighlightRuleType.BEGINS_WITH, "ab", "", bold)
    assert rule.formula1_template == 'LEFT(%2,LEN("ab"))="ab"'


def test_blanks_rule_keeps_template(bold):
    cf = ConditionalFormatting()
    rule = cf.add_highlight_cells_rule(HighlightRuleType.BLANKS, "", "", bold)
    assert rule.type == "containsBlanks"
    assert rule.formula1_template == "LEN(TRIM(%1))=0"


def test_duplicate_has_no_formula(bold):
    cf = ConditionalFormatting()
    rule = cf.add_highlight_cells_rule(HighlightRuleType.DUPLICATE, "", "", bold)
    assert rule.type == "duplicateValues"
    assert rule.formula1 is None and rule.formula1_template is None


def test_top_rank_default_and_flags(bold):
    cf = ConditionalFormatting()
    top = cf.add_highlight_cells_rule(HighlightRuleType.TOP, "", "", bold)
    bottom = cf.add_highlight_cells_rule(HighlightRuleType.BOTTOM_PERCENT, "5", "", bold)
    assert top.type == "top10" and top.rank == "10"
    assert not top.bottom and not top.percent
    assert bottom.rank == "5" and bottom.bottom and bottom.percent
    assert bottom.formula1 is None


def test_average_rules(bold):
    cf = ConditionalFormatting()
    below = cf.add_highlight_cells_rule(HighlightRuleType.BELOW_STD_DEV2, "", "", bold)
    above = cf.add_highlight_cells_rule(HighlightRuleType.ABOVE_OR_EQUAL_AVERAGE, "", "", bold)
    assert below.type == "aboveAverage"
    assert not below.above_average and below.std_dev == "2"
    assert above.above_average and above.equal_average and above.std_dev is None


def test_expression_rule(bold):
    cf = ConditionalFormatting()
    rule = cf.add_highlight_cells_rule(HighlightRuleType.EXPRESSION, "=$A1>0", "", bold)
    assert rule.type == "expression"
    assert rule.formula1 == "$A1>0"
    assert rule.dxf_format is bold


def test_data_bar_rule():
    cf = ConditionalFormatting()
    rule = cf.add_data_bar_rule(Argb(255, 0, 0, 255), show_data=False)
    assert rule.type == "dataBar"
    assert rule.hide_data
    assert rule.colors == [XlsxColor(Argb(255, 0, 0, 255))]
    assert rule.value_objects == [
        CfValueObject(ValueObjectType.MIN, "0"),
        CfValueObject(ValueObjectType.MAX, "0"),
    ]


def test_color_scales():
    cf = ConditionalFormatting()
    two = cf.add_2color_scale_rule(Argb(255, 255, 0, 0), XlsxColor(3))
    three = cf.add_3color_scale_rule(1, 2, 3, stop_if_true=True)
    assert two.type == three.type == "colorScale"
    assert len(two.colors) == 2 and two.colors[1] == XlsxColor(3)
    assert [v.type for v in three.value_objects] == [
        ValueObjectType.MIN,
        ValueObjectType.PERCENT,
        ValueObjectType.MAX,
    ]
    assert [v.value for v in three.value_objects] == ["0", "50", "0"]
    assert three.stop_if_true


def test_ranges():
    cf = ConditionalFormatting()
    cf.add_cell(2, 3)
    cf.add_range(1, 1, 4, 2)
    cf.add_cell_range("C3:D4")
    cf.add_cell_range(CellRange(5, 5, 6, 6))
    assert cf.ranges == [
        CellRange(2, 3, 2, 3),
        CellRange(1, 1, 4, 2),
        CellRange(3, 3, 4, 4),
        CellRange(5, 5, 6, 6),
    ]