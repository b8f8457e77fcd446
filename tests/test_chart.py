import pytest

from xlsxparts.cellrange import CellRange
from xlsxparts.chart import (
    Axis,
    AxisPos,
    AxisType,
    Chart,
    ChartAxisPos,
    ChartType,
    escape_sheet_name,
)


def _split(ref):
    sheet, _, cells = ref.rpartition("!")
    return sheet, CellRange.from_string(cells)


def test_escape_plain_name_unchanged():
    assert escape_sheet_name("Sheet1") == "Sheet1"


def test_escape_name_with_space():
    assert escape_sheet_name("My Sheet") == "'My Sheet'"


def test_escape_doubles_quotes():
    assert escape_sheet_name("It's") == "'It''s'"


def test_single_column_gives_one_series():
    chart = Chart(sheet_name="Data")
    added = chart.add_series(CellRange(1, 1, 5, 1))
    assert len(added) == 1
    assert chart.series == added
    sheet, rng = _split(added[0].number_ref)
    assert sheet == "Data"
    assert rng == CellRange(1, 1, 5, 1)
    assert "$" in added[0].number_ref


def test_single_row_from_string():
    chart = Chart()
    added = chart.add_series("A1:D1")
    assert len(added) == 1
    assert _split(added[0].number_ref)[1] == CellRange(1, 1, 1, 4)


def test_column_based_series_with_headers():
    chart = Chart(sheet_name="S")
    added = chart.add_series(CellRange(1, 1, 10, 3), header_h=True, header_v=True)
    assert len(added) == 2
    for offset, series in enumerate(added):
        col = 2 + offset
        assert _split(series.number_ref)[1] == CellRange(2, col, 10, col)
        assert _split(series.header_h_ref)[1] == CellRange(1, col, 1, col)
        assert _split(series.header_v_ref)[1] == CellRange(2, 1, 10, 1)
        assert series.ax_ref == ""
        assert series.swap_header is False


def test_row_based_series():
    chart = Chart()
    added = chart.add_series(CellRange(1, 1, 3, 8), header_h=True)
    assert len(added) == 2
    assert [_split(s.number_ref)[1] for s in added] == [
        CellRange(2, 1, 2, 8),
        CellRange(3, 1, 3, 8),
    ]
    assert all(_split(s.header_h_ref)[1] == CellRange(1, 1, 1, 8) for s in added)
    assert all(s.header_v_ref == "" for s in added)


def test_swap_headers_forces_column_based():
    chart = Chart()
    added = chart.add_series(CellRange(1, 1, 2, 4), swap_headers=True)
    assert len(added) == 4
    assert all(s.swap_header for s in added)


def test_scatter_uses_first_column_as_x():
    chart = Chart(chart_type=ChartType.SCATTER)
    added = chart.add_series(CellRange(1, 1, 10, 3))
    assert len(added) == 2
    for series in added:
        assert _split(series.ax_ref)[1] == CellRange(1, 1, 10, 1)


def test_other_sheet_name_is_escaped():
    chart = Chart(sheet_name="Sheet1")
    added = chart.add_series(CellRange(1, 1, 4, 1), sheet_name="My Data")
    assert _split(added[0].number_ref)[0] == escape_sheet_name("My Data")


def test_invalid_range_raises():
    chart = Chart()
    with pytest.raises(ValueError):
        chart.add_series(CellRange(5, 1, 1, 1))
    assert chart.series == []


def test_set_axis_title():
    chart = Chart()
    chart.set_axis_title(ChartAxisPos.LEFT, "Amount")
    chart.set_axis_title(ChartAxisPos.BOTTOM, "")
    chart.set_axis_title(ChartAxisPos.NONE, "ignored")
    assert chart.axis_names == {AxisPos.LEFT: "Amount"}


def test_legend_and_gridlines():
    chart = Chart()
    assert chart.legend_pos is ChartAxisPos.NONE
    chart.set_chart_legend(ChartAxisPos.TOP, True)
    chart.set_gridlines_enable(True, False)
    assert chart.legend_pos is ChartAxisPos.TOP
    assert chart.legend_overlay is True
    assert chart.major_gridlines_enabled is True
    assert chart.minor_gridlines_enabled is False


def test_enum_values_match_element_names():
    assert ChartType.BAR.value == "barChart"
    assert AxisType.CAT.value == "catAx"
    assert ChartType("pie3DChart") is ChartType.PIE_3D


def test_axis_with_title():
    axis = Axis.with_title(AxisType.VAL, AxisPos.LEFT, 1, 0, "Y")
    assert axis.names == {AxisPos.LEFT: "Y"}
    assert (axis.axis_id, axis.cross_ax) == (1, 0)
    default = Axis()
    assert default.type is AxisType.NONE
    assert default.axis_id == -1