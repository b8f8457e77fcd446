"""Chart model: chart type, data series, axes, title and legend."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from .cellrange import CellRange

_NEEDS_QUOTING = re.compile(r"[ +\-,%^=<>'&]")


def escape_sheet_name(name: str) -> str:
    """Quote a sheet name for use in a formula reference when it needs it.

    Names holding spaces, quotes or operator characters are wrapped in
    single quotes, with embedded quotes doubled.
    """
    if not _NEEDS_QUOTING.search(name):
        return name
    return "'" + name.replace("'", "''") + "'"


class ChartType(Enum):
    """The kind of chart; the value is the element name in the chart part."""

    NO_STATEMENT = ""
    AREA = "areaChart"
    AREA_3D = "area3DChart"
    LINE = "lineChart"
    LINE_3D = "line3DChart"
    STOCK = "stockChart"
    RADAR = "radarChart"
    SCATTER = "scatterChart"
    PIE = "pieChart"
    PIE_3D = "pie3DChart"
    DOUGHNUT = "doughnutChart"
    BAR = "barChart"
    BAR_3D = "bar3DChart"
    OF_PIE = "ofPieChart"
    SURFACE = "surfaceChart"
    SURFACE_3D = "surface3DChart"
    BUBBLE = "bubbleChart"


class ChartAxisPos(Enum):
    """A side of the chart, used for axis titles and the legend."""

    NONE = ""
    LEFT = "l"
    RIGHT = "r"
    TOP = "t"
    BOTTOM = "b"


class AxisType(Enum):
    """The kind of an axis; the value is the element name."""

    NONE = ""
    CAT = "catAx"
    VAL = "valAx"
    DATE = "dateAx"
    SER = "serAx"


class AxisPos(Enum):
    """Where an axis is drawn; the value is its ``axPos`` code."""

    NONE = ""
    LEFT = "l"
    RIGHT = "r"
    TOP = "t"
    BOTTOM = "b"


_AXIS_POS_FOR_CHART_POS = {
    ChartAxisPos.LEFT: AxisPos.LEFT,
    ChartAxisPos.RIGHT: AxisPos.RIGHT,
    ChartAxisPos.TOP: AxisPos.TOP,
    ChartAxisPos.BOTTOM: AxisPos.BOTTOM,
}

_XY_CHARTS = (ChartType.SCATTER, ChartType.BUBBLE)


@dataclass
class Series:
    """One data series, given by references into a sheet."""

    number_ref: str = ""
    ax_ref: str = ""
    header_h_ref: str = ""
    header_v_ref: str = ""
    swap_header: bool = False


@dataclass
class Axis:
    """A chart axis with its id, the id of the axis it crosses, and titles."""

    type: AxisType = AxisType.NONE
    pos: AxisPos = AxisPos.NONE
    axis_id: int = -1
    cross_ax: int = -1
    names: Dict[AxisPos, str] = field(default_factory=dict)

    @classmethod
    def with_title(
        cls, axis_type: AxisType, pos: AxisPos, axis_id: int, cross_ax: int, title: str = ""
    ) -> "Axis":
        """Build an axis whose title sits at its own position."""
        return cls(axis_type, pos, axis_id, cross_ax, {pos: title})


@dataclass
class Chart:
    """A chart drawn from data on a sheet."""

    sheet_name: str = "Sheet1"
    chart_type: ChartType = ChartType.NO_STATEMENT
    title: str = ""
    layout: str = ""
    legend_pos: ChartAxisPos = ChartAxisPos.NONE
    legend_overlay: bool = False
    major_gridlines_enabled: bool = False
    minor_gridlines_enabled: bool = False
    series: List[Series] = field(default_factory=list)
    axes: List[Axis] = field(default_factory=list)
    axis_names: Dict[AxisPos, str] = field(default_factory=dict)

    def _ref(self, sheet: str, cell_range: CellRange) -> str:
        return f"{sheet}!{cell_range.to_string(True, True)}"

    def add_series(
        self,
        cell_range: Union[CellRange, str],
        sheet_name: Optional[str] = None,
        header_h: bool = False,
        header_v: bool = False,
        swap_headers: bool = False,
    ) -> List[Series]:
        """Add the series held in ``cell_range`` and return those added.

        A single row or column gives one series; otherwise each column (when
        there are more rows than columns, or when ``swap_headers``) or each
        row becomes a series.  ``header_h`` marks the first row as headers,
        ``header_v`` the first column.  Raises ValueError for an invalid range.
        """
        if isinstance(cell_range, str):
            cell_range = CellRange.from_string(cell_range)
        if not cell_range.is_valid():
            raise ValueError(f"invalid cell range: {cell_range!r}")
        sheet = escape_sheet_name(sheet_name if sheet_name is not None else self.sheet_name)
        r = cell_range
        added: List[Series] = []

        if r.column_count() == 1 or r.row_count() == 1:
            added.append(Series(number_ref=self._ref(sheet, r)))
        elif r.column_count() < r.row_count() or swap_headers:
            first_row, first_col = r.first_row, r.first_column
            ax_ref = ""
            if self.chart_type in _XY_CHARTS:
                first_col += 1
                ax_ref = self._ref(
                    sheet, CellRange(r.first_row, r.first_column, r.last_row, r.first_column)
                )
            if header_h:
                first_row += 1
            if header_v:
                first_col += 1
            for col in range(first_col, r.last_column + 1):
                series = Series(
                    number_ref=self._ref(sheet, CellRange(first_row, col, r.last_row, col)),
                    ax_ref=ax_ref,
                    swap_header=swap_headers,
                )
                if header_h:
                    series.header_h_ref = self._ref(
                        sheet, CellRange(r.first_row, col, r.first_row, col)
                    )
                if header_v:
                    series.header_v_ref = self._ref(
                        sheet, CellRange(first_row, r.first_column, r.last_row, r.first_column)
                    )
                added.append(series)
        else:
            first_row, first_col = r.first_row, r.first_column
            ax_ref = ""
            if self.chart_type in _XY_CHARTS:
                first_row += 1
                ax_ref = self._ref(
                    sheet, CellRange(r.first_row, r.first_column, r.first_row, r.last_column)
                )
            if header_h:
                first_row += 1
            if header_v:
                first_col += 1
            for row in range(first_row, r.last_row + 1):
                series = Series(
                    number_ref=self._ref(sheet, CellRange(row, first_col, row, r.last_column)),
                    ax_ref=ax_ref,
                    swap_header=swap_headers,
                )
                if header_h:
                    series.header_h_ref = self._ref(
                        sheet, CellRange(r.first_row, first_col, r.first_row, r.last_column)
                    )
                if header_v:
                    series.header_v_ref = self._ref(
                        sheet, CellRange(row, r.first_column, row, r.first_column)
                    )
                added.append(series)

        self.series.extend(added)
        return added

    def set_axis_title(self, pos: ChartAxisPos, title: str) -> None:
        """Title the axis at ``pos``; an empty title or no position is ignored."""
        if not title:
            return
        axis_pos = _AXIS_POS_FOR_CHART_POS.get(ChartAxisPos(pos))
        if axis_pos is not None:
            self.axis_names[axis_pos] = title

    def set_chart_legend(self, pos: ChartAxisPos, overlay: bool = False) -> None:
        """Place the legend at ``pos``; ``ChartAxisPos.NONE`` hides it."""
        self.legend_pos = ChartAxisPos(pos)
        self.legend_overlay = overlay

    def set_gridlines_enable(self, major: bool = False, minor: bool = False) -> None:
        self.major_gridlines_enabled = major
        self.minor_gridlines_enabled = minor