"""pyqtgraph view of the frontier curve and the allocation point."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pyqtgraph as pg
from PySide6.QtCore import QEasingCurve, QVariantAnimation, QPointF
from PySide6.QtWidgets import QWidget

from portfoliofrontier.config import (
    ALLOCATION_COLOR, CHART_TITLE, FRONTIER_COLOR, X_TITLE, Y_TITLE,
)
from portfoliofrontier.model.formatting import axis_tick_label, point_tooltip
from portfoliofrontier.model.frontier import effective_axis_min

if TYPE_CHECKING:
    from portfoliofrontier.model.frontier import AxisBounds, FrontierPoint, FrontierResult

logger = logging.getLogger(__name__)


class PercentAxisItem(pg.AxisItem):
    """Axis whose tick labels read as whole percentages (0.25 -> '25%')."""

    def tickStrings(self, values, scale, spacing):
        return [axis_tick_label(v * scale) for v in values]


class FrontierChart(pg.PlotWidget):
    """
    Renders the two series and the axis bounds handed over by the store.

    The chart keeps no portfolio state of its own; every call replaces what
    is drawn with the given immutable values.
    """
    Y_ANIMATION_MS = 250

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(
            parent=parent,
            axisItems={"bottom": PercentAxisItem("bottom"), "left": PercentAxisItem("left")},
        )
        self.setTitle(CHART_TITLE, color='black', size='12pt')
        self.setLabel('bottom', X_TITLE, color='black')
        self.setLabel('left', Y_TITLE, color='black')
        self.setMouseEnabled(x=False, y=False)
        self.hideButtons()
        self.setMenuEnabled(False)

        self.frontier_curve = self.plot([], [], pen=pg.mkPen(color=FRONTIER_COLOR, width=2), name="Portfolio")

        self.allocation_marker = pg.ScatterPlotItem(
            size=9,
            symbol='o',
            pen=pg.mkPen(color='k', width=1),
            brush=pg.mkBrush(ALLOCATION_COLOR),
            hoverable=True,
            tip=self._tooltip,
            name="Allocation point",
        )
        self.addItem(self.allocation_marker)

        self._end_labels: list[pg.TextItem] = []

        self._y_animation = QVariantAnimation(self)
        self._y_animation.setDuration(self.Y_ANIMATION_MS)
        self._y_animation.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._y_animation.valueChanged.connect(self._on_y_range_step)

    # ---- public API ----

    def show_result(self, result: FrontierResult, animate_y: bool = True) -> None:
        """Redraw curve, allocation point and axes from a full recompute."""
        x, y = result.frontier_arrays()
        self.frontier_curve.setData(x, y)
        self._place_end_labels(result.frontier)
        self.show_allocation(result.allocation_point)
        self.apply_bounds(result.bounds, animate_y=animate_y)

    def show_allocation(self, point: FrontierPoint) -> None:
        """Move only the allocation marker; the axes stay where they are."""
        self.allocation_marker.setData([point.risk], [point.ret], data=[point])

    def apply_bounds(self, bounds: AxisBounds, animate_y: bool = False) -> None:
        x_min = effective_axis_min(bounds.x_min)
        y_min = effective_axis_min(bounds.y_min)
        self.getAxis('bottom').setTickSpacing(major=bounds.x_interval, minor=bounds.x_interval)
        self.getAxis('left').setTickSpacing(major=bounds.y_interval, minor=bounds.y_interval)
        self.setXRange(x_min, bounds.x_max, padding=0)

        if not animate_y:
            self._y_animation.stop()
            self.setYRange(y_min, bounds.y_max, padding=0)
            return

        (_, _), (cur_min, cur_max) = self.viewRange()
        self._y_animation.stop()
        self._y_animation.setStartValue(QPointF(cur_min, cur_max))
        self._y_animation.setEndValue(QPointF(y_min, bounds.y_max))
        self._y_animation.start()

    # ---- internals ----

    def _on_y_range_step(self, value: QPointF) -> None:
        self.setYRange(value.x(), value.y(), padding=0)

    def _place_end_labels(self, frontier: tuple[FrontierPoint, ...]) -> None:
        for item in self._end_labels:
            self.removeItem(item)
        self._end_labels = []

        for point in frontier:
            if not point.label:
                continue
            text = pg.TextItem(point.label, color='k', anchor=(-0.2, 0.5))
            text.setPos(point.risk, point.ret)
            self.addItem(text)
            self._end_labels.append(text)

    @staticmethod
    def _tooltip(x: float, y: float, data: FrontierPoint) -> str:
        return "<b>Allocation point</b><br/>" + point_tooltip(data)
