from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QSplitter, QWidget, QVBoxLayout, QLabel, QStatusBar,
)

from portfoliofrontier.app.announcer import Announcer
from portfoliofrontier.app.corrections import ClampCorrector
from portfoliofrontier.app.state import ParameterStore
from portfoliofrontier.app.ui.chart import FrontierChart
from portfoliofrontier.app.ui.panels.parameters import ParameterPanel
from portfoliofrontier.config import CHART_CAPTION, VISIBLE_APP_NAME
from portfoliofrontier.model.frontier import FrontierResult

logger = logging.getLogger(__name__)

ANNOUNCE_TIMEOUT_MS = 4000


class MainWindow(QMainWindow):
    """Parameter panel on the left, frontier chart with caption on the right."""

    def __init__(self, store: ParameterStore, announcer: Announcer | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 700)

        self.store = store
        self.announcer = announcer if announcer is not None else Announcer(self)
        self.corrector = ClampCorrector(self.announcer, parent=self)

        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)

        self.panel = ParameterPanel(self.store, self.corrector, parent=split)

        right = QWidget(split)
        v = QVBoxLayout(right)
        self.chart = FrontierChart(right)
        v.addWidget(self.chart, 1)
        caption = QLabel(CHART_CAPTION, right)
        caption.setWordWrap(True)
        v.addWidget(caption, 0)

        # screen readers read the accessible name of this label when it changes
        self.live_region = QLabel("", right)
        self.live_region.setVisible(False)
        v.addWidget(self.live_region, 0)

        split.addWidget(self.panel)
        split.addWidget(right)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
        self.setCentralWidget(split)
        self.setStatusBar(QStatusBar(self))

        # wiring
        self.store.frontier_changed.connect(self._on_frontier_changed)
        self.store.allocation_changed.connect(self.chart.show_allocation)
        self.announcer.announced.connect(self._on_announced)

        # initial draw without animation
        self.chart.show_result(self.store.result, animate_y=False)

    def _on_frontier_changed(self, result: FrontierResult) -> None:
        self.chart.show_result(result, animate_y=True)
        self.announcer.announce(self.tr("Chart updated"))

    def _on_announced(self, message: str) -> None:
        self.statusBar().showMessage(message, ANNOUNCE_TIMEOUT_MS)
        self.live_region.setText(message)
        self.live_region.setAccessibleName(message)
