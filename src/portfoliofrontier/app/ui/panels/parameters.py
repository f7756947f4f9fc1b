from __future__ import annotations

import logging
from functools import partial

from PySide6.QtCore import Qt, QTimer, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QLineEdit, QSlider, QLabel,
    QPushButton, QHBoxLayout, QSizePolicy,
)

from portfoliofrontier.app.corrections import ClampCorrector
from portfoliofrontier.app.state import ParameterStore
from portfoliofrontier.config import CLAMP_HIGHLIGHT_COLOR, CLAMP_HIGHLIGHT_MS
from portfoliofrontier.model.formatting import format_field_value, format_percent
from portfoliofrontier.model.normalizer import normalize
from portfoliofrontier.model.parameters import DISPLAY_NAMES, ParamName, Parameters

logger = logging.getLogger(__name__)

TEXT_FIELDS = [
    ParamName.EXPECTED_RETURN_A,
    ParamName.EXPECTED_RETURN_B,
    ParamName.STD_DEV_A,
    ParamName.STD_DEV_B,
]

# sliders work in hundredths
SLIDER_SCALE = 100


class ParameterPanel(QWidget):
    """
    Left-side panel with the portfolio inputs.

    Top: correlation and share sliders.
    Below: free-text fields for expected returns and standard deviations,
    applied to the store on every keystroke and corrected once the edit is
    finished, and the reset button.
    """
    def __init__(self, store: ParameterStore, corrector: ClampCorrector, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.corrector = corrector
        self._edits: dict[ParamName, QLineEdit] = {}
        self._sliders: dict[ParamName, QSlider] = {}
        self._editing: ParamName | None = None

        root = QVBoxLayout(self)

        # ---- sliders ----
        grp_sliders = QGroupBox(self.tr("Portfolio"), self)
        form_sliders = QFormLayout(grp_sliders)

        self.correlation_label = QLabel(grp_sliders)
        form_sliders.addRow(self.tr("Correlation:"), self._add_slider(ParamName.CORRELATION, grp_sliders))
        form_sliders.addRow("", self.correlation_label)

        self.share_label = QLabel(grp_sliders)
        form_sliders.addRow(self.tr("Share of Stock A:"), self._add_slider(ParamName.SHARE_A, grp_sliders))
        form_sliders.addRow("", self.share_label)
        root.addWidget(grp_sliders)

        # ---- text fields ----
        grp_fields = QGroupBox(self.tr("Stocks"), self)
        form_fields = QFormLayout(grp_fields)
        for name in TEXT_FIELDS:
            form_fields.addRow(self.tr(DISPLAY_NAMES[name] + ":"), self._add_edit(name, grp_fields))
        root.addWidget(grp_fields)

        # ---- reset ----
        row = QHBoxLayout()
        row.addStretch()
        self.reset_button = QPushButton(self.tr("Reset"), self)
        self.reset_button.clicked.connect(self._on_reset)
        row.addWidget(self.reset_button)
        root.addLayout(row)
        root.addStretch()

        # wiring
        self.store.parameters_changed.connect(self._sync_from)
        self.corrector.display_corrected.connect(self._show_corrected)

        self._sync_from(self.store.parameters)

    # ---- builders ----

    def _add_slider(self, name: ParamName, parent: QWidget) -> QSlider:
        lo, hi = (-SLIDER_SCALE, SLIDER_SCALE) if name is ParamName.CORRELATION else (0, SLIDER_SCALE)
        slider = QSlider(Qt.Orientation.Horizontal, parent)
        slider.setRange(lo, hi)
        slider.setSingleStep(1)
        slider.setPageStep(10)
        slider.setAccessibleName(DISPLAY_NAMES[name])
        slider.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        slider.valueChanged.connect(partial(self._on_slider_moved, name))
        self._sliders[name] = slider
        return slider

    def _add_edit(self, name: ParamName, parent: QWidget) -> QLineEdit:
        edit = QLineEdit(parent)
        edit.setAccessibleName(DISPLAY_NAMES[name])
        edit.setPlaceholderText("e.g. 16%")
        edit.textEdited.connect(partial(self._on_text_edited, name))
        edit.editingFinished.connect(partial(self._on_editing_finished, name))
        self._edits[name] = edit
        return edit

    # ---- slots ----

    @Slot()
    def _on_reset(self) -> None:
        self.store.reset()

    def _on_slider_moved(self, name: ParamName, position: int) -> None:
        self.store.set(name, position / SLIDER_SCALE)

    def _on_text_edited(self, name: ParamName, text: str) -> None:
        # live update while typing; the text itself is never touched here
        self._editing = name
        self.store.set(name, normalize(text, name).value)

    def _on_editing_finished(self, name: ParamName) -> None:
        result = normalize(self._edits[name].text(), name)
        # the clamped value goes to the store now, the text is fixed up later
        self._editing = name
        self.store.set(name, result.value)
        self._editing = None
        if result.was_clamped:
            self.corrector.schedule(result)

    def _show_corrected(self, name: ParamName, text: str) -> None:
        edit = self._edits.get(name)
        if edit is None:
            return
        edit.setText(text)
        edit.setStyleSheet(f"background-color: {CLAMP_HIGHLIGHT_COLOR};")
        QTimer.singleShot(CLAMP_HIGHLIGHT_MS, partial(edit.setStyleSheet, ""))

    def _sync_from(self, parameters: Parameters) -> None:
        """Show the store's values; a field being typed into is left alone."""
        for name, edit in self._edits.items():
            if name is not self._editing:
                edit.setText(format_field_value(name, parameters.get(name)))

        for name, slider in self._sliders.items():
            slider.blockSignals(True)
            slider.setValue(round(parameters.get(name) * SLIDER_SCALE))
            slider.blockSignals(False)

        self.correlation_label.setText(format_field_value(ParamName.CORRELATION, parameters.correlation))
        self.share_label.setText(
            f"Stock A {format_percent(parameters.share_a, 0)} / Stock B {format_percent(1 - parameters.share_a, 0)}"
        )
