"""
Deferred Field Corrections
==========================
When a typed value had to be clamped, the clamped value is applied to the
store at once but the text field is only rewritten after the current input
event has been handled completely, so a keystroke in progress is never
overwritten under the user's cursor.

The deferral is a single-shot QTimer with a zero interval: it fires on the
next turn of the Qt event loop, before the next user event is processed.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Signal

from portfoliofrontier.app.announcer import Announcer
from portfoliofrontier.model.formatting import clamp_announcement, format_field_value
from portfoliofrontier.model.normalizer import NormalizedInput
from portfoliofrontier.model.parameters import ParamName

logger = logging.getLogger(__name__)


class ClampCorrector(QObject):
    # (field, formatted clamped value)
    display_corrected = Signal(object, str)

    def __init__(self, announcer: Announcer, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.announcer = announcer

        # one pending correction per field; a newer one for the same field wins
        self._pending: dict[ParamName, NormalizedInput] = {}

        self._flush_timer = QTimer(self)
        self._flush_timer.setSingleShot(True)
        self._flush_timer.setInterval(0)
        self._flush_timer.timeout.connect(self._flush)

    def has_pending(self) -> bool:
        return bool(self._pending)

    def schedule(self, result: NormalizedInput) -> None:
        """Queue the display correction and announcement for a clamped input."""
        if not result.was_clamped:
            return
        self._pending[result.field] = result
        if not self._flush_timer.isActive():
            self._flush_timer.start()

    def _flush(self) -> None:
        pending, self._pending = self._pending, {}
        for field, result in pending.items():
            text = format_field_value(field, result.value)
            logger.debug(f"Correcting {field} display to {text}.")
            self.display_corrected.emit(field, text)
            self.announcer.announce(clamp_announcement(result))
