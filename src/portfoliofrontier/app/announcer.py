from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class Announcer(QObject):
    """
    Fire-and-forget accessible notifications.

    The main window forwards `announced` to the status bar and to the
    accessible name of a live label, which screen readers pick up.
    """
    announced = Signal(str)

    def announce(self, message: str) -> None:
        logger.info(f"Announce: {message}")
        self.announced.emit(message)
