import os

import pytest

# widgets are created in some tests; no display is needed
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QEventLoop, QTimer
from PySide6.QtWidgets import QApplication

from portfoliofrontier.app.announcer import Announcer
from portfoliofrontier.app.state import ParameterStore
from portfoliofrontier.model.parameters import Parameters


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """One application for the whole session; widgets render offscreen."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def drain_events(qapp):
    """Run the event loop long enough for zero-interval timers to fire."""
    def _drain(ms: int = 20) -> None:
        loop = QEventLoop()
        QTimer.singleShot(ms, loop.quit)
        loop.exec()
    return _drain


@pytest.fixture
def default_parameters() -> Parameters:
    return Parameters()


@pytest.fixture
def store(qapp) -> ParameterStore:
    return ParameterStore()


@pytest.fixture
def announcer(qapp) -> Announcer:
    return Announcer()
