import pytest

from portfoliofrontier.app.ui.main_window import MainWindow
from portfoliofrontier.model.parameters import ParamName


@pytest.fixture
def window(store, announcer):
    widget = MainWindow(store, announcer)
    yield widget
    widget.close()


@pytest.fixture
def announced(announcer) -> list:
    received = []
    announcer.announced.connect(lambda message: received.append(message))
    return received


def test_full_recompute_announces_chart_update(window, store, announced):
    store.set(ParamName.STD_DEV_A, 0.25)
    assert announced == ["Chart updated"]
    assert window.live_region.text() == "Chart updated"
    assert window.statusBar().currentMessage() == "Chart updated"


def test_share_change_is_not_announced(window, store, announced):
    store.set(ParamName.SHARE_A, 0.3)
    assert announced == []


def test_clamp_correction_is_announced_in_window(window, store, drain_events):
    edit = window.panel._edits[ParamName.STD_DEV_A]
    edit.setText("90%")
    edit.editingFinished.emit()

    assert store.parameters.std_dev_a == 0.6
    drain_events()

    assert edit.text() == "60.0%"
    assert window.live_region.text() == "Standard Deviation A adjusted to maximum value 60%"
