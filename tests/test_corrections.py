import pytest

from portfoliofrontier.app.corrections import ClampCorrector
from portfoliofrontier.model.normalizer import normalize
from portfoliofrontier.model.parameters import ParamName


@pytest.fixture
def corrector(announcer) -> ClampCorrector:
    return ClampCorrector(announcer)


@pytest.fixture
def corrected(corrector) -> list:
    received = []
    corrector.display_corrected.connect(lambda field, text: received.append((field, text)))
    return received


@pytest.fixture
def announced(announcer) -> list:
    received = []
    announcer.announced.connect(lambda message: received.append(message))
    return received


def test_correction_is_deferred_until_next_turn(corrector, corrected, announced, drain_events):
    corrector.schedule(normalize("150", ParamName.EXPECTED_RETURN_A))

    # nothing happens while the triggering input is still being handled
    assert corrected == []
    assert announced == []
    assert corrector.has_pending()

    drain_events()

    assert corrected == [(ParamName.EXPECTED_RETURN_A, "30.0%")]
    assert announced == ["Expected Return A adjusted to maximum value 30%"]
    assert not corrector.has_pending()


def test_unclamped_input_schedules_nothing(corrector, corrected, announced, drain_events):
    corrector.schedule(normalize("10%", ParamName.STD_DEV_A))
    assert not corrector.has_pending()
    drain_events()
    assert corrected == []
    assert announced == []


def test_corrections_for_different_fields_are_independent(corrector, corrected, announced, drain_events):
    corrector.schedule(normalize("90%", ParamName.STD_DEV_A))
    corrector.schedule(normalize("-5", ParamName.EXPECTED_RETURN_B))

    drain_events()

    assert sorted(corrected) == sorted([
        (ParamName.STD_DEV_A, "60.0%"),
        (ParamName.EXPECTED_RETURN_B, "0.0%"),
    ])
    assert sorted(announced) == sorted([
        "Standard Deviation A adjusted to maximum value 60%",
        "Expected Return B adjusted to minimum value 0%",
    ])


def test_latest_correction_for_a_field_wins(corrector, corrected, drain_events):
    corrector.schedule(normalize("-5", ParamName.STD_DEV_B))
    corrector.schedule(normalize("99", ParamName.STD_DEV_B))

    drain_events()

    assert corrected == [(ParamName.STD_DEV_B, "60.0%")]


def test_store_gets_clamped_value_before_display_is_fixed(store, corrector, corrected, drain_events):
    # caller side of the protocol: apply now, correct the text later
    result = normalize("150", ParamName.EXPECTED_RETURN_A)
    store.set(result.field, result.value)
    corrector.schedule(result)

    assert store.parameters.expected_return_a == 0.3
    assert corrected == []

    drain_events()
    assert corrected == [(ParamName.EXPECTED_RETURN_A, "30.0%")]


def test_corrections_in_later_turns_are_delivered_separately(corrector, corrected, drain_events):
    corrector.schedule(normalize("80", ParamName.STD_DEV_A))
    drain_events()
    corrector.schedule(normalize("80", ParamName.STD_DEV_B))
    drain_events()

    assert corrected == [(ParamName.STD_DEV_A, "60.0%"), (ParamName.STD_DEV_B, "60.0%")]
