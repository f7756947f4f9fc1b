import dataclasses

import pytest

from portfoliofrontier.model.parameters import FieldRange, ParamName, Parameters, RANGES


def test_defaults():
    params = Parameters.defaults()
    assert params.correlation == 0.0
    assert params.share_a == 0.5
    assert params.expected_return_a == 0.16
    assert params.expected_return_b == 0.06
    assert params.std_dev_a == 0.3
    assert params.std_dev_b == 0.2


def test_param_names_match_fields():
    params = Parameters()
    assert set(params.to_dict()) == {name.value for name in ParamName}


def test_with_values_returns_copy():
    params = Parameters()
    changed = params.with_values({ParamName.STD_DEV_A: 0.25, "share_a": 0.7})
    assert changed.std_dev_a == 0.25
    assert changed.share_a == 0.7
    assert params.std_dev_a == 0.3
    assert changed.get(ParamName.SHARE_A) == 0.7


def test_parameters_are_immutable():
    params = Parameters()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.share_a = 0.3
    assert params.share_a == 0.5


def test_every_parameter_has_a_range():
    assert set(RANGES) == set(ParamName)
    assert RANGES[ParamName.EXPECTED_RETURN_A] == FieldRange(0.0, 0.3)
    assert RANGES[ParamName.STD_DEV_B] == FieldRange(0.0, 0.6)
    assert RANGES[ParamName.CORRELATION] == FieldRange(-1.0, 1.0)


@pytest.mark.parametrize("value, expected", [(-0.1, 0.0), (0.2, 0.2), (0.9, 0.6)])
def test_field_range_clamp(value, expected):
    assert RANGES[ParamName.STD_DEV_A].clamp(value) == expected


def test_field_range_contains():
    assert 0.3 in RANGES[ParamName.EXPECTED_RETURN_B]
    assert 0.31 not in RANGES[ParamName.EXPECTED_RETURN_B]


def test_defaults_lie_inside_ranges():
    params = Parameters()
    for name in ParamName:
        assert params.get(name) in RANGES[name]
