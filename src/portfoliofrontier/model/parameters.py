"""
Portfolio Parameters (Data Model)
=================================
This module defines the six scalar inputs of the two-asset portfolio.

Why is this file needed?
------------------------
1. State Management: `Parameters` is the single value object the store owns
   and hands to the frontier computation.
2. Identity: `ParamName` is the stable key used by the store's dispatch
   table, by the normalizer's ranges and by the input widgets.

Classes:
    ParamName: Enum of parameter keys.
    FieldRange: Allowed closed interval of one parameter.
    Parameters: The six current values.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from enum import StrEnum

from portfoliofrontier.config import DEFAULT_VALUES, FIELD_RANGES


class ParamName(StrEnum):
    """Keys of the editable parameters (values match the dataclass fields)."""
    CORRELATION = "correlation"
    EXPECTED_RETURN_A = "expected_return_a"
    EXPECTED_RETURN_B = "expected_return_b"
    STD_DEV_A = "std_dev_a"
    STD_DEV_B = "std_dev_b"
    SHARE_A = "share_a"


DISPLAY_NAMES: dict[ParamName, str] = {
    ParamName.CORRELATION: "Correlation",
    ParamName.EXPECTED_RETURN_A: "Expected Return A",
    ParamName.EXPECTED_RETURN_B: "Expected Return B",
    ParamName.STD_DEV_A: "Standard Deviation A",
    ParamName.STD_DEV_B: "Standard Deviation B",
    ParamName.SHARE_A: "Share of Stock A",
}


@dataclass(frozen=True)
class FieldRange:
    minimum: float
    maximum: float

    def clamp(self, value: float) -> float:
        return min(max(value, self.minimum), self.maximum)

    def __contains__(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


RANGES: dict[ParamName, FieldRange] = {
    ParamName(key): FieldRange(lo, hi) for key, (lo, hi) in FIELD_RANGES.items()
}


@dataclass(frozen=True)
class Parameters:
    """
    Current inputs of the two-asset portfolio.

    All values are fractions (0.16 means 16 %). `share_a` is the weight of
    stock A; stock B holds the rest.
    """
    correlation: float = DEFAULT_VALUES["correlation"]
    expected_return_a: float = DEFAULT_VALUES["expected_return_a"]
    expected_return_b: float = DEFAULT_VALUES["expected_return_b"]
    std_dev_a: float = DEFAULT_VALUES["std_dev_a"]
    std_dev_b: float = DEFAULT_VALUES["std_dev_b"]
    share_a: float = DEFAULT_VALUES["share_a"]

    @classmethod
    def defaults(cls) -> Parameters:
        return cls()

    def get(self, name: ParamName) -> float:
        return getattr(self, ParamName(name).value)

    def with_values(self, values: dict[ParamName, float]) -> Parameters:
        """Return a copy with the given parameters replaced."""
        return replace(self, **{ParamName(k).value: float(v) for k, v in values.items()})

    def to_dict(self) -> dict[str, float]:
        return asdict(self)
