"""
Input Normalization
===================
Turns free text typed into a parameter field into a validated value.

Steps:
1. Drop every character except digits, '.' and '-'.
2. Parse as float; anything unparsable (including "") becomes 0.
3. If the text contained '%' or the number is larger than 1 in magnitude,
   treat it as a percentage and divide by 100 ("50" and "50%" both give 0.5).
4. Clamp into the field's range and record which bound was hit.

Nothing here raises for bad input: a parse failure falls back to 0 and an
out-of-range value is corrected, both reported on the returned object.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum

from portfoliofrontier.model.parameters import ParamName, RANGES

logger = logging.getLogger(__name__)

_NOT_NUMERIC = re.compile(r"[^0-9.\-]")


class ClampDirection(StrEnum):
    NONE = "none"
    MIN = "min"
    MAX = "max"


@dataclass(frozen=True)
class NormalizedInput:
    field: ParamName
    value: float
    was_clamped: bool = False
    clamp_direction: ClampDirection = ClampDirection.NONE
    parse_fallback: bool = False

    @property
    def bound(self) -> float | None:
        """The bound that was reached, or None when the value was in range."""
        if self.clamp_direction is ClampDirection.MIN:
            return RANGES[self.field].minimum
        if self.clamp_direction is ClampDirection.MAX:
            return RANGES[self.field].maximum
        return None


def parse_number(raw_text: str) -> tuple[float, bool]:
    """
    Parse the numeric part of `raw_text`.

    Returns:
        (value, fell_back) where `fell_back` is True if the text held no
        parsable number and 0.0 was used instead.
    """
    cleaned = _NOT_NUMERIC.sub("", raw_text)
    try:
        return float(cleaned), False
    except ValueError:
        return 0.0, True


def normalize(raw_text: str, field: ParamName | str) -> NormalizedInput:
    """
    Normalize user text for the given parameter field.

    Args:
        raw_text: Text as typed, e.g. "16%", "0.16", "16", "abc".
        field: Parameter the text belongs to.

    Returns:
        NormalizedInput with the clamped value and clamp/fallback flags.
    """
    field = ParamName(field)
    value, fell_back = parse_number(raw_text)
    if fell_back:
        logger.debug(f"Could not parse {raw_text!r} for {field}, using 0.")

    if "%" in raw_text or abs(value) > 1:
        value = value / 100

    clamped = RANGES[field].clamp(value)
    direction = ClampDirection.NONE
    if clamped < value:
        direction = ClampDirection.MAX
    elif clamped > value:
        direction = ClampDirection.MIN
    value = clamped

    was_clamped = direction is not ClampDirection.NONE
    if was_clamped:
        logger.info(f"{field} input {raw_text!r} clamped to {direction} value {value}.")

    return NormalizedInput(
        field=field,
        value=value,
        was_clamped=was_clamped,
        clamp_direction=direction,
        parse_fallback=fell_back,
    )
