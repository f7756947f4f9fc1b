"""Text shown to the user: field values, tooltips, axis ticks and announcements."""
from __future__ import annotations

from typing import TYPE_CHECKING

from portfoliofrontier.model.parameters import DISPLAY_NAMES, ParamName

if TYPE_CHECKING:
    from portfoliofrontier.model.frontier import FrontierPoint
    from portfoliofrontier.model.normalizer import NormalizedInput


def format_percent(value: float, decimals: int = 1) -> str:
    """0.163 -> '16.3%'."""
    return f"{value * 100:.{decimals}f}%"


def format_field_value(name: ParamName, value: float) -> str:
    """Text a parameter field shows for `value`."""
    if name is ParamName.CORRELATION:
        return f"{value:.2f}"
    return format_percent(value, 1)


def axis_tick_label(value: float) -> str:
    return format_percent(value, 0)


def point_tooltip(point: FrontierPoint) -> str:
    return (
        f"Stock A share: {format_percent(point.weight_a, 0)}<br/>"
        f"Stock B share: {format_percent(point.weight_b, 0)}<br/>"
        f"Expected return: {format_percent(point.ret, 1)}<br/>"
        f"Portfolio standard deviation: {format_percent(point.risk, 1)}"
    )


def clamp_announcement(result: NormalizedInput) -> str:
    """e.g. 'Expected Return A adjusted to maximum value 30%'."""
    field_name = DISPLAY_NAMES.get(result.field, str(result.field))
    bound = result.bound
    kind = "minimum" if result.clamp_direction == "min" else "maximum"

    # correlation is not a percentage
    bound_text = f"{bound:g}" if result.field is ParamName.CORRELATION else format_percent(bound, 0)
    return f"{field_name} adjusted to {kind} value {bound_text}"
