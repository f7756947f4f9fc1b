"""
Two-Asset Frontier
==================
Closed-form risk/return curve of every mix of two risky assets.

For a weight w_B of stock B (and w_A = 1 - w_B of stock A):

    return = w_A * E[r_A] + w_B * E[r_B]
    risk   = sqrt(w_A^2 * var_A + w_B^2 * var_B + 2 * w_A * w_B * cov_AB)

with var = sd^2 and cov_AB = rho * sd_A * sd_B.

Everything here is a pure function of `Parameters`; results are frozen
dataclasses so the store can hand them to the views without copying.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import sqrt
from typing import Optional, TYPE_CHECKING

import numpy as np

from portfoliofrontier.config import (
    AXIS_INTERVAL, AXIS_MIN_SNAP, FRONTIER_DECIMALS, FRONTIER_STEP,
    X_MAX_FACTOR, X_MIN_FACTOR, Y_MAX_FACTOR, Y_MIN,
)
from portfoliofrontier.model.parameters import Parameters, RANGES, ParamName

if TYPE_CHECKING:
    import numpy.typing as npt

STOCK_A_LABEL = "Stock A"
STOCK_B_LABEL = "Stock B"


@dataclass(frozen=True)
class FrontierPoint:
    """One portfolio on the curve. `ret` is the expected return."""
    weight_a: float
    weight_b: float
    risk: float
    ret: float
    label: Optional[str] = None


@dataclass(frozen=True)
class AxisBounds:
    x_min: float
    x_max: float
    y_min: float
    y_max: float
    x_interval: float = AXIS_INTERVAL
    y_interval: float = AXIS_INTERVAL


@dataclass(frozen=True)
class FrontierResult:
    """
    Output of one recomputation.

    Attributes:
        frontier: 101 points ordered by increasing weight of stock B.
        allocation_point: Portfolio at the currently selected share.
        bounds: Axis bounds derived from the frontier.
        generation: Sequence number assigned by the store (0 when computed
            directly); a higher generation always supersedes a lower one.
    """
    frontier: tuple[FrontierPoint, ...]
    allocation_point: FrontierPoint
    bounds: AxisBounds
    generation: int = 0

    def frontier_arrays(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Risk (x) and return (y) of the frontier as arrays for plotting."""
        risks = np.fromiter((p.risk for p in self.frontier), dtype=np.float64, count=len(self.frontier))
        returns = np.fromiter((p.ret for p in self.frontier), dtype=np.float64, count=len(self.frontier))
        return risks, returns


def portfolio_point(
    params: Parameters,
    weight_b: float,
    label: Optional[str] = None,
    weight_a: Optional[float] = None,
) -> FrontierPoint:
    """
    Risk and return of the portfolio holding `weight_b` of stock B.

    Args:
        params: Current portfolio parameters (share_a is ignored).
        weight_b: Fraction of stock B, stock A receives the rest.
        label: Optional display label for the point.
        weight_a: Fraction of stock A when known exactly; defaults to
            1 - weight_b.

    Returns:
        The corresponding FrontierPoint.
    """
    if weight_a is None:
        weight_a = 1.0 - weight_b
    var_a = params.std_dev_a * params.std_dev_a
    var_b = params.std_dev_b * params.std_dev_b
    cov_ab = params.correlation * params.std_dev_a * params.std_dev_b

    ret = weight_a * params.expected_return_a + weight_b * params.expected_return_b
    variance = weight_a * weight_a * var_a + weight_b * weight_b * var_b + 2.0 * weight_a * weight_b * cov_ab

    # (w_A*sd_A - w_B*sd_B)^2 at rho = -1 may come out as -1e-18
    risk = sqrt(max(0.0, variance))
    return FrontierPoint(weight_a=weight_a, weight_b=weight_b, risk=risk, ret=ret, label=label)


def frontier_weights() -> list[float]:
    """Weights of stock B from 0.00 to 1.00, rounded at every step."""
    weights = []
    weight_b = 0.0
    while weight_b <= 1.0:
        weights.append(weight_b)
        # rounding keeps accumulated drift from adding or dropping the last step
        weight_b = round(weight_b + FRONTIER_STEP, FRONTIER_DECIMALS)
    return weights


def compute_frontier(params: Parameters) -> tuple[FrontierPoint, ...]:
    weights = frontier_weights()
    last = len(weights) - 1
    points = []
    for i, weight_b in enumerate(weights):
        label = STOCK_A_LABEL if i == 0 else STOCK_B_LABEL if i == last else None
        points.append(portfolio_point(params, weight_b, label))
    return tuple(points)


def compute_allocation(params: Parameters) -> FrontierPoint:
    """The portfolio at the selected share, not snapped to the frontier grid."""
    return portfolio_point(params, 1.0 - params.share_a, weight_a=params.share_a)


def compute_bounds(frontier: tuple[FrontierPoint, ...]) -> AxisBounds:
    risks = np.array([p.risk for p in frontier])
    returns = np.array([p.ret for p in frontier])
    return AxisBounds(
        x_min=float(risks.min()) * X_MIN_FACTOR,
        x_max=float(risks.max()) * X_MAX_FACTOR,
        y_min=Y_MIN,
        y_max=float(returns.max()) * Y_MAX_FACTOR,
    )


def compute(params: Parameters) -> FrontierResult:
    """
    Compute the frontier, the allocation point and the axis bounds.

    Identical parameters always give identical results.

    Raises:
        ValueError: If the correlation lies outside [-1, 1].
    """
    if params.correlation not in RANGES[ParamName.CORRELATION]:
        raise ValueError(f"Correlation must lie in [-1, 1], got {params.correlation}.")

    frontier = compute_frontier(params)
    return FrontierResult(
        frontier=frontier,
        allocation_point=compute_allocation(params),
        bounds=compute_bounds(frontier),
    )


def effective_axis_min(value: float, snap: float = AXIS_MIN_SNAP) -> float:
    """Axis minimum as rendered: values at or below `snap` are drawn from 0."""
    return 0.0 if value <= snap else value
