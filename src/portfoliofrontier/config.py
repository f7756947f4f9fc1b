"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (default weights, axis factors,
   field ranges) scattered throughout the model and the views.
2. Consistency: The normalizer, the store and the chart all read the same
   ranges and defaults, so the text fields, the sliders and the curve agree.

Exports:
    DEFAULT_VALUES (dict): Default value per parameter name.
    FIELD_RANGES (dict): Allowed (min, max) per parameter name.
    FRONTIER_STEP, FRONTIER_POINTS: Sampling of the frontier curve.
"""
# Application identity
ORG_ID = "portfoliofrontier"
APP_ID = "portfolio-frontier"
ORG_DOMAIN = "portfoliofrontier.local"

VISIBLE_APP_NAME = "Portfolios of Two Risky Assets"

# Parameter defaults (keys match model.parameters.ParamName values)
DEFAULT_VALUES: dict[str, float] = {
    "correlation": 0.0,
    "share_a": 0.5,
    "expected_return_a": 0.16,
    "expected_return_b": 0.06,
    "std_dev_a": 0.3,
    "std_dev_b": 0.2,
}

# Allowed (min, max) for every editable parameter
FIELD_RANGES: dict[str, tuple[float, float]] = {
    "correlation": (-1.0, 1.0),
    "share_a": (0.0, 1.0),
    "expected_return_a": (0.0, 0.3),
    "expected_return_b": (0.0, 0.3),
    "std_dev_a": (0.0, 0.6),
    "std_dev_b": (0.0, 0.6),
}

# Frontier sampling: weight of stock B from 0.00 to 1.00
FRONTIER_STEP: float = 0.01
FRONTIER_DECIMALS: int = 2
FRONTIER_POINTS: int = 101

# Axis bounds are padded relative to the extremes of the frontier
X_MIN_FACTOR: float = 0.8
X_MAX_FACTOR: float = 1.2
Y_MAX_FACTOR: float = 1.2
Y_MIN: float = 0.0
AXIS_INTERVAL: float = 0.05

# Below this value the rendered axis minimum snaps to zero
AXIS_MIN_SNAP: float = 0.05

# Chart texts
CHART_TITLE = "Portfolios of stocks A and B"
CHART_CAPTION = (
    "The graph shows the relation between the standard deviation and expected "
    "return of a portfolio consisting of various combinations of two risky assets. "
    "Hover over the graph to see the details of the current allocation point. "
    "Change the portfolio weights slider to set other allocation points."
)
X_TITLE = "Portfolio Standard Deviation"
Y_TITLE = "Portfolio Return"
FRONTIER_COLOR = "#2D629F"
ALLOCATION_COLOR = "maroon"

# Visual feedback for a corrected text field
CLAMP_HIGHLIGHT_COLOR = "#fff3cd"
CLAMP_HIGHLIGHT_MS: int = 1500
