from __future__ import annotations

import logging
from dataclasses import replace
from enum import IntFlag
from functools import reduce
from operator import or_
from typing import Mapping

from PySide6.QtCore import QObject, Signal

from portfoliofrontier.model.frontier import (
    AxisBounds, FrontierPoint, FrontierResult, compute, compute_allocation,
)
from portfoliofrontier.model.parameters import ParamName, Parameters

logger = logging.getLogger(__name__)


class Scope(IntFlag):
    """Which outputs a parameter change invalidates."""
    ALLOCATION = 1
    FRONTIER = 2  # curve and axis bounds
    FULL = ALLOCATION | FRONTIER


# The share moves continuously while a slider is dragged; it must not rescale
# the axes or rebuild the curve on every intermediate value.
RECOMPUTE_SCOPE: dict[ParamName, Scope] = {
    ParamName.SHARE_A: Scope.ALLOCATION,
    ParamName.CORRELATION: Scope.FULL,
    ParamName.EXPECTED_RETURN_A: Scope.FULL,
    ParamName.EXPECTED_RETURN_B: Scope.FULL,
    ParamName.STD_DEV_A: Scope.FULL,
    ParamName.STD_DEV_B: Scope.FULL,
}


class ParameterStore(QObject):
    """Central parameter store; recomputes outputs and notifies the views."""
    parameters_changed = Signal(object)  # Parameters
    frontier_changed = Signal(object)    # FrontierResult, after a full recompute
    allocation_changed = Signal(object)  # FrontierPoint, after every recompute

    def __init__(self, parameters: Parameters | None = None) -> None:
        super().__init__()
        self._parameters = parameters if parameters is not None else Parameters.defaults()
        self._generation = 0
        self._result = compute(self._parameters)

    # ---- read access ----

    @property
    def parameters(self) -> Parameters:
        return self._parameters

    @property
    def result(self) -> FrontierResult:
        return self._result

    @property
    def frontier(self) -> tuple[FrontierPoint, ...]:
        return self._result.frontier

    @property
    def allocation_point(self) -> FrontierPoint:
        return self._result.allocation_point

    @property
    def bounds(self) -> AxisBounds:
        return self._result.bounds

    @property
    def generation(self) -> int:
        return self._generation

    def value(self, name: ParamName) -> float:
        return self._parameters.get(name)

    # ---- mutation ----

    def set(self, name: ParamName | str, value: float) -> None:
        """Set one parameter and recompute what it invalidates."""
        self.update({name: value})

    def update(self, values: Mapping[ParamName | str, float] | None = None, **kwargs: float) -> None:
        """
        Set several parameters at once with a single recomputation.

        Args:
            values: Mapping of parameter name to new value.
            **kwargs: Same, given as keyword arguments (e.g. std_dev_a=0.25).

        Raises:
            KeyError: If a name is not a known parameter.
            ValueError: If the new parameters cannot be computed (correlation
                outside [-1, 1]); the store is left unchanged.
        """
        merged = {**(values or {}), **kwargs}
        scopes = []
        changes: dict[ParamName, float] = {}
        for name, value in merged.items():
            if name not in RECOMPUTE_SCOPE:
                raise KeyError(f"Unknown parameter '{name}'")
            name = ParamName(name)
            if self._parameters.get(name) == value:
                continue
            changes[name] = value
            scopes.append(RECOMPUTE_SCOPE[name])

        if not changes:
            return

        new_parameters = self._parameters.with_values(changes)
        scope = reduce(or_, scopes)
        result = self._compute(new_parameters, scope)

        self._parameters = new_parameters
        self.parameters_changed.emit(self._parameters)
        self.accept(result, scope)

    def reset(self) -> Parameters:
        """Restore the default parameters and recompute everything."""
        defaults = Parameters.defaults()
        result = self._compute(defaults, Scope.FULL)
        self._parameters = defaults
        logger.info("Parameters have been reset.")
        self.parameters_changed.emit(self._parameters)
        self.accept(result, Scope.FULL)
        return defaults

    def accept(self, result: FrontierResult, scope: Scope = Scope.FULL) -> bool:
        """
        Publish a computed result unless a newer one is already published.

        Returns:
            False if the result was stale and dropped.
        """
        if result.generation < self._result.generation:
            logger.debug(f"Dropping stale result {result.generation} (current {self._result.generation}).")
            return False

        self._result = result
        self._generation = max(self._generation, result.generation)
        if scope & Scope.FRONTIER:
            self.frontier_changed.emit(result)
        self.allocation_changed.emit(result.allocation_point)
        return True

    def _compute(self, parameters: Parameters, scope: Scope) -> FrontierResult:
        if scope & Scope.FRONTIER:
            result = compute(parameters)
        else:
            result = replace(self._result, allocation_point=compute_allocation(parameters))

        self._generation += 1
        logger.debug(f"Recompute #{self._generation} ({scope!r}).")
        return replace(result, generation=self._generation)
