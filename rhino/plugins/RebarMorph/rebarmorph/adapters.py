"""
Title         : adapters.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : rhino/plugins/RebarMorph/rebarmorph/adapters.py

Description
----------------------------------------------------------------------------
Thin seam between host curves and the morpher. Host curves are duck-typed on
the Rhino-style `PointAt(t)` / `Domain` members, so nothing here imports a
host SDK. Element creation and undo handling stay with the host command.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Callable

import numpy as np

from .constants import Constants, Strings
from .exceptions import InvalidArgumentError
from .geometry.curves import InterpolatedCurve, ParametricCurve, as_point
from .morph import morph_curves


# --- Host Curve Adapter ---------------------------------------------------
class HostCurveAdapter:
    """Expose a host curve as a ParametricCurve.

    The normalized parameter is mapped onto the host domain [T0, T1].
    Returned host points may carry `X`, `Y`, `Z` attributes or be plain
    coordinate sequences.
    """

    def __init__(self, host_curve: Any) -> None:
        if host_curve is None or not hasattr(host_curve, "PointAt") or not hasattr(host_curve, "Domain"):
            raise InvalidArgumentError(Strings.MSG_HOST_CURVE_UNSUPPORTED, context=type(host_curve).__name__)
        self.host_curve = host_curve

    def _bounds(self) -> tuple[float, float]:
        domain = self.host_curve.Domain
        return float(domain.T0), float(domain.T1)

    def evaluate(self, t: float) -> np.ndarray:
        t0, t1 = self._bounds()
        point = self.host_curve.PointAt(t0 + t * (t1 - t0))
        if hasattr(point, "X"):
            return np.array([point.X, point.Y, point.Z], dtype=float)
        return as_point(point)

    def domain_length(self) -> float:
        t0, t1 = self._bounds()
        return abs(t1 - t0)


def as_parametric(curve: Any) -> ParametricCurve:
    """Return `curve` unchanged if it already is a ParametricCurve, else wrap it."""
    if isinstance(curve, ParametricCurve):
        return curve
    return HostCurveAdapter(curve)


# --- Host Output ----------------------------------------------------------
def to_host_points(
    curve: InterpolatedCurve,
    count: int,
    point_factory: Callable[[float, float, float], Any] = lambda x, y, z: (x, y, z),
) -> list[Any]:
    """Sample a bar curve and convert each point with `point_factory`.

    Raises:
        InvalidArgumentError: If `count` is not an integer of at least 2

    Example:
        >>> to_host_points(bar, 32, rg.Point3d)
    """
    if not isinstance(count, Integral) or isinstance(count, bool) or count < 2:
        raise InvalidArgumentError(Strings.MSG_SAMPLE_COUNT_INVALID.format(value=count), context={"count": count})
    return [point_factory(float(x), float(y), float(z)) for x, y, z in curve.sample(count)]


# --- Node Entry Point -----------------------------------------------------
def bar_curves(edge_a: Any, edge_b: Any, precision: int, number_of_bars: int) -> dict[str, list[InterpolatedCurve]]:
    """Morph between two edge curves and return the multi-output node payload."""
    result = morph_curves(as_parametric(edge_a), as_parametric(edge_b), precision, number_of_bars)
    return {Constants.BAR_CURVES_KEY: list(result.curves)}
