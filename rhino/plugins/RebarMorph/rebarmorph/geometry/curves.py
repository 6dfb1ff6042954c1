"""
Title         : curves.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : rhino/plugins/RebarMorph/rebarmorph/geometry/curves.py

Description
----------------------------------------------------------------------------
Host-independent curve primitives for bar morphing.
Defines the ParametricCurve protocol consumed by the morpher, a few analytic
curves for callers and tests, and the interpolated curve produced for each bar.
"""

from __future__ import annotations

import math
from typing import Callable, Protocol, Sequence, runtime_checkable

import numpy as np
from scipy.interpolate import make_interp_spline

from ..constants import Constants
from ..exceptions import GeometryConstructionError
from .math_utils import chord_length_parameters, clamp_unit, parameter_samples, polyline_length


# --- Parametric Curve Protocol --------------------------------------------
@runtime_checkable
class ParametricCurve(Protocol):
    """A curve evaluable at a normalized parameter t in [0, 1]."""

    def evaluate(self, t: float) -> np.ndarray:
        """Return the 3D point at normalized parameter `t`."""
        ...

    def domain_length(self) -> float:
        """Return the length of the curve's native parametric domain."""
        ...


def as_point(value: Sequence[float] | np.ndarray) -> np.ndarray:
    """Coerce a 2D or 3D coordinate into a float array of shape (3,)."""
    point = np.asarray(value, dtype=float).reshape(-1)
    if point.shape == (2,):
        point = np.append(point, 0.0)
    if point.shape != (3,):
        raise ValueError(f"Expected a 3D point, got shape {point.shape}.")
    return point


def sample_curve(curve: ParametricCurve, parameters: np.ndarray) -> np.ndarray:
    """Evaluate a curve at each normalized parameter.

    Args:
        curve: Curve to evaluate
        parameters: Normalized parameters in [0, 1]

    Returns:
        Array of shape (len(parameters), 3)
    """
    return np.array([as_point(curve.evaluate(float(t))) for t in parameters], dtype=float)


# --- Analytic Curves ------------------------------------------------------
class LineCurve:
    """Straight segment between two points; native domain is [0, length]."""

    def __init__(self, start: Sequence[float], end: Sequence[float]) -> None:
        self.start = as_point(start)
        self.end = as_point(end)

    def evaluate(self, t: float) -> np.ndarray:
        return self.start + t * (self.end - self.start)

    def domain_length(self) -> float:
        return float(np.linalg.norm(self.end - self.start))

    def __repr__(self) -> str:
        return f"LineCurve({self.start.tolist()}, {self.end.tolist()})"


class ArcCurve:
    """Circular arc in the plane spanned by `x_axis` and `y_axis`.

    The native domain is the swept angle in radians, matching host arcs.
    """

    def __init__(
        self,
        center: Sequence[float],
        radius: float,
        start_angle: float,
        end_angle: float,
        x_axis: Sequence[float] = (1.0, 0.0, 0.0),
        y_axis: Sequence[float] = (0.0, 1.0, 0.0),
    ) -> None:
        self.center = as_point(center)
        self.radius = float(radius)
        self.start_angle = float(start_angle)
        self.end_angle = float(end_angle)
        self.x_axis = as_point(x_axis)
        self.y_axis = as_point(y_axis)

    def evaluate(self, t: float) -> np.ndarray:
        angle = self.start_angle + t * (self.end_angle - self.start_angle)
        return self.center + self.radius * (math.cos(angle) * self.x_axis + math.sin(angle) * self.y_axis)

    def domain_length(self) -> float:
        return abs(self.end_angle - self.start_angle)


class FunctionCurve:
    """Wrap a callable mapping a native parameter to a point."""

    def __init__(
        self,
        func: Callable[[float], Sequence[float]],
        domain: tuple[float, float] = (0.0, 1.0),
    ) -> None:
        self.func = func
        self.domain = (float(domain[0]), float(domain[1]))

    def evaluate(self, t: float) -> np.ndarray:
        t0, t1 = self.domain
        return as_point(self.func(t0 + t * (t1 - t0)))

    def domain_length(self) -> float:
        return abs(self.domain[1] - self.domain[0])


# --- Interpolated Curve ---------------------------------------------------
class InterpolatedCurve:
    """B-spline passing through an ordered set of points.

    Parameterized by normalized chord length, so `evaluate(0)` and
    `evaluate(1)` return the first and last fitted points.

    Raises:
        TypeError: If the points are not numeric
        ValueError: If the points cannot define a curve
    """

    def __init__(
        self,
        points: Sequence[Sequence[float]] | np.ndarray,
        degree: int = Constants.DEFAULT_DEGREE,
        tolerance: float = Constants.TOLERANCE,
    ) -> None:
        data = np.array(points, dtype=float)
        if data.ndim != 2 or data.shape[1] != 3:
            raise ValueError(f"Expected points of shape (n, 3), got {data.shape}.")
        if len(data) < 2:
            raise ValueError("At least two points required to build a curve.")
        if not np.all(np.isfinite(data)):
            raise ValueError("Points must be finite.")

        self._points = data
        self._points.setflags(write=False)
        self._parameters = chord_length_parameters(data, tolerance)
        self.degree = _effective_degree(degree, len(data))
        self._spline = make_interp_spline(self._parameters, data, k=self.degree)

    @property
    def points(self) -> np.ndarray:
        """Copy of the fitted points."""
        return self._points.copy()

    @property
    def start(self) -> np.ndarray:
        return self._points[0].copy()

    @property
    def end(self) -> np.ndarray:
        return self._points[-1].copy()

    def evaluate(self, t: float) -> np.ndarray:
        return np.asarray(self._spline(clamp_unit(t)), dtype=float)

    def domain_length(self) -> float:
        return 1.0

    def sample(self, count: int) -> np.ndarray:
        """Evaluate the curve at `count` evenly spaced parameters."""
        return np.asarray(self._spline(parameter_samples(count)), dtype=float)

    def length(self, samples: int = Constants.LENGTH_SAMPLES) -> float:
        """Approximate arc length from a dense polyline."""
        return polyline_length(self.sample(samples))

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"InterpolatedCurve(points={len(self._points)}, degree={self.degree})"


def _effective_degree(degree: int, count: int) -> int:
    """Clamp the spline degree to what `count` points support.

    Even degrees above 2 have no default knot placement, so they drop by one.
    """
    k = max(1, min(degree, count - 1))
    if k > 2 and k % 2 == 0:
        k -= 1
    return k


def interpolate_curve(
    points: np.ndarray,
    degree: int = Constants.DEFAULT_DEGREE,
    tolerance: float = Constants.TOLERANCE,
) -> InterpolatedCurve:
    """Create a smooth curve through a list of points.

    Args:
        points: Ordered points of shape (n, 3)
        degree: Requested spline degree
        tolerance: Minimum spacing between consecutive points

    Returns:
        Curve passing through all points

    Raises:
        GeometryConstructionError: If the points cannot be fitted
    """
    try:
        return InterpolatedCurve(points, degree=degree, tolerance=tolerance)
    except (TypeError, ValueError, np.linalg.LinAlgError) as exc:
        try:
            shape = np.shape(points)
        except ValueError:
            shape = None
        raise GeometryConstructionError(f"Curve fit failed: {exc}", context={"shape": shape}) from exc
