"""
Title         : morph.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : rhino/plugins/RebarMorph/rebarmorph/morph.py

Description
----------------------------------------------------------------------------
Morph one boundary curve into another as an ordered family of bar curves.

Both curves are reduced to point samples at matching normalized parameters,
so lines, arcs and splines can be blended without sharing a representation.
Each bar blends the samples linearly and fits a new curve through them. The
family includes both boundaries: bar 0 is curve A, the last bar is curve B.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np

from .constants import Constants, Strings
from .exceptions import DegenerateGeometryError, GeometryConstructionError, InvalidArgumentError
from .geometry.curves import InterpolatedCurve, ParametricCurve, interpolate_curve, sample_curve
from .geometry.math_utils import lerp_points, parameter_samples, polyline_length
from .specs import MorphOptions


logger = logging.getLogger(__name__)


# --- Interpolation Weights ------------------------------------------------
def interpolation_weights(number_of_bars: int) -> np.ndarray:
    """Return the blend weight of each bar, w_i = i / (number_of_bars - 1).

    A single bar gets weight 0.0 and therefore reproduces the first curve.
    """
    if number_of_bars < 1:
        raise InvalidArgumentError(
            Strings.MSG_BAR_COUNT_INVALID.format(value=number_of_bars),
            context={"number_of_bars": number_of_bars},
        )
    if number_of_bars == 1:
        return np.zeros(1)
    return np.linspace(0.0, 1.0, number_of_bars)


# --- Morph Result Container -----------------------------------------------
@dataclass(frozen=True)
class MorphResult:
    """Ordered bar curves with the weight each was blended at."""

    curves: tuple[InterpolatedCurve, ...]
    weights: tuple[float, ...]
    options: MorphOptions

    def __len__(self) -> int:
        return len(self.curves)

    def __iter__(self) -> Iterator[InterpolatedCurve]:
        return iter(self.curves)

    def __getitem__(self, index: int) -> InterpolatedCurve:
        return self.curves[index]


# --- Curve Morpher --------------------------------------------------------
class CurveMorpher:
    """Blend two parametric curves into `number_of_bars` bar curves."""

    def __init__(self, options: MorphOptions) -> None:
        self.options = options

    @staticmethod
    def validate_curve(curve: Any, label: str, tolerance: float = Constants.TOLERANCE) -> None:
        """Reject missing, unsupported or degenerate input curves.

        Raises:
            InvalidArgumentError: If the curve is None or lacks the protocol
            DegenerateGeometryError: If the domain or sampled length is empty
        """
        if curve is None:
            raise InvalidArgumentError(Strings.MSG_CURVE_MISSING.format(label=label), context=label)
        if not isinstance(curve, ParametricCurve):
            raise InvalidArgumentError(Strings.MSG_CURVE_UNSUPPORTED.format(label=label), context=label)

        try:
            domain = float(curve.domain_length())
        except (TypeError, ValueError) as exc:
            raise DegenerateGeometryError(Strings.MSG_CURVE_NO_DOMAIN.format(label=label), context=label) from exc
        if not math.isfinite(domain) or domain <= 0.0:
            raise DegenerateGeometryError(
                Strings.MSG_CURVE_NO_DOMAIN.format(label=label),
                context={"curve": label, "domain_length": domain},
            )

        try:
            sampled = sample_curve(curve, parameter_samples(Constants.DEGENERACY_SAMPLES))
        except (TypeError, ValueError) as exc:
            raise DegenerateGeometryError(
                Strings.MSG_CURVE_EVALUATION_FAILED.format(label=label, reason=exc),
                context=label,
            ) from exc
        if not np.all(np.isfinite(sampled)):
            raise DegenerateGeometryError(Strings.MSG_CURVE_NOT_FINITE.format(label=label), context=label)
        if polyline_length(sampled) <= tolerance:
            raise DegenerateGeometryError(Strings.MSG_CURVE_ZERO_LENGTH.format(label=label), context=label)

    def morph(self, curve_a: ParametricCurve, curve_b: ParametricCurve) -> MorphResult:
        """Compute the bar family from `curve_a` to `curve_b`.

        Args:
            curve_a: First boundary curve, reproduced by bar 0
            curve_b: Second boundary curve, reproduced by the last bar

        Returns:
            MorphResult with exactly `number_of_bars` curves

        Raises:
            InvalidArgumentError: If a curve is missing or unsupported
            DegenerateGeometryError: If a curve has no usable extent
            GeometryConstructionError: If any bar cannot be fitted
        """
        options = self.options
        self.validate_curve(curve_a, "A", options.tolerance)
        self.validate_curve(curve_b, "B", options.tolerance)

        parameters = parameter_samples(options.sample_count)
        samples_a = sample_curve(curve_a, parameters)
        samples_b = sample_curve(curve_b, parameters)
        weights = interpolation_weights(options.number_of_bars)

        logger.debug(
            "Morphing %d bars from %d samples per curve (degree %d).",
            options.number_of_bars,
            len(parameters),
            options.degree,
        )

        curves: list[InterpolatedCurve] = []
        for index, weight in enumerate(weights):
            points = lerp_points(samples_a, samples_b, float(weight))
            try:
                curves.append(interpolate_curve(points, options.degree, options.tolerance))
            except GeometryConstructionError as exc:
                raise GeometryConstructionError(
                    Strings.MSG_BAR_FIT_FAILED.format(index=index, count=options.number_of_bars, reason=exc),
                    context={"bar": index, "weight": float(weight)},
                ) from exc

        return MorphResult(
            curves=tuple(curves),
            weights=tuple(float(w) for w in weights),
            options=options,
        )


# --- Functional Entry Point -----------------------------------------------
def morph_curves(
    curve_a: ParametricCurve,
    curve_b: ParametricCurve,
    precision: int,
    number_of_bars: int,
    *,
    degree: int = Constants.DEFAULT_DEGREE,
    tolerance: float = Constants.TOLERANCE,
) -> MorphResult:
    """Morph between two curves.

    Args:
        curve_a: First boundary curve
        curve_b: Second boundary curve
        precision: Sample points per curve (>= 1)
        number_of_bars: Bar curves to produce (>= 1)
        degree: Spline degree for each bar
        tolerance: Minimum spacing between consecutive fitted points

    Returns:
        MorphResult ordered from curve A to curve B
    """
    options = MorphOptions(
        precision=precision,
        number_of_bars=number_of_bars,
        degree=degree,
        tolerance=tolerance,
    )
    return CurveMorpher(options).morph(curve_a, curve_b)
