"""
Title         : __init__.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : rhino/plugins/RebarMorph/rebarmorph/geometry/__init__.py

Description
----------------------------------------------------------------------------
Geometry package for bar morphing.
Exports the curve protocol, curve primitives, and numeric helpers.
"""

from .curves import (
    ArcCurve,
    FunctionCurve,
    InterpolatedCurve,
    LineCurve,
    ParametricCurve,
    as_point,
    interpolate_curve,
    sample_curve,
)
from .math_utils import chord_length_parameters, clamp_unit, lerp_points, parameter_samples, polyline_length


__all__ = [  # noqa: RUF022
    # Curves
    "ParametricCurve",
    "LineCurve",
    "ArcCurve",
    "FunctionCurve",
    "InterpolatedCurve",
    "as_point",
    "interpolate_curve",
    "sample_curve",
    # Math utilities
    "chord_length_parameters",
    "clamp_unit",
    "lerp_points",
    "parameter_samples",
    "polyline_length",
]
