"""
Title         : __init__.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : rhino/plugins/RebarMorph/rebarmorph/__init__.py

Description
----------------------------------------------------------------------------
Package initializer exporting the public API for the RebarMorph plugin.
"""

from .adapters import HostCurveAdapter, as_parametric, bar_curves, to_host_points
from .constants import Constants, Strings
from .exceptions import (
    DegenerateGeometryError,
    GeometryConstructionError,
    InvalidArgumentError,
    RebarMorphError,
)
from .geometry import ArcCurve, FunctionCurve, InterpolatedCurve, LineCurve, ParametricCurve
from .logging_config import setup_logging
from .metadata import MorphMetadata
from .morph import CurveMorpher, MorphResult, interpolation_weights, morph_curves
from .specs import MorphOptions


__all__ = [
    # Curves
    "ArcCurve",
    "FunctionCurve",
    "InterpolatedCurve",
    "LineCurve",
    "ParametricCurve",
    # Morphing
    "CurveMorpher",
    "MorphOptions",
    "MorphResult",
    "interpolation_weights",
    "morph_curves",
    # Host seam
    "HostCurveAdapter",
    "as_parametric",
    "bar_curves",
    "to_host_points",
    # Metadata
    "MorphMetadata",
    # Configuration
    "Constants",
    "Strings",
    "setup_logging",
    # Exception classes
    "DegenerateGeometryError",
    "GeometryConstructionError",
    "InvalidArgumentError",
    "RebarMorphError",
]
