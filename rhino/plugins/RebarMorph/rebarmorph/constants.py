"""
Title         : constants.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : rhino/plugins/RebarMorph/rebarmorph/constants.py

Description
----------------------------------------------------------------------------
Centralize numeric defaults, output keys, and string messages
"""

from typing import ClassVar


# --- Constants Section ----------------------------------------------------
class Constants:
    """Numeric defaults shared by the morpher and its helpers."""

    # Tolerances
    TOLERANCE = 1e-9

    # Spline Fitting
    DEFAULT_DEGREE = 3
    SUPPORTED_DEGREES: ClassVar[tuple[int, ...]] = (1, 2, 3, 5)

    # Sampling
    DEGENERACY_SAMPLES = 16
    LENGTH_SAMPLES = 256

    # Node Output Keys
    BAR_CURVES_KEY = "BarCurves"

    # Metadata
    METADATA_KEY = "rebar_morph_result"
    METADATA_VERSION = "1.0"


# --- Strings Section ------------------------------------------------------
class Strings:
    """User-facing messages."""

    MSG_PRECISION_INVALID = "Precision must be a positive integer, got {value!r}."
    MSG_BAR_COUNT_INVALID = "Number of bars must be a positive integer, got {value!r}."
    MSG_DEGREE_INVALID = "Spline degree must be one of {supported}, got {value!r}."
    MSG_TOLERANCE_INVALID = "Tolerance must be a positive number, got {value!r}."
    MSG_CURVE_MISSING = "Curve {label} is missing."
    MSG_CURVE_UNSUPPORTED = "Curve {label} does not provide evaluate() and domain_length()."
    MSG_CURVE_NO_DOMAIN = "Curve {label} has an empty or undefined parametric domain."
    MSG_CURVE_ZERO_LENGTH = "Curve {label} has zero length."
    MSG_CURVE_NOT_FINITE = "Curve {label} evaluates to non-finite points."
    MSG_CURVE_EVALUATION_FAILED = "Curve {label} could not be evaluated: {reason}"
    MSG_BAR_FIT_FAILED = "Unable to fit bar {index} of {count}: {reason}"
    MSG_HOST_CURVE_UNSUPPORTED = "Host curve must expose PointAt() and Domain."
    MSG_SAMPLE_COUNT_INVALID = "Point count must be an integer of at least 2, got {value!r}."
    MSG_METADATA_INVALID = "Invalid morph metadata: {reason}"
