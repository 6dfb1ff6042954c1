"""
Title         : math_utils.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : rhino/plugins/RebarMorph/rebarmorph/geometry/math_utils.py

Description
----------------------------------------------------------------------------
General-purpose numeric helpers for sampling and blending point sets.
"""

from __future__ import annotations

import numpy as np


# --- Unit Interval --------------------------------------------------------
def clamp_unit(t: float) -> float:
    """Pin a normalized curve parameter into [0, 1]."""
    return float(np.clip(t, 0.0, 1.0))


# --- Parameter Samples ----------------------------------------------------
def parameter_samples(count: int) -> np.ndarray:
    """Return `count` evenly spaced normalized parameters over [0, 1].

    A single sample is widened to both ends of the domain so the result
    always describes at least a chord.

    Args:
        count: Requested number of samples

    Returns:
        Array of parameters, first 0.0 and last 1.0
    """
    return np.linspace(0.0, 1.0, max(int(count), 2))


# --- Linear Interpolation -------------------------------------------------
def lerp_points(first: np.ndarray, second: np.ndarray, weight: float) -> np.ndarray:
    """Blend two equally shaped point arrays: (1 - w) * first + w * second."""
    return (1.0 - weight) * first + weight * second


# --- Chord Length ---------------------------------------------------------
def polyline_length(points: np.ndarray) -> float:
    """Total length of the polyline through the ordered points."""
    if len(points) < 2:
        return 0.0
    return float(np.linalg.norm(np.diff(points, axis=0), axis=1).sum())


def chord_length_parameters(points: np.ndarray, tolerance: float) -> np.ndarray:
    """Chord-length parameterization of ordered points, normalized to [0, 1].

    Args:
        points: Array of shape (n, 3), n >= 2
        tolerance: Minimum distance between consecutive points

    Returns:
        Strictly increasing parameters, first 0.0 and last 1.0

    Raises:
        ValueError: If consecutive points coincide within tolerance
    """
    segments = np.linalg.norm(np.diff(points, axis=0), axis=1)
    if np.any(segments <= tolerance):
        index = int(np.argmax(segments <= tolerance))
        raise ValueError(f"Points {index} and {index + 1} coincide.")
    cumulative = np.concatenate(([0.0], np.cumsum(segments)))
    return cumulative / cumulative[-1]
