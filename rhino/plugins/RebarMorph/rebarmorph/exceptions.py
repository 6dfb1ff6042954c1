"""
Title         : exceptions.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : rhino/plugins/RebarMorph/rebarmorph/exceptions.py

Description
----------------------------------------------------------------------------
Exception hierarchy for RebarMorph. All exceptions inherit from RebarMorphError
and support optional context information for debugging.
"""

from __future__ import annotations

from typing import Any


# --- Base Exception -------------------------------------------------------
class RebarMorphError(Exception):
    """Base exception for all RebarMorph errors.

    Attributes:
        message: Human-readable error description
        context: Optional context information (indices, parameters, etc.)

    Example:
        >>> raise RebarMorphError("Morph failed", context={"bar": 3})
    """

    def __init__(self, message: str, context: Any | None = None) -> None:
        """Initialize error with message and optional context.

        Args:
            message: Error description shown to user
            context: Optional context information for debugging
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Return formatted error message."""
        return self.message


# --- Input Exceptions -----------------------------------------------------
class InvalidArgumentError(RebarMorphError, ValueError):
    """Raised when a count, precision, degree or tolerance is out of range.

    Also raised for a missing (None) curve or an object that is not a
    curve at all, before any geometry is inspected.

    Example:
        >>> if precision < 1:
        ...     raise InvalidArgumentError(f"Precision must be positive: {precision}")
    """


class DegenerateGeometryError(RebarMorphError, ValueError):
    """Raised when an input curve has no usable extent.

    Covers curves with an empty parametric domain, zero length, or
    non-finite evaluations.

    Example:
        >>> if curve.domain_length() <= 0:
        ...     raise DegenerateGeometryError("Curve A has an empty domain", context="A")
    """


# --- Construction Exceptions ----------------------------------------------
class GeometryConstructionError(RebarMorphError):
    """Raised when an intermediate bar curve cannot be fitted.

    Typically caused by coincident consecutive sample points. No partial
    result accompanies this error.

    Example:
        >>> raise GeometryConstructionError("Unable to fit bar 2", context={"bar": 2})
    """
