"""
Title         : specs.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : rhino/plugins/RebarMorph/rebarmorph/specs.py

Description
----------------------------------------------------------------------------
Morph configuration data structure and metadata helpers.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import MISSING, asdict, dataclass, fields
from numbers import Integral, Real
from typing import Any

from .constants import Constants, Strings
from .exceptions import InvalidArgumentError


def _is_count(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool) and value >= 1


# --- Morph Options --------------------------------------------------------
@dataclass(frozen=True)
class MorphOptions:
    """Immutable description of a morph request.

    Attributes:
        precision: Sample points taken along each curve per bar
        number_of_bars: Bars produced, including both boundary curves
        degree: Spline degree used to fit each bar
        tolerance: Minimum spacing between consecutive fitted points
    """

    precision: int
    number_of_bars: int
    degree: int = Constants.DEFAULT_DEGREE
    tolerance: float = Constants.TOLERANCE

    def __post_init__(self) -> None:
        if not _is_count(self.precision):
            raise InvalidArgumentError(
                Strings.MSG_PRECISION_INVALID.format(value=self.precision),
                context={"precision": self.precision},
            )
        if not _is_count(self.number_of_bars):
            raise InvalidArgumentError(
                Strings.MSG_BAR_COUNT_INVALID.format(value=self.number_of_bars),
                context={"number_of_bars": self.number_of_bars},
            )
        if not _is_count(self.degree) or self.degree not in Constants.SUPPORTED_DEGREES:
            raise InvalidArgumentError(
                Strings.MSG_DEGREE_INVALID.format(supported=Constants.SUPPORTED_DEGREES, value=self.degree),
                context={"degree": self.degree},
            )
        if (
            not isinstance(self.tolerance, Real)
            or isinstance(self.tolerance, bool)
            or not math.isfinite(self.tolerance)
            or self.tolerance <= 0
        ):
            raise InvalidArgumentError(
                Strings.MSG_TOLERANCE_INVALID.format(value=self.tolerance),
                context={"tolerance": self.tolerance},
            )

        # numpy scalars become builtins so metadata stays JSON-serialisable
        object.__setattr__(self, "precision", int(self.precision))
        object.__setattr__(self, "number_of_bars", int(self.number_of_bars))
        object.__setattr__(self, "degree", int(self.degree))
        object.__setattr__(self, "tolerance", float(self.tolerance))

    @property
    def sample_count(self) -> int:
        """Points sampled per curve; a precision of 1 still samples both ends."""
        return max(self.precision, 2)

    # --- Metadata ---------------------------------------------------------
    def to_metadata(self) -> dict[str, Any]:
        """Convert option fields into serialisable metadata."""
        return asdict(self)

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any] | None = None) -> MorphOptions:
        """Rehydrate options from stored metadata, ignoring unknown keys."""
        data = dict(metadata or {})
        required = [f.name for f in fields(cls) if f.default is MISSING]
        missing = [name for name in required if name not in data]
        if missing:
            raise InvalidArgumentError(
                f"Missing required option(s) {', '.join(missing)} for {cls.__name__}.",
                context={"missing": missing},
            )
        return cls(**{f.name: data[f.name] for f in fields(cls) if f.name in data})
