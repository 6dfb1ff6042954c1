"""
Title         : metadata.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : rhino/plugins/RebarMorph/rebarmorph/metadata.py

Description
----------------------------------------------------------------------------
Metadata utilities for storing and restoring morph results as JSON, so a
host command can attach them to the bar elements it creates.
"""

from __future__ import annotations

import json
from typing import Any

from .constants import Constants, Strings
from .exceptions import GeometryConstructionError, RebarMorphError
from .geometry.curves import interpolate_curve
from .morph import MorphResult
from .specs import MorphOptions


# --- Morph Metadata Handler -----------------------------------------------
class MorphMetadata:
    """Handle metadata serialization for morph results."""

    KEY = Constants.METADATA_KEY
    VERSION = Constants.METADATA_VERSION

    @classmethod
    def to_payload(cls, result: MorphResult) -> dict[str, Any]:
        """Build a JSON-friendly mapping of options, weights and bar points."""
        return {
            "key": cls.KEY,
            "version": cls.VERSION,
            "options": result.options.to_metadata(),
            "weights": list(result.weights),
            "bars": [curve.points.tolist() for curve in result.curves],
        }

    @classmethod
    def to_json(cls, result: MorphResult) -> str:
        """Serialise a morph result to JSON for storage."""
        return json.dumps(cls.to_payload(result))

    @classmethod
    def from_json(cls, text: str) -> MorphResult:
        """Rebuild a morph result from stored JSON.

        Raises:
            RebarMorphError: If the payload is malformed or from another plugin
        """
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RebarMorphError(Strings.MSG_METADATA_INVALID.format(reason=exc)) from exc

        if not isinstance(payload, dict) or payload.get("key") != cls.KEY:
            raise RebarMorphError(Strings.MSG_METADATA_INVALID.format(reason="unexpected key"))
        if payload.get("version") != cls.VERSION:
            raise RebarMorphError(
                Strings.MSG_METADATA_INVALID.format(reason=f"unsupported version {payload.get('version')!r}"),
                context=payload.get("version"),
            )

        try:
            options = MorphOptions.from_metadata(payload["options"])
            weights = tuple(float(w) for w in payload["weights"])
            bars = list(payload["bars"])
        except (KeyError, TypeError, ValueError) as exc:
            raise RebarMorphError(Strings.MSG_METADATA_INVALID.format(reason=exc)) from exc

        if len(bars) != options.number_of_bars or len(weights) != options.number_of_bars:
            raise RebarMorphError(
                Strings.MSG_METADATA_INVALID.format(reason="bar count mismatch"),
                context={"bars": len(bars), "weights": len(weights), "expected": options.number_of_bars},
            )

        curves = []
        for index, points in enumerate(bars):
            try:
                curves.append(interpolate_curve(points, options.degree, options.tolerance))
            except GeometryConstructionError as exc:
                raise RebarMorphError(
                    Strings.MSG_METADATA_INVALID.format(reason=f"bar {index}: {exc}"),
                    context={"bar": index},
                ) from exc
        return MorphResult(curves=tuple(curves), weights=weights, options=options)
