"""
Base types shared by the engine modules.

This module contains only dataclasses and type aliases with NO internal
imports to avoid circular dependencies.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

# (lat, lon) in decimal degrees
GeoPoint = Tuple[float, float]

# Ordered path along a trail
Track = Sequence[GeoPoint]


@dataclass(frozen=True)
class ProfilePoint:
    """
    A generic chart point.

    Decoupled from elevation/slope fields so the same downsampling
    serves both charts.
    """
    x: float
    y: float


@dataclass(frozen=True)
class DistanceMarker:
    """
    A kilometer marker placed along a track.

    Transient: recomputed whenever the track, interval or cap changes.
    """
    id: str
    position: GeoPoint
    distance_km: float
    offset_position: GeoPoint


@dataclass(frozen=True)
class ColorBucket:
    """Half-open slope interval [lower, upper) mapped to a color token."""
    lower: float
    upper: float
    color: str
    label: str

    def contains(self, value: float) -> bool:
        return self.lower <= value < self.upper


@dataclass(frozen=True)
class ZoomTier:
    """One row of a zoom step table: applies from min_zoom upwards."""
    min_zoom: float
    value: float
