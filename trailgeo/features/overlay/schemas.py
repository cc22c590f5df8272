"""
Overlay schemas.

Pydantic models handed to the map and chart renderers.
"""

from typing import List, Tuple

from pydantic import BaseModel, Field


class MarkerOut(BaseModel):
    """Distance marker as seen by the renderer."""

    id: str
    position: Tuple[float, float]
    offset_position: Tuple[float, float]
    distance_km: float
    label: str


class ChartPoint(BaseModel):
    """Single chart point."""

    x: float
    y: float


class TrackOverlay(BaseModel):
    """Everything the renderer needs to decorate one track at one zoom."""

    zoom: float

    # Metrics
    cumulative_distances_m: List[float] = Field(default_factory=list)
    total_distance_km: float = 0.0
    is_loop: bool = False

    # Decorations
    marker_interval_km: float = 0.0
    markers: List[MarkerOut] = Field(default_factory=list)
    arrow_repeat_interval: float = 0.0
    simplify_tolerance_m: float = 0.0

    # Profile
    slope_colors: List[str] = Field(default_factory=list)
    chart_points: List[ChartPoint] = Field(default_factory=list)
