"""
Slope profile schemas.

Pydantic models for gradient profiles received from the track API.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class SlopeSample(BaseModel):
    """One segment of a gradient profile."""

    model_config = ConfigDict(frozen=True)

    distance_m: float
    slope_percent: Optional[float] = None  # None when the API has no slope
    length_m: float
