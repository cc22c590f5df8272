"""
Unified constants for colors and units.

This module provides a single source of truth for color tokens
used by path-coloring and chart renderers.
"""

from enum import Enum


class SlopeColor(str, Enum):
    """
    Color tokens for slope classification.

    Red shades for uphill, green shades for downhill.
    CYAN matches the elevation chart line so flat-ish sections blend in.
    """
    DARK_RED = "#8B0000"
    CRIMSON = "#DC143C"
    TOMATO = "#FF6347"
    LIGHT_ORANGE = "#FFB347"
    CYAN = "#4BC0C0"
    LIGHT_GREEN = "#90EE90"
    LIME_GREEN = "#32CD32"
    FOREST_GREEN = "#228B22"
    DARK_GREEN = "#006400"
    GRAY = "#808080"  # invalid / missing data


# Units
METERS_PER_KM = 1000.0

# 1 degree of latitude ≈ 111,320 m (used for small offsets in degree space)
METERS_PER_DEGREE = 111320.0

# Label offset from the path for distance markers
MARKER_OFFSET_M = 3.0
