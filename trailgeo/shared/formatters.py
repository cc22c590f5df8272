"""
Formatting utilities for map labels.
"""


def format_distance_marker(distance_km: float) -> str:
    """
    Format a distance marker label.

    Args:
        distance_km: Marker distance in kilometers

    Returns:
        Short label: '.5' below 1 km, '5' for whole km, '1.5' otherwise
    """
    if distance_km <= 0:
        return "0"
    if distance_km < 1:
        return f"{distance_km:g}".lstrip("0")

    rounded = round(distance_km, 1)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.1f}"
