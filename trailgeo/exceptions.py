"""
Engine exceptions.

Numeric data never raises: invalid slopes become gray, invalid
coordinates are skipped. These are for parameter contract violations only.
"""


class TrailGeoError(Exception):
    """Base engine error."""
    pass


class InvalidParameterError(TrailGeoError, ValueError):
    """A caller passed a parameter outside its allowed range."""
    pass
