"""Model parameter definitions."""

from scalar_kalman.models.params import FilterParams

__all__ = [
    "FilterParams",
]
