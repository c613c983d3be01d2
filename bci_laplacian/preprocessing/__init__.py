"""Preprocessing steps for multichannel EEG."""

from .spatial_filters import (
    ConfigureStatus,
    LaplacianSpatialFilter,
    SpatialFilterBase,
)

__all__ = [
    "SpatialFilterBase",
    "LaplacianSpatialFilter",
    "ConfigureStatus",
]
