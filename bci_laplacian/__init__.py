"""Grid Laplacian re-referencing for multichannel EEG."""

from .preprocessing.spatial_filters import (
    ConfigureStatus,
    ErrorKind,
    LaplacianError,
    LaplacianSpatialFilter,
    build_mask,
    has_duplicate_channel,
    parse_layout,
)

__version__ = "0.1.0"

__all__ = [
    "LaplacianSpatialFilter",
    "ConfigureStatus",
    "ErrorKind",
    "LaplacianError",
    "parse_layout",
    "has_duplicate_channel",
    "build_mask",
    "__version__",
]
