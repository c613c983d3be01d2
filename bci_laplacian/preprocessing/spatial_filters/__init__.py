"""Spatial filter plugins: grid Laplacian (layout parsing, mask building, apply)."""

from .base import SpatialFilterBase
from .errors import (
    ConfigureStatus,
    DuplicateChannelError,
    ErrorKind,
    InvalidParameterError,
    LaplacianError,
    MalformedLayoutError,
    MaskNotReadyError,
    MissingParameterError,
)
from .laplacian import LaplacianSpatialFilter
from .layout import accept_layout, find_duplicate_channels, has_duplicate_channel, parse_layout
from .mask import build_mask, locate_channel, neighbors_of

__all__ = [
    "SpatialFilterBase",
    "LaplacianSpatialFilter",
    "parse_layout",
    "has_duplicate_channel",
    "find_duplicate_channels",
    "accept_layout",
    "locate_channel",
    "neighbors_of",
    "build_mask",
    "ConfigureStatus",
    "ErrorKind",
    "LaplacianError",
    "MissingParameterError",
    "MalformedLayoutError",
    "DuplicateChannelError",
    "InvalidParameterError",
    "MaskNotReadyError",
]
