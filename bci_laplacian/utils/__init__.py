"""Utility functions and helpers for the Laplacian filter."""

from .config_loader import load_config, get_config, get_laplacian_params
from .streaming import frame_chunks, apply_in_frames

__all__ = [
    "load_config",
    "get_config",
    "get_laplacian_params",
    "frame_chunks",
    "apply_in_frames",
]
