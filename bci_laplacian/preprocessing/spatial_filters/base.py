"""
Base interface for spatial filter plugins.

Spatial filters re-reference channels with a fixed linear map. They accept
either (n_samples, n_channels) frames or (n_trials, n_channels, n_samples)
batches and keep the input layout. Configuration comes from the keyword
parameters given at construction (the host's parameter store).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np


class SpatialFilterBase(ABC):
    """
    Abstract base for spatial filtering plugins.

    Online mode requires a precomputed filter matrix; transform must be causal
    (no future samples), which holds for any per-sample linear map.
    """

    name: str = "base"

    def __init__(self, fs: float | None = None, **kwargs: Any) -> None:
        self.fs = fs
        self.params = kwargs
        self._fitted = False

    @abstractmethod
    def fit(self, X: np.ndarray, y: np.ndarray | None = None, info: dict[str, Any] | None = None) -> "SpatialFilterBase":
        """Prepare the filter. X: (n_samples, n_channels) or (n_trials, n_channels, n_samples)."""
        return self

    @abstractmethod
    def transform(self, X: np.ndarray) -> np.ndarray:
        """Apply spatial filter; output has the same layout as X."""
        pass

    def fit_transform(
        self, X: np.ndarray, y: np.ndarray | None = None, info: dict[str, Any] | None = None
    ) -> np.ndarray:
        """Fit and transform."""
        self.fit(X, y=y, info=info)
        return self.transform(X)

    def is_online_safe(self) -> bool:
        """True if transform is causal and can run in real-time (matrix mult only)."""
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(fs={self.fs}, name={self.name!r})"
