"""Grid Laplacian spatial filter (each channel minus the mean of its grid neighbours)."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import numpy as np

from .base import SpatialFilterBase
from .errors import (
    ConfigureStatus,
    DuplicateChannelError,
    InvalidParameterError,
    LaplacianError,
    MaskNotReadyError,
    MissingParameterError,
)
from .layout import accept_layout, find_duplicate_channels, parse_layout
from .mask import build_mask, validate_nchannels

logger = logging.getLogger(__name__)


class LaplacianSpatialFilter(SpatialFilterBase):
    """
    Surface Laplacian over a rectangular electrode grid.

    The layout (text such as "0 1 0; 2 3 4; 0 5 0" or an int grid) places
    channels 1..N on a grid; 0 marks an empty cell. The filter output is
    samples @ mask, where mask column c holds +1 for channel c+1 and
    -1/deg for each of its deg left/right/up/down neighbours.

    Parameters are read from the constructor keywords (self.params) by
    configure(); set_layout()/set_mask() bypass the parameter store. A failed
    (re)configuration leaves the previous layout and mask untouched.
    Configuration and apply are not synchronised; callers serialise them.
    """

    name = "laplacian"

    def __init__(
        self,
        fs: float | None = None,
        layout: str | Sequence[Sequence[int]] | np.ndarray | None = None,
        nchannels: int | None = None,
        dtype: type = np.float64,
        **kwargs: Any,
    ) -> None:
        if layout is not None:
            kwargs["layout"] = layout
        if nchannels is not None:
            kwargs["nchannels"] = nchannels
        super().__init__(fs, **kwargs)
        self.dtype = dtype
        self._layout: np.ndarray | None = None
        self._nchannels: int | None = None
        self._mask: np.ndarray | None = None
        self._is_mask_set = False

    def configure(self, params: Mapping[str, Any] | None = None) -> ConfigureStatus:
        """
        Build layout and mask from params (default: self.params).
        Returns CHANNEL_COUNT_FALLBACK when nchannels was derived from the layout maximum.
        """
        params = self.params if params is None else params
        layout_spec = params.get("layout")
        if layout_spec is None:
            logger.error("[%s] Cannot find param layout", self.name)
            raise MissingParameterError(f"[{self.name}] Missing required parameter 'layout'")

        layout = self._load_layout(layout_spec)

        status = ConfigureStatus.OK
        nchannels = params.get("nchannels")
        if nchannels is None:
            nchannels = int(layout.max())
            if nchannels < 1:
                logger.error("[%s] Cannot derive number of channels: layout holds no channel", self.name)
                raise MissingParameterError(
                    f"[{self.name}] Parameter 'nchannels' not provided and layout holds no positive index"
                )
            logger.warning(
                "[%s] Number of channels not provided: assuming that the number of channels "
                "corresponds to the highest index in the provided layout (%d)",
                self.name,
                nchannels,
            )
            status = ConfigureStatus.CHANNEL_COUNT_FALLBACK

        self._commit(layout, nchannels)
        return status

    def set_layout(
        self, layout: str | Sequence[Sequence[int]] | np.ndarray, nchannels: int
    ) -> None:
        """Replace layout and rebuild the mask for nchannels channels."""
        self._commit(self._load_layout(layout), nchannels)

    def set_mask(self, mask: np.ndarray | Sequence[Sequence[float]]) -> None:
        """Inject a precomputed mask (e.g. calibrated offline). Layout is left as is."""
        arr = np.array(mask)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.size == 0:
            logger.error("[%s] Injected mask must be square; got shape %s", self.name, arr.shape)
            raise InvalidParameterError(
                f"[{self.name}] Mask must be a non-empty square matrix; got shape {arr.shape}"
            )
        if arr.dtype == bool or not np.issubdtype(arr.dtype, np.number):
            logger.error("[%s] Injected mask must be numeric; got dtype %s", self.name, arr.dtype)
            raise InvalidParameterError(f"[{self.name}] Mask must hold numbers; got dtype {arr.dtype}")
        self._mask = arr
        self._nchannels = arr.shape[0]
        self._is_mask_set = True

    def _load_layout(self, spec: str | Sequence[Sequence[int]] | np.ndarray) -> np.ndarray:
        try:
            if isinstance(spec, str):
                duplicates = find_duplicate_channels(spec)
                if duplicates:
                    raise DuplicateChannelError(
                        f"[{self.name}] The provided layout has duplicated indexes: {duplicates}",
                        channels=duplicates,
                    )
                return parse_layout(spec)
            return accept_layout(spec)
        except LaplacianError as exc:
            logger.error("[%s] Invalid layout (%s): %s", self.name, exc.kind.value, exc)
            raise

    def _commit(self, layout: np.ndarray, nchannels: object) -> None:
        try:
            nchannels = validate_nchannels(nchannels)
        except InvalidParameterError:
            logger.error("[%s] Invalid number of channels: %r", self.name, nchannels)
            raise
        mask = build_mask(layout, nchannels, dtype=self.dtype)
        self._layout = layout
        self._nchannels = nchannels
        self._mask = mask
        self._is_mask_set = True
        logger.info(
            "[%s] Laplacian mask built: %d channels, %d located in a %dx%d layout",
            self.name,
            nchannels,
            int(np.count_nonzero(np.diag(mask))),
            layout.shape[0],
            layout.shape[1],
        )

    @property
    def layout(self) -> np.ndarray | None:
        return None if self._layout is None else self._layout.copy()

    @property
    def mask(self) -> np.ndarray | None:
        return None if self._mask is None else self._mask.copy()

    @property
    def nchannels(self) -> int | None:
        return self._nchannels

    @property
    def is_mask_set(self) -> bool:
        return self._is_mask_set

    def _require_mask(self) -> np.ndarray:
        if not self._is_mask_set or self._mask is None:
            logger.error("[%s] Laplacian mask is not set", self.name)
            raise MaskNotReadyError(f"[{self.name}] - Laplacian mask is not set")
        return self._mask

    def _check_channels(self, data: np.ndarray, n_mask: int) -> None:
        if data.shape[1] != n_mask:
            raise ValueError(
                f"[{self.name}] Expected {n_mask} channels on axis 1; got shape {data.shape}"
            )

    def apply(self, samples: np.ndarray) -> np.ndarray:
        """(n_samples, n_channels) -> samples @ mask."""
        mask = self._require_mask()
        data = np.asarray(samples)
        if data.ndim != 2:
            raise ValueError(
                f"[{self.name}] apply expects 2D array (n_samples, n_channels); got ndim={data.ndim}"
            )
        self._check_channels(data, mask.shape[0])
        return data @ mask

    def fit(
        self, X: np.ndarray, y: np.ndarray | None = None, info: dict | None = None
    ) -> "LaplacianSpatialFilter":
        if not self._is_mask_set:
            self.configure()
        self._check_channels(np.asarray(X), self._require_mask().shape[0])
        self._fitted = True
        return self

    def transform(self, X: np.ndarray) -> np.ndarray:
        data = np.asarray(X)
        if data.ndim == 2:
            return self.apply(data)
        if data.ndim != 3:
            raise ValueError(
                f"[{self.name}] expects (n_samples, n_channels) or "
                f"(n_trials, n_channels, n_samples); got ndim={data.ndim}"
            )
        mask = self._require_mask()
        self._check_channels(data, mask.shape[0])
        # out[b, c, s] = sum_k mask[k, c] * X[b, k, s]
        return np.einsum("kc,bks->bcs", mask, data)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(fs={self.fs}, name={self.name!r}, "
            f"nchannels={self._nchannels}, mask_set={self._is_mask_set})"
        )
