"""Laplacian mask construction from a validated channel layout."""

from __future__ import annotations

import numpy as np

from .errors import InvalidParameterError


def validate_nchannels(nchannels: object) -> int:
    if isinstance(nchannels, bool) or not isinstance(nchannels, (int, np.integer)) or nchannels < 1:
        raise InvalidParameterError(f"nchannels must be a positive integer; got {nchannels!r}")
    return int(nchannels)


def locate_channel(layout: np.ndarray, channel: int) -> tuple[int, int] | None:
    """First (row, col) holding channel in row-major order, or None if the channel has no grid cell."""
    hits = np.argwhere(np.asarray(layout) == channel)
    if len(hits) == 0:
        return None
    row, col = hits[0]
    return int(row), int(col)


def neighbors_of(layout: np.ndarray, row: int, col: int) -> list[int]:
    """
    Channel indices adjacent to (row, col), in the fixed order left, right, up, down.
    Out-of-grid cells and empty cells (0) are skipped.
    """
    layout = np.asarray(layout)
    nrows, ncols = layout.shape
    neighbours: list[int] = []
    for r, c in ((row, col - 1), (row, col + 1), (row - 1, col), (row + 1, col)):
        if 0 <= r < nrows and 0 <= c < ncols and layout[r, c] != 0:
            neighbours.append(int(layout[r, c]))
    return neighbours


def build_mask(layout: np.ndarray, nchannels: int, dtype: type = np.float64) -> np.ndarray:
    """
    (nchannels, nchannels) mask; column c is channel c+1.

    mask[c, c] = 1 and mask[k-1, c] = -1/deg for each of the deg neighbours k of
    channel c+1 that is itself a channel of this mask (1 <= k <= nchannels).
    Channels missing from the layout keep a zero column; isolated channels keep
    only the self-weight.
    """
    nchannels = validate_nchannels(nchannels)
    layout = np.asarray(layout)
    mask = np.zeros((nchannels, nchannels), dtype=dtype)
    for ch in range(1, nchannels + 1):
        pos = locate_channel(layout, ch)
        if pos is None:
            continue
        neighbours = [k for k in neighbors_of(layout, *pos) if 1 <= k <= nchannels]
        mask[ch - 1, ch - 1] = 1
        for k in neighbours:
            mask[k - 1, ch - 1] = -1.0 / len(neighbours)
    return mask
