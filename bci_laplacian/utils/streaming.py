"""
Frame-wise streaming over sample matrices.
Recording (n_samples, n_channels) -> consecutive frames -> filter apply.
"""

import logging
from typing import Generator

import numpy as np

logger = logging.getLogger(__name__)


def frame_chunks(
    samples: np.ndarray,
    frame_size: int,
) -> Generator[tuple[np.ndarray, int, int], None, None]:
    """
    Yield consecutive, non-overlapping row blocks of samples (time on axis 0).
    The last block may be shorter than frame_size.
    Yields (frame, start_idx, end_idx).
    """
    if frame_size < 1:
        raise ValueError(f"frame_size must be >= 1; got {frame_size}")
    n_samples = samples.shape[0]
    start = 0
    while start < n_samples:
        end = min(start + frame_size, n_samples)
        yield samples[start:end], start, end
        start = end


def apply_in_frames(filt, samples: np.ndarray, frame_size: int) -> np.ndarray:
    """Run filt.apply frame by frame, as a host pipeline would, and stitch the output."""
    data = np.asarray(samples)
    out: np.ndarray | None = None
    n_frames = 0
    for frame, start, end in frame_chunks(data, frame_size):
        filtered = filt.apply(frame)
        if out is None:
            out = np.empty((data.shape[0], filtered.shape[1]), dtype=filtered.dtype)
        out[start:end] = filtered
        n_frames += 1
    logger.debug("Applied %s over %d frames of %d samples", filt.name, n_frames, frame_size)
    if out is None:
        return filt.apply(data)
    return out
