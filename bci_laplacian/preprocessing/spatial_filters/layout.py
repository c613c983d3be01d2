"""
Channel layout parsing and validation.

Layout text is a small grid language: rows separated by ';', channel indices
separated by whitespace (newlines included). 0 marks an empty grid cell.

    " 0  1  0;
      2  3  4;
      0  5  0"
"""

from __future__ import annotations

import re
from typing import Any, Sequence

import numpy as np

from .errors import MalformedLayoutError

_ROW_SEPARATOR = ";"
_INT_TOKEN = re.compile(r"[+-]?\d+")
_EDGE_PUNCTUATION = re.compile(r"^[^\w+-]+|[^\w+-]+$")


def _split_rows(text: str) -> list[str]:
    rows = text.split(_ROW_SEPARATOR)
    # "1 2; 3 4;" -> no trailing empty row
    if len(rows) > 1 and not rows[-1].strip():
        rows = rows[:-1]
    return rows


def _parse_token(token: str, row_idx: int) -> int:
    if not _INT_TOKEN.fullmatch(token):
        raise MalformedLayoutError(
            f"Layout row {row_idx}: token {token!r} is not an integer channel index"
        )
    return int(token)


def parse_layout(text: str) -> np.ndarray:
    """
    Parse layout text into a (n_rows, n_cols) int matrix.
    Raises MalformedLayoutError on empty text, non-integer tokens or ragged rows.
    Duplicates are not checked here (see has_duplicate_channel).
    """
    if not isinstance(text, str):
        raise MalformedLayoutError(f"Layout text must be a string; got {type(text).__name__}")
    if not text.strip():
        raise MalformedLayoutError("Layout text is empty")

    rows: list[list[int]] = []
    for row_idx, srow in enumerate(_split_rows(text)):
        rows.append([_parse_token(tok, row_idx) for tok in srow.split()])

    ncols = len(rows[0])
    lengths = [len(r) for r in rows]
    if ncols == 0 or any(n != ncols for n in lengths):
        raise MalformedLayoutError(
            f"Layout rows must be non-empty and of equal length; got row lengths {lengths}"
        )
    return np.array(rows, dtype=np.int64)


def find_duplicate_channels(text: str) -> list[int]:
    """Positive channel indices appearing more than once in layout text, in first-repeat order."""
    seen: set[int] = set()
    duplicates: list[int] = []
    for srow in _split_rows(text):
        for raw in srow.split():
            # "1," and "(1)" name channel 1; "1.5", "x1" and "1e5" name no channel
            token = _EDGE_PUNCTUATION.sub("", raw)
            if not _INT_TOKEN.fullmatch(token):
                continue
            value = int(token)
            if value <= 0:
                continue
            if value in seen:
                if value not in duplicates:
                    duplicates.append(value)
                continue
            seen.add(value)
    return duplicates


def has_duplicate_channel(text: str) -> bool:
    """True if any positive channel index is repeated. Run before parse_layout."""
    return bool(find_duplicate_channels(text))


def accept_layout(grid: Sequence[Sequence[int]] | np.ndarray | Any) -> np.ndarray:
    """
    Validate a pre-built grid and return it as an int matrix (copy).
    Duplicate indices are the caller's responsibility.
    """
    try:
        arr = np.array(grid)
    except (ValueError, TypeError) as exc:
        raise MalformedLayoutError(f"Layout grid is not rectangular: {exc}") from exc
    if arr.ndim != 2 or arr.size == 0:
        raise MalformedLayoutError(
            f"Layout grid must be a non-empty 2D matrix; got shape {arr.shape}"
        )
    if arr.dtype == bool or not np.issubdtype(arr.dtype, np.number):
        raise MalformedLayoutError(f"Layout grid must hold integers; got dtype {arr.dtype}")
    if not np.issubdtype(arr.dtype, np.integer):
        if not np.all(np.isfinite(arr)) or not np.all(arr == np.round(arr)):
            raise MalformedLayoutError("Layout grid must hold integer channel indices")
    return arr.astype(np.int64)
