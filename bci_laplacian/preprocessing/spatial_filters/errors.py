"""Error kinds and configure outcomes for the grid Laplacian filter."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Distinguishable failure kinds so hosts can log or abort per their own policy."""

    MISSING_PARAMETER = "missing_parameter"
    MALFORMED_LAYOUT = "malformed_layout"
    DUPLICATE_CHANNEL = "duplicate_channel"
    INVALID_PARAMETER = "invalid_parameter"
    MASK_NOT_READY = "mask_not_ready"


class ConfigureStatus(str, Enum):
    """Successful configure outcomes. CHANNEL_COUNT_FALLBACK means nchannels was derived from the layout."""

    OK = "ok"
    CHANNEL_COUNT_FALLBACK = "channel_count_fallback"


class LaplacianError(Exception):
    """Base for all Laplacian configuration/apply failures."""

    kind: ErrorKind


class MissingParameterError(LaplacianError, LookupError):
    kind = ErrorKind.MISSING_PARAMETER


class MalformedLayoutError(LaplacianError, ValueError):
    kind = ErrorKind.MALFORMED_LAYOUT


class DuplicateChannelError(LaplacianError, ValueError):
    kind = ErrorKind.DUPLICATE_CHANNEL

    def __init__(self, message: str, channels: list[int] | None = None) -> None:
        super().__init__(message)
        self.channels = list(channels or [])


class InvalidParameterError(LaplacianError, ValueError):
    kind = ErrorKind.INVALID_PARAMETER


class MaskNotReadyError(LaplacianError, RuntimeError):
    kind = ErrorKind.MASK_NOT_READY
