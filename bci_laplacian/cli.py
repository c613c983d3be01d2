"""
Command-line entry point for the grid Laplacian filter.

  bci-laplacian --print-mask
  bci-laplacian --layout "1 2 3; 4 5 6; 7 8 9" --nchannels 9 --print-mask
  bci-laplacian --config my.yaml --input raw.csv --output filtered.csv --frame-size 32

Flow: YAML config (or --layout/--nchannels) -> configure -> mask
      -> optional frame-wise apply on a CSV sample matrix (rows = samples, cols = channels).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from bci_laplacian.preprocessing.spatial_filters import (
    ConfigureStatus,
    LaplacianError,
    LaplacianSpatialFilter,
    MaskNotReadyError,
)
from bci_laplacian.utils.config_loader import get_laplacian_params, load_config
from bci_laplacian.utils.streaming import apply_in_frames

logger = logging.getLogger("bci_laplacian")

EXIT_OK = 0
EXIT_APPLY_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bci-laplacian",
        description="Grid Laplacian re-referencing: build the mask and filter CSV sample matrices.",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML config (default: packaged config.yaml)")
    parser.add_argument("--layout", type=str, default=None, help="Layout text, e.g. '1 2; 3 4'")
    parser.add_argument("--nchannels", type=int, default=None, help="Number of channels (default: max index in layout)")
    parser.add_argument("--print-mask", action="store_true", help="Write the mask as CSV to stdout")
    parser.add_argument("--input", type=Path, default=None, help="CSV sample matrix (n_samples x n_channels)")
    parser.add_argument("--output", type=Path, default=None, help="Where to write the filtered CSV")
    parser.add_argument("--frame-size", type=int, default=None, help="Apply frame by frame with this many samples")
    parser.add_argument("--delimiter", type=str, default=",", help="CSV delimiter")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def _resolve_params(args: argparse.Namespace) -> tuple[dict, int | None]:
    params: dict = {}
    frame_size = args.frame_size
    if args.layout is None or args.config is not None:
        config = load_config(args.config)
        params = get_laplacian_params(config)
        if frame_size is None:
            frame_size = (config.get("streaming") or {}).get("frame_size")
    if args.layout is not None:
        params["layout"] = args.layout
        params.pop("nchannels", None)
    if args.nchannels is not None:
        params["nchannels"] = args.nchannels
    return params, frame_size


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        params, frame_size = _resolve_params(args)
        filt = LaplacianSpatialFilter(**params)
        status = filt.configure()
    except (LaplacianError, FileNotFoundError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if status is ConfigureStatus.CHANNEL_COUNT_FALLBACK:
        logger.info("Channel count derived from layout: %d", filt.nchannels)

    if args.print_mask:
        np.savetxt(sys.stdout, filt.mask, delimiter=args.delimiter, fmt="%.10g")

    if args.input is not None:
        try:
            samples = np.loadtxt(args.input, delimiter=args.delimiter, ndmin=2)
        except (OSError, ValueError) as e:
            print(f"Input error: {e}", file=sys.stderr)
            return EXIT_APPLY_ERROR
        try:
            if frame_size:
                filtered = apply_in_frames(filt, samples, int(frame_size))
            else:
                filtered = filt.apply(samples)
        except (MaskNotReadyError, ValueError) as e:
            print(f"Apply error: {e}", file=sys.stderr)
            return EXIT_APPLY_ERROR
        if args.output is not None:
            np.savetxt(args.output, filtered, delimiter=args.delimiter, fmt="%.10g")
            logger.info("Wrote %d x %d filtered samples to %s", filtered.shape[0], filtered.shape[1], args.output)
        else:
            np.savetxt(sys.stdout, filtered, delimiter=args.delimiter, fmt="%.10g")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
