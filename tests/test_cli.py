"""CLI tests: mask printing, CSV filtering and exit codes."""

import io

import numpy as np

from bci_laplacian.cli import EXIT_APPLY_ERROR, EXIT_CONFIG_ERROR, EXIT_OK, main
from bci_laplacian.preprocessing.spatial_filters import build_mask, parse_layout

GRID_TEXT = "1 2 3; 4 5 6; 7 8 9"


def test_print_mask_from_layout(capsys):
    rc = main(["--layout", GRID_TEXT, "--nchannels", "9", "--print-mask"])
    assert rc == EXIT_OK
    mask = np.loadtxt(io.StringIO(capsys.readouterr().out), delimiter=",")
    np.testing.assert_allclose(mask, build_mask(parse_layout(GRID_TEXT), 9))


def test_print_mask_default_config(capsys):
    assert main(["--print-mask"]) == EXIT_OK
    mask = np.loadtxt(io.StringIO(capsys.readouterr().out), delimiter=",")
    assert mask.shape == (32, 32)


def test_filter_csv(tmp_path):
    samples = np.arange(60, dtype=float).reshape(20, 3)
    src = tmp_path / "raw.csv"
    dst = tmp_path / "filtered.csv"
    np.savetxt(src, samples, delimiter=",")
    rc = main(
        ["--layout", "1 2 3", "--input", str(src), "--output", str(dst), "--frame-size", "8"]
    )
    assert rc == EXIT_OK
    expected = samples @ build_mask(parse_layout("1 2 3"), 3)
    np.testing.assert_allclose(np.loadtxt(dst, delimiter=","), expected, rtol=1e-9)


def test_malformed_layout_exit_code(capsys):
    rc = main(["--layout", "1 2 3; 4 5; 7 8 9"])
    assert rc == EXIT_CONFIG_ERROR
    assert "Configuration error" in capsys.readouterr().err


def test_duplicate_layout_exit_code():
    assert main(["--layout", "1 1"]) == EXIT_CONFIG_ERROR


def test_channel_mismatch_exit_code(tmp_path, capsys):
    src = tmp_path / "raw.csv"
    np.savetxt(src, np.zeros((5, 2)), delimiter=",")
    rc = main(["--layout", GRID_TEXT, "--input", str(src)])
    assert rc == EXIT_APPLY_ERROR
    assert "Apply error" in capsys.readouterr().err


def test_missing_input_exit_code(tmp_path, capsys):
    rc = main(["--layout", "1 2", "--input", str(tmp_path / "nope.csv")])
    assert rc == EXIT_APPLY_ERROR
    assert "Input error" in capsys.readouterr().err


def test_unparseable_input_exit_code(tmp_path):
    src = tmp_path / "raw.csv"
    src.write_text("1,2\nfoo,bar\n")
    assert main(["--layout", "1 2", "--input", str(src)]) == EXIT_APPLY_ERROR
