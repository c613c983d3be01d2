"""Unit tests for YAML config loading and Laplacian parameter extraction."""

import numpy as np
import pytest

from bci_laplacian.preprocessing.spatial_filters import (
    ConfigureStatus,
    LaplacianSpatialFilter,
    MissingParameterError,
)
from bci_laplacian.utils.config_loader import get_config, get_laplacian_params, load_config


def test_default_config_reference_layout():
    config = load_config()
    assert get_config() is config
    params = get_laplacian_params(config)
    assert "nchannels" not in params
    filt = LaplacianSpatialFilter(**params)
    assert filt.configure() is ConfigureStatus.CHANNEL_COUNT_FALLBACK
    assert filt.nchannels == 32
    assert filt.layout.shape == (7, 7)
    assert config["streaming"]["frame_size"] == 32


def test_custom_config_grid_layout(tmp_path):
    path = tmp_path / "lap.yaml"
    path.write_text(
        "spatial_filter:\n"
        "  laplacian:\n"
        "    layout:\n"
        "      - [1, 2, 3]\n"
        "      - [4, 5, 6]\n"
        "    nchannels: 6\n"
    )
    params = get_laplacian_params(load_config(path))
    filt = LaplacianSpatialFilter(**params)
    assert filt.configure() is ConfigureStatus.OK
    np.testing.assert_array_equal(filt.layout, np.array([[1, 2, 3], [4, 5, 6]]))


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_missing_laplacian_section():
    with pytest.raises(MissingParameterError):
        get_laplacian_params({"spatial_filter": {}})
    with pytest.raises(MissingParameterError):
        get_laplacian_params({})
