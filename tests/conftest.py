"""Shared fixtures: the 32-channel 7x7 reference layout."""

import pytest

REFERENCE_LAYOUT = (
    " 0   0   1   0   2   0   0;\n"
    " 0   0   0   0   0   0   0;\n"
    " 0   0  18   3  19   0   0;\n"
    " 4  20   5  21   6  22   7;\n"
    "23   8  24   9  25  10  26;\n"
    "11  27  12   0  13  28  14;\n"
    "29  15  30  16  31  17  32"
)


@pytest.fixture
def reference_layout() -> str:
    return REFERENCE_LAYOUT
