"""Pytest configuration and fixtures."""

import pytest

from bitint import BitVectorBE, BitVectorLE


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--fast",
        action="store_true",
        default=False,
        help="Skip slow tests (randomized cross-checks against int)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests when --fast flag is used."""
    if config.getoption("--fast"):
        skip_slow = pytest.mark.skip(reason="skipped with --fast flag")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


@pytest.fixture(params=[BitVectorLE, BitVectorBE], ids=["le", "be"])
def layout(request):
    """Both storage layouts."""
    return request.param


def twos_bits(value: int, width: int = 0) -> "list[int]":
    """LSB-first two's complement bits of value, sign bit last."""
    width = max(width, value.bit_length() + 1)
    return [(value >> i) & 1 for i in range(width)]


def to_int(vector) -> int:
    """Value of a vector, read back through its binary rendering."""
    return int(str(vector), 2)


@pytest.fixture
def make(layout):
    """Factory building a vector of the current layout from an int.

    Non-negative values go through from_magnitude; negative ones through
    from_twos_complement unless twos=False.
    """

    def _make(value: int, twos: bool = True):
        if value < 0 and twos:
            bits = twos_bits(value)
            if layout is BitVectorBE:
                bits.reverse()
            return layout.from_twos_complement(bits)

        magnitude = [int(c) for c in reversed(format(abs(value), "b"))] if value else []
        if layout is BitVectorBE:
            magnitude.reverse()
        return layout.from_magnitude(-1 if value < 0 else 1, magnitude)

    return _make
