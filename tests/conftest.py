from __future__ import annotations

from collections.abc import Iterator

import pytest

from shadowcast import config


@pytest.fixture(autouse=True)
def restore_config() -> Iterator[None]:
    """Keep config tweaks made by one test from leaking into the next."""
    int_bits = config.FRACTION_INT_BITS
    strategy = config.DEFAULT_SCAN_STRATEGY
    yield
    config.FRACTION_INT_BITS = int_bits
    config.DEFAULT_SCAN_STRATEGY = strategy
