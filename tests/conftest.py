from __future__ import annotations

from collections.abc import Iterator

import pytest

from delver.util import rng

TEST_SEED = "delver-tests"


@pytest.fixture(autouse=True)
def seeded_rng() -> Iterator[None]:
    """Give every test the same fresh set of random streams."""
    rng.init(TEST_SEED)
    yield
    rng.init(None)
