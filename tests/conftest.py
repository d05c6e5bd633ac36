from __future__ import annotations

import pytest

from hcube import enumeration
from hcube.config import settings
from hcube.piece import Piece


@pytest.fixture(autouse=True)
def reset_orbit_cache():
    """Each test starts with an empty orbit cache and caching enabled."""
    enumeration.clear_cache()
    original = settings.cache_orbits
    settings.cache_orbits = True
    yield
    settings.cache_orbits = original
    enumeration.clear_cache()


@pytest.fixture
def sample_pieces() -> list[Piece]:
    """A spread of indices: empty, full, single bits, corners, asymmetric shapes."""
    indices = [
        0, 0xFFFF, 0b1, 0b10, 0b10000, 0x8000,
        0b0001_0001_0001_0001,  # all four corners
        0b0000_0000_0001_1111,  # full top edge
        0b0100_1010_0110_0011,
        0b1011_0101_1001_1100,
    ]
    return [Piece.from_index(i) for i in indices]
