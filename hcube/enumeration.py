"""Enumeration of the piece space.

``all_pieces`` walks every raw index. ``orbits`` groups the raw indices into
classes of pieces that are the same up to turning and flipping, and
``distinct_pieces`` keeps one piece per class: the one with the smallest index.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from hcube.config import settings
from hcube.piece import Piece
from hcube.ring import INDEX_COUNT, MAX_INDEX, Permutation, permutation
from hcube.symmetry import ALL_SYMMETRIES, Symmetry

logger = logging.getLogger(__name__)

DISTINCT_PIECE_COUNT = 8484
"""Number of orbits of the 8-element group on the 65536 raw indices."""


class Orbit(BaseModel):
    """One symmetry class of raw piece indices."""

    model_config = ConfigDict(frozen=True)

    canonical: int
    members: tuple[int, ...]

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def stabilizer_order(self) -> int:
        return len(ALL_SYMMETRIES) // self.size

    def piece(self) -> Piece:
        return Piece.from_index(self.canonical)

    def __contains__(self, index: int) -> bool:
        return index in self.members


def all_pieces() -> Iterator[Piece]:
    """Yield every piece, indices 0 through 65535 in ascending order."""
    index = 0
    while True:
        yield Piece.from_index(index)
        if index == MAX_INDEX:
            return
        index += 1


def orbit_of(index: int) -> frozenset[int]:
    """Indices of every image of ``index`` under the symmetry group."""
    return frozenset(s.apply(index) for s in ALL_SYMMETRIES)


_orbit_cache: list[Orbit] | None = None


def _reduce() -> list[Orbit]:
    t0 = time.monotonic()
    visited: set[int] = set()
    result: list[Orbit] = []
    for index in range(INDEX_COUNT):
        if index in visited:
            continue
        members = orbit_of(index)
        visited.update(members)
        result.append(Orbit(canonical=min(members), members=tuple(sorted(members))))

    logger.info("Reduced %d raw pieces to %d orbits", INDEX_COUNT, len(result))
    logger.debug("Orbit reduction took %.1f ms", (time.monotonic() - t0) * 1000)
    return result


def orbits() -> list[Orbit]:
    """All orbits of the raw piece space, in ascending canonical order."""
    global _orbit_cache
    if not settings.cache_orbits:
        return _reduce()
    if _orbit_cache is None:
        _orbit_cache = _reduce()
    return list(_orbit_cache)


def clear_cache() -> None:
    global _orbit_cache
    _orbit_cache = None


def distinct_pieces() -> list[Piece]:
    """One canonical piece per symmetry class."""
    return [orbit.piece() for orbit in orbits()]


def orbit_size_distribution() -> dict[int, int]:
    """Map orbit size to the number of orbits of that size."""
    counts = Counter(orbit.size for orbit in orbits())
    return dict(sorted(counts.items()))


def _cycle_count(perm: Permutation) -> int:
    seen: set[int] = set()
    cycles = 0
    for start in range(len(perm)):
        if start in seen:
            continue
        cycles += 1
        position = start
        while position not in seen:
            seen.add(position)
            position = perm[position]
    return cycles


def fixed_point_count(symmetry: Symmetry) -> int:
    """Number of raw indices left unchanged by ``symmetry``.

    A word is fixed iff it is constant on every cycle of the permutation.
    """
    return 2 ** _cycle_count(permutation(symmetry.shift, symmetry.reflected))


def count_orbits_burnside() -> int:
    """Count orbits as the average number of fixed points over the group."""
    total = sum(fixed_point_count(s) for s in ALL_SYMMETRIES)
    return total // len(ALL_SYMMETRIES)
