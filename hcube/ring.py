"""Bit-permutation algebra on the 16-position ring of a piece.

A piece word has one bit per ring position, laid out clockwise around the
border of a 5x5 square (corners at 0, 4, 8 and 12)::

    00 01 02 03 04
    15          05
    14          06
    13          07
    12 11 10 09 08

Rotating the piece a quarter turn clockwise moves every position four steps
along the ring. Mirroring it about the diagonal through positions 0 and 8 maps
position i to (16 - i) mod 16. Both are permutations of bit positions, so the
ring wraps without carry: nothing is shifted out of the word.

Each permutation is compiled once into a pair of 256-entry byte tables. A word
is permuted with one lookup per byte.
"""

from __future__ import annotations

from functools import lru_cache

from hcube.errors import InvalidIndexError

RING_SIZE = 16
QUARTER_TURN = RING_SIZE // 4  # positions per 90 degrees
MAX_INDEX = (1 << RING_SIZE) - 1
INDEX_COUNT = 1 << RING_SIZE

# Destination position of bit i, for i in 0..15.
Permutation = tuple[int, ...]


def check_index(n: int) -> int:
    """Return ``n`` unchanged if it is a valid 16-bit ring word."""
    if isinstance(n, bool) or not isinstance(n, int) or not 0 <= n <= MAX_INDEX:
        raise InvalidIndexError(n)
    return n


@lru_cache(maxsize=None)
def permutation(k: int, reflected: bool = False) -> Permutation:
    """Destination table for "reflect (optionally), then rotate by k positions"."""
    if reflected:
        return tuple((RING_SIZE - i + k) % RING_SIZE for i in range(RING_SIZE))
    return tuple((i + k) % RING_SIZE for i in range(RING_SIZE))


def _scatter(bits: int, offset: int, perm: Permutation) -> int:
    out = 0
    for i in range(8):
        if bits >> i & 1:
            out |= 1 << perm[offset + i]
    return out


@lru_cache(maxsize=None)
def _byte_tables(perm: Permutation) -> tuple[tuple[int, ...], tuple[int, ...]]:
    if sorted(perm) != list(range(RING_SIZE)):
        raise ValueError(f"Not a permutation of the {RING_SIZE} ring positions: {perm!r}")
    low = tuple(_scatter(b, 0, perm) for b in range(256))
    high = tuple(_scatter(b, 8, perm) for b in range(256))
    return low, high


def apply_permutation(n: int, perm: Permutation) -> int:
    """Move bit i of ``n`` to bit ``perm[i]`` for every ring position i."""
    low, high = _byte_tables(tuple(perm))
    n = check_index(n)
    return low[n & 0xFF] | high[n >> 8]


def rotate(n: int, k: int) -> int:
    """Rotate the ring word ``n`` clockwise by ``k`` positions.

    Bit i becomes bit (i + k) mod 16. ``k`` is taken modulo the ring size;
    the symmetry group only uses multiples of a quarter turn (0, 4, 8, 12).
    """
    return apply_permutation(n, permutation(k % RING_SIZE))


def reflect(n: int) -> int:
    """Mirror the ring word ``n``: bit i becomes bit (16 - i) mod 16."""
    return apply_permutation(n, permutation(0, True))


def reflect_rotate(n: int, k: int) -> int:
    """Reflect ``n``, then rotate the result clockwise by ``k`` positions."""
    return apply_permutation(n, permutation(k % RING_SIZE, True))
