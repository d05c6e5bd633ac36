"""A single Happy Cube piece.

A piece forms one side of the cube. Its centre 3x3 block is always solid.
What distinguishes pieces is which of the 16 border sub-cubes are present,
so a piece is identified by a 16-bit index with one bit per ring position
(see ``hcube.ring`` for the layout).

There are 2^16 = 65536 indices. Many of them describe the same physical piece
turned or flipped over. Not every index is a usable piece either: some have
detached parts. That check is left to callers.
"""

from __future__ import annotations

from dataclasses import dataclass

from hcube.ring import RING_SIZE, check_index
from hcube.symmetry import ALL_SYMMETRIES, Symmetry

# (row, col) of each ring position in the 5x5 chart.
RING_CELLS: tuple[tuple[int, int], ...] = tuple(
    [(0, c) for c in range(5)]              # 0-4 top, left to right
    + [(r, 4) for r in range(1, 5)]         # 5-8 right, downwards
    + [(4, c) for c in range(3, -1, -1)]    # 9-12 bottom, right to left
    + [(r, 0) for r in range(3, 0, -1)]     # 13-15 left, upwards
)


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece with a sub-cube at every ring position whose bit is set."""

    index: int

    def __post_init__(self) -> None:
        check_index(self.index)

    @classmethod
    def from_index(cls, index: int) -> Piece:
        return cls(index)

    # -- Symmetry operations --

    def transform(self, symmetry: Symmetry) -> Piece:
        return Piece(symmetry.apply(self.index))

    def rotate_clockwise(self) -> Piece:
        """Return this piece turned 90 degrees clockwise."""
        return self.transform(Symmetry.ROTATE_90)

    def rotate_counter_clockwise(self) -> Piece:
        """Return this piece turned 90 degrees counter-clockwise."""
        return self.transform(Symmetry.ROTATE_270)

    def flip(self) -> Piece:
        """Return this piece turned over (mirrored through positions 0 and 8)."""
        return self.transform(Symmetry.FLIP)

    def images(self) -> dict[Symmetry, Piece]:
        """The image of this piece under every element of the group."""
        return {s: self.transform(s) for s in ALL_SYMMETRIES}

    def orbit(self) -> frozenset[Piece]:
        """All distinct pieces this one can be turned or flipped into."""
        return frozenset(self.images().values())

    def canonical(self) -> Piece:
        """The member of this piece's orbit with the smallest index."""
        return min(self.orbit(), key=lambda p: p.index)

    @property
    def is_canonical(self) -> bool:
        return self.canonical() == self

    def stabilizer(self) -> tuple[Symmetry, ...]:
        """Group elements that leave this piece unchanged (identity included)."""
        return tuple(s for s, p in self.images().items() if p == self)

    # -- Footprint --

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(i for i in range(RING_SIZE) if self.index >> i & 1)

    @property
    def size(self) -> int:
        """Number of ring sub-cubes present."""
        return bin(self.index).count("1")

    def __contains__(self, position: int) -> bool:
        return 0 <= position < RING_SIZE and bool(self.index >> position & 1)

    def chart(self, filled: str = "#", empty: str = ".") -> str:
        """Render the piece as a 5x5 grid, top row first."""
        grid = [[filled] * 5 for _ in range(5)]
        for position, (r, c) in enumerate(RING_CELLS):
            if not self.index >> position & 1:
                grid[r][c] = empty
        return "\n".join("".join(row) for row in grid)

    def __str__(self) -> str:
        return self.chart()
