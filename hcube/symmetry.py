"""The dihedral group of order 8 acting on piece ring words.

Every element is "reflect (optionally), then rotate clockwise by a number of
quarter turns". Composition follows from the relation that rotating and then
reflecting equals reflecting and then rotating the other way.
"""

from __future__ import annotations

from enum import Enum

from hcube.ring import QUARTER_TURN, reflect_rotate, rotate


class Symmetry(str, Enum):
    IDENTITY = "identity"
    ROTATE_90 = "rotate_90"
    ROTATE_180 = "rotate_180"
    ROTATE_270 = "rotate_270"
    FLIP = "flip"
    FLIP_ROTATE_90 = "flip_rotate_90"
    FLIP_ROTATE_180 = "flip_rotate_180"
    FLIP_ROTATE_270 = "flip_rotate_270"

    @property
    def quarter_turns(self) -> int:
        return _PARTS[self][0]

    @property
    def reflected(self) -> bool:
        return _PARTS[self][1]

    @property
    def shift(self) -> int:
        """Ring positions moved by the rotation part."""
        return self.quarter_turns * QUARTER_TURN

    @classmethod
    def from_parts(cls, quarter_turns: int, reflected: bool) -> Symmetry:
        return _BY_PARTS[(quarter_turns % 4, bool(reflected))]

    def apply(self, index: int) -> int:
        """Apply this element to a ring word."""
        if self.reflected:
            return reflect_rotate(index, self.shift)
        return rotate(index, self.shift)

    def compose(self, other: Symmetry) -> Symmetry:
        """The element equal to applying ``other`` first, then ``self``."""
        turns = -other.quarter_turns if self.reflected else other.quarter_turns
        return Symmetry.from_parts(
            self.quarter_turns + turns, self.reflected != other.reflected,
        )

    def inverse(self) -> Symmetry:
        if self.reflected:
            return self
        return Symmetry.from_parts(-self.quarter_turns, False)


_PARTS: dict[Symmetry, tuple[int, bool]] = {
    Symmetry.IDENTITY: (0, False),
    Symmetry.ROTATE_90: (1, False),
    Symmetry.ROTATE_180: (2, False),
    Symmetry.ROTATE_270: (3, False),
    Symmetry.FLIP: (0, True),
    Symmetry.FLIP_ROTATE_90: (1, True),
    Symmetry.FLIP_ROTATE_180: (2, True),
    Symmetry.FLIP_ROTATE_270: (3, True),
}

_BY_PARTS: dict[tuple[int, bool], Symmetry] = {parts: s for s, parts in _PARTS.items()}

ROTATIONS: tuple[Symmetry, ...] = tuple(s for s in Symmetry if not s.reflected)
ALL_SYMMETRIES: tuple[Symmetry, ...] = tuple(Symmetry)
"""Identity first, then the other rotations, then the reflections."""
