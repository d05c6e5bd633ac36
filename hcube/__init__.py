"""hcube: the combinatorial core of a Happy Cube generator and solver.

A Happy Cube is a foam puzzle of six pieces. They can be assembled into a
cube or packed back into their receptacle. This package models a single
piece, the symmetries that turn one piece into another, and the space of
distinct pieces.
"""

from __future__ import annotations

from hcube.enumeration import (
    DISTINCT_PIECE_COUNT,
    Orbit,
    all_pieces,
    distinct_pieces,
    orbits,
)
from hcube.errors import HCubeError, InvalidIndexError
from hcube.piece import Piece
from hcube.ring import reflect, reflect_rotate, rotate
from hcube.symmetry import Symmetry

__all__ = [
    "DISTINCT_PIECE_COUNT",
    "HCubeError",
    "InvalidIndexError",
    "Orbit",
    "Piece",
    "Symmetry",
    "all_pieces",
    "distinct_pieces",
    "orbits",
    "reflect",
    "reflect_rotate",
    "rotate",
]
