from __future__ import annotations


class HCubeError(Exception):
    """Base class for hcube errors."""
    pass


class InvalidIndexError(HCubeError, ValueError):
    """A ring word or piece index is not a 16-bit unsigned integer."""

    def __init__(self, index: object):
        self.index = index
        super().__init__(f"Piece index must be an int in 0..65535, got {index!r}")
