"""Tests for the Piece value type."""

from __future__ import annotations

import dataclasses

import pytest

from hcube.errors import InvalidIndexError
from hcube.piece import RING_CELLS, Piece
from hcube.ring import INDEX_COUNT
from hcube.symmetry import ALL_SYMMETRIES, Symmetry


class TestConstruction:
    def test_from_index(self) -> None:
        assert Piece.from_index(0b10).index == 0b10

    def test_bounds_are_valid(self) -> None:
        assert Piece.from_index(0).index == 0
        assert Piece.from_index(0xFFFF).index == 0xFFFF

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(InvalidIndexError):
            Piece.from_index(0x10000)
        with pytest.raises(InvalidIndexError):
            Piece.from_index(-1)

    def test_equality_is_structural(self) -> None:
        assert Piece.from_index(42) == Piece.from_index(42)
        assert Piece.from_index(42) != Piece.from_index(43)
        assert len({Piece.from_index(42), Piece.from_index(42)}) == 1

    def test_symmetric_pieces_are_not_equal(self) -> None:
        p = Piece.from_index(0b10)
        assert p.rotate_clockwise() != p

    def test_immutable(self) -> None:
        p = Piece.from_index(7)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.index = 8


class TestRotation:
    def test_rotate_clockwise_moves_four_positions(self) -> None:
        start = Piece.from_index(0b10)
        assert start.rotate_clockwise() == Piece.from_index(0b100000)

    def test_rotate_counter_clockwise_moves_back_four_positions(self) -> None:
        start = Piece.from_index(0b100000)
        assert start.rotate_counter_clockwise() == Piece.from_index(0b10)

    def test_top_edge_becomes_right_edge(self) -> None:
        top = Piece.from_index(0b1_1111)
        assert top.rotate_clockwise().positions == (4, 5, 6, 7, 8)

    def test_does_not_mutate(self) -> None:
        p = Piece.from_index(0b10)
        p.rotate_clockwise()
        p.flip()
        assert p.index == 0b10

    def test_four_rotations_return_to_original_exhaustive(self) -> None:
        for index in range(INDEX_COUNT):
            p = Piece.from_index(index)
            q = p.rotate_clockwise().rotate_clockwise().rotate_clockwise().rotate_clockwise()
            assert q == p, f"index {index}"

    def test_counter_clockwise_is_inverse_exhaustive(self) -> None:
        for index in range(INDEX_COUNT):
            p = Piece.from_index(index)
            assert p.rotate_clockwise().rotate_counter_clockwise() == p
            assert p.rotate_counter_clockwise().rotate_clockwise() == p


class TestFlip:
    def test_flip_bit_1_to_bit_15(self) -> None:
        start = Piece.from_index(0b10)
        assert start.flip() == Piece.from_index(0b1000_0000_0000_0000)

    def test_flip_keeps_axis_corners(self) -> None:
        corners = Piece.from_index(0b0000_0001_0000_0001)  # positions 0 and 8
        assert corners.flip() == corners

    def test_double_flip_returns_to_original_exhaustive(self) -> None:
        for index in range(INDEX_COUNT):
            p = Piece.from_index(index)
            assert p.flip().flip() == p


class TestSymmetryQueries:
    def test_images_cover_the_group(self, sample_pieces: list[Piece]) -> None:
        for p in sample_pieces:
            images = p.images()
            assert set(images) == set(ALL_SYMMETRIES)
            assert images[Symmetry.IDENTITY] == p
            assert images[Symmetry.ROTATE_90] == p.rotate_clockwise()
            assert images[Symmetry.ROTATE_270] == p.rotate_counter_clockwise()
            assert images[Symmetry.FLIP] == p.flip()

    def test_empty_and_full_are_fixed(self) -> None:
        for index in (0, 0xFFFF):
            p = Piece.from_index(index)
            assert p.orbit() == frozenset({p})
            assert len(p.stabilizer()) == 8

    def test_asymmetric_piece_has_orbit_of_8(self) -> None:
        p = Piece.from_index(0b0100_1010_0110_0011)
        assert len(p.orbit()) == 8
        assert p.stabilizer() == (Symmetry.IDENTITY,)

    def test_orbit_stabilizer(self, sample_pieces: list[Piece]) -> None:
        for p in sample_pieces:
            assert len(p.orbit()) * len(p.stabilizer()) == 8, f"{p!r}"

    def test_corners_stabilized_by_whole_group(self) -> None:
        corners = Piece.from_index(0b0001_0001_0001_0001)
        assert len(corners.orbit()) == 1

    def test_canonical_is_minimum_of_orbit(self, sample_pieces: list[Piece]) -> None:
        for p in sample_pieces:
            canonical = p.canonical()
            assert canonical in p.orbit()
            assert all(canonical.index <= q.index for q in p.orbit())
            assert canonical.is_canonical

    def test_canonical_is_shared_across_orbit(self) -> None:
        p = Piece.from_index(0b1011_0101_1001_1100)
        for q in p.orbit():
            assert q.canonical() == p.canonical()

    def test_single_bit_canonical_is_corner_or_edge(self) -> None:
        # Corner bits fall in the orbit of bit 0, mid-edge bits in that of bit 1 or 2
        assert Piece.from_index(1 << 12).canonical() == Piece.from_index(0b1)
        assert Piece.from_index(1 << 10).canonical() == Piece.from_index(0b100)
        assert Piece.from_index(1 << 15).canonical() == Piece.from_index(0b10)


class TestFootprint:
    def test_positions_and_size(self) -> None:
        p = Piece.from_index(0b1000_0000_0010_0001)
        assert p.positions == (0, 5, 15)
        assert p.size == 3

    def test_contains(self) -> None:
        p = Piece.from_index(0b10)
        assert 1 in p
        assert 0 not in p
        assert 16 not in p

    def test_ring_cells_walk_the_border_clockwise(self) -> None:
        assert len(RING_CELLS) == 16
        assert len(set(RING_CELLS)) == 16
        assert RING_CELLS[0] == (0, 0)
        assert RING_CELLS[4] == (0, 4)
        assert RING_CELLS[8] == (4, 4)
        assert RING_CELLS[12] == (4, 0)
        assert RING_CELLS[15] == (1, 0)

    def test_chart(self) -> None:
        p = Piece.from_index(0b0000_0000_0001_0101)
        assert p.chart() == "\n".join([
            "#.#.#",
            ".###.",
            ".###.",
            ".###.",
            ".....",
        ])

    def test_str_is_chart(self) -> None:
        p = Piece.from_index(0xFFFF)
        assert str(p) == "\n".join(["#####"] * 5)
