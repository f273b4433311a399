"""Two-phase (Kociemba) solving of the 3x3x3 cube.

Phase one brings a cube into the subgroup G1, where every piece is oriented
and the E-slice edges sit in the E slice. Phase two solves a G1 cube. Both
phases run an IDA* search guided by pruning tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from math import comb
from typing import Callable, Sequence

from norcina.corner import SOLVED_CORNERS
from norcina.corner import move_pieces as _move_corners
from norcina.cube import Cube
from norcina.edge import SOLVED_EDGES
from norcina.edge import move_pieces as _move_edges
from norcina.geometry import Axis
from norcina.moves import B2, D, D2, DP, F2, L2, R2, U, U2, UP, Move
from norcina.search import SearchSolution, search_idastar

#: Moves that keep a cube inside G1.
G1_MOVES: tuple[Move, ...] = (U, U2, UP, D, D2, DP, R2, L2, F2, B2)

_UNREACHED = 255

# Pieces are handled here as their packed integers: for corners ``oozyx``,
# for edges ``onnba``.
_RawPieces = tuple


@cache
def _corner_transform(mov: Move) -> tuple[tuple[int, int], ...]:
    """For each slot, the slot its new piece comes from and the twist it gets."""
    return tuple((c.data & 0b111, c.data >> 3) for c in _move_corners(SOLVED_CORNERS, mov))


@cache
def _edge_transform(mov: Move) -> tuple[tuple[int, int], ...]:
    """For each slot, the slot its new piece comes from and the flip it gets."""
    return tuple((e.data & 0b1111, e.data & 0b10000) for e in _move_edges(SOLVED_EDGES, mov))


def _apply_corners(corners: _RawPieces, mov: Move) -> _RawPieces:
    return tuple((corners[src] + (twist << 3)) % (3 << 3) for src, twist in _corner_transform(mov))


def _apply_edges(edges: _RawPieces, mov: Move) -> _RawPieces:
    return tuple(edges[src] ^ flip for src, flip in _edge_transform(mov))


def _lehmer_index(values: Sequence[int]) -> int:
    index = 0
    count = len(values)
    for i, value in enumerate(values):
        index = index * (count - i) + sum(other < value for other in values[i + 1 :])
    return index


def _lehmer_decode(index: int, count: int) -> list[int]:
    digits = [0] * count
    for i in reversed(range(count - 1)):
        index, digits[i] = divmod(index, count - i)
        for j in range(i + 1, count):
            if digits[j] >= digits[i]:
                digits[j] += 1
    return digits


@dataclass(frozen=True)
class _Subtable:
    """A coordinate of the cube together with how to build its distance table."""

    index: Callable[[_RawPieces], int]
    from_index: Callable[[int], _RawPieces]
    size: int
    initial: _RawPieces
    phase1: bool
    apply_mov: Callable[[_RawPieces, Move], _RawPieces]

    def generate_buffer(self) -> bytes:
        """Breadth-first distances from the initial state to every coordinate."""
        moves = Move.all() if self.phase1 else G1_MOVES
        buffer = bytearray([_UNREACHED]) * self.size
        start = self.index(self.initial)
        buffer[start] = 0
        frontier = [start]
        depth = 0
        while frontier:
            depth += 1
            reached = []
            for i in frontier:
                state = self.from_index(i)
                for mov in moves:
                    new_index = self.index(self.apply_mov(state, mov))
                    if buffer[new_index] > depth:
                        buffer[new_index] = depth
                        reached.append(new_index)
            frontier = reached
        return bytes(buffer)


_SOLVED_RAW_CORNERS = tuple(range(8))
_SOLVED_RAW_EDGES = tuple(range(12))


# -- Phase 1 --


def _corner_orientation_index(corners: _RawPieces) -> int:
    index = 0
    for corner in corners[:7]:
        index = index * 3 + (corner >> 3)
    return index


def _corner_orientation_from_index(index: int) -> _RawPieces:
    orientations = [0] * 8
    for i in reversed(range(7)):
        index, orientations[i] = divmod(index, 3)
    orientations[7] = -sum(orientations[:7]) % 3
    return tuple(pos | (o << 3) for pos, o in enumerate(orientations))


def _edge_orientation_index(edges: _RawPieces) -> int:
    index = 0
    for edge in edges[:11]:
        index = index * 2 + (edge >> 4)
    return index


def _edge_orientation_from_index(index: int) -> _RawPieces:
    flips = [0] * 12
    for i in reversed(range(11)):
        index, flips[i] = divmod(index, 2)
    flips[11] = sum(flips[:11]) % 2
    return tuple(pos | (flip << 4) for pos, flip in enumerate(flips))


def _is_y_normal(edge: int) -> bool:
    return (edge & 0b1111) >> 2 == int(Axis.Y)


def _y_slice_index(edges: _RawPieces) -> int:
    index = 0
    remaining = 4
    for i, edge in reversed(list(enumerate(edges))):
        if _is_y_normal(edge):
            index += comb(i, remaining)
            remaining -= 1
    return index


def _y_slice_from_index(index: int) -> _RawPieces:
    edges = list(_SOLVED_RAW_EDGES)
    remaining = 4
    for i in reversed(range(12)):
        if index >= comb(i, remaining):
            edges[i] = remaining + 3
            index -= comb(i, remaining)
            remaining -= 1
        else:
            edges[i] = (i + 8 - remaining) % 12
    return tuple(edges)


# -- Phase 2 --


def _corner_position_index(corners: _RawPieces) -> int:
    return _lehmer_index([corner & 0b111 for corner in corners])


def _corner_position_from_index(index: int) -> _RawPieces:
    return tuple(_lehmer_decode(index, 8))


def _ud_edges_index(edges: _RawPieces) -> int:
    # Valid for cubes in G1, where these slots hold the U and D layer edges.
    return _lehmer_index([edge & 0b1111 for edge in edges[:4] + edges[8:]])


def _ud_edges_from_index(index: int) -> _RawPieces:
    digits = _lehmer_decode(index, 8)
    edges = list(_SOLVED_RAW_EDGES)
    edges[0:4] = digits[:4]
    edges[8:12] = digits[4:]
    return tuple(edges)


def _slice_edges_index(edges: _RawPieces) -> int:
    return _lehmer_index([edge & 0b1111 for edge in edges[4:8]])


def _slice_edges_from_index(index: int) -> _RawPieces:
    edges = list(_SOLVED_RAW_EDGES)
    edges[4:8] = _lehmer_decode(index, 4)
    return tuple(edges)


_CORNER_ORIENTATION = _Subtable(
    _corner_orientation_index, _corner_orientation_from_index, 3**7,
    _SOLVED_RAW_CORNERS, True, _apply_corners,
)
_EDGE_ORIENTATION = _Subtable(
    _edge_orientation_index, _edge_orientation_from_index, 2**11,
    _SOLVED_RAW_EDGES, True, _apply_edges,
)
_IS_ON_Y_SLICE = _Subtable(
    _y_slice_index, _y_slice_from_index, comb(12, 4),
    _SOLVED_RAW_EDGES, True, _apply_edges,
)
_CORNER_POSITION = _Subtable(
    _corner_position_index, _corner_position_from_index, 40320,
    _SOLVED_RAW_CORNERS, False, _apply_corners,
)
_Y_SLICE_POSITION = _Subtable(
    _ud_edges_index, _ud_edges_from_index, 40320,
    _SOLVED_RAW_EDGES, False, _apply_edges,
)
_NON_Y_SLICE_POSITION = _Subtable(
    _slice_edges_index, _slice_edges_from_index, 24,
    _SOLVED_RAW_EDGES, False, _apply_edges,
)


@dataclass(frozen=True)
class PruneTable:
    """Minimum move counts for each phase's sub-goals, used as heuristics."""

    orient_corners: bytes
    orient_edges: bytes
    put_edges_to_y_slice: bytes
    permute_corners: bytes
    permute_y_slice_edges: bytes
    permute_non_y_slice_edges: bytes

    @classmethod
    def load_or_generate(cls) -> PruneTable:
        """The shared table, generated on first use."""
        return _shared_table()

    @classmethod
    def generate(cls) -> PruneTable:
        """Build the table from scratch."""
        return cls(
            orient_corners=_CORNER_ORIENTATION.generate_buffer(),
            orient_edges=_EDGE_ORIENTATION.generate_buffer(),
            put_edges_to_y_slice=_IS_ON_Y_SLICE.generate_buffer(),
            permute_corners=_CORNER_POSITION.generate_buffer(),
            permute_y_slice_edges=_Y_SLICE_POSITION.generate_buffer(),
            permute_non_y_slice_edges=_NON_Y_SLICE_POSITION.generate_buffer(),
        )

    def phase1_distance_heuristic(self, cube: Cube) -> int:
        corners = tuple(c.data for c in cube.corners)
        edges = tuple(e.data for e in cube.edges)
        return max(
            self.orient_corners[_corner_orientation_index(corners)],
            self.orient_edges[_edge_orientation_index(edges)],
            self.put_edges_to_y_slice[_y_slice_index(edges)],
        )

    def phase2_distance_heuristic(self, cube: Cube) -> int:
        corners = tuple(c.data for c in cube.corners)
        edges = tuple(e.data for e in cube.edges)
        return max(
            self.permute_corners[_corner_position_index(corners)],
            self.permute_y_slice_edges[_ud_edges_index(edges)],
            self.permute_non_y_slice_edges[_slice_edges_index(edges)],
        )


@cache
def _shared_table() -> PruneTable:
    return PruneTable.generate()


def is_in_g1(cube: Cube) -> bool:
    """Whether every piece is oriented and the E-slice edges are in the E slice."""
    return (
        all(corner.is_oriented() for corner in cube.corners)
        and all(edge.is_oriented() for edge in cube.edges)
        and all(
            (position.normal() == Axis.Y) == (edge.position().normal() == Axis.Y)
            for position, edge in cube.edge_positions()
        )
    )


def solve_to_g1(cube: Cube, prune_table: PruneTable) -> SearchSolution:
    """The shortest path from ``cube`` to some state in G1."""
    return search_idastar(cube, prune_table.phase1_distance_heuristic, is_in_g1)


def solve_from_g1(cube: Cube, prune_table: PruneTable) -> SearchSolution:
    """A path from a G1 ``cube`` to the solved state."""
    if not is_in_g1(cube):
        raise ValueError("cube is not in G1")
    return search_idastar(cube, prune_table.phase2_distance_heuristic, Cube.is_solved)


def solve_with_table(cube: Cube, prune_table: PruneTable) -> SearchSolution:
    phase1 = solve_to_g1(cube, prune_table)
    phase2 = solve_from_g1(phase1.final_state(), prune_table)
    return phase1.concat(phase2)


def solve(cube: Cube) -> SearchSolution:
    """Solve ``cube`` with the two-phase algorithm."""
    return solve_with_table(cube, PruneTable.load_or_generate())