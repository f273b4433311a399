"""The 3x3x3 cube state."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator

from norcina.corner import SOLVED_CORNERS, Corner, CornerPosition
from norcina.corner import move_pieces as _move_corners
from norcina.corner import sticker as _corner_sticker
from norcina.edge import SOLVED_EDGES, Edge, EdgePosition
from norcina.edge import move_pieces as _move_edges
from norcina.edge import sticker as _edge_sticker
from norcina.geometry import Face, Sticker
from norcina.moves import Move

_BLOCK = "██"
_PAD = "      "

_COLORS = {
    Face.R: (217, 39, 39),
    Face.U: (250, 250, 250),
    Face.F: (109, 242, 116),
    Face.L: (255, 153, 12),
    Face.D: (255, 224, 0),
    Face.B: (79, 123, 212),
}


def default_color_scheme(face: Face) -> tuple[int, int, int]:
    """The RGB colour used to draw stickers of ``face``."""
    return _COLORS[face]


def _colored_block(face: Face) -> str:
    r, g, b = default_color_scheme(face)
    return f"\x1b[38;2;{r};{g};{b}m{_BLOCK}\x1b[39m"


@dataclass(frozen=True)
class Cube:
    """A 3x3x3 cube: the piece found at each corner and edge position."""

    corners: tuple[Corner, ...] = SOLVED_CORNERS
    edges: tuple[Edge, ...] = SOLVED_EDGES

    SOLVED: ClassVar[Cube]

    def __post_init__(self) -> None:
        corners = tuple(self.corners)
        edges = tuple(self.edges)
        if len(corners) != 8:
            raise ValueError(f"a cube needs 8 corners, got {len(corners)}")
        if len(edges) != 12:
            raise ValueError(f"a cube needs 12 edges, got {len(edges)}")
        object.__setattr__(self, "corners", corners)
        object.__setattr__(self, "edges", edges)

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Cube:
        """A uniformly random solvable cube."""
        rng = rng if rng is not None else _random.Random()
        corners = list(Corner.random(rng))
        edges = list(Edge.random(rng))

        if Corner.count_swaps(corners) % 2 != Edge.count_swaps(edges) % 2:
            pieces = corners if rng.random() < 0.5 else edges
            count = len(pieces)
            i = rng.randrange(count)
            j = rng.randrange(count - 1)
            if j >= i:
                j += 1
            pieces[i], pieces[j] = pieces[j], pieces[i]

        return cls(tuple(corners), tuple(edges))

    def sticker_at(self, face: Face, up: Face, col: int, row: int) -> Sticker:
        """The sticker on ``face`` at (``col``, ``row``), with ``up`` at the top."""
        if not (0 <= col < 3 and 0 <= row < 3):
            raise ValueError(f"sticker coordinates out of range: col={col}, row={row}")
        if col == 1 and row == 1:
            return face

        side = up.cross(face)

        if (col + row) % 2 == 0:
            faces = (
                face,
                up if row == 0 else up.opposite(),
                side.opposite() if col == 0 else side,
            )
            position = CornerPosition.from_faces(faces)
            return _corner_sticker(position.pick(self.corners), position, face)

        other_face = {
            (0, 1): up,
            (1, 0): side.opposite(),
            (1, 2): side,
            (2, 1): up.opposite(),
        }[(row, col)]
        position = EdgePosition.from_faces((face, other_face))
        return _edge_sticker(position.pick(self.edges), position, face)

    def mov_single(self, mov: Move) -> Cube:
        """The cube after one move."""
        return Cube(_move_corners(self.corners, mov), _move_edges(self.edges, mov))

    def mov(self, moves: Iterable[Move]) -> Cube:
        """The cube after every move in ``moves``, in order."""
        cube = self
        for mov in moves:
            cube = cube.mov_single(mov)
        return cube

    def is_solved(self) -> bool:
        return self == Cube.SOLVED

    def neighbors(self) -> Iterator[tuple[Move, Cube]]:
        """Each move paired with the state it leads to."""
        return ((mov, self.mov_single(mov)) for mov in Move.all())

    def corner_positions(self) -> Iterator[tuple[CornerPosition, Corner]]:
        """Each corner position with the piece sitting there."""
        return zip(CornerPosition.all(), self.corners)

    def edge_positions(self) -> Iterator[tuple[EdgePosition, Edge]]:
        """Each edge position with the piece sitting there."""
        return zip(EdgePosition.all(), self.edges)

    def describe(self) -> str:
        """A readable listing of where every piece is."""
        lines = ["Cube {", "    corners: ["]
        lines += [f"        {piece} is at {pos}," for pos, piece in self.corner_positions()]
        lines += ["    ],", "    edges: ["]
        lines += [f"        {piece} is at {pos}," for pos, piece in self.edge_positions()]
        lines += ["    ],", "}"]
        return "\n".join(lines)

    def _row(self, face: Face, up: Face, row: int) -> str:
        return "".join(_colored_block(self.sticker_at(face, up, col, row)) for col in range(3))

    def __str__(self) -> str:
        lines = []
        lines += [_PAD + self._row(Face.B, Face.D, row) for row in range(3)]
        lines += [_PAD + self._row(Face.U, Face.B, row) for row in range(3)]
        lines += [
            self._row(Face.L, Face.U, row)
            + self._row(Face.F, Face.U, row)
            + self._row(Face.R, Face.U, row)
            for row in range(3)
        ]
        lines += [_PAD + self._row(Face.D, Face.F, row) for row in range(3)]
        return "".join(line + "\n" for line in lines)


Cube.SOLVED = Cube(SOLVED_CORNERS, SOLVED_EDGES)