"""Edge pieces of a cube and how face turns move them."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Sequence

from norcina.geometry import Axis, Direction, Face, Sticker
from norcina.moves import Amount, Move

_POSITION_MASK = 0b01111
_ORIENTATION_BIT = 0b10000


@dataclass(frozen=True)
class Edge:
    """An edge piece.

    ``data`` packs ``---onnba``: the home position in the low four bits
    (``a`` and ``b`` directions and the normal axis) and the orientation
    flag above them.
    """

    data: int

    def __post_init__(self) -> None:
        if not 0 <= self.data < 0b100000 or self.data & _POSITION_MASK >= 12:
            raise ValueError(f"invalid edge data: {self.data}")

    @classmethod
    def solved(cls, index: int) -> Edge:
        """The oriented piece whose home is position ``index``."""
        if not 0 <= index < 12:
            raise ValueError(f"invalid edge index: {index}")
        return cls(index)

    def a(self) -> Direction:
        return Direction.from_bool(self.data & 0b01 != 0)

    def b(self) -> Direction:
        return Direction.from_bool(self.data & 0b10 != 0)

    def normal(self) -> Axis:
        return Axis.from_u8((self.data >> 2) & 0b11)

    def orientation(self) -> Direction:
        return Direction.from_u8(self.data >> 4)

    def is_oriented(self) -> bool:
        return self.data & _ORIENTATION_BIT == 0

    def position(self) -> EdgePosition:
        """The home position of the piece."""
        return EdgePosition(self.data & _POSITION_MASK)

    def with_oriented(self, is_oriented: bool) -> Edge:
        """The same piece, oriented or flipped as requested."""
        flag = 0 if is_oriented else _ORIENTATION_BIT
        return Edge((self.data & _POSITION_MASK) | flag)

    @classmethod
    def random(cls, rng: _random.Random) -> tuple[Edge, ...]:
        """A random set of 12 edges whose orientation parity is even."""
        indices = list(range(12))
        rng.shuffle(indices)
        flips = [rng.random() < 0.5 for _ in range(11)]
        flips.append(sum(flips) % 2 == 1)
        return tuple(cls(index + (int(flip) << 4)) for index, flip in zip(indices, flips))

    @staticmethod
    def count_swaps(edges: Sequence[Edge]) -> int:
        """Number of transpositions that make up the permutation of the edges."""
        visited: set[int] = set()
        output = 0
        for start in range(12):
            if start in visited:
                continue
            visited.add(start)
            current = edges[start]
            while current.position().index != start:
                output += 1
                visited.add(current.position().index)
                current = edges[current.position().index]
        return output

    def __str__(self) -> str:
        a, b = self.position().faces()
        mark = "✓" if self.is_oriented() else "x"
        return f"{a}{b} ({mark})"


@dataclass(frozen=True)
class EdgePosition:
    """A slot for an edge, indexed as ``nnba`` (normal axis and two directions)."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < 12:
            raise ValueError(f"invalid edge position: {self.index}")

    def a(self) -> Direction:
        return Direction.from_bool(self.index & 0b01 != 0)

    def b(self) -> Direction:
        return Direction.from_bool(self.index & 0b10 != 0)

    def normal(self) -> Axis:
        return Axis.from_u8((self.index >> 2) & 0b11)

    @classmethod
    def from_faces(cls, faces: Sequence[Face]) -> EdgePosition:
        """The position shared by two perpendicular faces."""
        faces = tuple(faces)
        if len(faces) != 2 or faces[0].axis == faces[1].axis:
            raise ValueError(f"faces don't form an edge: {faces}")
        f1, f2 = faces
        normal = Axis.other(f1.axis, f2.axis)
        if f1.axis == normal.next():
            a, b = f1.direction, f2.direction
        else:
            a, b = f2.direction, f1.direction
        return cls(int(a) + (int(b) << 1) + (int(normal) << 2))

    def faces(self) -> tuple[Face, Face]:
        normal = self.normal()
        return (Face.new(normal.next(), self.a()), Face.new(normal.prev(), self.b()))

    def pick(self, edges: Sequence[Edge]) -> Edge:
        """The piece at this position."""
        return edges[self.index]

    @classmethod
    def from_index(cls, index: int) -> EdgePosition:
        return cls(index)

    def direction_on_axis(self, axis: Axis) -> Direction:
        """Direction of the position along ``axis``, which must not be the normal."""
        normal = self.normal()
        if axis == normal:
            raise ValueError("tried to get the direction along the normal")
        shift = (3 - int(normal) + int(axis)) % 3 - 1
        return Direction.from_u8((self.index >> shift) & 0b1)

    def face_on_axis(self, axis: Axis) -> Face:
        return Face.new(axis, self.direction_on_axis(axis))

    def orientation_axis(self) -> Axis:
        return Axis.Z if self.normal() is Axis.Y else Axis.Y

    def non_orientation_axis(self) -> Axis:
        return Axis.Z if self.normal() is Axis.X else Axis.X

    def orientation_face(self) -> Face:
        return self.face_on_axis(self.orientation_axis())

    def other_face(self) -> Face:
        return self.face_on_axis(self.non_orientation_axis())

    def contains_face(self, face: Face) -> bool:
        return face.axis != self.normal() and face.direction == self.direction_on_axis(
            face.axis
        )

    def turn_distance(self, other: EdgePosition) -> int:
        """The minimum number of turns to get from ``self`` to ``other``."""
        theirs = set(other.faces())
        return 2 - sum(face in theirs for face in self.faces())

    def with_orientation(self, orientation: Direction) -> Edge:
        return Edge(self.index + (int(Direction.from_u8(int(orientation))) << 4))

    @classmethod
    def all(cls) -> tuple[EdgePosition, ...]:
        return _ALL_POSITIONS

    def __str__(self) -> str:
        a, b = self.faces()
        return f"{a}{b}"


_ALL_POSITIONS = tuple(EdgePosition(i) for i in range(12))

SOLVED_EDGES: tuple[Edge, ...] = tuple(Edge.solved(i) for i in range(12))


def sticker(edge: Edge, position: EdgePosition, face: Face) -> Sticker:
    """The colour shown on ``face`` by ``edge`` sitting at ``position``."""
    if face.axis == position.normal():
        raise ValueError(f"face {face} is not on edge position {position}")
    if (position.orientation_axis() == face.axis) == edge.is_oriented():
        return edge.position().orientation_face()
    return edge.position().other_face()


def _moved_edge(edges: Sequence[Edge], i: int, mov: Move) -> Edge:
    position = EdgePosition(i)
    face = mov.face
    normal = position.normal()
    if face.axis == normal.next():
        dir_mov, other_axis_offset = position.a(), 1
    elif face.axis == normal.prev():
        dir_mov, other_axis_offset = position.b(), 0
    else:
        return edges[i]

    if dir_mov != face.direction:
        return edges[i]

    amount = mov.amount
    if amount is Amount.DOUBLE:
        return edges[i ^ (1 << other_axis_offset)]

    axis = int(face.axis)
    if (amount is Amount.SINGLE) == (face.direction is Direction.POSITIVE):
        ii, jj = (axis + 1) % 3, (axis + 2) % 3
    else:
        ii, jj = (axis + 2) % 3, (axis + 1) % 3

    # Rotation (p[ii], p[jj]) -> (p[jj], -p[ii]); one of the two is the normal.
    if ii == int(normal):
        other_face = Face.new(Axis(ii), position.direction_on_axis(Axis(jj)).flip())
    else:
        other_face = Face.new(Axis(jj), position.direction_on_axis(Axis(ii)))

    out = EdgePosition.from_faces((other_face, face)).pick(edges)
    # Quarter turns on the Z axis flip edge orientation.
    is_on_z_axis = axis >> 1
    return Edge(out.data ^ (is_on_z_axis << 4))


def move_pieces(edges: Sequence[Edge], mov: Move) -> tuple[Edge, ...]:
    """The edges after applying ``mov``."""
    return tuple(_moved_edge(edges, i, mov) for i in range(12))