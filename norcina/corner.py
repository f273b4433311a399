"""Corner pieces of a cube and how face turns move them."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import ClassVar, Sequence

from norcina.geometry import Axis, Direction, Face, Sticker
from norcina.moves import Amount, Move

_POSITION_MASK = 0b00111


@dataclass(frozen=True)
class Corner:
    """A corner piece.

    ``data`` packs ``000oozyx``: the home position in the low three bits
    (one direction bit per axis) and the orientation (0, 1 or 2) above them.
    """

    data: int

    ORIENTATION_AXIS: ClassVar[Axis] = Axis.Y

    def __post_init__(self) -> None:
        if not 0 <= self.data < 3 << 3:
            raise ValueError(f"invalid corner data: {self.data}")

    @classmethod
    def solved(cls, index: int) -> Corner:
        """The oriented piece whose home is position ``index``."""
        if not 0 <= index < 8:
            raise ValueError(f"invalid corner index: {index}")
        return cls(index)

    def x(self) -> Direction:
        return Direction.from_bool(self.data & 0b001 != 0)

    def y(self) -> Direction:
        return Direction.from_bool(self.data & 0b010 != 0)

    def z(self) -> Direction:
        return Direction.from_bool(self.data & 0b100 != 0)

    def orientation(self) -> Axis:
        """Number of clockwise twists from oriented to the current state."""
        return Axis.from_u8((self.data >> 3) & 0b11)

    def reoriented(self, orientation: int) -> Corner:
        """The same piece with a different orientation."""
        return Corner((self.data & _POSITION_MASK) ^ (int(Axis.from_u8(orientation)) << 3))

    def direction_on_axis(self, axis: Axis) -> Direction:
        return Direction.from_bool((self.data >> int(axis)) & 0b1 != 0)

    def on_face(self, face: Face) -> bool:
        """Whether the piece belongs on the given face."""
        return self.direction_on_axis(face.axis) == face.direction

    def position(self) -> CornerPosition:
        """The home position of the piece."""
        return CornerPosition(self.data & _POSITION_MASK)

    def is_oriented(self) -> bool:
        return int(self.orientation()) == 0

    @classmethod
    def random(cls, rng: _random.Random) -> tuple[Corner, ...]:
        """A random set of 8 corners whose orientations sum to a multiple of 3."""
        indices = list(range(8))
        rng.shuffle(indices)
        orientations = [rng.randrange(3) for _ in range(7)]
        orientations.append(-sum(orientations) % 3)
        return tuple(cls(index + (o << 3)) for index, o in zip(indices, orientations))

    @staticmethod
    def count_swaps(corners: Sequence[Corner]) -> int:
        """Number of transpositions that make up the permutation of the corners."""
        visited: set[int] = set()
        output = 0
        for start in range(8):
            if start in visited:
                continue
            visited.add(start)
            current = corners[start]
            while current.position().index != start:
                output += 1
                visited.add(current.position().index)
                current = corners[current.position().index]
        return output

    def __str__(self) -> str:
        a, b, c = self.position().faces()
        return f"{a}{b}{c} ({int(self.orientation())})"


@dataclass(frozen=True)
class CornerPosition:
    """A slot for a corner, indexed by one direction bit per axis (``zyx``)."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < 8:
            raise ValueError(f"invalid corner position: {self.index}")

    def x(self) -> Direction:
        return Direction.from_bool(self.index & 0b001 != 0)

    def y(self) -> Direction:
        return Direction.from_bool(self.index & 0b010 != 0)

    def z(self) -> Direction:
        return Direction.from_bool(self.index & 0b100 != 0)

    @classmethod
    def from_faces(cls, faces: Sequence[Face]) -> CornerPosition:
        """The position shared by three mutually perpendicular faces."""
        faces = tuple(faces)
        if len(faces) != 3 or len({face.axis for face in faces}) != 3:
            raise ValueError(f"faces don't form a corner: {faces}")
        return cls(sum(int(face.direction) << int(face.axis) for face in faces))

    def faces(self) -> tuple[Face, Face, Face]:
        return (
            Face.new(Axis.X, self.x()),
            Face.new(Axis.Y, self.y()),
            Face.new(Axis.Z, self.z()),
        )

    @classmethod
    def from_index(cls, index: int) -> CornerPosition:
        return cls(index)

    def pick(self, corners: Sequence[Corner]) -> Corner:
        """The piece at this position."""
        return corners[self.index]

    def contains_face(self, face: Face) -> bool:
        return (self.index >> int(face.axis)) & 0b1 == int(face.direction)

    def parity(self) -> int:
        """Xor of the three position bits."""
        return (self.index ^ (self.index >> 1) ^ (self.index >> 2)) & 0b1

    def turn_distance(self, other: CornerPosition) -> int:
        """The minimum number of turns to get from ``self`` to ``other``."""
        diff_coords = bin((self.index ^ other.index) & 0b111).count("1")
        return (diff_coords + 1) // 2

    def with_orientation(self, orientation: int) -> Corner:
        return Corner(self.index + (int(Axis.from_u8(orientation)) << 3))

    @classmethod
    def all(cls) -> tuple[CornerPosition, ...]:
        return _ALL_POSITIONS

    def __str__(self) -> str:
        a, b, c = self.faces()
        return f"{a}{b}{c}"


_ALL_POSITIONS = tuple(CornerPosition(i) for i in range(8))

SOLVED_CORNERS: tuple[Corner, ...] = tuple(Corner.solved(i) for i in range(8))


def _sign(parity: int) -> int:
    return 1 if parity else -1


def sticker(corner: Corner, position: CornerPosition, face: Face) -> Sticker:
    """The colour shown on ``face`` by ``corner`` sitting at ``position``."""
    orientation_axis = int(Corner.ORIENTATION_AXIS)
    ppar_sign = _sign(position.parity())
    # Index of the inspected face as it would be on an oriented piece.
    face_orientation_index = -ppar_sign * orientation_axis + ppar_sign * int(face.axis)
    oriented_foi = face_orientation_index - int(corner.orientation())
    cpar_sign = _sign(corner.position().parity())
    axis = Axis.from_int_mod3(orientation_axis + cpar_sign * oriented_foi)
    return Face.new(axis, corner.direction_on_axis(axis))


def _moved_corner(corners: Sequence[Corner], i: int, mov: Move) -> Corner:
    position = CornerPosition(i)
    if not position.contains_face(mov.face):
        return corners[i]

    axis = int(mov.axis)
    amount = mov.amount
    direction = mov.face.direction
    if amount is Amount.DOUBLE:
        return corners[i ^ (0b111 ^ (1 << axis))]
    if (amount is Amount.SINGLE) == (direction is Direction.POSITIVE):
        a, b = (axis + 1) % 3, (axis + 2) % 3
    else:
        a, b = (axis + 2) % 3, (axis + 1) % 3

    # Rotation (a, b) -> (b, -a) of the position coordinates.
    temp = ((i >> a) ^ (i >> b)) & 0b1
    source = i ^ (((temp ^ 0b1) << a) | (temp << b))

    # Turns around the orientation axis leave twists alone; others add 1 or 2.
    is_not_on_y_axis = (axis & 0b1) ^ 0b1
    orientation_diff = is_not_on_y_axis << (
        position.parity() ^ (int(amount) & 0b1) ^ (axis >> 1)
    )
    out = corners[source]
    return Corner((out.data + (orientation_diff << 3)) % (3 << 3))


def move_pieces(corners: Sequence[Corner], mov: Move) -> tuple[Corner, ...]:
    """The corners after applying ``mov``."""
    return tuple(_moved_corner(corners, i, mov) for i in range(8))