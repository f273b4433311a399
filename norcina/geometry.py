"""Directions, axes and faces of a cube."""

from __future__ import annotations

from enum import IntEnum


class Direction(IntEnum):
    POSITIVE = 0
    NEGATIVE = 1

    @classmethod
    def from_bool(cls, value: bool) -> Direction:
        return cls.NEGATIVE if value else cls.POSITIVE

    @classmethod
    def from_u8(cls, value: int) -> Direction:
        """Map 0 to positive and 1 to negative; any other value is an error."""
        if value not in (0, 1):
            raise ValueError(f"invalid direction: {value}")
        return cls(value)

    @classmethod
    def from_u8_any(cls, value: int) -> Direction:
        """Map 0 to positive and anything else to negative."""
        return cls.from_bool(value != 0)

    def flip(self) -> Direction:
        return Direction(self.value ^ 1)

    def __xor__(self, other) -> Direction:
        return Direction.from_u8(int(self) ^ int(other))


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2

    @classmethod
    def from_u8(cls, value: int) -> Axis:
        if not 0 <= value < 3:
            raise ValueError(f"invalid axis: {value}")
        return cls(value)

    @classmethod
    def from_int_mod3(cls, value: int) -> Axis:
        return cls(value % 3)

    def next(self) -> Axis:
        return Axis.from_int_mod3(self.value + 1)

    def prev(self) -> Axis:
        return Axis.from_int_mod3(self.value + 2)

    @staticmethod
    def other(a: Axis, b: Axis) -> Axis:
        """An axis that is neither ``a`` nor ``b`` (when they differ)."""
        return Axis.from_int_mod3(2 * int(a) + 3 - int(b))


class Face(IntEnum):
    """A face: bits 0-1 hold the axis, bit 2 the direction."""

    R = 0
    U = 1
    F = 2
    L = 4
    D = 5
    B = 6

    @classmethod
    def new(cls, axis: Axis, direction: Direction) -> Face:
        return cls.from_u8(int(axis) + (int(direction) << 2))

    @classmethod
    def from_u8(cls, index: int) -> Face:
        if index == 3 or not 0 <= index < 7:
            raise ValueError(f"invalid face index: {index}")
        return cls(index)

    @property
    def axis(self) -> Axis:
        return Axis.from_u8(self.value & 0b011)

    @property
    def direction(self) -> Direction:
        return Direction.from_bool(self.value & 0b100 != 0)

    def opposite(self) -> Face:
        return Face.from_u8(self.value ^ 0b100)

    def cross(self, rhs: Face) -> Face:
        """The face perpendicular to both, following the right-hand rule."""
        if self.axis == rhs.axis:
            raise ValueError(f"faces {self} and {rhs} are not perpendicular")
        axis = Axis.other(self.axis, rhs.axis)
        negative = (
            (self.axis.next() != rhs.axis)
            ^ bool(self.direction)
            ^ bool(rhs.direction)
        )
        return Face.new(axis, Direction.from_bool(negative))

    def __str__(self) -> str:
        return self.name

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


Sticker = Face