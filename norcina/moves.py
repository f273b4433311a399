"""Face turns of a cube."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import IntEnum

from norcina.alg import InvertibleMove, RandomMove
from norcina.geometry import Axis, Direction, Face


class Amount(IntEnum):
    SINGLE = 1
    DOUBLE = 2
    REVERSE = 3

    @classmethod
    def from_u8(cls, value: int) -> Amount:
        if value not in (1, 2, 3):
            raise ValueError(f"invalid amount: {value}")
        return cls(value)

    def reverse(self) -> Amount:
        """The amount that undoes this one."""
        return Amount(4 - self.value) if self is not Amount.DOUBLE else self

    def __mul__(self, direction):
        if isinstance(direction, Direction):
            if direction is Direction.POSITIVE:
                return self
            return Amount.from_u8(4 - self.value)
        return int.__mul__(self, direction)


_AMOUNT_SUFFIX = {Amount.SINGLE: " ", Amount.DOUBLE: "2", Amount.REVERSE: "'"}


@dataclass(frozen=True)
class Move(InvertibleMove, RandomMove):
    """A turn of one face by some amount."""

    face: Face
    amount: Amount

    @property
    def axis(self) -> Axis:
        return self.face.axis

    @classmethod
    def all(cls) -> tuple[Move, ...]:
        """Every move: each face in order, each with every amount."""
        return _ALL

    def inverse(self) -> Move:
        return Move(self.face, self.amount.reverse())

    @classmethod
    def random(cls, rng: _random.Random) -> Move:
        amount = list(Amount)[rng.randrange(3)]
        face = list(Face)[rng.randrange(6)]
        return cls(face, amount)

    def __str__(self) -> str:
        return f"{self.face}{_AMOUNT_SUFFIX[self.amount]}"


_ALL = tuple(Move(face, amount) for face in Face for amount in Amount)

R = Move(Face.R, Amount.SINGLE)
R2 = Move(Face.R, Amount.DOUBLE)
RP = Move(Face.R, Amount.REVERSE)
U = Move(Face.U, Amount.SINGLE)
U2 = Move(Face.U, Amount.DOUBLE)
UP = Move(Face.U, Amount.REVERSE)
F = Move(Face.F, Amount.SINGLE)
F2 = Move(Face.F, Amount.DOUBLE)
FP = Move(Face.F, Amount.REVERSE)
L = Move(Face.L, Amount.SINGLE)
L2 = Move(Face.L, Amount.DOUBLE)
LP = Move(Face.L, Amount.REVERSE)
D = Move(Face.D, Amount.SINGLE)
D2 = Move(Face.D, Amount.DOUBLE)
DP = Move(Face.D, Amount.REVERSE)
B = Move(Face.B, Amount.SINGLE)
B2 = Move(Face.B, Amount.DOUBLE)
BP = Move(Face.B, Amount.REVERSE)

_NAME_SUFFIXES = {Amount.SINGLE: ("",), Amount.DOUBLE: ("2",), Amount.REVERSE: ("P", "'")}
_BY_NAME = {
    f"{mov.face}{suffix}": mov
    for mov in _ALL
    for suffix in _NAME_SUFFIXES[mov.amount]
}


def parse_alg(text: str) -> list[Move]:
    """Parse whitespace separated move names such as ``R U2 FP`` or ``R U2 F'``."""
    moves = []
    for token in text.split():
        try:
            moves.append(_BY_NAME[token])
        except KeyError:
            raise ValueError(f"unknown move: {token!r}") from None
    return moves