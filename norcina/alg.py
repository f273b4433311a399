"""Move sequences ("algorithms") and the move interfaces they rely on."""

from __future__ import annotations

import random as _random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator


class InvertibleMove(ABC):
    """A move that can be undone."""

    @abstractmethod
    def inverse(self) -> Any:
        """The move that undoes ``self``."""


class RandomMove(ABC):
    """A move that can be generated at random."""

    @classmethod
    @abstractmethod
    def random(cls, rng: _random.Random) -> Any:
        """Generate a random move."""


@dataclass(order=True)
class Alg:
    """A sequence of moves."""

    moves: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.moves = list(self.moves)

    def reverse(self) -> None:
        """Invert the algorithm in place: reverse the order and invert each move."""
        self.moves = [mov.inverse() for mov in reversed(self.moves)]

    def reversed(self) -> Alg:
        """A new algorithm that undoes this one."""
        return Alg([mov.inverse() for mov in reversed(self.moves)])

    @classmethod
    def random(cls, move_type: type, length: int, rng: _random.Random) -> Alg:
        """An algorithm of ``length`` random moves of ``move_type``."""
        return cls([move_type.random(rng) for _ in range(length)])

    def __iter__(self) -> Iterator:
        return iter(self.moves)

    def __len__(self) -> int:
        return len(self.moves)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Alg(self.moves[index])
        return self.moves[index]

    def __str__(self) -> str:
        return " ".join(str(mov) for mov in self.moves)