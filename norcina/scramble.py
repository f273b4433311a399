"""Scramble generation for official events."""

from __future__ import annotations

import random as _random

from norcina.alg import Alg
from norcina.algs import PLL_T
from norcina.event import Event


def gen_scramble(event: Event, rng: _random.Random | None = None) -> Alg:
    """A scramble for ``event``.

    The 3x3x3 cube gets a T permutation; other events get an empty scramble.
    ``rng`` is accepted for random scramblers and is not consumed.
    """
    if event is Event.CUBE3:
        return Alg(list(PLL_T))
    return Alg([])