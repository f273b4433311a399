"""Official WCA events."""

from __future__ import annotations

from enum import Enum


class Event(Enum):
    """Official WCA events, valued by their numeric id."""

    CUBE2 = 0
    CUBE3 = 1
    CUBE4 = 2
    CUBE5 = 3
    CUBE6 = 4
    CUBE7 = 5
    BLIND3 = 6
    BLIND4 = 7
    BLIND5 = 8
    MULTIBLIND = 9
    FEWEST_MOVES = 10
    ONE_HANDED = 11
    CLOCK = 12
    MEGAMINX = 13
    PYRAMINX = 14
    SKEWB = 15
    SQUARE1 = 16

    def str_id(self) -> str:
        """The WCA id of the event."""
        return _STR_IDS[self]

    def full_name(self) -> str:
        """The full name of the event, as used by the WCA."""
        return _FULL_NAMES[self]

    def short_name(self) -> str:
        """A short, commonly used (unofficial) name for the event."""
        return _SHORT_NAMES[self]

    def id(self) -> int:
        """Numeric index of the event."""
        return self.value

    @classmethod
    def default(cls) -> Event:
        return cls.CUBE3

    def __str__(self) -> str:
        return self.short_name()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_STR_IDS = {
    Event.CUBE2: "222",
    Event.CUBE3: "333",
    Event.CUBE4: "444",
    Event.CUBE5: "555",
    Event.CUBE6: "666",
    Event.CUBE7: "777",
    Event.BLIND3: "333bf",
    Event.BLIND4: "444bf",
    Event.BLIND5: "555bf",
    Event.MULTIBLIND: "333mbf",
    Event.FEWEST_MOVES: "333fm",
    Event.ONE_HANDED: "333oh",
    Event.CLOCK: "clock",
    Event.MEGAMINX: "minx",
    Event.PYRAMINX: "pyram",
    Event.SKEWB: "skewb",
    Event.SQUARE1: "sq-1",
}

_FULL_NAMES = {
    Event.CUBE2: "2x2x2 Cube",
    Event.CUBE3: "3x3x3 Cube",
    Event.CUBE4: "4x4x4 Cube",
    Event.CUBE5: "5x5x5 Cube",
    Event.CUBE6: "6x6x6 Cube",
    Event.CUBE7: "7x7x7 Cube",
    Event.BLIND3: "3x3x3 Blindfolded",
    Event.BLIND4: "4x4x4 Blindfolded",
    Event.BLIND5: "5x5x5 Blindfolded",
    Event.MULTIBLIND: "3x3x3 Multi-Blind",
    Event.FEWEST_MOVES: "3x3x3 Fewest Moves",
    Event.ONE_HANDED: "3x3x3 One-Handed",
    Event.CLOCK: "Clock",
    Event.MEGAMINX: "Megaminx",
    Event.PYRAMINX: "Pyraminx",
    Event.SKEWB: "Skewb",
    Event.SQUARE1: "Square-1",
}

_SHORT_NAMES = {
    Event.CUBE2: "2x2",
    Event.CUBE3: "3x3",
    Event.CUBE4: "4x4",
    Event.CUBE5: "5x5",
    Event.CUBE6: "6x6",
    Event.CUBE7: "7x7",
    Event.BLIND3: "3BLD",
    Event.BLIND4: "4BLD",
    Event.BLIND5: "5BLD",
    Event.MULTIBLIND: "Multiblind",
    Event.FEWEST_MOVES: "FM",
    Event.ONE_HANDED: "OH",
    Event.CLOCK: "Clock",
    Event.MEGAMINX: "Megaminx",
    Event.PYRAMINX: "Pyraminx",
    Event.SKEWB: "Skewb",
    Event.SQUARE1: "Square-1",
}