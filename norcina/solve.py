"""Timed solves and their penalties."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


class Penalty(Enum):
    """A penalty applied to a solve."""

    #: No penalty.
    NONE = 0
    #: +2, usually because the cube was one move from solved when the timer stopped.
    PLUS2 = 1
    #: The timer stopped and the cube was not finished.
    DNF = 2

    def index(self) -> int:
        """The number the penalty is stored as."""
        return self.value

    @classmethod
    def from_index(cls, index: int) -> Penalty:
        """The penalty stored as ``index``."""
        try:
            return cls(index)
        except ValueError:
            raise ValueError(f"invalid penalty index: {index}") from None


_PENALTY_SUFFIX = {
    Penalty.NONE: "",
    Penalty.PLUS2: " (+2)",
    Penalty.DNF: " (DNF)",
}


def format_duration(duration: timedelta) -> str:
    """``SS.mmm`` below a minute, ``MM:SS.mmm`` from a minute on."""
    if duration < timedelta(0):
        raise ValueError(f"negative duration: {duration}")
    total_ms = duration // timedelta(milliseconds=1)
    secs, millis = divmod(total_ms, 1000)
    if secs < 60:
        return f"{secs:02}.{millis:03}"
    return f"{secs // 60:02}:{secs % 60:02}.{millis:03}"


@dataclass
class Solve:
    """One timed solve."""

    #: How long the solve took.
    time: timedelta
    #: The moment the solve was finished.
    end_date: datetime
    scramble: str
    penalty: Penalty = Penalty.NONE

    @classmethod
    def new(cls, time: timedelta, scramble: str) -> Solve:
        """A solve without penalty that finished just now."""
        return cls(time, datetime.now().astimezone(), scramble)

    def start_date(self) -> datetime:
        """The moment the solve was started."""
        return self.end_date - self.time

    def __str__(self) -> str:
        return format_duration(self.time) + _PENALTY_SUFFIX[self.penalty]