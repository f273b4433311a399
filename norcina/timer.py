"""The state machine of a speedcubing timer driven by a single key."""

from __future__ import annotations

import time as _time
from datetime import timedelta
from enum import Enum, auto
from typing import Callable

#: How long the key must be held before releasing it starts the timer.
MIN_PRESS_DURATION = timedelta(milliseconds=100)
#: How long after stopping before the timer can be armed again.
MIN_STOP_DURATION = timedelta(milliseconds=500)


class TimerState(Enum):
    #: Nothing pressed yet.
    IDLE = auto()
    #: Key held down, not yet released.
    PRESSED = auto()
    #: Timer is running.
    RUNNING = auto()
    #: Timer stopped with a time.
    STOPPED = auto()


class Timer:
    """A timer: press and hold, release to start, press again to stop."""

    def __init__(self, clock: Callable[[], float] = _time.monotonic) -> None:
        self._clock = clock
        self.state = TimerState.IDLE
        # When the current state was entered (press start, run start or stop).
        self._mark = 0.0
        # The last measured time, meaningful when stopped.
        self._time = timedelta(0)

    def _elapsed(self, now: float) -> timedelta:
        return timedelta(seconds=now - self._mark)

    def press(self, min_stop_duration: timedelta = MIN_STOP_DURATION) -> timedelta | None:
        """Handle a key press; returns the solve time when it stops the timer."""
        now = self._clock()
        if self.state is TimerState.IDLE:
            self.state = TimerState.PRESSED
            self._mark = now
        elif self.state is TimerState.RUNNING:
            self._time = self._elapsed(now)
            self.state = TimerState.STOPPED
            self._mark = now
            return self._time
        elif self.state is TimerState.STOPPED:
            if self._elapsed(now) >= min_stop_duration:
                self.state = TimerState.PRESSED
                self._mark = now
        return None

    def release(self, min_press_duration: timedelta = MIN_PRESS_DURATION) -> None:
        """Handle the key being released: start the timer if held long enough."""
        if self.state is not TimerState.PRESSED:
            return
        now = self._clock()
        if self._elapsed(now) < min_press_duration:
            self.state = TimerState.IDLE
        else:
            self.state = TimerState.RUNNING
            self._mark = now

    def is_pressed(self) -> bool:
        return self.state is TimerState.PRESSED

    def is_running(self) -> bool:
        return self.state is TimerState.RUNNING

    def reading(
        self,
        min_press_duration: timedelta = MIN_PRESS_DURATION,
        min_stop_duration: timedelta = MIN_STOP_DURATION,
    ) -> tuple[timedelta, str]:
        """The time to show and the colour to show it in."""
        now = self._clock()
        if self.state is TimerState.IDLE:
            return timedelta(0), "white"
        if self.state is TimerState.PRESSED:
            held_long_enough = self._elapsed(now) >= min_press_duration
            return timedelta(0), "green" if held_long_enough else "yellow"
        if self.state is TimerState.RUNNING:
            return self._elapsed(now), "blue"
        recently_stopped = self._elapsed(now) < min_stop_duration
        return self._time, "green" if recently_stopped else "white"