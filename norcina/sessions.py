"""Events, custom events and the sessions that group solves."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass, field
from typing import Iterator

from norcina.event import Event
from norcina.scramble import gen_scramble as _gen_scramble


@dataclass(frozen=True)
class Session:
    """A group of solves; without a custom name it is the main session (id 0)."""

    custom_name: str | None = None
    custom_id: int = 0

    @classmethod
    def main(cls) -> Session:
        return cls()

    def name(self) -> str:
        return "main" if self.custom_name is None else self.custom_name

    def id(self) -> int:
        return 0 if self.custom_name is None else self.custom_id


@dataclass(frozen=True)
class CustomEvent:
    """A user-defined event, optionally scrambled like an official one."""

    id: int
    name: str
    scramble_type: Event | None = None


@dataclass(frozen=True)
class MaybeCustomEvent:
    """Either an official event or a custom one."""

    event: Event | CustomEvent

    def scramble_type(self) -> Event | None:
        if isinstance(self.event, Event):
            return self.event
        return self.event.scramble_type

    def short_name(self) -> str:
        if isinstance(self.event, Event):
            return self.event.short_name()
        return self.event.name

    def id(self) -> int:
        if isinstance(self.event, Event):
            return self.event.id()
        return self.event.id

    def gen_scramble(self, rng: _random.Random | None = None) -> str | None:
        """A scramble for the event, or None if it has no scramble type."""
        scramble_type = self.scramble_type()
        if scramble_type is None:
            return None
        return str(_gen_scramble(scramble_type, rng))

    @classmethod
    def default(cls) -> MaybeCustomEvent:
        return cls(Event.default())


@dataclass
class EventSessionList:
    """Custom events and, per event id, the sessions of that event."""

    custom_events: list[CustomEvent] = field(default_factory=list)
    sessions: list[list[Session]] = field(default_factory=list)

    def events(self) -> Iterator[MaybeCustomEvent]:
        """Every official event followed by the custom ones."""
        for event in Event:
            yield MaybeCustomEvent(event)
        for custom in self.custom_events:
            yield MaybeCustomEvent(custom)

    def sessions_of(self, event: MaybeCustomEvent) -> Iterator[Session]:
        return iter(self.sessions[event.id()])