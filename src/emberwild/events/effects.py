from __future__ import annotations
from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:
    from .model import Effect, EventResult


class WorldClock(Protocol):
    def advance(self, minutes: int) -> None: ...


class EffectTarget(Protocol):
    def add_effect(self, effect: Effect) -> None: ...


class MinuteClock:
    """Counts game minutes consumed by event outcomes."""

    def __init__(self, minute: int = 0):
        self.minute = minute

    def advance(self, minutes: int):
        if minutes < 0:
            raise ValueError("Cannot advance the clock by a negative amount.")
        self.minute += minutes


class EffectLedger:
    """Collects forwarded effects in arrival order."""

    def __init__(self):
        self.effects: List[Effect] = []

    def add_effect(self, effect: Effect):
        self.effects.append(effect)


def apply_result(result: EventResult, clock: WorldClock, target: EffectTarget):
    """Forwards an outcome's time cost and effects. Effects are never inspected here."""
    if result.time_added_minutes:
        clock.advance(result.time_added_minutes)
    for effect in result.effects:
        target.add_effect(effect)
