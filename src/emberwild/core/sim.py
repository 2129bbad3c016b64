import math
from dataclasses import dataclass
from typing import Optional

from .. import config
from .context import GameContext
from .state import GameSession
from ..events.model import GameEvent


@dataclass
class TickResult:
    minutes_elapsed: int
    event: Optional[GameEvent] = None


def rate_to_chance_per_minute(events_per_hour: float) -> float:
    """Converts an hourly event rate into a per-minute trigger probability."""
    rate_per_minute = events_per_hour / 60.0
    return 1 - math.exp(-rate_per_minute)


def run_ticks(
    session: GameSession,
    ctx: GameContext,
    target_minutes: int,
    activity_multiplier: float = 1.0,
    events_per_hour: float = config.EVENTS_PER_HOUR,
) -> TickResult:
    """
    Advances the session clock minute by minute until target_minutes pass or
    an event comes up. An activity multiplier of 0 or less suppresses events
    entirely, queued ones included; they stay queued for a later call.
    Otherwise queued events surface on the next minute and ambient events
    need the per-minute roll to succeed first.
    """
    chance = rate_to_chance_per_minute(events_per_hour) * activity_multiplier
    elapsed = 0

    while elapsed < target_minutes:
        elapsed += 1
        session.clock.advance(1)

        if activity_multiplier <= 0:
            continue

        # Intentional events first
        if not session.queue.is_empty:
            return TickResult(minutes_elapsed=elapsed, event=session.dispatcher.poll_next_event(ctx))

        if chance <= 0 or session.rng.random() >= chance:
            continue

        event = session.dispatcher.poll_next_event(ctx)
        if event is not None:
            return TickResult(minutes_elapsed=elapsed, event=event)

    return TickResult(minutes_elapsed=elapsed)
