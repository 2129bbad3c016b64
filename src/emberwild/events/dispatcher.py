from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from ..core.ids import EventTitle, ChoiceLabel
from ..core.log import AuditLog
from ..core.rng import default_rng
from .conditions import all_match
from .effects import MinuteClock, EffectLedger, EffectTarget, apply_result
from .errors import InvalidChoiceError, MalformedEventError
from .queue import EventQueue
from .sampler import weighted_choice

if TYPE_CHECKING:
    from ..core.context import GameContext
    from .model import Effect, GameEvent, EventChoice, EventResult
    from .registry import EventRegistry

logger = logging.getLogger(__name__)


class DispatchState(Enum):
    IDLE = "idle"
    EVENT_PRESENTED = "event_presented"
    CHOICE_RESOLVED = "choice_resolved"


@dataclass(frozen=True)
class OutcomeReport:
    event_title: EventTitle
    choice_label: ChoiceLabel
    result: EventResult
    message: str
    time_added_minutes: int
    effects: Tuple[Effect, ...]
    aborts_action: bool = False
    chained_event: Optional[EventTitle] = None


class EventDispatcher:
    """
    Decides which event fires next and which outcome a choice produces.

    Queued (intentional) events always win over ambient ones and skip
    condition filtering, weighting and cooldowns. Ambient events are drawn
    from the registry's currently eligible set by effective weight.
    """

    def __init__(
        self,
        registry: EventRegistry,
        queue: Optional[EventQueue] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[MinuteClock] = None,
        effect_target: Optional[EffectTarget] = None,
        log: Optional[AuditLog] = None,
    ):
        self.registry = registry
        self.queue = queue if queue is not None else EventQueue()
        self.rng = rng or default_rng
        self.clock = clock if clock is not None else MinuteClock()
        self.effect_target = effect_target if effect_target is not None else EffectLedger()
        self.log = log if log is not None else AuditLog()
        self.state = DispatchState.IDLE
        self.presented: Optional[GameEvent] = None
        self._last_fired: Dict[EventTitle, int] = {}
        self.registry.validate_chains()

    def trigger(self, title: str):
        """Queues a registered event as an intentional event."""
        event = self.registry.get(title)
        self.queue.enqueue(event)
        self.log.add_entry("event.queued", self.clock.minute, event_title=event.title)

    def is_on_cooldown(self, event: GameEvent) -> bool:
        if event.cooldown_minutes <= 0 or event.title not in self._last_fired:
            return False
        return self.clock.minute - self._last_fired[event.title] < event.cooldown_minutes

    def candidate_events(self, ctx: GameContext) -> List[GameEvent]:
        return [event for event in self.registry.eligible_events(ctx) if not self.is_on_cooldown(event)]

    def poll_next_event(self, ctx: GameContext) -> Optional[GameEvent]:
        event, found = self.queue.try_dequeue()
        if found:
            self.log.add_entry(
                "event.presented", self.clock.minute, event_title=event.title,
                reason="Intentional event dequeued.", details={"source": "queue"},
            )
            logger.debug("Presenting queued event '%s'", event.title)
            return self._present(event)

        candidates = self.candidate_events(ctx)
        if not candidates:
            self.log.add_entry("events.none", self.clock.minute, reason="No eligible events.")
            self.state = DispatchState.IDLE
            self.presented = None
            return None

        event = weighted_choice(candidates, lambda e: self.registry.effective_weight(e, ctx), self.rng)
        self._last_fired[event.title] = self.clock.minute
        self.log.add_entry(
            "event.presented", self.clock.minute, event_title=event.title,
            reason=f"Ambient event drawn from {len(candidates)} candidates.",
            details={"source": "ambient", "candidates": [e.title for e in candidates]},
        )
        logger.debug("Presenting ambient event '%s' (%d candidates)", event.title, len(candidates))
        return self._present(event)

    def _present(self, event: GameEvent) -> GameEvent:
        self.state = DispatchState.EVENT_PRESENTED
        self.presented = event
        return event

    def available_choices(self, event: GameEvent, ctx: GameContext) -> List[EventChoice]:
        return [choice for choice in event.choices if all_match(choice.required_conditions, ctx)]

    def resolve_choice(self, event: GameEvent, choice: EventChoice) -> OutcomeReport:
        if choice not in event.choices:
            raise InvalidChoiceError(f"Choice '{choice.label}' does not belong to event '{event.title}'.")

        result = weighted_choice(choice.results, lambda r: r.weight, self.rng)

        # Resolve the follow-up before touching the clock or effects
        chained_event = None
        if result.chain_event:
            try:
                chained_event = self.registry.get(result.chain_event)
            except ValueError:
                raise MalformedEventError(
                    f"Result in '{event.title}/{choice.label}' chains to unknown event '{result.chain_event}'."
                ) from None

        apply_result(result, self.clock, self.effect_target)

        chained = None
        if chained_event is not None:
            self.queue.enqueue(chained_event)
            chained = chained_event.title
            self.log.add_entry(
                "event.chained", self.clock.minute, event_title=chained,
                reason=f"Chained from '{event.title}'.",
            )

        self.log.add_entry(
            "event.resolved", self.clock.minute, event_title=event.title, choice_label=choice.label,
            reason=result.message,
            details={"minutes": result.time_added_minutes, "effects": list(result.effects)},
        )
        logger.debug("Resolved '%s' / '%s' (+%d min)", event.title, choice.label, result.time_added_minutes)

        self.state = DispatchState.CHOICE_RESOLVED
        self.presented = None
        return OutcomeReport(
            event_title=event.title,
            choice_label=choice.label,
            result=result,
            message=result.message,
            time_added_minutes=result.time_added_minutes,
            effects=result.effects,
            aborts_action=result.aborts_action,
            chained_event=chained,
        )

    def reset(self):
        self.queue.clear()
        self._last_fired.clear()
        self.log.clear()
        self.state = DispatchState.IDLE
        self.presented = None
