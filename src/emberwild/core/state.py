import random
from dataclasses import dataclass, field
from typing import Optional

from .log import AuditLog
from .rng import get_seeded_rng
from ..events.dispatcher import EventDispatcher
from ..events.effects import MinuteClock, EffectLedger
from ..events.queue import EventQueue
from ..events.registry import EventRegistry


@dataclass
class GameSession:
    """
    Per-session event state. Each session owns its own queue, clock and RNG,
    so several sessions can run side by side in one process.
    """
    seed: int
    registry: EventRegistry = field(default_factory=EventRegistry)
    rng: random.Random = field(init=False)
    queue: EventQueue = field(default_factory=EventQueue)
    clock: MinuteClock = field(default_factory=MinuteClock)
    effects: EffectLedger = field(default_factory=EffectLedger)
    log: AuditLog = field(default_factory=AuditLog)

    dispatcher: Optional[EventDispatcher] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self.rng = get_seeded_rng(self.seed)
        self.dispatcher = EventDispatcher(
            self.registry,
            queue=self.queue,
            rng=self.rng,
            clock=self.clock,
            effect_target=self.effects,
            log=self.log,
        )

    @property
    def minute(self) -> int:
        return self.clock.minute

    def trigger(self, title: str):
        self.dispatcher.trigger(title)

    def reset(self):
        """Drops queued events, cooldowns and the audit trail. Time and RNG state are kept."""
        self.dispatcher.reset()
