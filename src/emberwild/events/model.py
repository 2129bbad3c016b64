from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional, Tuple, Union

from ..core.ids import EventTitle, ChoiceLabel
from .conditions import Condition
from .errors import MalformedEventError
from .situations import Situation

# Effects are opaque handles; they are forwarded to the effect target unmodified.
Effect = Any

WeightFactors = Tuple[Tuple[Condition, float], ...]
SituationFactors = Tuple[Tuple[Situation, float], ...]


def freeze(value: Any) -> Any:
    """Read-only copy of plain YAML data: mappings become proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def _pairs(factors: Union[Mapping, Tuple, list]) -> tuple:
    if isinstance(factors, Mapping):
        factors = factors.items()
    return tuple((key, multiplier) for key, multiplier in factors)


@dataclass(frozen=True)
class EventResult:
    message: str
    weight: float = 1.0
    time_added_minutes: int = 0
    # Opaque handles may be unhashable, so they stay out of the hash
    effects: Tuple[Effect, ...] = field(default=(), hash=False)
    aborts_action: bool = False
    # Title of a follow-up event queued as an intentional event once this result lands
    chain_event: Optional[EventTitle] = None

    def __post_init__(self):
        object.__setattr__(self, "effects", freeze(tuple(self.effects)))


@dataclass(frozen=True)
class EventChoice:
    label: ChoiceLabel
    description: str
    results: Tuple[EventResult, ...]
    required_conditions: FrozenSet[Condition] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "results", tuple(self.results))
        object.__setattr__(self, "required_conditions", frozenset(self.required_conditions))
        if not self.results:
            raise MalformedEventError(f"Choice '{self.label}' has no results.")


@dataclass(frozen=True)
class GameEvent:
    title: EventTitle
    description: str
    base_weight: float = 1.0
    required_conditions: FrozenSet[Condition] = frozenset()
    choices: Tuple[EventChoice, ...] = ()
    # Event is ineligible while ANY of these hold
    excluded_conditions: FrozenSet[Condition] = frozenset()
    # (condition, multiplier) pairs applied to base_weight when the condition holds
    weight_factors: WeightFactors = ()
    cooldown_minutes: int = 0
    required_situations: FrozenSet[Situation] = frozenset()
    situation_factors: SituationFactors = ()

    def __post_init__(self):
        object.__setattr__(self, "required_conditions", frozenset(self.required_conditions))
        object.__setattr__(self, "excluded_conditions", frozenset(self.excluded_conditions))
        object.__setattr__(self, "required_situations", frozenset(self.required_situations))
        object.__setattr__(self, "choices", tuple(self.choices))
        object.__setattr__(self, "weight_factors", _pairs(self.weight_factors))
        object.__setattr__(self, "situation_factors", _pairs(self.situation_factors))

    def choice(self, label: str) -> EventChoice:
        for event_choice in self.choices:
            if event_choice.label == label:
                return event_choice
        raise ValueError(f"Event '{self.title}' has no choice labelled '{label}'.")
