from __future__ import annotations
import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING, Any, Collection, Dict, Iterable, List
import yaml

from ..core.ids import EventTitle, ChoiceLabel
from .conditions import Condition, all_match, any_match, matches
from .errors import MalformedEventError
from .model import GameEvent, EventChoice, EventResult
from .situations import Situation, all_hold, holds

if TYPE_CHECKING:
    from ..core.context import GameContext

logger = logging.getLogger(__name__)


def _parse_conditions(names: List[str], where: str) -> List[Condition]:
    conditions = []
    for name in names or []:
        try:
            conditions.append(Condition.parse(name))
        except ValueError as exc:
            raise MalformedEventError(f"{where}: {exc}") from None
    return conditions


def _parse_situations(names: List[str], where: str) -> List[Situation]:
    situations = []
    for name in names or []:
        try:
            situations.append(Situation.parse(name))
        except ValueError as exc:
            raise MalformedEventError(f"{where}: {exc}") from None
    return situations


def _build_result(r_data: Dict[str, Any]) -> EventResult:
    chain = r_data.get('chain')
    return EventResult(
        message=r_data['message'],
        weight=r_data.get('weight', 1.0),
        time_added_minutes=r_data.get('minutes', 0),
        effects=r_data.get('effects') or [],
        aborts_action=r_data.get('aborts', False),
        chain_event=EventTitle(chain) if chain else None,
    )


def _build_event(e_data: Dict[str, Any]) -> GameEvent:
    title = e_data['title']
    where = f"Event '{title}'"
    choices = []
    for c_data in e_data.get('choices') or []:
        choices.append(EventChoice(
            label=ChoiceLabel(c_data['label']),
            description=c_data.get('description', ""),
            results=[_build_result(r_data) for r_data in c_data.get('results') or []],
            required_conditions=_parse_conditions(c_data.get('requires'), f"Choice '{c_data['label']}' in '{title}'"),
        ))

    weight_factors = [
        (_parse_conditions([name], where)[0], multiplier)
        for name, multiplier in (e_data.get('weight_factors') or {}).items()
    ]
    situation_factors = [
        (_parse_situations([name], where)[0], multiplier)
        for name, multiplier in (e_data.get('situation_factors') or {}).items()
    ]

    return GameEvent(
        title=EventTitle(title),
        description=e_data.get('description', ""),
        base_weight=e_data.get('base_weight', 1.0),
        required_conditions=_parse_conditions(e_data.get('requires'), where),
        excluded_conditions=_parse_conditions(e_data.get('excludes'), where),
        choices=choices,
        weight_factors=weight_factors,
        cooldown_minutes=e_data.get('cooldown_minutes', 0),
        required_situations=_parse_situations(e_data.get('requires_situations'), where),
        situation_factors=situation_factors,
    )


def _check_weight(value: float, what: str):
    if not math.isfinite(value) or value < 0:
        raise MalformedEventError(f"{what} must be a finite non-negative number, got {value}.")


def validate_event(event: GameEvent):
    """Rejects definitions that could fail at dispatch time."""
    if not event.title:
        raise MalformedEventError("Event title must be non-empty.")
    _check_weight(event.base_weight, f"Base weight of '{event.title}'")
    if event.cooldown_minutes < 0:
        raise MalformedEventError(f"Event '{event.title}' has negative cooldown {event.cooldown_minutes}.")
    for condition, multiplier in event.weight_factors:
        _check_weight(multiplier, f"Weight factor {condition.value} of '{event.title}'")
    for situation, multiplier in event.situation_factors:
        _check_weight(multiplier, f"Situation factor {situation.value} of '{event.title}'")

    if not event.choices:
        raise MalformedEventError(f"Event '{event.title}' offers no choices.")
    # Someone has to be able to respond whatever the context
    if all(choice.required_conditions for choice in event.choices):
        raise MalformedEventError(f"Event '{event.title}' needs at least one choice without requirements.")

    seen_labels = set()
    for choice in event.choices:
        if choice.label in seen_labels:
            raise MalformedEventError(f"Event '{event.title}' has duplicate choice '{choice.label}'.")
        seen_labels.add(choice.label)
        if not choice.results:
            raise MalformedEventError(f"Choice '{choice.label}' in '{event.title}' has no results.")
        for result in choice.results:
            _check_weight(result.weight, f"Result weight in '{event.title}/{choice.label}'")
            if result.time_added_minutes < 0:
                raise MalformedEventError(f"Result in '{event.title}/{choice.label}' has negative time cost.")


def check_chains(events: Iterable[GameEvent], known_titles: Collection[str]):
    for event in events:
        for choice in event.choices:
            for result in choice.results:
                if result.chain_event and result.chain_event not in known_titles:
                    raise MalformedEventError(
                        f"Result in '{event.title}/{choice.label}' chains to unknown event '{result.chain_event}'."
                    )


class EventRegistry:
    def __init__(self):
        self._events: Dict[EventTitle, GameEvent] = {}

    def register(self, event: GameEvent):
        validate_event(event)
        if event.title in self._events:
            raise MalformedEventError(f"Event '{event.title}' is already registered.")
        self._events[event.title] = event

    def load_from_yaml(self, path: Path):
        """Loads a whole file or nothing: every entry is built and checked before any is registered."""
        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if data is None:
            raise MalformedEventError(f"YAML file '{path}' is empty or malformed.")
        if not isinstance(data, list):
            raise MalformedEventError(f"Top level of {path} must be a list of events.")

        staged: Dict[EventTitle, GameEvent] = {}
        for index, e_data in enumerate(data):
            if not isinstance(e_data, dict):
                raise MalformedEventError(f"Entry {index} in {path} must be a mapping, got {type(e_data).__name__}.")
            try:
                event = _build_event(e_data)
                validate_event(event)
            except KeyError as exc:
                raise MalformedEventError(f"Entry {index} in {path} is missing key {exc}.") from None
            except (TypeError, ValueError, AttributeError) as exc:
                raise MalformedEventError(f"Entry {index} in {path} is invalid: {exc}") from None
            if event.title in staged or event.title in self._events:
                raise MalformedEventError(f"Event '{event.title}' is already registered.")
            staged[event.title] = event

        check_chains(staged.values(), set(staged) | set(self._events))
        self._events.update(staged)
        logger.info("Loaded %d events from %s", len(staged), path)

    def validate_chains(self):
        """Every chained title must resolve to a registered event."""
        check_chains(self._events.values(), self._events)

    def get(self, title: str) -> GameEvent:
        if title not in self._events:
            raise ValueError(f"Event with title '{title}' not found.")
        return self._events[EventTitle(title)]

    def all_events(self) -> List[GameEvent]:
        return list(self._events.values())

    def eligible_events(self, ctx: GameContext) -> List[GameEvent]:
        return [
            event for event in self._events.values()
            if all_match(event.required_conditions, ctx)
            and not any_match(event.excluded_conditions, ctx)
            and all_hold(event.required_situations, ctx)
        ]

    def effective_weight(self, event: GameEvent, ctx: GameContext) -> float:
        weight = event.base_weight
        for condition, multiplier in event.weight_factors:
            if matches(condition, ctx):
                weight *= multiplier
        for situation, multiplier in event.situation_factors:
            if holds(situation, ctx):
                weight *= multiplier
        return weight

    def __len__(self) -> int:
        return len(self._events)

# Global registry instance
event_registry = EventRegistry()
