from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Iterable

from ..core.context import WeatherCondition
from .conditions import Condition, matches

if TYPE_CHECKING:
    from ..core.context import GameContext


class Situation(Enum):
    """Compound predicates built from several conditions."""
    COGNITIVELY_IMPAIRED = "CognitivelyImpaired"
    SUPPLY_PRESSURE = "SupplyPressure"
    HARSH_CONDITIONS = "HarshConditions"
    UNDER_THREAT = "UnderThreat"
    FAVORABLE_CONDITIONS = "FavorableConditions"

    @classmethod
    def parse(cls, name: str) -> Situation:
        try:
            return cls(name)
        except ValueError:
            pass
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown situation '{name}'.") from None


def _under_threat(ctx: GameContext) -> bool:
    return ctx.has_tension("Stalked") or ctx.has_tension("Hunted") or ctx.has_tension("PackNearby")


def _supply_pressure(ctx: GameContext) -> bool:
    return matches(Condition.LOW_ON_FUEL, ctx) or not matches(Condition.HAS_FOOD, ctx)


def holds(situation: Situation, ctx: GameContext) -> bool:
    if situation is Situation.COGNITIVELY_IMPAIRED:
        # clumsy, foggy or impaired
        return (
            matches(Condition.CLUMSY, ctx)
            or matches(Condition.FOGGY, ctx)
            or matches(Condition.IMPAIRED, ctx)
        )
    elif situation is Situation.SUPPLY_PRESSURE:
        return _supply_pressure(ctx)
    elif situation is Situation.HARSH_CONDITIONS:
        return (
            matches(Condition.IS_BLIZZARD, ctx)
            or ctx.weather is WeatherCondition.STORMY
            or matches(Condition.EXTREMELY_COLD, ctx)
        )
    elif situation is Situation.UNDER_THREAT:
        return _under_threat(ctx)
    elif situation is Situation.FAVORABLE_CONDITIONS:
        return (
            matches(Condition.IS_DAYTIME, ctx)
            and ctx.weather is WeatherCondition.CLEAR
            and not _under_threat(ctx)
            and not _supply_pressure(ctx)
        )
    raise ValueError(f"No evaluator mapping for situation {situation!r}.")


def all_hold(situations: Iterable[Situation], ctx: GameContext) -> bool:
    return all(holds(situation, ctx) for situation in situations)
