from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Iterable

from .. import config
from ..core.context import Activity, WeatherCondition, CAMP_WORK_ACTIVITIES

if TYPE_CHECKING:
    from ..core.context import GameContext


class Condition(Enum):
    IMPAIRED = "Impaired"
    LIMPING = "Limping"
    CLUMSY = "Clumsy"
    FOGGY = "Foggy"
    IS_EXPEDITION = "IsExpedition"
    AT_CAMP = "AtCamp"
    IS_CAMP_WORK = "IsCampWork"
    TRAVELING = "Traveling"
    IS_DAYTIME = "IsDaytime"
    INJURED = "Injured"
    FIRE_BURNING = "FireBurning"
    IS_SNOWING = "IsSnowing"
    IS_BLIZZARD = "IsBlizzard"
    EXTREMELY_COLD = "ExtremelyCold"
    HAS_FOOD = "HasFood"
    HAS_FUEL = "HasFuel"
    LOW_ON_FUEL = "LowOnFuel"
    STALKED = "Stalked"

    @classmethod
    def parse(cls, name: str) -> Condition:
        """Looks a condition up by its value ("IsExpedition") or member name ("IS_EXPEDITION")."""
        try:
            return cls(name)
        except ValueError:
            pass
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown condition '{name}'.") from None


def matches(condition: Condition, ctx: GameContext) -> bool:
    """
    Tests a single condition against a context snapshot.
    Every Condition member must have a branch here; a missing one raises
    instead of quietly evaluating to False.
    """
    if condition is Condition.IMPAIRED:
        return ctx.consciousness < config.IMPAIRMENT_THRESHOLD
    elif condition is Condition.LIMPING:
        return ctx.moving < config.IMPAIRMENT_THRESHOLD
    elif condition is Condition.CLUMSY:
        return ctx.manipulation < config.IMPAIRMENT_THRESHOLD
    elif condition is Condition.FOGGY:
        return ctx.perception < config.IMPAIRMENT_THRESHOLD
    elif condition is Condition.IS_EXPEDITION:
        return not ctx.at_camp
    elif condition is Condition.AT_CAMP:
        return ctx.at_camp
    elif condition is Condition.IS_CAMP_WORK:
        return ctx.activity in CAMP_WORK_ACTIVITIES
    elif condition is Condition.TRAVELING:
        return ctx.activity is Activity.TRAVELING
    elif condition is Condition.IS_DAYTIME:
        start, end = config.DAYTIME_HOURS
        return start <= ctx.hour < end
    elif condition is Condition.INJURED:
        return ctx.injured
    elif condition is Condition.FIRE_BURNING:
        return ctx.fire_burning
    elif condition is Condition.IS_SNOWING:
        return ctx.weather in (WeatherCondition.LIGHT_SNOW, WeatherCondition.BLIZZARD)
    elif condition is Condition.IS_BLIZZARD:
        return ctx.weather is WeatherCondition.BLIZZARD
    elif condition is Condition.EXTREMELY_COLD:
        return ctx.temperature_c < config.EXTREME_COLD_C
    elif condition is Condition.HAS_FOOD:
        return ctx.food_servings > 0
    elif condition is Condition.HAS_FUEL:
        return ctx.fuel_pieces > 0
    elif condition is Condition.LOW_ON_FUEL:
        return ctx.fuel_pieces <= config.LOW_FUEL_PIECES
    elif condition is Condition.STALKED:
        return ctx.has_tension("Stalked")
    raise ValueError(f"No evaluator mapping for condition {condition!r}.")


def all_match(conditions: Iterable[Condition], ctx: GameContext) -> bool:
    """True when every condition holds. An empty set always matches."""
    return all(matches(condition, ctx) for condition in conditions)


def any_match(conditions: Iterable[Condition], ctx: GameContext) -> bool:
    return any(matches(condition, ctx) for condition in conditions)
