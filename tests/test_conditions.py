import pytest

from emberwild.core.context import GameContext, Activity, WeatherCondition
from emberwild.core.ids import TensionType
from emberwild.events.conditions import Condition, matches, all_match, any_match


def test_every_condition_has_an_evaluator_mapping():
    ctx = GameContext()
    for condition in Condition:
        assert matches(condition, ctx) in (True, False)


def test_empty_condition_set_always_matches():
    assert all_match([], GameContext())
    assert all_match(frozenset(), GameContext(at_camp=False, consciousness=0.0))
    assert not any_match([], GameContext())


def test_impairment_conditions_follow_capacities():
    ctx = GameContext(consciousness=0.3, moving=0.9, manipulation=0.2, perception=0.49)
    assert matches(Condition.IMPAIRED, ctx)
    assert not matches(Condition.LIMPING, ctx)
    assert matches(Condition.CLUMSY, ctx)
    assert matches(Condition.FOGGY, ctx)


def test_location_and_activity_conditions():
    camp = GameContext(at_camp=True, activity=Activity.COOKING)
    assert matches(Condition.AT_CAMP, camp)
    assert not matches(Condition.IS_EXPEDITION, camp)
    assert matches(Condition.IS_CAMP_WORK, camp)
    assert not matches(Condition.TRAVELING, camp)

    away = GameContext(at_camp=False, activity=Activity.TRAVELING)
    assert matches(Condition.IS_EXPEDITION, away)
    assert matches(Condition.TRAVELING, away)
    assert not matches(Condition.IS_CAMP_WORK, away)


def test_weather_and_resource_conditions():
    ctx = GameContext(
        weather=WeatherCondition.BLIZZARD, temperature_c=-30.0, hour=22,
        fuel_pieces=1, food_servings=0, tensions={TensionType("Stalked")},
    )
    assert matches(Condition.IS_SNOWING, ctx)
    assert matches(Condition.IS_BLIZZARD, ctx)
    assert matches(Condition.EXTREMELY_COLD, ctx)
    assert not matches(Condition.IS_DAYTIME, ctx)
    assert matches(Condition.HAS_FUEL, ctx)
    assert matches(Condition.LOW_ON_FUEL, ctx)
    assert not matches(Condition.HAS_FOOD, ctx)
    assert matches(Condition.STALKED, ctx)


def test_all_match_requires_every_condition():
    conditions = {Condition.IMPAIRED, Condition.IS_EXPEDITION}
    assert all_match(conditions, GameContext(at_camp=False, consciousness=0.2))
    assert not all_match(conditions, GameContext(at_camp=True, consciousness=0.2))
    assert not all_match(conditions, GameContext(at_camp=False, consciousness=0.9))


def test_evaluation_is_pure():
    ctx = GameContext(at_camp=False, consciousness=0.2)
    conditions = {Condition.IMPAIRED, Condition.IS_EXPEDITION, Condition.IS_DAYTIME}
    assert all_match(conditions, ctx) == all_match(conditions, ctx)
    assert ctx == GameContext(at_camp=False, consciousness=0.2)


def test_parse_accepts_value_or_member_name():
    assert Condition.parse("IsExpedition") is Condition.IS_EXPEDITION
    assert Condition.parse("IS_EXPEDITION") is Condition.IS_EXPEDITION
    with pytest.raises(ValueError):
        Condition.parse("IsUnderwater")
