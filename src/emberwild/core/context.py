from dataclasses import dataclass, field
from enum import Enum
from typing import Set

from .ids import TensionType


class Activity(Enum):
    IDLE = "idle"
    TRAVELING = "traveling"
    FORAGING = "foraging"
    HUNTING = "hunting"
    EXPLORING = "exploring"
    TENDING_FIRE = "tending_fire"
    EATING = "eating"
    COOKING = "cooking"
    CRAFTING = "crafting"
    RESTING = "resting"
    SLEEPING = "sleeping"


class WeatherCondition(Enum):
    CLEAR = "clear"
    CLOUDY = "cloudy"
    MISTY = "misty"
    LIGHT_SNOW = "light_snow"
    BLIZZARD = "blizzard"
    RAINY = "rainy"
    STORMY = "stormy"


CAMP_WORK_ACTIVITIES = frozenset({
    Activity.TENDING_FIRE,
    Activity.EATING,
    Activity.COOKING,
    Activity.CRAFTING,
})


@dataclass
class GameContext:
    """
    Read-only snapshot of the world and player that event conditions are
    evaluated against. Capacities are on a 0..1 scale, 1.0 being unhurt.
    """
    at_camp: bool = True
    activity: Activity = Activity.IDLE
    hour: int = 12
    consciousness: float = 1.0
    moving: float = 1.0
    manipulation: float = 1.0
    perception: float = 1.0
    injured: bool = False
    fire_burning: bool = False
    weather: WeatherCondition = WeatherCondition.CLEAR
    temperature_c: float = -5.0
    food_servings: float = 0.0
    fuel_pieces: float = 0.0
    tensions: Set[TensionType] = field(default_factory=set)

    def has_tension(self, tension_type: str) -> bool:
        return TensionType(tension_type) in self.tensions
