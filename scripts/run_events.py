import argparse
import logging
import sys
from pathlib import Path

# Add the source tree to the Python path
sys.path.append(str(Path(__file__).parent.parent / "src"))

from emberwild import config
from emberwild.core.context import GameContext, Activity, WeatherCondition
from emberwild.core.ids import TensionType
from emberwild.core.sim import run_ticks
from emberwild.core.state import GameSession
from emberwild.events.registry import event_registry


SCENARIOS = {
    "camp": lambda: GameContext(at_camp=True, activity=Activity.COOKING, fire_burning=True, fuel_pieces=4, food_servings=2),
    "expedition": lambda: GameContext(at_camp=False, activity=Activity.TRAVELING, fuel_pieces=1),
    "impaired": lambda: GameContext(at_camp=False, activity=Activity.TRAVELING, consciousness=0.3, moving=0.4, perception=0.4),
    "blizzard": lambda: GameContext(
        at_camp=False, activity=Activity.TRAVELING, weather=WeatherCondition.BLIZZARD,
        temperature_c=-30.0, fuel_pieces=2, tensions={TensionType("Stalked")},
    ),
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the event engine against a fixed scenario.")
    parser.add_argument(
        "--events",
        type=str,
        default=str(config.DEFAULT_EVENTS_PATH),
        help="Path to the event definitions YAML file.",
    )
    parser.add_argument("--scenario", choices=sorted(SCENARIOS), default="expedition", help="Context preset to play.")
    parser.add_argument("--seed", type=int, default=7, help="RNG seed for the session.")
    parser.add_argument("--minutes", type=int, default=600, help="Game minutes to simulate.")
    parser.add_argument(
        "--trigger", action="append", default=[], help="Queue an intentional event by title before starting."
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if not len(event_registry):
        event_registry.load_from_yaml(Path(args.events))
        event_registry.validate_chains()

    session = GameSession(seed=args.seed, registry=event_registry)
    ctx = SCENARIOS[args.scenario]()
    for title in args.trigger:
        session.trigger(title)
    print(f"Loaded {len(event_registry)} events from '{args.events}'. Scenario '{args.scenario}', seed {args.seed}.")

    while session.minute < args.minutes:
        tick = run_ticks(session, ctx, args.minutes - session.minute)
        if tick.event is None:
            break

        event = tick.event
        choices = session.dispatcher.available_choices(event, ctx)
        choice = session.rng.choice(choices)
        report = session.dispatcher.resolve_choice(event, choice)
        print(f"\n[{session.minute:>4} min] {event.title}")
        print(f"  > {choice.label}")
        print(f"  {report.message} (+{report.time_added_minutes} min)")
        for effect in report.effects:
            print(f"    - {effect}")

    print(f"\nSimulated {session.minute} minutes, {len(session.log.of_type('event.resolved'))} events resolved.")
    return session


if __name__ == "__main__":
    main()
