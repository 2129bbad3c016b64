from pathlib import Path

# Overall event frequency knob for the minute-tick driver
EVENTS_PER_HOUR = 0.5

# Capacity below which a body system counts as impaired (0..1 scale)
IMPAIRMENT_THRESHOLD = 0.5

EXTREME_COLD_C = -25.0
LOW_FUEL_PIECES = 1.0

# [start, end) in game hours
DAYTIME_HOURS = (6, 20)

DEFAULT_EVENTS_PATH = Path("data/events.yaml")
