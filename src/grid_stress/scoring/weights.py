"""Component curves, caps and multipliers for the grid stress score.

Every breakpoint used by the component scorers lives here so that a
score can be traced back to a concrete number.  Temperatures are in
degrees Fahrenheit, wind in mph, humidity and cloud cover in percent.
"""

# ---------------------------------------------------------------------------
# Component display names (single source of truth for all modules)
# ---------------------------------------------------------------------------
COMPONENT_NAMES = {
    "temperature": "Temperature",
    "time_of_day": "Time of Day",
    "day_of_week": "Day of Week",
    "wind": "Wind Relief",
    "solar": "Solar Depletion",
    "ev_charging": "EV Charging",
}

# ---------------------------------------------------------------------------
# Overall score bounds
# ---------------------------------------------------------------------------
SCORE_MIN = 0
SCORE_MAX = 100

# ---------------------------------------------------------------------------
# Temperature (max 35)
# ---------------------------------------------------------------------------
TEMP_MAX = 35.0

HEAT_THRESHOLD = 75.0       # At/above: cooling load
COLD_THRESHOLD = 40.0       # At/below: heating load

# Heat segments: (lower bound, upper bound, score at lower, score at upper)
HEAT_SEGMENTS = (
    (75.0, 85.0, 5.0, 15.0),
    (85.0, 95.0, 15.0, 28.0),
    (95.0, 105.0, 28.0, 33.0),
)
EXTREME_HEAT_BASE = 33.0
EXTREME_HEAT_RANGE = (105.0, 115.0, 0.0, 2.0)

# Heat index amplifier kicks in strictly above this temperature
HUMIDITY_AMPLIFIER_TEMP = 80.0
HUMIDITY_AMPLIFIER_RANGE = (30.0, 90.0, 0.0, 5.0)

# Cold segments, checked top-down: applies while temperature > lower bound
COLD_SEGMENTS = (
    (32.0, 40.0, 15.0, 8.0),
    (10.0, 32.0, 30.0, 15.0),
)
DEEP_COLD_BASE = 30.0
DEEP_COLD_RANGE = (-10.0, 10.0, 5.0, 0.0)

# Comfort zone 40-75F
COMFORT_RANGE = (40.0, 75.0, 5.0, 1.0)

# ---------------------------------------------------------------------------
# Time of day (max 30) -- duck curve anchors as (hour, score)
# ---------------------------------------------------------------------------
TIME_OF_DAY_MAX = 30.0

TIME_OF_DAY_CURVE = (
    (0, 3.0),
    (4, 2.0),
    (6, 8.0),
    (9, 14.0),
    (12, 16.0),
    (15, 20.0),
    (17, TIME_OF_DAY_MAX),  # evening peak
    (19, 22.0),
    (21, 12.0),
    (23, 5.0),
)

# ---------------------------------------------------------------------------
# Day of week (0 = Sunday)
# ---------------------------------------------------------------------------
SUNDAY = 0
MONDAY = 1
SATURDAY = 6

SUNDAY_SCORE = 2.0
SATURDAY_SCORE = 4.0
WEEKDAY_SCORE = 8.0

# ---------------------------------------------------------------------------
# Wind relief (-10 to 0)
# ---------------------------------------------------------------------------
WIND_CALM_BELOW = 5.0
WIND_SEGMENTS = (
    (5.0, 15.0, 0.0, -5.0),
    (15.0, 25.0, -5.0, -8.0),
)
WIND_STRONG_SCORE = -10.0

# ---------------------------------------------------------------------------
# Solar depletion (max 12)
# ---------------------------------------------------------------------------
SOLAR_MAX = 12.0

SOLAR_START_HOUR = 8    # inclusive
SOLAR_END_HOUR = 18     # exclusive
SOLAR_PEAK_HOUR = 13
SOLAR_CLOUD_RANGE = (0.0, 100.0, 0.0, SOLAR_MAX)
SOLAR_POTENTIAL_RANGE = (0.0, 5.0, 1.0, 0.2)  # |hour - peak| -> potential

# ---------------------------------------------------------------------------
# EV charging pressure (max 15)
# ---------------------------------------------------------------------------
EV_MAX = 15.0

# (start hour inclusive, end hour exclusive, pressure at start, pressure at end)
EV_EVENING_WINDOW = (17, 20, 8.0, 2.0)
EV_MORNING_WINDOW = (7, 9, 3.0, 1.0)

ADOPTION_MULTIPLIERS = {
    "low": 0.4,
    "medium": 1.0,
    "high": 2.2,
}
DEFAULT_ADOPTION_MULTIPLIER = 1.0

EV_COLD_BELOW = 40.0
EV_COLD_RANGE = (-10.0, 40.0, 0.6, 0.0)

MONDAY_MULTIPLIER = 1.15
