# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Component scorers for the grid stress index.

Each function computes one independently bounded contribution.  The
engine sums them, rounds, and clamps the total to 0-100.
"""

from __future__ import annotations

from grid_stress.scoring.curves import interpolate_anchors, lerp, lerp_range
from grid_stress.scoring.weights import (
    ADOPTION_MULTIPLIERS,
    COLD_SEGMENTS,
    COLD_THRESHOLD,
    COMFORT_RANGE,
    DEEP_COLD_BASE,
    DEEP_COLD_RANGE,
    DEFAULT_ADOPTION_MULTIPLIER,
    EV_COLD_BELOW,
    EV_COLD_RANGE,
    EV_EVENING_WINDOW,
    EV_MAX,
    EV_MORNING_WINDOW,
    EXTREME_HEAT_BASE,
    EXTREME_HEAT_RANGE,
    HEAT_SEGMENTS,
    HEAT_THRESHOLD,
    HUMIDITY_AMPLIFIER_RANGE,
    HUMIDITY_AMPLIFIER_TEMP,
    MONDAY,
    MONDAY_MULTIPLIER,
    SATURDAY,
    SATURDAY_SCORE,
    SOLAR_CLOUD_RANGE,
    SOLAR_END_HOUR,
    SOLAR_PEAK_HOUR,
    SOLAR_POTENTIAL_RANGE,
    SOLAR_START_HOUR,
    SUNDAY,
    SUNDAY_SCORE,
    TEMP_MAX,
    TIME_OF_DAY_CURVE,
    WEEKDAY_SCORE,
    WIND_CALM_BELOW,
    WIND_SEGMENTS,
    WIND_STRONG_SCORE,
)


# ---------------------------------------------------------------------------
# Temperature
# ---------------------------------------------------------------------------

def temperature_score(temperature: float, humidity: float) -> float:
    """Heat and cold load, capped at 35.

    Cooling load ramps up non-linearly from 75F, with a humidity
    amplifier above 80F.  Heating load ramps up below 40F.  Between the
    two is a comfort zone with a small, falling baseline.
    """
    if temperature >= HEAT_THRESHOLD:
        score = _heat_score(temperature)
        if temperature > HUMIDITY_AMPLIFIER_TEMP:
            score += lerp_range(humidity, HUMIDITY_AMPLIFIER_RANGE)
    elif temperature <= COLD_THRESHOLD:
        score = _cold_score(temperature)
    else:
        score = lerp_range(temperature, COMFORT_RANGE)

    return min(TEMP_MAX, score)


def _heat_score(temperature: float) -> float:
    for low, high, out_low, out_high in HEAT_SEGMENTS:
        if temperature < high:
            return lerp(temperature, low, high, out_low, out_high)
    # Past the last breakpoint the ramp keeps climbing a little
    return EXTREME_HEAT_BASE + lerp_range(temperature, EXTREME_HEAT_RANGE)


def _cold_score(temperature: float) -> float:
    for low, high, out_low, out_high in COLD_SEGMENTS:
        if temperature > low:
            return lerp(temperature, low, high, out_low, out_high)
    return DEEP_COLD_BASE + lerp_range(temperature, DEEP_COLD_RANGE)


# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------

def time_of_day_score(hour: float) -> float:
    """Duck-curve demand shape, peaking at 30 around 5pm."""
    return interpolate_anchors(hour, TIME_OF_DAY_CURVE)


def day_of_week_score(day_of_week: int) -> float:
    """Weekday commercial and industrial load; weekends are lighter."""
    if day_of_week == SUNDAY:
        return SUNDAY_SCORE
    if day_of_week == SATURDAY:
        return SATURDAY_SCORE
    return WEEKDAY_SCORE


# ---------------------------------------------------------------------------
# Supply side
# ---------------------------------------------------------------------------

def wind_score(wind_speed: float) -> float:
    """Wind relief in ``[-10, 0]``; never adds stress."""
    if wind_speed < WIND_CALM_BELOW:
        return 0.0
    for low, high, out_low, out_high in WIND_SEGMENTS:
        if wind_speed < high:
            return lerp(wind_speed, low, high, out_low, out_high)
    return WIND_STRONG_SCORE


def solar_score(hour: float, cloud_cover: float) -> float:
    """Solar shortfall from cloud cover during generation hours, max 12.

    Cloud cover is weighted by solar potential, which is 1.0 at 1pm and
    falls to 0.2 five hours either side.
    """
    if hour < SOLAR_START_HOUR or hour >= SOLAR_END_HOUR:
        return 0.0
    potential = lerp_range(abs(hour - SOLAR_PEAK_HOUR), SOLAR_POTENTIAL_RANGE)
    return lerp_range(cloud_cover, SOLAR_CLOUD_RANGE) * potential


# ---------------------------------------------------------------------------
# EV charging
# ---------------------------------------------------------------------------

def adoption_multiplier(ev_adoption: str) -> float:
    """Multiplier for an adoption level; unknown levels are neutral."""
    return ADOPTION_MULTIPLIERS.get(ev_adoption, DEFAULT_ADOPTION_MULTIPLIER)


def charging_pressure(hour: float) -> float:
    """Base charging demand: evening arrivals and a morning preconditioning pulse."""
    for start, end, out_start, out_end in (EV_EVENING_WINDOW, EV_MORNING_WINDOW):
        if start <= hour < end:
            return lerp(hour, start, end, out_start, out_end)
    return 0.0


def cold_multiplier(temperature: float) -> float:
    """Range-anxiety top-off: drivers charge harder below 40F."""
    if temperature < EV_COLD_BELOW:
        return 1.0 + lerp_range(temperature, EV_COLD_RANGE)
    return 1.0


def ev_charging_score(
    hour: float,
    day_of_week: int,
    temperature: float,
    ev_adoption: str,
) -> float:
    """EV charging pressure, capped at 15.

    Monday carries a small bump from weekend battery depletion.
    """
    monday = MONDAY_MULTIPLIER if day_of_week == MONDAY else 1.0
    score = (
        charging_pressure(hour)
        * adoption_multiplier(ev_adoption)
        * cold_multiplier(temperature)
        * monday
    )
    return min(EV_MAX, score)
