# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""24-hour stress profiles.

The forecast holds every weather input constant and steps the hour
through the clock, so it shows how the demand curve, solar window and
EV charging windows shape the day under fixed conditions.
"""

from __future__ import annotations

from typing import Sequence

from grid_stress.data.models import ForecastResult, HourlyStress
from grid_stress.scoring.engine import InputLike, StressScorer, as_input
from grid_stress.scoring.thresholds import HIGH_MIN, score_to_level

HOURS_PER_DAY = 24


def find_stress_windows(
    scores: Sequence[int], threshold: int = HIGH_MIN
) -> list[tuple[int, int]]:
    """Return maximal runs of hours scoring at or above *threshold*.

    Each run is a half-open ``(start, end)`` hour range, so
    ``(16, 20)`` covers 4pm through 7pm.
    """
    windows: list[tuple[int, int]] = []
    start: int | None = None
    for hour, score in enumerate(scores):
        if score >= threshold:
            if start is None:
                start = hour
        elif start is not None:
            windows.append((start, hour))
            start = None
    if start is not None:
        windows.append((start, len(scores)))
    return windows


class ForecastGenerator:
    """Produces hourly stress profiles from a single set of conditions.

    Usage::

        generator = ForecastGenerator()
        scores = generator.forecast(conditions)      # list of 24 ints
        profile = generator.profile(conditions)      # ForecastResult
    """

    def __init__(self, scorer: StressScorer | None = None) -> None:
        self.scorer = scorer or StressScorer()

    def forecast(self, conditions: InputLike) -> list[int]:
        """Return 24 scores; index *i* is the score at hour *i*."""
        inp = as_input(conditions)
        return [self.scorer.score(inp.at_hour(hour)) for hour in range(HOURS_PER_DAY)]

    def profile(self, conditions: InputLike, threshold: int = HIGH_MIN) -> ForecastResult:
        """Return the forecast with levels, peak and stress windows."""
        inp = as_input(conditions)
        scores = self.forecast(inp)
        hours = [
            HourlyStress(hour=hour, score=score, level=score_to_level(score))
            for hour, score in enumerate(scores)
        ]
        return ForecastResult(
            input=inp,
            hours=hours,
            stress_windows=find_stress_windows(scores, threshold),
        )


def generate_24_hour_forecast(conditions: InputLike) -> list[int]:
    """Return the 24-hour score sequence for *conditions*."""
    return ForecastGenerator().forecast(conditions)
