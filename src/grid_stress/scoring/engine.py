# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Master scoring orchestrator for the grid stress index.

Delegates to the component scorers, sums their contributions, and
rounds and clamps the total to an integer score in 0-100.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from grid_stress.data.models import StressBreakdown, StressInput, StressResult
from grid_stress.scoring.components import (
    day_of_week_score,
    ev_charging_score,
    solar_score,
    temperature_score,
    time_of_day_score,
    wind_score,
)
from grid_stress.scoring.curves import clamp, round_half_up
from grid_stress.scoring.thresholds import score_to_level
from grid_stress.scoring.weights import SCORE_MAX, SCORE_MIN

logger = logging.getLogger(__name__)

InputLike = Union[StressInput, Mapping[str, Any]]


def as_input(conditions: InputLike) -> StressInput:
    """Coerce a mapping (snake_case or camelCase keys) into a StressInput."""
    if isinstance(conditions, StressInput):
        return conditions
    return StressInput.model_validate(conditions)


class StressScorer:
    """Computes the grid stress index for a set of conditions.

    The scorer holds no state; one instance can be shared freely.

    Usage::

        scorer = StressScorer()
        score = scorer.score(StressInput(temperature=102, hour=17))
        result = scorer.evaluate({"temperature": 102, "evAdoption": "high"})
    """

    def breakdown(self, conditions: InputLike) -> StressBreakdown:
        """Score every component and assemble the full breakdown."""
        inp = as_input(conditions)

        temperature = temperature_score(inp.temperature, inp.humidity)
        time_of_day = time_of_day_score(inp.hour)
        day = day_of_week_score(inp.day_of_week)
        wind = wind_score(inp.wind_speed)
        solar = solar_score(inp.hour, inp.cloud_cover)
        ev = ev_charging_score(
            inp.hour, inp.day_of_week, inp.temperature, inp.ev_adoption
        )

        raw_total = temperature + time_of_day + day + wind + solar + ev
        score = int(clamp(round_half_up(raw_total), SCORE_MIN, SCORE_MAX))

        logger.debug(
            "stress components temp=%.2f tod=%.2f day=%.2f wind=%.2f "
            "solar=%.2f ev=%.2f raw=%.3f score=%d",
            temperature, time_of_day, day, wind, solar, ev, raw_total, score,
        )

        return StressBreakdown(
            temperature=temperature,
            time_of_day=time_of_day,
            day_of_week=day,
            wind=wind,
            solar=solar,
            ev_charging=ev,
            raw_total=raw_total,
            score=score,
            level=score_to_level(score),
        )

    def score(self, conditions: InputLike) -> int:
        """Return the integer stress score (0-100) for *conditions*."""
        return self.breakdown(conditions).score

    def evaluate(self, conditions: InputLike) -> StressResult:
        """Score *conditions* and wrap the outcome in a StressResult."""
        inp = as_input(conditions)
        breakdown = self.breakdown(inp)
        return StressResult(
            input=inp,
            score=breakdown.score,
            level=breakdown.level,
            breakdown=breakdown,
        )


_DEFAULT_SCORER = StressScorer()


def calculate_stress_score(conditions: InputLike) -> int:
    """Return the grid stress index (0-100) for *conditions*."""
    return _DEFAULT_SCORER.score(conditions)


def score_breakdown(conditions: InputLike) -> StressBreakdown:
    """Return the per-component breakdown for *conditions*."""
    return _DEFAULT_SCORER.breakdown(conditions)


def evaluate(conditions: InputLike) -> StressResult:
    """Return the full :class:`StressResult` for *conditions*."""
    return _DEFAULT_SCORER.evaluate(conditions)
