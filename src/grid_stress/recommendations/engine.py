# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Advisory engine.

Inspects a scored :class:`~grid_stress.data.models.StressResult` and,
optionally, its 24-hour forecast, and produces a ranked list of
:class:`~grid_stress.data.models.Advisory` objects from fixed templates.
"""

from __future__ import annotations

import logging

from grid_stress.data.models import Advisory, ForecastResult, StressLevel, StressResult
from grid_stress.recommendations.templates import (
    COLD_LOAD,
    CRITICAL_CONDITIONS,
    EVENING_PEAK,
    HEAT_LOAD,
    MANAGED_CHARGING,
    SOLAR_SHORTFALL,
    WIND_RELIEF,
    AdvisoryTemplate,
)
from grid_stress.reporting.ascii_charts import format_hour
from grid_stress.scoring.weights import COLD_THRESHOLD, HEAT_THRESHOLD

logger = logging.getLogger(__name__)

# Maximum number of advisories to return.
MAX_ADVISORIES = 8

# Component levels at which an advisory fires.
HEAT_COMPONENT_MIN = 20.0
COLD_COMPONENT_MIN = 15.0
EV_COMPONENT_MIN = 5.0
SOLAR_COMPONENT_MIN = 6.0
WIND_RELIEF_MAX = -5.0

# Evening peak hours checked against forecast stress windows.
EVENING_PEAK_HOURS = (17, 20)

_URGENCY_ORDER = {"high": 0, "medium": 1, "low": 2}


class AdvisoryEngine:
    """Generate ranked operating advisories for a stress evaluation.

    Usage::

        engine = AdvisoryEngine()
        advisories = engine.generate(result, forecast)
    """

    def generate(
        self,
        result: StressResult,
        forecast: ForecastResult | None = None,
    ) -> list[Advisory]:
        """Generate advisories for *result*.

        Parameters
        ----------
        result:
            The scored conditions.
        forecast:
            Optional 24-hour profile for the same conditions; enables the
            evening-peak advisory.

        Returns
        -------
        list[Advisory]
            Up to ``MAX_ADVISORIES`` advisories ordered by urgency (high
            first), ties kept in template order.
        """
        inp = result.input
        bd = result.breakdown
        candidates: list[tuple[AdvisoryTemplate, str, str]] = []

        if result.level is StressLevel.critical:
            candidates.append((
                CRITICAL_CONDITIONS,
                CRITICAL_CONDITIONS.description_template.format(
                    score=result.score, level=result.level.label
                ),
                "score",
            ))

        if inp.temperature >= HEAT_THRESHOLD and bd.temperature >= HEAT_COMPONENT_MIN:
            candidates.append((
                HEAT_LOAD,
                HEAT_LOAD.description_template.format(
                    temperature=inp.temperature,
                    humidity=inp.humidity,
                    component=bd.temperature,
                ),
                "temperature",
            ))

        if inp.temperature <= COLD_THRESHOLD and bd.temperature >= COLD_COMPONENT_MIN:
            candidates.append((
                COLD_LOAD,
                COLD_LOAD.description_template.format(
                    temperature=inp.temperature, component=bd.temperature
                ),
                "temperature",
            ))

        if forecast is not None:
            window = _evening_window(forecast)
            if window is not None:
                candidates.append((
                    EVENING_PEAK,
                    EVENING_PEAK.description_template.format(
                        window_start=format_hour(window[0]),
                        window_end=format_hour(window[1] % 24),
                        peak_score=forecast.peak_score,
                        peak_hour=format_hour(forecast.peak_hour),
                    ),
                    "forecast",
                ))

        if bd.ev_charging >= EV_COMPONENT_MIN:
            candidates.append((
                MANAGED_CHARGING,
                MANAGED_CHARGING.description_template.format(
                    component=bd.ev_charging, ev_adoption=inp.ev_adoption
                ),
                "ev_charging",
            ))

        if bd.solar >= SOLAR_COMPONENT_MIN:
            candidates.append((
                SOLAR_SHORTFALL,
                SOLAR_SHORTFALL.description_template.format(
                    cloud_cover=inp.cloud_cover, component=bd.solar
                ),
                "solar",
            ))

        if bd.wind <= WIND_RELIEF_MAX:
            candidates.append((
                WIND_RELIEF,
                WIND_RELIEF.description_template.format(
                    wind_speed=inp.wind_speed, relief=-bd.wind
                ),
                "wind",
            ))

        # sorted() is stable, so equal urgencies keep template order
        candidates = sorted(candidates, key=lambda c: _URGENCY_ORDER[c[0].urgency])

        advisories = [
            Advisory(
                rank=rank,
                title=template.title,
                description=description,
                category=template.category,
                urgency=template.urgency,
                trigger=trigger,
            )
            for rank, (template, description, trigger) in enumerate(
                candidates[:MAX_ADVISORIES], start=1
            )
        ]
        logger.debug(
            "Generated %d advisories for score %d", len(advisories), result.score
        )
        return advisories


def _evening_window(forecast: ForecastResult) -> tuple[int, int] | None:
    """Return the first stress window overlapping the evening peak hours."""
    peak_start, peak_end = EVENING_PEAK_HOURS
    for start, end in forecast.stress_windows:
        if start < peak_end and end > peak_start:
            return start, end
    return None
