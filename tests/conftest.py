# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the grid stress test suite."""

from __future__ import annotations

import pytest

from grid_stress.data.models import ForecastResult, StressInput, StressResult
from grid_stress.data.scenarios import get_scenario
from grid_stress.scoring.engine import StressScorer
from grid_stress.scoring.forecast import ForecastGenerator


@pytest.fixture()
def scorer() -> StressScorer:
    return StressScorer()


@pytest.fixture()
def heat_wave() -> StressInput:
    """Hot, windless, high-EV Tuesday at 5pm."""
    return get_scenario("heat_wave").conditions


@pytest.fixture()
def spring_morning() -> StressInput:
    """Mild Sunday at 3am with low EV adoption."""
    return get_scenario("spring_morning").conditions


@pytest.fixture()
def winter_freeze() -> StressInput:
    """10F Monday at 7am with medium EV adoption."""
    return get_scenario("winter_freeze").conditions


@pytest.fixture()
def heat_wave_result(scorer: StressScorer, heat_wave: StressInput) -> StressResult:
    return scorer.evaluate(heat_wave)


@pytest.fixture()
def heat_wave_forecast(scorer: StressScorer, heat_wave: StressInput) -> ForecastResult:
    return ForecastGenerator(scorer).profile(heat_wave)
