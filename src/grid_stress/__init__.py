# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Grid Stress - weather-driven grid stress index and 24-hour forecast."""

__version__ = "0.1.0"

from grid_stress.data.models import (
    Advisory,
    EVAdoption,
    ForecastResult,
    HourlyStress,
    StressBreakdown,
    StressInput,
    StressLevel,
    StressResult,
)
from grid_stress.data.scenarios import SCENARIOS, Scenario, get_scenario
from grid_stress.scoring.engine import (
    StressScorer,
    calculate_stress_score,
    evaluate,
    score_breakdown,
)
from grid_stress.scoring.forecast import ForecastGenerator, generate_24_hour_forecast
from grid_stress.scoring.thresholds import score_to_level
from grid_stress.recommendations.engine import AdvisoryEngine

__all__ = [
    "Advisory",
    "AdvisoryEngine",
    "EVAdoption",
    "ForecastGenerator",
    "ForecastResult",
    "HourlyStress",
    "SCENARIOS",
    "Scenario",
    "StressBreakdown",
    "StressInput",
    "StressLevel",
    "StressResult",
    "StressScorer",
    "calculate_stress_score",
    "evaluate",
    "generate_24_hour_forecast",
    "get_scenario",
    "score_breakdown",
    "score_to_level",
]
