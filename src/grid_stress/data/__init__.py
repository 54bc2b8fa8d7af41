# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data models and scenario presets."""

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

__all__ = [
    "Advisory",
    "EVAdoption",
    "ForecastResult",
    "HourlyStress",
    "SCENARIOS",
    "Scenario",
    "StressBreakdown",
    "StressInput",
    "StressLevel",
    "StressResult",
    "get_scenario",
]
