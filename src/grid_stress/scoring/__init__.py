# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scoring engine for the grid stress index."""

from grid_stress.scoring.engine import (
    StressScorer,
    calculate_stress_score,
    evaluate,
    score_breakdown,
)
from grid_stress.scoring.forecast import (
    ForecastGenerator,
    find_stress_windows,
    generate_24_hour_forecast,
)
from grid_stress.scoring.thresholds import score_to_level

__all__ = [
    "ForecastGenerator",
    "StressScorer",
    "calculate_stress_score",
    "evaluate",
    "find_stress_windows",
    "generate_24_hour_forecast",
    "score_breakdown",
    "score_to_level",
]
