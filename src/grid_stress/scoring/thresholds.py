# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Severity thresholds and level/color mappings.

Scores are banded as:

    0-29   Low        (green)
    30-59  Moderate   (yellow)
    60-79  High       (orange)
    80-100 Critical   (red)
"""

from grid_stress.data.models import StressLevel

# ---------------------------------------------------------------------------
# Level thresholds (score -> severity)
# ---------------------------------------------------------------------------
MODERATE_MIN = 30
HIGH_MIN = 60
CRITICAL_MIN = 80
# Below 30 = Low


# ---------------------------------------------------------------------------
# Utility functions
# ---------------------------------------------------------------------------

def score_to_level(score: float) -> StressLevel:
    """Convert a 0-100 stress score to its severity level.

    The returned :class:`StressLevel` carries both the display ``label``
    and the hex ``color``.
    """
    if score < MODERATE_MIN:
        return StressLevel.low
    if score < HIGH_MIN:
        return StressLevel.moderate
    if score < CRITICAL_MIN:
        return StressLevel.high
    return StressLevel.critical


def score_to_color(score: float) -> str:
    """Convert a 0-100 stress score to its hex display color."""
    return score_to_level(score).color
