# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Operating advisories derived from stress scores and forecasts."""

from grid_stress.recommendations.engine import AdvisoryEngine

__all__ = ["AdvisoryEngine"]
