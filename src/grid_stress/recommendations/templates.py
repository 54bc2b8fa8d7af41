# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Advisory template definitions.

Each template carries a static title, a description template string
with ``{placeholder}`` fields, and metadata used for sorting and
display (category, urgency).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AdvisoryTemplate:
    """Immutable template for a single advisory type."""

    title: str
    description_template: str
    category: str
    urgency: str  # "low", "medium", "high"


CRITICAL_CONDITIONS = AdvisoryTemplate(
    title="Critical Grid Stress Expected",
    description_template=(
        "Stress index is {score}/100 ({level}). Activate demand-response "
        "programs, confirm reserve availability, and defer discretionary "
        "load until conditions ease."
    ),
    category="operations",
    urgency="high",
)

HEAT_LOAD = AdvisoryTemplate(
    title="Pre-Cool Ahead of Heat Load",
    description_template=(
        "At {temperature:.0f}°F with {humidity:.0f}% humidity, cooling "
        "load contributes {component:.1f} of 35 points. Pre-cool buildings "
        "before the afternoon ramp and raise thermostat setpoints during "
        "the peak."
    ),
    category="cooling",
    urgency="high",
)

COLD_LOAD = AdvisoryTemplate(
    title="Stage Heating Load",
    description_template=(
        "At {temperature:.0f}°F, heating load contributes "
        "{component:.1f} of 35 points. Stagger heat-pump recovery and "
        "pre-heat during low-demand hours to flatten the morning ramp."
    ),
    category="heating",
    urgency="medium",
)

EVENING_PEAK = AdvisoryTemplate(
    title="Shift Load Out of the Evening Peak",
    description_template=(
        "The 24-hour profile stays at or above High from {window_start} to "
        "{window_end} (peak {peak_score}/100 at {peak_hour}). Move flexible load "
        "out of this window and schedule storage discharge inside it."
    ),
    category="scheduling",
    urgency="high",
)

MANAGED_CHARGING = AdvisoryTemplate(
    title="Enable Managed EV Charging",
    description_template=(
        "EV charging pressure adds {component:.1f} of 15 points with "
        "{ev_adoption} adoption. Defer non-urgent charging to after 9pm "
        "or to midday solar hours."
    ),
    category="ev_charging",
    urgency="medium",
)

SOLAR_SHORTFALL = AdvisoryTemplate(
    title="Cover the Solar Shortfall",
    description_template=(
        "{cloud_cover:.0f}% cloud cover removes solar supply worth "
        "{component:.1f} of 12 points. Schedule dispatchable generation "
        "or storage to cover midday demand."
    ),
    category="supply",
    urgency="medium",
)

WIND_RELIEF = AdvisoryTemplate(
    title="Use Available Wind Supply",
    description_template=(
        "Wind at {wind_speed:.0f} mph relieves {relief:.1f} points of "
        "stress. Favour charging and storage top-up while wind output "
        "is high."
    ),
    category="supply",
    urgency="low",
)
