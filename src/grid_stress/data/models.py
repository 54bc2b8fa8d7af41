# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core Pydantic v2 data models for the grid stress tool.

This module defines the data contract shared by the scoring, forecast,
advisory, reporting, CLI and API layers.  Inputs are deliberately loose:
numeric fields carry no range constraints because the scorer clamps
every sub-score itself and must keep working when a caller drags a
value past its nominal range.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class EVAdoption(str, Enum):
    """Regional electric-vehicle adoption level."""

    low = "low"
    medium = "medium"
    high = "high"


class StressLevel(str, Enum):
    """Severity band derived from a 0-100 stress score."""

    low = "Low"
    moderate = "Moderate"
    high = "High"
    critical = "Critical"

    @property
    def label(self) -> str:
        """Display label for this level."""
        return self.value

    @property
    def color(self) -> str:
        """Hex display color associated with this level."""
        return _LEVEL_COLORS[self]

    @property
    def style(self) -> str:
        """Rich terminal style associated with this level."""
        return _LEVEL_STYLES[self]


_LEVEL_COLORS = {
    StressLevel.low: "#22c55e",
    StressLevel.moderate: "#eab308",
    StressLevel.high: "#f97316",
    StressLevel.critical: "#ef4444",
}

_LEVEL_STYLES = {
    StressLevel.low: "green",
    StressLevel.moderate: "yellow",
    StressLevel.high: "dark_orange",
    StressLevel.critical: "red",
}


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

class StressInput(BaseModel):
    """Weather and calendar conditions for a single stress evaluation.

    Field aliases follow the camelCase keys of the browser demo, so
    ``{"dayOfWeek": 2, "windSpeed": 3}`` and
    ``{"day_of_week": 2, "wind_speed": 3}`` both validate.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    temperature: float = Field(
        default=72.0, description="Air temperature in degrees Fahrenheit"
    )
    humidity: float = Field(
        default=50.0, description="Relative humidity (0-100)"
    )
    hour: int = Field(
        default=12, description="Hour of day (0-23)"
    )
    day_of_week: int = Field(
        default=2, alias="dayOfWeek",
        description="Day of week (0-6, 0 = Sunday)",
    )
    wind_speed: float = Field(
        default=8.0, alias="windSpeed", description="Wind speed in mph"
    )
    cloud_cover: float = Field(
        default=30.0, alias="cloudCover", description="Cloud cover (0-100)"
    )
    ev_adoption: str = Field(
        default=EVAdoption.medium.value, alias="evAdoption",
        description="EV adoption level: low, medium, or high",
    )

    def at_hour(self, hour: int) -> StressInput:
        """Return a copy of these conditions with *hour* replaced."""
        return self.model_copy(update={"hour": hour})


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class StressBreakdown(BaseModel):
    """Per-component contributions to a single stress score."""

    model_config = {"frozen": True}

    temperature: float = Field(..., description="Heat / cold load (0-35)")
    time_of_day: float = Field(..., description="Daily demand curve (0-30)")
    day_of_week: float = Field(..., description="Weekday / weekend load")
    wind: float = Field(..., description="Wind relief (-10-0)")
    solar: float = Field(..., description="Solar depletion by cloud cover (0-12)")
    ev_charging: float = Field(..., description="EV charging pressure (0-15)")
    raw_total: float = Field(..., description="Unrounded sum of all components")
    score: int = Field(..., ge=0, le=100, description="Final clamped score")
    level: StressLevel = Field(..., description="Severity band of the score")

    def components(self) -> dict[str, float]:
        """Return the six component values keyed by name, in scoring order."""
        return {
            "temperature": self.temperature,
            "time_of_day": self.time_of_day,
            "day_of_week": self.day_of_week,
            "wind": self.wind,
            "solar": self.solar,
            "ev_charging": self.ev_charging,
        }


class StressResult(BaseModel):
    """Complete output of a single stress evaluation."""

    model_config = {"frozen": True}

    input: StressInput = Field(..., description="The conditions that were scored")
    score: int = Field(..., ge=0, le=100, description="Grid stress index (0-100)")
    level: StressLevel = Field(..., description="Severity band")
    breakdown: StressBreakdown = Field(..., description="Component contributions")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def color(self) -> str:
        """Hex display color for the severity band."""
        return self.level.color


class HourlyStress(BaseModel):
    """Stress score for one hour of a forecast profile."""

    model_config = {"frozen": True}

    hour: int = Field(..., ge=0, le=23)
    score: int = Field(..., ge=0, le=100)
    level: StressLevel


class ForecastResult(BaseModel):
    """A 24-hour stress profile with weather held constant."""

    model_config = {"frozen": True}

    input: StressInput = Field(..., description="Base conditions; hour is swept")
    hours: list[HourlyStress] = Field(
        ..., min_length=24, max_length=24,
        description="One entry per hour, index = hour of day",
    )
    stress_windows: list[tuple[int, int]] = Field(
        default_factory=list,
        description="Half-open [start, end) hour ranges at or above High",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def scores(self) -> list[int]:
        """Bare score sequence, index = hour of day."""
        return [h.score for h in self.hours]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def peak_hour(self) -> int:
        """Earliest hour carrying the highest score."""
        scores = self.scores
        return scores.index(max(scores))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def peak_score(self) -> int:
        """Highest hourly score."""
        return max(self.scores)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mean_score(self) -> float:
        """Average hourly score."""
        return round(sum(self.scores) / len(self.scores), 2)


class Advisory(BaseModel):
    """A single operating advisory derived from the stress picture."""

    model_config = {"frozen": False, "populate_by_name": True}

    rank: int = Field(..., ge=1, description="Priority rank (1 = most urgent)")
    title: str = Field(..., description="Short actionable title")
    description: str = Field(..., description="Explanation with the driving numbers")
    category: str = Field(..., description="Load area the advisory addresses")
    urgency: str = Field(
        ..., pattern=r"^(low|medium|high)$",
        description="Urgency: low, medium, or high",
    )
    trigger: str = Field(..., description="Component or forecast feature that fired")
