# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""API response Pydantic models for the REST interface.

Request bodies reuse :class:`~grid_stress.data.models.StressInput`
directly, so clients may send either camelCase or snake_case keys.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from grid_stress.data.models import Advisory, StressBreakdown, StressInput


class ScoreResponse(BaseModel):
    """Response body returned by the ``POST /api/v1/score`` endpoint."""

    score: int = Field(
        ..., ge=0, le=100, description="Grid stress index (0-100)."
    )
    label: str = Field(
        ..., description="Severity label (Low, Moderate, High, Critical)."
    )
    color: str = Field(
        ..., description="Hex display color for the severity level."
    )
    breakdown: StressBreakdown = Field(
        ..., description="Per-component contributions."
    )


class ForecastResponse(BaseModel):
    """Response body returned by the ``POST /api/v1/forecast`` endpoint."""

    scores: list[int] = Field(
        ..., min_length=24, max_length=24,
        description="Hourly scores; index is the hour of day.",
    )
    labels: list[str] = Field(
        ..., description="Severity label for each hour."
    )
    peak_hour: int = Field(..., ge=0, le=23, description="Earliest highest-scoring hour.")
    peak_score: int = Field(..., ge=0, le=100, description="Highest hourly score.")
    mean_score: float = Field(..., ge=0, le=100, description="Average hourly score.")
    stress_windows: list[tuple[int, int]] = Field(
        default_factory=list,
        description="Half-open [start, end) hour ranges at or above High.",
    )


class LevelResponse(BaseModel):
    """Response body returned by the ``GET /api/v1/level/{score}`` endpoint."""

    score: int = Field(..., description="Score that was classified.")
    label: str = Field(..., description="Severity label.")
    color: str = Field(..., description="Hex display color.")


class ScenarioResponse(BaseModel):
    """A named scenario with its conditions and current score."""

    name: str
    description: str
    conditions: StressInput
    score: int = Field(..., ge=0, le=100)
    label: str


class AdvisoryResponse(BaseModel):
    """Response body returned by the ``POST /api/v1/advisories`` endpoint."""

    score: int = Field(..., ge=0, le=100)
    label: str
    advisories: list[Advisory] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Response body returned by the ``GET /api/v1/health`` endpoint."""

    status: str = Field(
        ..., description="Service health status (e.g. 'ok')."
    )
    version: str = Field(
        ..., description="Application version string."
    )
