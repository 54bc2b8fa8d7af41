# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""FastAPI router with REST endpoints for the grid stress API."""

from __future__ import annotations

import logging

from grid_stress.api import check_dependency

check_dependency("fastapi", "pip install -e '.[api]'")

from fastapi import APIRouter, Depends, HTTPException  # noqa: E402

from grid_stress.api.models import (  # noqa: E402
    AdvisoryResponse,
    ForecastResponse,
    HealthResponse,
    LevelResponse,
    ScenarioResponse,
    ScoreResponse,
)
from grid_stress.data.models import StressInput  # noqa: E402
from grid_stress.data.scenarios import SCENARIOS, Scenario, get_scenario  # noqa: E402
from grid_stress.recommendations.engine import AdvisoryEngine  # noqa: E402
from grid_stress.scoring.engine import StressScorer  # noqa: E402
from grid_stress.scoring.forecast import ForecastGenerator  # noqa: E402
from grid_stress.scoring.thresholds import score_to_level  # noqa: E402

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["grid-stress"])


# ---------------------------------------------------------------------------
# Dependency injection -- scorer
# ---------------------------------------------------------------------------

def get_scorer() -> StressScorer:
    """Return the scorer used by the endpoints.

    Exposed as a FastAPI dependency so it can be overridden in tests or
    custom deployments.
    """
    return StressScorer()


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _scenario_response(scenario: Scenario, scorer: StressScorer) -> ScenarioResponse:
    score = scorer.score(scenario.conditions)
    return ScenarioResponse(
        name=scenario.name,
        description=scenario.description,
        conditions=scenario.conditions,
        score=score,
        label=score_to_level(score).label,
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return service health status and version information."""
    import grid_stress

    return HealthResponse(status="ok", version=grid_stress.__version__)


@router.post("/score", response_model=ScoreResponse)
async def score(
    conditions: StressInput,
    scorer: StressScorer = Depends(get_scorer),
) -> ScoreResponse:
    """Score one set of conditions."""
    result = scorer.evaluate(conditions)
    logger.debug("Scored %s -> %d", conditions, result.score)
    return ScoreResponse(
        score=result.score,
        label=result.level.label,
        color=result.color,
        breakdown=result.breakdown,
    )


@router.post("/forecast", response_model=ForecastResponse)
async def forecast(
    conditions: StressInput,
    scorer: StressScorer = Depends(get_scorer),
) -> ForecastResponse:
    """Return the 24-hour profile with weather held constant."""
    profile = ForecastGenerator(scorer).profile(conditions)
    return ForecastResponse(
        scores=profile.scores,
        labels=[h.level.label for h in profile.hours],
        peak_hour=profile.peak_hour,
        peak_score=profile.peak_score,
        mean_score=profile.mean_score,
        stress_windows=profile.stress_windows,
    )


@router.get("/level/{score}", response_model=LevelResponse)
async def level(score: int) -> LevelResponse:
    """Classify a score into its severity level and color."""
    lvl = score_to_level(score)
    return LevelResponse(score=score, label=lvl.label, color=lvl.color)


@router.get("/scenarios", response_model=list[ScenarioResponse])
async def list_scenarios(
    scorer: StressScorer = Depends(get_scorer),
) -> list[ScenarioResponse]:
    """List the scenario presets with their scores."""
    return [_scenario_response(s, scorer) for s in SCENARIOS.values()]


@router.get("/scenarios/{name}", response_model=ScenarioResponse)
async def scenario(
    name: str,
    scorer: StressScorer = Depends(get_scorer),
) -> ScenarioResponse:
    """Return one scenario preset with its score."""
    try:
        found = get_scenario(name)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=exc.args[0]) from exc
    return _scenario_response(found, scorer)


@router.post("/advisories", response_model=AdvisoryResponse)
async def advisories(
    conditions: StressInput,
    scorer: StressScorer = Depends(get_scorer),
) -> AdvisoryResponse:
    """Score the conditions and return ranked operating advisories."""
    try:
        result = scorer.evaluate(conditions)
        profile = ForecastGenerator(scorer).profile(conditions)
        items = AdvisoryEngine().generate(result, profile)
    except Exception as exc:
        raise HTTPException(
            status_code=500, detail=f"Advisory generation failed: {exc}"
        ) from exc
    return AdvisoryResponse(
        score=result.score, label=result.level.label, advisories=items
    )
