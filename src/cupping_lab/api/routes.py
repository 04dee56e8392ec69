# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""FastAPI router with REST endpoints for the cupping lab API."""

from __future__ import annotations

from cupping_lab.api import check_dependency

check_dependency("fastapi", "pip install -e '.[api]'")

from fastapi import APIRouter, Depends, HTTPException  # noqa: E402
from pydantic import ValidationError  # noqa: E402

from cupping_lab.api.models import (  # noqa: E402
    HealthResponse,
    RoastResponse,
    ScoreRequest,
    ScoreResponse,
    SessionSummaryRequest,
)
from cupping_lab.data.models import SampleInfo, SessionSummary, Variant  # noqa: E402
from cupping_lab.data.normalize import (  # noqa: E402
    extract_sample_info,
    normalize_cupping,
    normalize_green,
    normalize_roast,
)
from cupping_lab.scoring.engine import ScoringEngine  # noqa: E402
from cupping_lab.scoring.session import summarize_session  # noqa: E402

router = APIRouter(prefix="/api/v1", tags=["cupping-lab"])

_ENGINE = ScoringEngine()


# ---------------------------------------------------------------------------
# Dependency injection: scoring engine
# ---------------------------------------------------------------------------

def get_engine() -> ScoringEngine:
    """Return the shared scoring engine.

    Used as a FastAPI dependency so the engine can be overridden in tests
    or custom deployments.
    """
    return _ENGINE


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _sample_info(request: ScoreRequest) -> SampleInfo:
    try:
        return extract_sample_info(request.info)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _score(
    variant: Variant, request: ScoreRequest, engine: ScoringEngine
) -> ScoreResponse:
    info = _sample_info(request)
    attributes = normalize_cupping(request.values)
    if variant is Variant.quality:
        result = engine.score_quality(attributes, normalize_green(request.values))
    elif variant is Variant.cupping:
        result = engine.score_cupping(attributes)
    else:
        result = engine.score_evaluation(attributes)
    return ScoreResponse(info=info, result=result)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return service health status and version information."""
    import cupping_lab

    return HealthResponse(
        status="ok",
        version=cupping_lab.__version__,
        variants=[v.value for v in Variant],
    )


@router.post("/quality", response_model=ScoreResponse)
async def quality(
    request: ScoreRequest,
    engine: ScoringEngine = Depends(get_engine),
) -> ScoreResponse:
    """Combined quality score with a letter grade."""
    return _score(Variant.quality, request, engine)


@router.post("/cupping", response_model=ScoreResponse)
async def cupping(
    request: ScoreRequest,
    engine: ScoringEngine = Depends(get_engine),
) -> ScoreResponse:
    """Standalone cupping score with a quality grade."""
    return _score(Variant.cupping, request, engine)


@router.post("/evaluation", response_model=ScoreResponse)
async def evaluation(
    request: ScoreRequest,
    engine: ScoringEngine = Depends(get_engine),
) -> ScoreResponse:
    """Evaluation form total, floored at zero."""
    return _score(Variant.evaluation, request, engine)


@router.post("/roast", response_model=RoastResponse)
async def roast(
    request: ScoreRequest,
    engine: ScoringEngine = Depends(get_engine),
) -> RoastResponse:
    """Roast level, development ratio and roasting advisories."""
    info = _sample_info(request)
    result = engine.analyze_roast(normalize_roast(request.values))
    return RoastResponse(info=info, result=result)


@router.post("/session-summary", response_model=SessionSummary)
async def session_summary(request: SessionSummaryRequest) -> SessionSummary:
    """Summarize the evaluations recorded at one cupping table."""
    evaluations = [normalize_cupping(record) for record in request.evaluations]
    try:
        return summarize_session(evaluations)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
