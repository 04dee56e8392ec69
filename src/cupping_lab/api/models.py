# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""API request/response Pydantic models for the REST interface."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from cupping_lab.data.models import RoastResult, SampleInfo, ScoreResult


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class ScoreRequest(BaseModel):
    """Request body shared by the four scoring endpoints."""

    values: dict[str, Any] = Field(
        default_factory=dict,
        description="Raw form values; blank or unreadable numbers count as 0.",
    )
    info: dict[str, Any] = Field(
        default_factory=dict,
        description="Optional sample metadata (name, origin, variety, ...).",
    )


class SessionSummaryRequest(BaseModel):
    """Request body for the ``POST /api/v1/session-summary`` endpoint."""

    evaluations: list[dict[str, Any]] = Field(
        ..., description="Raw evaluation form records, one per sample."
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class ScoreResponse(BaseModel):
    """Response body returned by the cupping scoring endpoints."""

    info: SampleInfo
    result: ScoreResult


class RoastResponse(BaseModel):
    """Response body returned by the ``POST /api/v1/roast`` endpoint."""

    info: SampleInfo
    result: RoastResult


class HealthResponse(BaseModel):
    """Response body returned by the ``GET /api/v1/health`` endpoint."""

    status: str = Field(default="ok", description="Service health status.")
    version: str = Field(..., description="Installed cupping-lab version.")
    variants: list[str] = Field(
        default_factory=list, description="Scoring variants served by this API."
    )
