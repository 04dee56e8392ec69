# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Batch file model and YAML loader.

A batch file describes one cupping table: session metadata plus a list of
samples, each naming the calculator to run and the raw form values to
feed it.  Raw values are kept as written and normalized at scoring time.
"""

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from cupping_lab.data.models import (
    CuppingAttributes,
    RoastResult,
    SampleInfo,
    ScoreResult,
    Variant,
)
from cupping_lab.data.normalize import (
    extract_sample_info,
    normalize_cupping,
    normalize_green,
    normalize_roast,
)
from cupping_lab.scoring.engine import ScoringEngine

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Session metadata
# ---------------------------------------------------------------------------

class SessionConfig(BaseModel):
    """Metadata for the cupping session a batch belongs to."""

    name: str = Field(default="Untitled session")
    cupper: str = Field(default="")
    date: dt.date | None = Field(default=None)
    session_type: str = Field(default="")
    location: str = Field(default="")
    environmental_conditions: str = Field(default="")
    notes: str = Field(default="")


# ---------------------------------------------------------------------------
# Sample entries
# ---------------------------------------------------------------------------

class BatchSample(BaseModel):
    """One sample to score."""

    variant: Variant
    info: dict[str, Any] = Field(
        default_factory=dict, description="Descriptive metadata (name, origin, ...)"
    )
    values: dict[str, Any] = Field(
        default_factory=dict, description="Raw form values, normalized before scoring"
    )

    def sample_info(self) -> SampleInfo:
        return extract_sample_info(self.info)

    def cupping_attributes(self) -> CuppingAttributes:
        return normalize_cupping(self.values)

    def score(self, engine: ScoringEngine) -> ScoreResult | RoastResult:
        """Normalize the raw values and run them through *engine*."""
        if self.variant is Variant.roast:
            return engine.analyze_roast(normalize_roast(self.values))
        attributes = self.cupping_attributes()
        if self.variant is Variant.quality:
            return engine.score_quality(attributes, normalize_green(self.values))
        if self.variant is Variant.cupping:
            return engine.score_cupping(attributes)
        return engine.score_evaluation(attributes)


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------

class BatchConfig(BaseModel):
    """Top-level batch configuration loaded from YAML."""

    session: SessionConfig = Field(default_factory=SessionConfig)
    samples: list[BatchSample] = Field(min_length=1)


def load_batch(path: str | Path) -> BatchConfig:
    """Load a BatchConfig from a YAML file.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    pydantic.ValidationError
        If the file content does not describe a valid batch.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Batch file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f)

    config = BatchConfig.model_validate(raw or {})
    logger.info(
        "Loaded batch '%s' with %d samples from %s",
        config.session.name, len(config.samples), config_path,
    )
    return config
