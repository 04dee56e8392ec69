# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Master scoring orchestrator for the cupping lab.

Selects the scoring profile for a caller, computes the final score,
classifies it against that caller's bucket table, and appends the
conditional advisories.
"""

from __future__ import annotations

import logging
from typing import Mapping, TypeVar

from pydantic import BaseModel

from cupping_lab.data.models import (
    CuppingAttributes,
    GreenBeanAttributes,
    RoastParameters,
    RoastResult,
    ScoreResult,
    Variant,
)
from cupping_lab.recommendations.engine import RecommendationEngine
from cupping_lab.scoring.cupping import final_score
from cupping_lab.scoring.profiles import ScoringProfile, get_profile
from cupping_lab.scoring.roast import analyze_roast
from cupping_lab.scoring.thresholds import classify, round_half_up

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ScoringEngine:
    """Scores samples for each of the four callers.

    Usage::

        engine = ScoringEngine()
        result = engine.score_cupping(attributes)
        print(result.score, result.grade, result.recommendations)

    The engine holds no per-call state; one instance may be shared
    freely and returns equal results for equal input.
    """

    def __init__(self, recommender: RecommendationEngine | None = None) -> None:
        self.recommender = recommender or RecommendationEngine()

    # ------------------------------------------------------------------
    # Per-caller entry points
    # ------------------------------------------------------------------

    def score_quality(
        self,
        attributes: CuppingAttributes,
        green: GreenBeanAttributes,
    ) -> ScoreResult:
        """Combined quality calculator: cupping blended with green grading."""
        return self._score(get_profile(Variant.quality), attributes, green)

    def score_cupping(self, attributes: CuppingAttributes) -> ScoreResult:
        """Standalone cupping calculator."""
        return self._score(get_profile(Variant.cupping), attributes)

    def score_evaluation(self, attributes: CuppingAttributes) -> ScoreResult:
        """Live evaluation form: floored raw score, no grade label."""
        return self._score(get_profile(Variant.evaluation), attributes)

    def analyze_roast(self, params: RoastParameters) -> RoastResult:
        """Roast calculator: roast level, development ratio and advisories."""
        result = analyze_roast(params, self.recommender)
        logger.debug(
            "roast scored: %s ratio=%.2f",
            result.roast_profile.value,
            result.development_ratio,
        )
        return result

    def score(
        self, variant: Variant | str, values: Mapping[str, float]
    ) -> ScoreResult | RoastResult:
        """Score a flat mapping of already-normalized values.

        *values* must hold numbers; run raw form input through
        :mod:`cupping_lab.data.normalize` first.  Non-numeric values raise
        :class:`pydantic.ValidationError` rather than being guessed at.
        """
        variant = Variant(variant)
        if variant is Variant.roast:
            return self.analyze_roast(_pick(RoastParameters, values))
        attributes = _pick(CuppingAttributes, values)
        if variant is Variant.quality:
            return self.score_quality(attributes, _pick(GreenBeanAttributes, values))
        if variant is Variant.cupping:
            return self.score_cupping(attributes)
        return self.score_evaluation(attributes)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _score(
        self,
        profile: ScoringProfile,
        attributes: CuppingAttributes,
        green: GreenBeanAttributes | None = None,
    ) -> ScoreResult:
        raw = final_score(profile, attributes, green)

        grade: str | None = None
        description = ""
        recommendations: list[str] = []
        if profile.buckets is not None:
            bucket = classify(raw, profile.buckets)
            grade = bucket.label
            description = bucket.description
            recommendations.extend(bucket.details)

            values: dict[str, float] = dict(attributes.sensory_values())
            values["defects"] = attributes.defects
            if green is not None:
                values.update(green.model_dump())
            recommendations.extend(self.recommender.generate(profile.variant, values))

        score = round_half_up(raw, 1)
        logger.debug(
            "%s scored: raw=%r score=%.1f grade=%s",
            profile.variant.value, raw, score, grade,
        )
        return ScoreResult(
            variant=profile.variant,
            score=score,
            grade=grade,
            quality_description=description,
            recommendations=tuple(recommendations),
        )


def _pick(model: type[ModelT], values: Mapping[str, float]) -> ModelT:
    """Build *model* from the keys of *values* it declares."""
    return model(**{k: v for k, v in values.items() if k in model.model_fields})
