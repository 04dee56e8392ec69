# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Roast profile classification.

Derives the roast level from the drop temperature, computes the
development ratio, and runs the roast advisory rules.
"""

from __future__ import annotations

from cupping_lab.data.models import RoastParameters, RoastResult, Variant
from cupping_lab.recommendations.engine import RecommendationEngine
from cupping_lab.scoring.thresholds import ROAST_BUCKETS, classify, round_half_up


def development_ratio(development_time: float, first_crack_time: float) -> float:
    """Development time over time-to-first-crack, rounded to 2 decimals.

    Returns 0.0 when first crack was never logged (time <= 0).
    """
    if first_crack_time > 0:
        return round_half_up(development_time / first_crack_time, 2)
    return 0.0


def analyze_roast(
    params: RoastParameters,
    recommender: RecommendationEngine | None = None,
) -> RoastResult:
    """Classify a roast log and collect its indicators and advisories.

    The level's three descriptive indicators come first, followed by the
    rule-driven indicators (optimal ratio, large batch) in rule order.
    """
    recommender = recommender or RecommendationEngine()
    ratio = development_ratio(params.development_time, params.first_crack_time)
    bucket = classify(params.drop_temp, ROAST_BUCKETS)

    values = params.model_dump()
    values["development_ratio"] = ratio
    indicators, recommendations = recommender.split(Variant.roast, values)

    return RoastResult(
        roast_profile=bucket.label,
        development_ratio=ratio,
        quality_indicators=(*bucket.details, *indicators),
        recommendations=tuple(recommendations),
    )
