# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Recommendation engine.

Evaluates every advisory rule that applies to a variant against a flat
mapping of sample values.  Rules never short-circuit one another: each
is checked on its own and fired rules are emitted in template order.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from cupping_lab.data.models import Variant
from cupping_lab.recommendations.templates import ALL_RULES, AdvisoryRule

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """Generate advisory strings for a scored sample.

    Usage::

        engine = RecommendationEngine()
        advice = engine.generate(Variant.cupping, {"acidity": 3.0, ...})
    """

    def __init__(self, rules: Sequence[AdvisoryRule] = ALL_RULES) -> None:
        self.rules = tuple(rules)

    def fired(
        self, variant: Variant, values: Mapping[str, float]
    ) -> list[AdvisoryRule]:
        """Return every applicable rule whose condition holds, in order.

        Fields missing from *values* are skipped rather than read as zero;
        callers normalize input before it gets here.
        """
        matched: list[AdvisoryRule] = []
        for rule in self.rules:
            if variant not in rule.variants or rule.field not in values:
                continue
            if rule.matches(values[rule.field]):
                matched.append(rule)
        if matched:
            logger.debug(
                "%s advisories fired: %s",
                variant.value,
                ", ".join(rule.key for rule in matched),
            )
        return matched

    def generate(
        self, variant: Variant, values: Mapping[str, float]
    ) -> list[str]:
        """Return the recommendation messages for *values*."""
        return [
            rule.message
            for rule in self.fired(variant, values)
            if rule.kind == "recommendation"
        ]

    def split(
        self, variant: Variant, values: Mapping[str, float]
    ) -> tuple[list[str], list[str]]:
        """Return ``(indicators, recommendations)`` for *values*.

        Used by the roast calculator, whose rules emit both positive
        quality indicators and corrective recommendations.
        """
        indicators: list[str] = []
        recommendations: list[str] = []
        for rule in self.fired(variant, values):
            if rule.kind == "indicator":
                indicators.append(rule.message)
            else:
                recommendations.append(rule.message)
        return indicators, recommendations
