# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Weighted cupping score arithmetic.

SCA-style total: the weighted sum of ten sensory sub-scores minus a
per-defect penalty.  Nothing here clamps or validates; out-of-range input
produces out-of-range scores.
"""

from __future__ import annotations

from cupping_lab.data.models import CuppingAttributes, GreenBeanAttributes
from cupping_lab.scoring.profiles import ScoringProfile
from cupping_lab.scoring.weights import (
    GREEN_BASE_SCORE,
    GREEN_PRIMARY_WEIGHT,
    GREEN_SECONDARY_WEIGHT,
)


def defect_penalty(
    profile: ScoringProfile,
    attributes: CuppingAttributes,
    green: GreenBeanAttributes | None = None,
) -> float:
    """Points subtracted for defects under *profile*.

    Split-defect profiles charge the green bean's primary and secondary
    counts; all others charge the single cup defect count.
    """
    if profile.split_defects:
        green = green or GreenBeanAttributes()
        return (
            green.defects_primary * profile.primary_defect_penalty
            + green.defects_secondary * profile.secondary_defect_penalty
        )
    return attributes.defects * profile.defect_penalty


def cupping_total(
    profile: ScoringProfile,
    attributes: CuppingAttributes,
    green: GreenBeanAttributes | None = None,
) -> float:
    """Weighted sum of the sensory attributes less the defect penalty."""
    weights = profile.attribute_weights
    total = sum(
        value * weights.get(name, 1.0)
        for name, value in attributes.sensory_values().items()
    )
    return total - defect_penalty(profile, attributes, green)


def green_score(green: GreenBeanAttributes) -> float:
    """Green bean score: 100 less primary defects and half the secondary."""
    return GREEN_BASE_SCORE - (
        green.defects_primary * GREEN_PRIMARY_WEIGHT
        + green.defects_secondary * GREEN_SECONDARY_WEIGHT
    )


def final_score(
    profile: ScoringProfile,
    attributes: CuppingAttributes,
    green: GreenBeanAttributes | None = None,
) -> float:
    """Unrounded final score for *profile*.

    Applies the green-bean blend and the floor where the profile asks for
    them.  Rounding is left to the caller so that bucket classification
    sees the exact value.
    """
    score = cupping_total(profile, attributes, green)
    if profile.blends_green:
        score = (
            score * profile.cupping_weight
            + green_score(green or GreenBeanAttributes()) * profile.green_weight
        )
    if profile.floor is not None:
        score = max(profile.floor, score)
    return score
