# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scoring profiles, one per caller.

A profile bundles everything that differs between the quality calculator,
the cupping calculator and the evaluation form: attribute weights, how
defects are charged, whether a green-bean score is blended in, the floor,
and the bucket table used for the grade label.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cupping_lab.data.models import Variant
from cupping_lab.scoring.thresholds import CUPPING_BUCKETS, QUALITY_BUCKETS, Bucket
from cupping_lab.scoring.weights import (
    ATTRIBUTE_WEIGHTS,
    CUPPING_BLEND_WEIGHT,
    CUPPING_NAME,
    DEFECT_PENALTY,
    EVALUATION_FLOOR,
    EVALUATION_NAME,
    GREEN_BLEND_WEIGHT,
    PRIMARY_DEFECT_PENALTY,
    QUALITY_NAME,
    SECONDARY_DEFECT_PENALTY,
)


@dataclass(frozen=True)
class ScoringProfile:
    """Immutable scoring configuration for one caller."""

    variant: Variant
    name: str
    attribute_weights: dict[str, float] = field(
        default_factory=lambda: dict(ATTRIBUTE_WEIGHTS)
    )
    split_defects: bool = False  # primary/secondary counts instead of one
    defect_penalty: float = DEFECT_PENALTY
    primary_defect_penalty: float = PRIMARY_DEFECT_PENALTY
    secondary_defect_penalty: float = SECONDARY_DEFECT_PENALTY
    cupping_weight: float = 1.0
    green_weight: float = 0.0  # > 0 blends in the green bean score
    floor: float | None = None
    buckets: tuple[Bucket, ...] | None = None  # None = no grade label

    @property
    def blends_green(self) -> bool:
        return self.green_weight > 0


QUALITY_PROFILE = ScoringProfile(
    variant=Variant.quality,
    name=QUALITY_NAME,
    split_defects=True,
    cupping_weight=CUPPING_BLEND_WEIGHT,
    green_weight=GREEN_BLEND_WEIGHT,
    buckets=QUALITY_BUCKETS,
)

CUPPING_PROFILE = ScoringProfile(
    variant=Variant.cupping,
    name=CUPPING_NAME,
    buckets=CUPPING_BUCKETS,
)

EVALUATION_PROFILE = ScoringProfile(
    variant=Variant.evaluation,
    name=EVALUATION_NAME,
    floor=EVALUATION_FLOOR,
)

PROFILES: dict[str, ScoringProfile] = {
    Variant.quality.value: QUALITY_PROFILE,
    Variant.cupping.value: CUPPING_PROFILE,
    Variant.evaluation.value: EVALUATION_PROFILE,
}


def get_profile(name: str | Variant) -> ScoringProfile:
    """Return the scoring profile for the given variant name.

    Raises
    ------
    KeyError
        If *name* does not match any registered profile.
    """
    key = name.value if isinstance(name, Variant) else name
    try:
        return PROFILES[key]
    except KeyError:
        available = ", ".join(sorted(PROFILES.keys()))
        raise KeyError(
            f"Unknown scoring profile '{key}'. Available profiles: {available}"
        ) from None
