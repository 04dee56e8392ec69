# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Grade thresholds and bucket tables for every caller.

Each caller owns its own bucket table.  The quality calculator and the
cupping calculator use different cutoffs on purpose and must not be merged.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Sequence

from cupping_lab.data.models import CuppingGrade, QualityGrade, RoastLevel


@dataclass(frozen=True)
class Bucket:
    """One row of a descending threshold table."""

    min_score: float | None  # None marks the default (catch-all) bucket
    label: str
    description: str
    details: tuple[str, ...] = ()  # default recommendations or roast indicators


# ---------------------------------------------------------------------------
# Combined quality calculator (score >= 90 / 80 / 70 / 60 / else)
# ---------------------------------------------------------------------------
QUALITY_A_MIN = 90
QUALITY_B_MIN = 80
QUALITY_C_MIN = 70
QUALITY_D_MIN = 60
# Below 60 = E

QUALITY_BUCKETS: tuple[Bucket, ...] = (
    Bucket(
        QUALITY_A_MIN, QualityGrade.A.value, "Exceptional",
        ("Premium pricing recommended", "Consider specialty markets"),
    ),
    Bucket(
        QUALITY_B_MIN, QualityGrade.B.value, "Excellent",
        ("High-quality market positioning", "Good for specialty roasters"),
    ),
    Bucket(
        QUALITY_C_MIN, QualityGrade.C.value, "Good",
        ("Standard commercial markets", "Consider blending options"),
    ),
    Bucket(
        QUALITY_D_MIN, QualityGrade.D.value, "Fair",
        (
            "Commercial markets with pricing considerations",
            "Blending recommended to improve profile",
        ),
    ),
    Bucket(
        None, QualityGrade.E.value, "Below Standard",
        (
            "Consider alternative uses (e.g., instant coffee)",
            "Significant quality improvement needed",
        ),
    ),
)

# ---------------------------------------------------------------------------
# Standalone cupping calculator (score >= 90 / 85 / 80 / 75 / else)
# ---------------------------------------------------------------------------
CUPPING_OUTSTANDING_MIN = 90
CUPPING_EXCELLENT_MIN = 85
CUPPING_GOOD_MIN = 80
CUPPING_FAIR_MIN = 75
# Below 75 = Below Standard

CUPPING_BUCKETS: tuple[Bucket, ...] = (
    Bucket(
        CUPPING_OUTSTANDING_MIN, CuppingGrade.outstanding.value,
        "Exceptional complexity and character",
        ("Premium pricing recommended", "Consider specialty markets"),
    ),
    Bucket(
        CUPPING_EXCELLENT_MIN, CuppingGrade.excellent.value,
        "High quality with distinct characteristics",
        ("High-quality market positioning", "Good for specialty roasters"),
    ),
    Bucket(
        CUPPING_GOOD_MIN, CuppingGrade.good.value,
        "Above average with notable qualities",
        ("Standard commercial markets", "May benefit from blending"),
    ),
    Bucket(
        CUPPING_FAIR_MIN, CuppingGrade.fair.value,
        "Acceptable with some positive attributes",
        (
            "Commercial markets with pricing considerations",
            "Blending recommended to improve profile",
        ),
    ),
    Bucket(
        None, CuppingGrade.below_standard.value,
        "Defective or below commercial standards",
        (
            "Consider alternative uses (e.g., instant coffee)",
            "Significant quality improvement needed",
        ),
    ),
)

# ---------------------------------------------------------------------------
# Roast level by drop temperature (degC >= 230 / 210 / 190 / else)
# ---------------------------------------------------------------------------
DROP_TEMP_DARK = 230
DROP_TEMP_MEDIUM_DARK = 210
DROP_TEMP_MEDIUM = 190

ROAST_BUCKETS: tuple[Bucket, ...] = (
    Bucket(
        DROP_TEMP_DARK, RoastLevel.dark.value, "Bold, smoky flavors",
        ("Bold, smoky flavors", "Low acidity", "Heavy body"),
    ),
    Bucket(
        DROP_TEMP_MEDIUM_DARK, RoastLevel.medium_dark.value, "Balanced flavors",
        ("Balanced flavors", "Moderate acidity", "Medium body"),
    ),
    Bucket(
        DROP_TEMP_MEDIUM, RoastLevel.medium.value, "Origin characteristics preserved",
        ("Origin characteristics preserved", "Bright acidity", "Medium body"),
    ),
    Bucket(
        None, RoastLevel.light.value, "Complex flavors",
        ("Complex flavors", "High acidity", "Light body"),
    ),
)

# ---------------------------------------------------------------------------
# Session rating (average total score)
# ---------------------------------------------------------------------------
SESSION_EXCELLENT_MIN = 80
SESSION_GOOD_MIN = 60
# Below 60 = Fair

# Wide enough to quantize any finite float.
_DECIMAL_CONTEXT = Context(prec=400)


# ---------------------------------------------------------------------------
# Utility functions
# ---------------------------------------------------------------------------

def classify(score: float, table: Sequence[Bucket]) -> Bucket:
    """Return the first bucket whose ``min_score`` *score* reaches.

    Tables are walked top-down with ``>=``; the catch-all bucket (the one
    without a minimum) is returned when nothing matches, so every real
    number lands somewhere.
    """
    default = table[-1]
    for bucket in table:
        if bucket.min_score is None:
            default = bucket
            continue
        if score >= bucket.min_score:
            return bucket
    return default


def session_rating(average: float) -> str:
    """Rate a cupping session from its average total score."""
    if average >= SESSION_EXCELLENT_MIN:
        return "Excellent"
    if average >= SESSION_GOOD_MIN:
        return "Good"
    return "Fair"


def round_half_up(value: float, places: int = 1) -> float:
    """Round *value* to *places* decimals, ties away from zero.

    Works on the exact binary value of the float, so 2.25 becomes 2.3
    where the builtin :func:`round` would give 2.2.

    Infinities and NaN have no decimal digits to round and are returned
    unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(
        Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT)
    )


def score_to_color(score: float) -> str:
    """Convert a 0-100 cupping score to a color string."""
    if score >= CUPPING_EXCELLENT_MIN:
        return "green"
    if score >= CUPPING_FAIR_MIN:
        return "yellow"
    return "red"
