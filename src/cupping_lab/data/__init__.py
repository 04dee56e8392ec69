# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data models, input normalization, and preset samples."""

from cupping_lab.data.models import (
    CuppingAttributes,
    CuppingGrade,
    GreenBeanAttributes,
    QualityGrade,
    RoastLevel,
    RoastParameters,
    RoastResult,
    SampleInfo,
    ScoreResult,
    SessionSummary,
    Variant,
)
from cupping_lab.data.samples import (
    ROASTS,
    SAMPLES,
    RoastPreset,
    SamplePreset,
    get_roast,
    get_sample,
)

__all__ = [
    "CuppingAttributes",
    "CuppingGrade",
    "GreenBeanAttributes",
    "QualityGrade",
    "ROASTS",
    "RoastLevel",
    "RoastParameters",
    "RoastPreset",
    "RoastResult",
    "SAMPLES",
    "SampleInfo",
    "SamplePreset",
    "ScoreResult",
    "SessionSummary",
    "Variant",
    "get_roast",
    "get_sample",
]
