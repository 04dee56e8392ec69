# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Cupping Lab - coffee quality-control scoring toolkit."""

__version__ = "0.1.0"

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
from cupping_lab.data.normalize import (
    normalize_cupping,
    normalize_green,
    normalize_roast,
)
from cupping_lab.data.samples import ROASTS, SAMPLES, get_roast, get_sample
from cupping_lab.scoring.engine import ScoringEngine
from cupping_lab.scoring.profiles import PROFILES, ScoringProfile, get_profile
from cupping_lab.scoring.session import summarize_session
from cupping_lab.recommendations.engine import RecommendationEngine

__all__ = [
    "CuppingAttributes",
    "CuppingGrade",
    "GreenBeanAttributes",
    "PROFILES",
    "QualityGrade",
    "ROASTS",
    "RecommendationEngine",
    "RoastLevel",
    "RoastParameters",
    "RoastResult",
    "SAMPLES",
    "SampleInfo",
    "ScoreResult",
    "ScoringEngine",
    "ScoringProfile",
    "SessionSummary",
    "Variant",
    "get_profile",
    "get_roast",
    "get_sample",
    "normalize_cupping",
    "normalize_green",
    "normalize_roast",
    "summarize_session",
]
