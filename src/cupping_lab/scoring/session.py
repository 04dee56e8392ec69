# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Cupping session summary.

Aggregates the evaluations recorded at one cupping table: sample count,
per-attribute averages, and the average / highest / lowest total score.
"""

from __future__ import annotations

from typing import Sequence

from cupping_lab.data.models import (
    SENSORY_ATTRIBUTES,
    CuppingAttributes,
    SessionSummary,
    Variant,
)
from cupping_lab.scoring.cupping import final_score
from cupping_lab.scoring.profiles import get_profile
from cupping_lab.scoring.thresholds import round_half_up, session_rating


def summarize_session(evaluations: Sequence[CuppingAttributes]) -> SessionSummary:
    """Summarize the evaluations of one session.

    Each evaluation is totalled the way the evaluation form totals it
    (floored at zero).  Averages are taken over unrounded totals and the
    rating comes from the unrounded average.

    Raises
    ------
    ValueError
        If *evaluations* is empty.
    """
    if not evaluations:
        raise ValueError("Cannot summarize a session with no evaluations")

    profile = get_profile(Variant.evaluation)
    totals = [final_score(profile, e) for e in evaluations]
    count = len(evaluations)

    averages = {
        name: round_half_up(sum(getattr(e, name) for e in evaluations) / count, 1)
        for name in SENSORY_ATTRIBUTES
    }
    average = sum(totals) / count

    return SessionSummary(
        sample_count=count,
        attribute_averages=averages,
        average_score=round_half_up(average, 1),
        highest_score=round_half_up(max(totals), 1),
        lowest_score=round_half_up(min(totals), 1),
        rating=session_rating(average),
    )
