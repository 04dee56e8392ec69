# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the scoring engine."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from cupping_lab.data.models import (
    SENSORY_ATTRIBUTES,
    CuppingAttributes,
    GreenBeanAttributes,
    RoastResult,
    ScoreResult,
    Variant,
)
from cupping_lab.data.normalize import normalize_cupping
from cupping_lab.scoring.cupping import cupping_total, defect_penalty, final_score, green_score
from cupping_lab.scoring.engine import ScoringEngine
from cupping_lab.scoring.profiles import (
    CUPPING_PROFILE,
    EVALUATION_PROFILE,
    PROFILES,
    QUALITY_PROFILE,
    get_profile,
)
from cupping_lab.scoring.weights import CUPPING_NAME, EVALUATION_NAME, QUALITY_NAME



class TestCuppingScore:
    """Tests for the weighted cupping total."""

    def test_all_fives_is_fifty(self, engine: ScoringEngine, uniform):
        result = engine.score_cupping(uniform(5))
        assert result.score == 50.0
        assert result.grade == "Below Standard"

    def test_all_nines_is_outstanding(self, engine: ScoringEngine, uniform):
        result = engine.score_cupping(uniform(9))
        assert result.score == 90.0
        assert result.grade == "Outstanding"
        assert result.quality_description == "Exceptional complexity and character"

    def test_defects_cost_two_points_each(self, uniform):
        attributes = uniform(8, defects=3)
        assert cupping_total(CUPPING_PROFILE, attributes) == pytest.approx(74.0)

    def test_evaluation_has_no_grade(self, engine: ScoringEngine, uniform):
        result = engine.score_evaluation(uniform(7))
        assert result.score == 70.0
        assert result.grade is None
        assert result.recommendations == ()

    def test_evaluation_is_floored_at_zero(self, engine: ScoringEngine, uniform):
        result = engine.score_evaluation(uniform(1, defects=20))
        assert result.score == 0.0

    def test_cupping_is_not_floored(self, engine: ScoringEngine, uniform):
        result = engine.score_cupping(uniform(1, defects=20))
        assert result.score == -30.0
        assert result.grade == "Below Standard"

    def test_out_of_range_values_propagate(self, engine: ScoringEngine, uniform):
        result = engine.score_cupping(uniform(12))
        assert result.score == 120.0
        assert result.grade == "Outstanding"

    def test_negative_defects_add_points(self, uniform):
        attributes = uniform(5, defects=-2)
        assert cupping_total(CUPPING_PROFILE, attributes) == pytest.approx(54.0)

    def test_score_rounded_to_one_decimal(self, engine: ScoringEngine, uniform):
        result = engine.score_cupping(uniform(8, flavor=8.33))
        assert result.score == 80.3


class TestQualityScore:
    """Tests for the combined quality calculator."""

    def test_all_nines_grade_a(self, engine: ScoringEngine, clean_green, uniform):
        result = engine.score_quality(uniform(9), clean_green)
        assert result.score == pytest.approx(93.0)
        assert result.grade == "A"
        assert result.quality_description == "Exceptional"

    def test_green_score(self):
        green = GreenBeanAttributes(defects_primary=4, defects_secondary=6)
        assert green_score(green) == pytest.approx(93.0)

    def test_split_defect_penalty(self, uniform):
        green = GreenBeanAttributes(defects_primary=2, defects_secondary=3)
        attributes = uniform(8, defects=10)
        # The single cup count is ignored when primary/secondary are used.
        assert defect_penalty(QUALITY_PROFILE, attributes, green) == pytest.approx(7.0)

    def test_blend_weights(self, uniform):
        green = GreenBeanAttributes(defects_primary=2, defects_secondary=6)
        attributes = uniform(8.2)
        expected = (82.0 - 10.0) * 0.7 + 95.0 * 0.3
        assert final_score(QUALITY_PROFILE, attributes, green) == pytest.approx(expected)

    def test_quality_and_cupping_thresholds_differ(self, engine: ScoringEngine, uniform):
        # 82 is "Good" on the cupping scale but a "B" on the quality scale.
        attributes = uniform(8.2)
        assert engine.score_cupping(attributes).grade == "Good"
        quality = engine.score_quality(attributes, GreenBeanAttributes())
        assert quality.grade == "B"

    def test_grade_recommendations_come_first(self, engine: ScoringEngine, defective):
        result = engine.score_quality(defective.attributes, defective.green)
        assert result.grade == "E"
        assert result.recommendations == (
            "Consider alternative uses (e.g., instant coffee)",
            "Significant quality improvement needed",
            "Moisture content high - consider additional drying",
            "High primary defects - sorting recommended",
            "Low acidity - may benefit from different processing",
        )

    def test_quality_ignores_cupping_only_rules(self, engine: ScoringEngine, defective):
        result = engine.score_quality(defective.attributes, defective.green)
        assert "Light body - consider roast profile adjustments" not in result.recommendations
        assert "High defect count - sorting recommended" not in result.recommendations


class TestEngineProperties:
    """Idempotence and monotonicity of the engine."""

    def test_idempotent(self, engine: ScoringEngine, defective):
        first = engine.score_cupping(defective.attributes)
        second = engine.score_cupping(defective.attributes)
        assert first == second
        assert first.recommendations == second.recommendations

    def test_separate_engines_agree(self, ethiopia):
        a = ScoringEngine().score_quality(ethiopia.attributes, ethiopia.green)
        b = ScoringEngine().score_quality(ethiopia.attributes, ethiopia.green)
        assert a.model_dump_json() == b.model_dump_json()

    @pytest.mark.parametrize("attribute", SENSORY_ATTRIBUTES)
    def test_monotone_in_each_attribute(self, attribute: str, uniform):
        low = uniform(7, **{attribute: 6.0})
        high = uniform(7, **{attribute: 6.5})
        for profile in (QUALITY_PROFILE, CUPPING_PROFILE, EVALUATION_PROFILE):
            assert final_score(profile, high) >= final_score(profile, low)

    def test_non_increasing_in_defects(self, uniform):
        previous = None
        for defects in range(0, 6):
            score = final_score(CUPPING_PROFILE, uniform(7, defects=defects))
            if previous is not None:
                assert score <= previous
            previous = score

    def test_non_increasing_in_green_defects(self, uniform):
        attributes = uniform(8)
        scores = [
            final_score(
                QUALITY_PROFILE, attributes, GreenBeanAttributes(defects_primary=n, defects_secondary=n)
            )
            for n in range(5)
        ]
        assert scores == sorted(scores, reverse=True)


class TestScoreDispatch:
    """Tests for ScoringEngine.score() with flat value mappings."""

    def test_dispatch_cupping(self, engine: ScoringEngine):
        values = {name: 9.0 for name in SENSORY_ATTRIBUTES}
        result = engine.score("cupping", values)
        assert isinstance(result, ScoreResult)
        assert result.variant is Variant.cupping
        assert result.score == 90.0

    def test_dispatch_quality_reads_green_fields(self, engine: ScoringEngine):
        values = {name: 8.0 for name in SENSORY_ATTRIBUTES}
        values.update(moisture=13.0, defects_primary=0, defects_secondary=0)
        result = engine.score(Variant.quality, values)
        assert "Moisture content high - consider additional drying" in result.recommendations

    def test_dispatch_roast(self, engine: ScoringEngine):
        result = engine.score("roast", {"first_crack_time": 150, "development_time": 45, "drop_temp": 200})
        assert isinstance(result, RoastResult)
        assert result.development_ratio == 0.3

    def test_unknown_variant(self, engine: ScoringEngine):
        with pytest.raises(ValueError):
            engine.score("espresso", {})

    def test_non_numeric_rejected(self, engine: ScoringEngine):
        with pytest.raises(ValidationError):
            engine.score("cupping", {"flavor": "lots"})


class TestProfiles:
    """Tests for the scoring profile registry."""

    def test_three_profiles(self):
        assert set(PROFILES) == {"quality", "cupping", "evaluation"}

    def test_profile_names(self):
        assert get_profile("quality").name == QUALITY_NAME
        assert get_profile(Variant.cupping).name == CUPPING_NAME
        assert get_profile("evaluation").name == EVALUATION_NAME

    def test_unknown_profile(self):
        with pytest.raises(KeyError, match="Available profiles"):
            get_profile("roast")

    def test_only_quality_blends_green(self):
        assert QUALITY_PROFILE.blends_green
        assert not CUPPING_PROFILE.blends_green
        assert not EVALUATION_PROFILE.blends_green

    def test_default_record_scores_zero(self, engine: ScoringEngine):
        assert engine.score_cupping(CuppingAttributes()).score == 0.0


class TestOverflowingTotals:
    """Finite input whose total overflows a float still scores."""

    def test_huge_sub_scores(self, engine: ScoringEngine, uniform):
        result = engine.score_cupping(uniform(1e308))
        assert result.score == math.inf
        assert result.grade == "Outstanding"

    def test_overflowing_form_value(self, engine: ScoringEngine):
        result = engine.score_evaluation(normalize_cupping({"flavor": "1e400"}))
        assert result.score == math.inf
        assert result.grade is None

    def test_huge_quality_blend(self, engine: ScoringEngine, uniform, clean_green):
        result = engine.score_quality(uniform(1e308), clean_green)
        assert result.score == math.inf
        assert result.grade == "A"
