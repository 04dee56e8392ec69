"""Tests for core Pydantic data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cupping_lab.data.models import (
    SENSORY_ATTRIBUTES,
    CuppingAttributes,
    CuppingGrade,
    QualityGrade,
    RoastLevel,
    RoastParameters,
    RoastResult,
    ScoreResult,
    SessionSummary,
    Variant,
)


class TestCuppingAttributes:
    """Tests for CuppingAttributes."""

    def test_defaults_are_zero(self):
        attributes = CuppingAttributes()
        assert attributes.sensory_sum == 0.0
        assert attributes.defects == 0

    def test_sensory_values_order(self):
        attributes = CuppingAttributes(flavor=8.0)
        assert tuple(attributes.sensory_values()) == SENSORY_ATTRIBUTES
        assert attributes.sensory_values()["flavor"] == 8.0

    def test_sensory_sum_excludes_defects(self):
        attributes = CuppingAttributes(flavor=8.0, acidity=7.0, defects=4)
        assert attributes.sensory_sum == 15.0

    def test_no_range_validation(self):
        attributes = CuppingAttributes(flavor=14.0, body=-2.0, defects=-1)
        assert attributes.flavor == 14.0
        assert attributes.defects == -1

    def test_frozen(self):
        attributes = CuppingAttributes()
        with pytest.raises(ValidationError):
            attributes.flavor = 9.0

    def test_computed_field_serialized(self):
        data = CuppingAttributes(flavor=8.0).model_dump()
        assert data["sensory_sum"] == 8.0


class TestRoastParameters:
    def test_form_defaults(self):
        params = RoastParameters()
        assert params.preheat_temp == 180.0
        assert params.charge_temp == 190.0
        assert params.drop_temp == 0.0


class TestResults:
    """Tests for the result records."""

    def test_score_result_equality(self):
        a = ScoreResult(variant=Variant.cupping, score=80.0, grade="Good", recommendations=("x",))
        b = ScoreResult(variant="cupping", score=80.0, grade="Good", recommendations=["x"])
        assert a == b

    def test_roast_result_variant(self):
        result = RoastResult(roast_profile="Dark Roast", development_ratio=0.3)
        assert result.roast_profile is RoastLevel.dark
        assert result.variant is Variant.roast

    def test_session_summary_requires_samples(self):
        with pytest.raises(ValidationError):
            SessionSummary(
                sample_count=0,
                average_score=0,
                highest_score=0,
                lowest_score=0,
                rating="Fair",
            )


class TestGradeColors:
    def test_quality_grade_colors(self):
        assert QualityGrade.A.color == "green"
        assert QualityGrade.C.color == "yellow"
        assert QualityGrade.E.color == "red"

    def test_cupping_grade_colors(self):
        assert CuppingGrade.outstanding.color == "green"
        assert CuppingGrade.good.color == "yellow"
        assert CuppingGrade.below_standard.color == "red"

    def test_roast_level_values(self):
        assert [level.value for level in RoastLevel] == [
            "Light Roast",
            "Medium Roast",
            "Medium-Dark Roast",
            "Dark Roast",
        ]
