# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for roast classification and the development ratio."""

from __future__ import annotations

import math

import pytest

from cupping_lab.data.models import RoastLevel, RoastParameters, Variant
from cupping_lab.data.samples import get_roast
from cupping_lab.scoring.engine import ScoringEngine
from cupping_lab.scoring.roast import analyze_roast, development_ratio


class TestDevelopmentRatio:
    """Tests for development_ratio()."""

    def test_optimal_ratio(self):
        assert development_ratio(45, 150) == 0.30

    def test_rounded_to_two_decimals(self):
        assert development_ratio(70, 210) == 0.33
        assert development_ratio(50, 150) == 0.33

    def test_first_crack_not_logged(self):
        assert development_ratio(60, 0) == 0.0
        assert development_ratio(60, -5) == 0.0


class TestAnalyzeRoast:
    """Tests for analyze_roast()."""

    def test_optimal_development(self):
        result = analyze_roast(
            RoastParameters(first_crack_time=150, development_time=45, drop_temp=200)
        )
        assert result.development_ratio == 0.30
        assert "Optimal development ratio" in result.quality_indicators
        assert not any("development time" in r for r in result.recommendations)

    def test_short_development(self):
        result = analyze_roast(
            RoastParameters(first_crack_time=150, development_time=30, drop_temp=200)
        )
        assert result.development_ratio == 0.20
        assert "Optimal development ratio" not in result.quality_indicators
        assert result.recommendations[0] == (
            "Increase development time for better flavor development"
        )

    def test_long_development(self):
        result = analyze_roast(
            RoastParameters(first_crack_time=150, development_time=75, drop_temp=200)
        )
        assert result.development_ratio == 0.5
        assert "Reduce development time to prevent over-roasting" in result.recommendations

    def test_level_indicators_come_first(self):
        result = analyze_roast(
            RoastParameters(first_crack_time=150, development_time=45, drop_temp=235)
        )
        assert result.roast_profile is RoastLevel.dark
        assert result.quality_indicators[:3] == (
            "Bold, smoky flavors",
            "Low acidity",
            "Heavy body",
        )
        assert result.quality_indicators[3] == "Optimal development ratio"

    @pytest.mark.parametrize(
        "drop, level",
        [(230, RoastLevel.dark), (229.9, RoastLevel.medium_dark), (190, RoastLevel.medium), (150, RoastLevel.light)],
    )
    def test_drop_temp_levels(self, drop: float, level: RoastLevel):
        assert analyze_roast(RoastParameters(drop_temp=drop)).roast_profile is level

    def test_independent_advisories(self):
        result = analyze_roast(get_roast("french_roast").params)
        assert result.recommendations == (
            "Increase development time for better flavor development",
            "Charge temperature is high - risk of scorching",
            "First crack occurred early - monitor heat application",
            "Small batch - consider efficiency improvements",
        )

    def test_low_charge_and_late_first_crack(self):
        result = analyze_roast(
            RoastParameters(charge_temp=160, first_crack_time=300, development_time=90, drop_temp=205)
        )
        assert "Charge temperature is low - may extend roast time" in result.recommendations
        assert (
            "First crack occurred late - consider heat application adjustments"
            in result.recommendations
        )

    def test_large_batch_is_an_indicator(self):
        result = analyze_roast(get_roast("full_city").params)
        assert result.roast_profile is RoastLevel.medium_dark
        assert "Large batch - efficient roasting" in result.quality_indicators
        assert "Large batch - efficient roasting" not in result.recommendations

    def test_zero_first_crack_asks_for_development(self):
        result = analyze_roast(RoastParameters(first_crack_time=0, development_time=60, drop_temp=200))
        assert result.development_ratio == 0.0
        assert "Increase development time for better flavor development" in result.recommendations

    def test_default_form_temperatures_fire_nothing(self):
        result = analyze_roast(RoastParameters(first_crack_time=180, development_time=60, drop_temp=200))
        assert not any("Charge temperature" in r for r in result.recommendations)

    def test_variant_and_idempotence(self, engine: ScoringEngine, city_roast: RoastParameters):
        first = engine.analyze_roast(city_roast)
        second = engine.analyze_roast(city_roast)
        assert first == second
        assert first.variant is Variant.roast
        assert first.model_dump()["variant"] == Variant.roast

    def test_overflowing_ratio(self):
        result = analyze_roast(
            RoastParameters(first_crack_time=1e-10, development_time=1e308, drop_temp=200)
        )
        assert result.development_ratio == math.inf
        assert "Reduce development time to prevent over-roasting" in result.recommendations
