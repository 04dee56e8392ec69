# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the cupping lab test suite."""

from __future__ import annotations

import pytest

from cupping_lab.data.models import (
    SENSORY_ATTRIBUTES,
    CuppingAttributes,
    GreenBeanAttributes,
    RoastParameters,
)
from cupping_lab.data.samples import get_roast, get_sample
from cupping_lab.scoring.engine import ScoringEngine


def _uniform(value: float, defects: int = 0, **overrides: float) -> CuppingAttributes:
    values: dict[str, float] = {name: value for name in SENSORY_ATTRIBUTES}
    values.update(overrides)
    return CuppingAttributes(defects=defects, **values)


@pytest.fixture()
def uniform():
    """Factory: every sensory sub-score set to one value, with overrides."""
    return _uniform


@pytest.fixture()
def engine() -> ScoringEngine:
    return ScoringEngine()


@pytest.fixture()
def clean_green() -> GreenBeanAttributes:
    """Green coffee with no defects and normal moisture."""
    return GreenBeanAttributes(moisture=10.0, defects_primary=0, defects_secondary=0)


@pytest.fixture()
def ethiopia():
    """The washed Ethiopian specialty preset."""
    return get_sample("ethiopia_washed")


@pytest.fixture()
def defective():
    """The defective commercial lot preset."""
    return get_sample("defective_lot")


@pytest.fixture()
def city_roast() -> RoastParameters:
    return get_roast("city_roast").params


@pytest.fixture()
def batch_yaml(tmp_path):
    """A small batch file covering every variant."""
    path = tmp_path / "table.yaml"
    path.write_text(
        """\
session:
  name: Morning table
  cupper: Ana
  date: 2025-03-01
samples:
  - variant: cupping
    info: {name: Lot 7, origin: Ethiopia, process: washed}
    values: {fragrance_aroma: 9, flavor: "9", aftertaste: 9, acidity: 9,
             body: 9, balance: 9, uniformity: 9, clean_cup: 9, sweetness: 9,
             overall: 9, defects: ""}
  - variant: quality
    info: {name: Lot 8, variety: arabica}
    values: {fragranceAroma: 8, flavor: 8, aftertaste: 8, acidity: 8, body: 8,
             balance: 8, uniformity: 8, cleanCup: 8, sweetness: 8, overall: 8,
             moistureContent: "12.5 %", defectsPrimary: 1, defectsSecondary: 2}
  - variant: evaluation
    values: {fragrance_aroma: 8, flavor: 8, aftertaste: 8, acidity: 8, body: 8,
             balance: 8, uniformity: 8, clean_cup: 8, sweetness: 8, overall: 8}
  - variant: evaluation
    values: {fragrance_aroma: 6, flavor: 6, aftertaste: 6, acidity: 6, body: 6,
             balance: 6, uniformity: 6, clean_cup: 6, sweetness: 6, overall: 6}
  - variant: roast
    info: {name: Roast 3}
    values: {firstCrackTime: 150, developmentTime: 45, dropTemp: 215, batchSize: "350g"}
"""
    )
    return path
