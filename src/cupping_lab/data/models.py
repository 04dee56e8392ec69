# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core Pydantic v2 data models for the cupping lab.

This module defines the value records passed into the scoring engine and
the result records it hands back.  Input records are deliberately loose:
sensory scores and defect counts carry no range constraints, so whatever
the caller measured flows straight into the formulas.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Variant(str, Enum):
    """The four callers of the scoring engine."""

    quality = "quality"
    cupping = "cupping"
    evaluation = "evaluation"
    roast = "roast"


class QualityGrade(str, Enum):
    """Letter grade produced by the combined quality calculator."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"

    @property
    def color(self) -> str:
        """Terminal color associated with this grade."""
        if self in (QualityGrade.A, QualityGrade.B):
            return "green"
        if self is QualityGrade.C:
            return "yellow"
        return "red"


class CuppingGrade(str, Enum):
    """Quality grade produced by the standalone cupping calculator."""

    outstanding = "Outstanding"
    excellent = "Excellent"
    good = "Good"
    fair = "Fair"
    below_standard = "Below Standard"

    @property
    def color(self) -> str:
        if self in (CuppingGrade.outstanding, CuppingGrade.excellent):
            return "green"
        if self is CuppingGrade.good:
            return "yellow"
        return "red"


class RoastLevel(str, Enum):
    """Roast level derived from drop temperature."""

    light = "Light Roast"
    medium = "Medium Roast"
    medium_dark = "Medium-Dark Roast"
    dark = "Dark Roast"

    @property
    def color(self) -> str:
        return {
            RoastLevel.light: "yellow",
            RoastLevel.medium: "dark_orange",
            RoastLevel.medium_dark: "orange4",
            RoastLevel.dark: "grey37",
        }[self]


class Variety(str, Enum):
    arabica = "arabica"
    robusta = "robusta"
    liberica = "liberica"
    excelsa = "excelsa"
    blend = "blend"


class Process(str, Enum):
    washed = "washed"
    natural = "natural"
    honey = "honey"
    pulped_natural = "pulped-natural"
    semi_washed = "semi-washed"


class RoastStyle(str, Enum):
    """Roast level as recorded by the roaster (free choice, not computed)."""

    light = "light"
    light_medium = "light-medium"
    medium_light = "medium-light"
    medium = "medium"
    medium_dark = "medium-dark"
    dark = "dark"
    french = "french"


# ---------------------------------------------------------------------------
# Input records
# ---------------------------------------------------------------------------

SENSORY_ATTRIBUTES: tuple[str, ...] = (
    "fragrance_aroma",
    "flavor",
    "aftertaste",
    "acidity",
    "body",
    "balance",
    "uniformity",
    "clean_cup",
    "sweetness",
    "overall",
)


class CuppingAttributes(BaseModel):
    """Ten sensory sub-scores plus a single defect count.

    Sub-scores are conventionally 0-10 but are not validated; the engine
    propagates out-of-range values into the total unchanged.
    """

    model_config = {"frozen": True}

    fragrance_aroma: float = Field(default=0.0, description="Fragrance / aroma")
    flavor: float = Field(default=0.0)
    aftertaste: float = Field(default=0.0)
    acidity: float = Field(default=0.0)
    body: float = Field(default=0.0)
    balance: float = Field(default=0.0)
    uniformity: float = Field(default=0.0)
    clean_cup: float = Field(default=0.0)
    sweetness: float = Field(default=0.0)
    overall: float = Field(default=0.0)
    defects: int = Field(default=0, description="Defective cups (single count)")

    def sensory_values(self) -> dict[str, float]:
        """Return the ten sensory sub-scores keyed by attribute name."""
        return {name: getattr(self, name) for name in SENSORY_ATTRIBUTES}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def sensory_sum(self) -> float:
        """Unweighted sum of the ten sensory sub-scores."""
        return sum(self.sensory_values().values())


class GreenBeanAttributes(BaseModel):
    """Green-bean measurements used by the combined quality calculator."""

    model_config = {"frozen": True}

    moisture: float = Field(default=0.0, description="Moisture content in percent")
    defects_primary: int = Field(default=0, description="Category 1 (primary) defects")
    defects_secondary: int = Field(default=0, description="Category 2 (secondary) defects")


class RoastParameters(BaseModel):
    """Roast log for one batch.  Times in seconds, temperatures in degC."""

    model_config = {"frozen": True}

    preheat_temp: float = Field(default=180.0)
    charge_temp: float = Field(default=190.0)
    first_crack_time: float = Field(default=0.0)
    first_crack_temp: float = Field(default=0.0)
    development_time: float = Field(default=0.0)
    drop_temp: float = Field(default=0.0)
    total_time: float = Field(default=0.0)
    batch_size: float = Field(default=0.0, description="Batch size in grams")


class SampleInfo(BaseModel):
    """Descriptive metadata carried alongside a sample.  Never scored."""

    model_config = {"frozen": True, "populate_by_name": True}

    name: str = Field(default="", description="Sample or lot name")
    origin: str = Field(default="")
    variety: Optional[Variety] = Field(default=None)
    process: Optional[Process] = Field(default=None)
    roast_level: Optional[RoastStyle] = Field(default=None)
    altitude: Optional[int] = Field(default=None, description="Altitude in metres")
    density: Optional[int] = Field(default=None, description="Density in g/L")
    screen_size: str = Field(default="")
    notes: str = Field(default="")


# ---------------------------------------------------------------------------
# Result records
# ---------------------------------------------------------------------------

class ScoreResult(BaseModel):
    """Output of one scoring call.

    Results are frozen and carry no timestamp or identifier, so two calls
    with equal input compare (and serialize) equal.
    """

    model_config = {"frozen": True}

    variant: Variant
    score: float = Field(..., description="Total score rounded to one decimal")
    grade: Optional[str] = Field(
        default=None, description="Bucket label; None for the evaluation form"
    )
    quality_description: str = Field(default="")
    recommendations: tuple[str, ...] = Field(default=())


class RoastResult(BaseModel):
    """Output of the roast profile calculator."""

    model_config = {"frozen": True}

    roast_profile: RoastLevel
    development_ratio: float = Field(..., description="Development / first-crack time")
    quality_indicators: tuple[str, ...] = Field(default=())
    recommendations: tuple[str, ...] = Field(default=())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def variant(self) -> Variant:
        return Variant.roast


class SessionSummary(BaseModel):
    """Aggregate view over the evaluations recorded in one cupping session."""

    model_config = {"frozen": True}

    sample_count: int = Field(..., ge=1)
    attribute_averages: dict[str, float] = Field(default_factory=dict)
    average_score: float
    highest_score: float
    lowest_score: float
    rating: str = Field(..., description="Excellent, Good or Fair")
