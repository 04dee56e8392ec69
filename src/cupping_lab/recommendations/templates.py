# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Advisory rule definitions.

Each rule carries the input field it watches, a comparison against one
or two fixed thresholds, the message it emits, and the variants it
applies to.  Rules are listed in emission order.
"""

from __future__ import annotations

from dataclasses import dataclass

from cupping_lab.data.models import Variant

# ---------------------------------------------------------------------------
# Roast benchmarks
# ---------------------------------------------------------------------------
DEV_RATIO_MIN = 0.30
DEV_RATIO_MAX = 0.40
CHARGE_TEMP_HIGH = 220       # degC, scorching risk above
CHARGE_TEMP_LOW = 170        # degC, slow roast below
FIRST_CRACK_EARLY = 120      # seconds
FIRST_CRACK_LATE = 240       # seconds
BATCH_LARGE = 500            # grams
BATCH_SMALL = 100            # grams


@dataclass(frozen=True)
class AdvisoryRule:
    """Immutable template for a single advisory."""

    key: str
    field: str
    comparison: str  # "gt", "lt", "between" (inclusive)
    threshold: float
    message: str
    variants: frozenset[Variant]
    kind: str = "recommendation"  # "recommendation" or "indicator"
    upper: float | None = None  # upper bound for "between"

    def matches(self, value: float) -> bool:
        """Return True when *value* triggers this rule."""
        if self.comparison == "gt":
            return value > self.threshold
        if self.comparison == "lt":
            return value < self.threshold
        if self.comparison == "between":
            return self.threshold <= value <= self.upper
        raise ValueError(f"Unknown comparison '{self.comparison}' in rule '{self.key}'")


_QUALITY = frozenset({Variant.quality})
_CUPPING = frozenset({Variant.cupping})
_BOTH = frozenset({Variant.quality, Variant.cupping})
_ROAST = frozenset({Variant.roast})


# ---------------------------------------------------------------------------
# Sample attribute rules
# ---------------------------------------------------------------------------

MOISTURE_HIGH = AdvisoryRule(
    key="moisture_high",
    field="moisture",
    comparison="gt",
    threshold=12,
    message="Moisture content high - consider additional drying",
    variants=_QUALITY,
)

PRIMARY_DEFECTS_HIGH = AdvisoryRule(
    key="primary_defects_high",
    field="defects_primary",
    comparison="gt",
    threshold=5,
    message="High primary defects - sorting recommended",
    variants=_QUALITY,
)

ACIDITY_LOW = AdvisoryRule(
    key="acidity_low",
    field="acidity",
    comparison="lt",
    threshold=4,
    message="Low acidity - may benefit from different processing",
    variants=_BOTH,
)

BODY_LIGHT = AdvisoryRule(
    key="body_light",
    field="body",
    comparison="lt",
    threshold=4,
    message="Light body - consider roast profile adjustments",
    variants=_CUPPING,
)

FLAVOR_UNDERDEVELOPED = AdvisoryRule(
    key="flavor_underdeveloped",
    field="flavor",
    comparison="lt",
    threshold=5,
    message="Flavor development could be improved",
    variants=_CUPPING,
)

DEFECTS_HIGH = AdvisoryRule(
    key="defects_high",
    field="defects",
    comparison="gt",
    threshold=3,
    message="High defect count - sorting recommended",
    variants=_CUPPING,
)

ATTRIBUTE_RULES: tuple[AdvisoryRule, ...] = (
    MOISTURE_HIGH,
    PRIMARY_DEFECTS_HIGH,
    ACIDITY_LOW,
    BODY_LIGHT,
    FLAVOR_UNDERDEVELOPED,
    DEFECTS_HIGH,
)


# ---------------------------------------------------------------------------
# Roast rules
# ---------------------------------------------------------------------------

DEV_RATIO_OPTIMAL = AdvisoryRule(
    key="dev_ratio_optimal",
    field="development_ratio",
    comparison="between",
    threshold=DEV_RATIO_MIN,
    upper=DEV_RATIO_MAX,
    message="Optimal development ratio",
    variants=_ROAST,
    kind="indicator",
)

DEV_RATIO_LOW = AdvisoryRule(
    key="dev_ratio_low",
    field="development_ratio",
    comparison="lt",
    threshold=DEV_RATIO_MIN,
    message="Increase development time for better flavor development",
    variants=_ROAST,
)

DEV_RATIO_HIGH = AdvisoryRule(
    key="dev_ratio_high",
    field="development_ratio",
    comparison="gt",
    threshold=DEV_RATIO_MAX,
    message="Reduce development time to prevent over-roasting",
    variants=_ROAST,
)

CHARGE_TEMP_TOO_HIGH = AdvisoryRule(
    key="charge_temp_high",
    field="charge_temp",
    comparison="gt",
    threshold=CHARGE_TEMP_HIGH,
    message="Charge temperature is high - risk of scorching",
    variants=_ROAST,
)

CHARGE_TEMP_TOO_LOW = AdvisoryRule(
    key="charge_temp_low",
    field="charge_temp",
    comparison="lt",
    threshold=CHARGE_TEMP_LOW,
    message="Charge temperature is low - may extend roast time",
    variants=_ROAST,
)

FIRST_CRACK_TOO_EARLY = AdvisoryRule(
    key="first_crack_early",
    field="first_crack_time",
    comparison="lt",
    threshold=FIRST_CRACK_EARLY,
    message="First crack occurred early - monitor heat application",
    variants=_ROAST,
)

FIRST_CRACK_TOO_LATE = AdvisoryRule(
    key="first_crack_late",
    field="first_crack_time",
    comparison="gt",
    threshold=FIRST_CRACK_LATE,
    message="First crack occurred late - consider heat application adjustments",
    variants=_ROAST,
)

LARGE_BATCH = AdvisoryRule(
    key="large_batch",
    field="batch_size",
    comparison="gt",
    threshold=BATCH_LARGE,
    message="Large batch - efficient roasting",
    variants=_ROAST,
    kind="indicator",
)

SMALL_BATCH = AdvisoryRule(
    key="small_batch",
    field="batch_size",
    comparison="lt",
    threshold=BATCH_SMALL,
    message="Small batch - consider efficiency improvements",
    variants=_ROAST,
)

ROAST_RULES: tuple[AdvisoryRule, ...] = (
    DEV_RATIO_OPTIMAL,
    DEV_RATIO_LOW,
    DEV_RATIO_HIGH,
    CHARGE_TEMP_TOO_HIGH,
    CHARGE_TEMP_TOO_LOW,
    FIRST_CRACK_TOO_EARLY,
    FIRST_CRACK_TOO_LATE,
    LARGE_BATCH,
    SMALL_BATCH,
)

ALL_RULES: tuple[AdvisoryRule, ...] = ATTRIBUTE_RULES + ROAST_RULES
