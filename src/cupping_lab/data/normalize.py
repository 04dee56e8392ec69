# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Caller-side normalization of raw form values.

The scoring engine is a total function over well-typed numbers and never
coerces anything itself.  Every outer surface (CLI, batch files, REST API)
runs raw input through this module first: blank or unparseable numeric
fields become 0, strings are read from their leading numeric prefix, and
integer fields are truncated toward zero.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping

from cupping_lab.data.models import (
    CuppingAttributes,
    GreenBeanAttributes,
    RoastParameters,
    SampleInfo,
)

_FLOAT_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^[+-]?\d+")

_MISSING = object()

# Field name -> accepted input keys, first match wins.  The camelCase keys
# are the names used by the web forms.
CUPPING_FIELDS: dict[str, tuple[str, ...]] = {
    "fragrance_aroma": ("fragrance_aroma", "fragranceAroma", "fragrance"),
    "flavor": ("flavor",),
    "aftertaste": ("aftertaste",),
    "acidity": ("acidity",),
    "body": ("body",),
    "balance": ("balance",),
    "uniformity": ("uniformity",),
    "clean_cup": ("clean_cup", "cleanCup"),
    "sweetness": ("sweetness",),
    "overall": ("overall",),
    "defects": ("defects",),
}

GREEN_FIELDS: dict[str, tuple[str, ...]] = {
    "moisture": ("moisture", "moisture_content", "moistureContent"),
    "defects_primary": ("defects_primary", "defectsPrimary"),
    "defects_secondary": ("defects_secondary", "defectsSecondary"),
}

ROAST_FIELDS: dict[str, tuple[str, ...]] = {
    "preheat_temp": ("preheat_temp", "preheatTemp"),
    "charge_temp": ("charge_temp", "chargeTemp"),
    "first_crack_time": ("first_crack_time", "firstCrackTime"),
    "first_crack_temp": ("first_crack_temp", "firstCrackTemp"),
    "development_time": ("development_time", "developmentTime"),
    "drop_temp": ("drop_temp", "dropTemp"),
    "total_time": ("total_time", "totalTime", "total_roast_time"),
    "batch_size": ("batch_size", "batchSize"),
}

INFO_FIELDS: dict[str, tuple[str, ...]] = {
    "name": ("name", "sample_name", "sampleName", "lot_number"),
    "origin": ("origin", "green_origin"),
    "variety": ("variety", "green_variety"),
    "process": ("process",),
    "roast_level": ("roast_level", "roastLevel"),
    "altitude": ("altitude",),
    "density": ("density",),
    "screen_size": ("screen_size", "screenSize"),
    "notes": ("notes",),
}

_INT_FIELDS = frozenset({"defects", "defects_primary", "defects_secondary"})

# Form defaults applied when the roast field is absent altogether.
_ROAST_DEFAULTS = {"preheat_temp": 180.0, "charge_temp": 190.0}


def parse_float(value: Any) -> float:
    """Coerce *value* to a float, returning 0.0 when it cannot be read.

    Numbers pass through (NaN becomes 0.0).  Strings are read from their
    longest leading numeric prefix, so ``"12.5 %"`` gives 12.5 and
    ``"abc"`` gives 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return 0.0 if math.isnan(number) else number
    match = _FLOAT_PREFIX.match(str(value).strip())
    if not match:
        return 0.0
    return float(match.group(0))


def parse_int(value: Any) -> int:
    """Coerce *value* to an int, truncating toward zero; 0 when unreadable."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        return int(value)
    match = _INT_PREFIX.match(str(value).strip())
    if not match:
        return 0
    return int(match.group(0))


def _lookup(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return _MISSING


def _numeric_fields(
    raw: Mapping[str, Any],
    fields: dict[str, tuple[str, ...]],
    defaults: Mapping[str, float] | None = None,
) -> dict[str, float | int]:
    values: dict[str, float | int] = {}
    for field, keys in fields.items():
        value = _lookup(raw, keys)
        if value is _MISSING and defaults and field in defaults:
            values[field] = defaults[field]
            continue
        if value is _MISSING:
            value = None
        values[field] = parse_int(value) if field in _INT_FIELDS else parse_float(value)
    return values


def normalize_cupping(raw: Mapping[str, Any]) -> CuppingAttributes:
    """Build :class:`CuppingAttributes` from a flat mapping of raw form values."""
    return CuppingAttributes(**_numeric_fields(raw, CUPPING_FIELDS))


def normalize_green(raw: Mapping[str, Any]) -> GreenBeanAttributes:
    """Build :class:`GreenBeanAttributes` from a flat mapping of raw form values."""
    return GreenBeanAttributes(**_numeric_fields(raw, GREEN_FIELDS))


def normalize_roast(raw: Mapping[str, Any]) -> RoastParameters:
    """Build :class:`RoastParameters` from a flat mapping of raw form values.

    Absent preheat and charge temperatures fall back to the form defaults
    (180 and 190 degC); a present-but-blank value still reads as 0.
    """
    return RoastParameters(**_numeric_fields(raw, ROAST_FIELDS, _ROAST_DEFAULTS))


def extract_sample_info(raw: Mapping[str, Any]) -> SampleInfo:
    """Pick the descriptive metadata out of a raw record.

    Blank strings are treated as absent.  Unknown variety / process / roast
    level values raise :class:`pydantic.ValidationError`.
    """
    values: dict[str, Any] = {}
    for field, keys in INFO_FIELDS.items():
        value = _lookup(raw, keys)
        if value is _MISSING or value is None or value == "":
            continue
        if field in ("altitude", "density"):
            value = parse_int(value)
        elif field in ("variety", "process", "roast_level"):
            value = str(value).strip().lower()
        else:
            value = str(value)
        values[field] = value
    return SampleInfo(**values)


__all__ = [
    "CUPPING_FIELDS",
    "GREEN_FIELDS",
    "INFO_FIELDS",
    "ROAST_FIELDS",
    "extract_sample_info",
    "normalize_cupping",
    "normalize_green",
    "normalize_roast",
    "parse_float",
    "parse_int",
]
