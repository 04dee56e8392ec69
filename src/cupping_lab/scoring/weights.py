"""Scoring weight constants for the cupping lab.

Every sensory attribute counts once toward the cupping total.  Defect
multipliers and the green/cupping blend are the only other knobs.
"""

from cupping_lab.data.models import SENSORY_ATTRIBUTES, Variant

# ---------------------------------------------------------------------------
# Variant display names (single source of truth for all modules)
# ---------------------------------------------------------------------------
QUALITY_NAME = "Quality Calculator"
CUPPING_NAME = "Cupping Calculator"
EVALUATION_NAME = "Cupping Evaluation"
ROAST_NAME = "Roast Calculator"

VARIANT_NAMES: dict[Variant, str] = {
    Variant.quality: QUALITY_NAME,
    Variant.cupping: CUPPING_NAME,
    Variant.evaluation: EVALUATION_NAME,
    Variant.roast: ROAST_NAME,
}

# ---------------------------------------------------------------------------
# Sensory attribute weights
# ---------------------------------------------------------------------------
ATTRIBUTE_WEIGHTS: dict[str, float] = {name: 1.0 for name in SENSORY_ATTRIBUTES}

# ---------------------------------------------------------------------------
# Defect penalties (points subtracted per defect)
# ---------------------------------------------------------------------------
DEFECT_PENALTY = 2.0            # single defect count variants
PRIMARY_DEFECT_PENALTY = 2.0    # quality calculator, category 1
SECONDARY_DEFECT_PENALTY = 1.0  # quality calculator, category 2

# ---------------------------------------------------------------------------
# Green bean score
# ---------------------------------------------------------------------------
GREEN_BASE_SCORE = 100.0
GREEN_PRIMARY_WEIGHT = 1.0
GREEN_SECONDARY_WEIGHT = 0.5

# ---------------------------------------------------------------------------
# Quality calculator blend (must sum to 1.0)
# ---------------------------------------------------------------------------
CUPPING_BLEND_WEIGHT = 0.7
GREEN_BLEND_WEIGHT = 0.3

# ---------------------------------------------------------------------------
# Evaluation form floor
# ---------------------------------------------------------------------------
EVALUATION_FLOOR = 0.0
