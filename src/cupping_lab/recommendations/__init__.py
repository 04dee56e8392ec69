# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Advisory rules and the recommendation engine."""

from cupping_lab.recommendations.engine import RecommendationEngine

__all__ = ["RecommendationEngine"]
