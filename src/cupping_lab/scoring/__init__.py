# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scoring engine for the cupping lab."""

from cupping_lab.scoring.engine import ScoringEngine

__all__ = ["ScoringEngine"]
