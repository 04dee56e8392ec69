# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Terminal-friendly visualizations using Unicode characters.

These functions return Rich-markup strings that render as bars,
score strips, and score gauges in the terminal via the Rich library.
Bars are clamped for drawing only; the printed number is never altered.
"""

from __future__ import annotations

import math

from cupping_lab.scoring.thresholds import score_to_color


def horizontal_bar(
    label: str,
    value: float,
    max_value: float,
    width: int = 20,
    color: str = "green",
) -> str:
    """Render a horizontal bar chart line using Unicode block characters.

    Returns a Rich-markup string like:
        Acidity............... [green]████████████████░░░░[/]   8.00/10
    """
    if max_value <= 0:
        return f"  {label:.<22} [dim]no data[/]"
    ratio = max(0.0, min(value / max_value, 1.0))
    filled = int(ratio * width)
    bar = "█" * filled + "░" * (width - filled)
    return f"  {label:.<22} [{color}]{bar}[/] {value:>6.2f}/{max_value:.0f}"


def attribute_bar(label: str, value: float, width: int = 20) -> str:
    """Bar for a 0-10 sensory sub-score, colored by strength."""
    if value >= 8:
        color = "green"
    elif value >= 6:
        color = "yellow"
    else:
        color = "red"
    return horizontal_bar(label, value, 10.0, width=width, color=color)


def score_gauge(score: float, label: str | None = None, width: int = 20) -> str:
    """Large visual gauge with color coding.

    Returns something like: [green]████████████████░░░░[/] 86.5/100 [green]Excellent[/]
    """
    clamped = max(0.0, min(100.0, score))
    filled = int(clamped / 100 * width)
    empty = width - filled
    color = score_to_color(score)

    bar = "█" * filled + "░" * empty
    suffix = f" [{color}]{label}[/]" if label else ""
    return f"[{color}]{bar}[/] {score:.1f}/100{suffix}"


def score_strip(scores: list[float], floor: float = 0.0, ceiling: float = 100.0) -> str:
    """One block per cupped sample, height proportional to its total.

    Heights use the fixed *floor*..*ceiling* score scale, not the spread
    of *scores*.
    Each block is colored like the score gauge.  Non-finite totals draw
    as the top or bottom block.
    """
    blocks = "▁▂▃▄▅▆▇█"
    span = ceiling - floor
    cells = []
    for score in scores:
        ratio = (score - floor) / span if span > 0 else 0.0
        ratio = 0.0 if math.isnan(ratio) else max(0.0, min(ratio, 1.0))
        block = blocks[round(ratio * (len(blocks) - 1))]
        color = score_to_color(score)
        cells.append(f"[{color}]{block}[/]")
    return "".join(cells)
