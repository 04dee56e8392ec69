"""Rich terminal report renderer.

Composes Rich tables, panels, and ASCII bars into the user-facing
terminal output for scored samples, roast logs and cupping sessions.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from cupping_lab.data.models import (
    CuppingAttributes,
    CuppingGrade,
    GreenBeanAttributes,
    QualityGrade,
    RoastParameters,
    RoastResult,
    SampleInfo,
    ScoreResult,
    SessionSummary,
    Variant,
)
from cupping_lab.data.samples import ROASTS, SAMPLES
from cupping_lab.reporting.ascii_charts import attribute_bar, score_gauge, score_strip
from cupping_lab.scoring.thresholds import score_to_color
from cupping_lab.scoring.weights import ROAST_NAME, VARIANT_NAMES


def _grade_color(result: ScoreResult) -> str:
    if result.grade is None:
        return score_to_color(result.score)
    if result.variant is Variant.quality:
        return QualityGrade(result.grade).color
    return CuppingGrade(result.grade).color


class TerminalRenderer:
    """Renders scoring results to the terminal using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_score(
        self,
        result: ScoreResult,
        attributes: CuppingAttributes | None = None,
        green: GreenBeanAttributes | None = None,
        info: SampleInfo | None = None,
    ) -> None:
        """Render a scored cupping sample."""
        self._render_header(VARIANT_NAMES[result.variant], info)

        color = _grade_color(result)
        self.console.print()
        self.console.print(
            f"  [bold]TOTAL SCORE[/bold]: {score_gauge(result.score, result.grade)}"
        )
        if result.quality_description:
            self.console.print(f"  [{color}]{result.quality_description}[/{color}]")

        if attributes is not None:
            self._render_attributes(attributes, green, result.variant)
        self._render_list("RECOMMENDATIONS", result.recommendations)

    def render_roast(
        self,
        result: RoastResult,
        params: RoastParameters | None = None,
        info: SampleInfo | None = None,
    ) -> None:
        """Render a classified roast log."""
        self._render_header(ROAST_NAME, info)

        color = result.roast_profile.color
        self.console.print()
        self.console.print(
            f"  [bold]ROAST PROFILE[/bold]: [{color}]{result.roast_profile.value}[/{color}]"
            f"  |  [bold]Development ratio[/bold]: {result.development_ratio:.2f}"
        )

        if params is not None:
            table = Table(show_header=True, header_style="bold", padding=(0, 1))
            table.add_column("Parameter", style="bold", min_width=20)
            table.add_column("Value", justify="right", min_width=10)
            table.add_row("Preheat temperature", f"{params.preheat_temp:.0f} °C")
            table.add_row("Charge temperature", f"{params.charge_temp:.0f} °C")
            table.add_row("First crack", f"{params.first_crack_time:.0f} s @ {params.first_crack_temp:.0f} °C")
            table.add_row("Development time", f"{params.development_time:.0f} s")
            table.add_row("Drop temperature", f"{params.drop_temp:.0f} °C")
            table.add_row("Total roast time", f"{params.total_time:.0f} s")
            table.add_row("Batch size", f"{params.batch_size:.0f} g")
            self.console.print()
            self.console.print(table)

        self._render_list("QUALITY INDICATORS", result.quality_indicators, style="green")
        self._render_list("RECOMMENDATIONS", result.recommendations)

    def render_session(self, summary: SessionSummary, name: str = "", totals: list[float] | None = None) -> None:
        """Render a cupping session summary."""
        self.console.print()
        self.console.print(Rule(f"[bold]SESSION SUMMARY[/bold] {name}".rstrip()))

        table = Table(show_header=False, padding=(0, 2), box=None)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")
        table.add_row("Samples", str(summary.sample_count))
        table.add_row("Average score", f"{summary.average_score:.1f}")
        table.add_row("Highest score", f"[green]{summary.highest_score:.1f}[/green]")
        table.add_row("Lowest score", f"[red]{summary.lowest_score:.1f}[/red]")
        table.add_row("Quality rating", summary.rating)
        if totals:
            table.add_row("Scores", score_strip(totals))
        self.console.print(Panel(table, title="[bold]CUPPING TABLE[/bold]"))

        for attr, value in summary.attribute_averages.items():
            self.console.print(attribute_bar(attr.replace("_", " ").title(), value))

    def render_presets(self) -> None:
        """List the built-in sample and roast presets."""
        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Preset", style="bold cyan")
        table.add_column("Kind", justify="center")
        table.add_column("Description")
        for name, preset in SAMPLES.items():
            table.add_row(name, "sample", preset.description)
        for name, preset in ROASTS.items():
            table.add_row(name, "roast", preset.description)
        self.console.print(table)

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _render_header(self, title: str, info: SampleInfo | None) -> None:
        header_text = Text()
        header_text.append("CUPPING LAB", style="bold cyan")
        if info is not None and info.name:
            header_text.append(" | ", style="dim")
            header_text.append(info.name, style="bold")
        if info is not None and info.origin:
            header_text.append(f" ({info.origin})", style="dim")
        if info is not None and info.process is not None:
            header_text.append(f" | {info.process.value}", style="")
        if info is not None and info.variety is not None:
            header_text.append(f" | {info.variety.value}", style="")

        self.console.print()
        self.console.print(Panel(header_text, title=title))

    def _render_attributes(
        self,
        attributes: CuppingAttributes,
        green: GreenBeanAttributes | None,
        variant: Variant,
    ) -> None:
        self.console.print()
        self.console.print(Rule("[bold]SENSORY ATTRIBUTES[/bold]"))
        for name, value in attributes.sensory_values().items():
            self.console.print(attribute_bar(name.replace("_", " ").title(), value))

        if variant is Variant.quality and green is not None:
            self.console.print(
                f"\n  [bold]Defects:[/bold] {green.defects_primary} primary, "
                f"{green.defects_secondary} secondary  |  "
                f"[bold]Moisture:[/bold] {green.moisture:.1f}%"
            )
        else:
            self.console.print(f"\n  [bold]Defects:[/bold] {attributes.defects}")

    def _render_list(self, title: str, items: tuple[str, ...], style: str = "yellow") -> None:
        if not items:
            return
        self.console.print()
        self.console.print(Rule(f"[bold]{title}[/bold]"))
        for item in items:
            self.console.print(f"    [{style}]•[/{style}] {item}")
