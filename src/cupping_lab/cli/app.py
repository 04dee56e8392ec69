# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for cupping-lab."""

from __future__ import annotations

import json
import logging
from typing import Any

import click
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape

from cupping_lab.config import load_batch
from cupping_lab.data.models import SENSORY_ATTRIBUTES, SampleInfo, ScoreResult, Variant
from cupping_lab.data.normalize import normalize_cupping, normalize_green, normalize_roast
from cupping_lab.data.samples import ROASTS, SAMPLES, get_roast, get_sample
from cupping_lab.reporting.terminal import TerminalRenderer
from cupping_lab.scoring.engine import ScoringEngine
from cupping_lab.scoring.session import summarize_session

SAMPLE_CHOICES = list(SAMPLES.keys())
ROAST_CHOICES = list(ROASTS.keys())

ROAST_OPTIONS = (
    ("--preheat-temp", "Preheat temperature (°C, default 180)"),
    ("--charge-temp", "Charge temperature (°C, default 190)"),
    ("--first-crack-time", "First crack time (s)"),
    ("--first-crack-temp", "First crack temperature (°C)"),
    ("--development-time", "Development time after first crack (s)"),
    ("--drop-temp", "Drop temperature (°C)"),
    ("--total-time", "Total roast time (s)"),
    ("--batch-size", "Batch size (g)"),
)


def _attribute_options(func):
    """Attach one option per sensory attribute plus --defects."""
    for name in reversed(SENSORY_ATTRIBUTES):
        flag = "--" + name.replace("_", "-")
        label = name.replace("_", " ").capitalize()
        func = click.option(flag, type=float, default=None, help=f"{label} score (0-10)")(func)
    func = click.option(
        "--defects", type=int, default=None,
        help="Defect count (2 points each)",
    )(func)
    func = click.option(
        "--sample", "-s", type=click.Choice(SAMPLE_CHOICES), default=None,
        help="Start from a built-in sample preset",
    )(func)
    func = click.option(
        "--export-json", type=click.Path(), default=None,
        help="Export the result as JSON at this path",
    )(func)
    return func


def _roast_options(func):
    for flag, help_text in reversed(ROAST_OPTIONS):
        func = click.option(flag, type=float, default=None, help=help_text)(func)
    func = click.option(
        "--sample", "-s", type=click.Choice(ROAST_CHOICES), default=None,
        help="Start from a built-in roast preset",
    )(func)
    func = click.option(
        "--export-json", type=click.Path(), default=None,
        help="Export the result as JSON at this path",
    )(func)
    return func


def _load_sample(name: str | None, console: Console):
    if name is None:
        return None
    try:
        return get_sample(name)
    except KeyError as exc:
        console.print(f"[red]{exc.args[0]}[/]")
        raise SystemExit(1)


def _score_sample(
    ctx: click.Context,
    variant: Variant,
    sample: str | None,
    export_json: str | None,
    options: dict[str, Any],
) -> ScoreResult:
    console: Console = ctx.obj["console"]
    engine: ScoringEngine = ctx.obj["engine"]

    preset = _load_sample(sample, console)
    raw: dict[str, Any] = {}
    info = SampleInfo()
    if preset is not None:
        raw.update(preset.attributes.model_dump())
        raw.update(preset.green.model_dump())
        info = preset.info
    raw.update({k: v for k, v in options.items() if v is not None})

    attributes = normalize_cupping(raw)
    green = normalize_green(raw)
    if variant is Variant.quality:
        result = engine.score_quality(attributes, green)
    elif variant is Variant.cupping:
        result = engine.score_cupping(attributes)
    else:
        result = engine.score_evaluation(attributes)

    renderer = TerminalRenderer(console)
    renderer.render_score(
        result,
        attributes=attributes,
        green=green if variant is Variant.quality else None,
        info=info,
    )

    if export_json:
        _export_json(result, export_json, console)
    return result


@click.group()
@click.version_option(version="0.1.0")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Log scoring details to stderr")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool) -> None:
    """cupping-lab: Coffee Quality Control Scoring

    Score coffee samples the way a cupping table does:

    \b
      quality   Cupping score blended with green-bean grading (A-E)
      cupping   Standalone SCA cupping score and quality grade
      evaluate  Live evaluation form total
      roast     Roast level and development ratio from a roast log
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.ensure_object(dict)
    ctx.obj["console"] = Console(no_color=no_color)
    ctx.obj["engine"] = ScoringEngine()
    ctx.obj["log_level"] = "debug" if verbose else "info"


@cli.command()
@_attribute_options
@click.option(
    "--defects-primary", type=int, default=None,
    help="Category 1 (primary) defect count",
)
@click.option(
    "--defects-secondary", type=int, default=None,
    help="Category 2 (secondary) defect count",
)
@click.option("--moisture", type=float, default=None, help="Green-bean moisture content (%)")
@click.pass_context
def quality(
    ctx: click.Context,
    sample: str | None,
    export_json: str | None,
    **options: Any,
) -> None:
    """Combined quality score: 70% cupping, 30% green grading."""
    _score_sample(ctx, Variant.quality, sample, export_json, options)


@cli.command()
@_attribute_options
@click.pass_context
def cupping(
    ctx: click.Context,
    sample: str | None,
    export_json: str | None,
    **options: Any,
) -> None:
    """Standalone cupping score with an SCA quality grade."""
    _score_sample(ctx, Variant.cupping, sample, export_json, options)


@cli.command()
@_attribute_options
@click.pass_context
def evaluate(
    ctx: click.Context,
    sample: str | None,
    export_json: str | None,
    **options: Any,
) -> None:
    """Evaluation form total, floored at zero."""
    _score_sample(ctx, Variant.evaluation, sample, export_json, options)


@cli.command()
@_roast_options
@click.pass_context
def roast(
    ctx: click.Context,
    sample: str | None,
    export_json: str | None,
    **options: Any,
) -> None:
    """Classify a roast log and check its development ratio."""
    console: Console = ctx.obj["console"]
    engine: ScoringEngine = ctx.obj["engine"]

    raw: dict[str, Any] = {}
    if sample is not None:
        try:
            raw.update(get_roast(sample).params.model_dump())
        except KeyError as exc:
            console.print(f"[red]{exc.args[0]}[/]")
            raise SystemExit(1)
    raw.update({k: v for k, v in options.items() if v is not None})

    params = normalize_roast(raw)
    result = engine.analyze_roast(params)

    renderer = TerminalRenderer(console)
    renderer.render_roast(result, params=params)

    if export_json:
        _export_json(result, export_json, console)


@cli.command()
@click.argument("config", type=click.Path())
@click.option(
    "--export-json", type=click.Path(), default=None,
    help="Export all results as JSON at this path",
)
@click.pass_context
def batch(ctx: click.Context, config: str, export_json: str | None) -> None:
    """Score every sample in a YAML batch file."""
    console: Console = ctx.obj["console"]
    engine: ScoringEngine = ctx.obj["engine"]

    try:
        batch_config = load_batch(config)
    except FileNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
        raise SystemExit(1)
    except ValidationError as exc:
        console.print(f"[red]Invalid batch file {config}:[/]\n{escape(str(exc))}")
        raise SystemExit(1)

    renderer = TerminalRenderer(console)
    session = batch_config.session
    results = []
    evaluations = []
    totals = []

    try:
        for entry in batch_config.samples:
            info = entry.sample_info()
            result = entry.score(engine)
            results.append(result)
            if entry.variant is Variant.roast:
                renderer.render_roast(result, params=normalize_roast(entry.values), info=info)
                continue
            attributes = entry.cupping_attributes()
            renderer.render_score(
                result,
                attributes=attributes,
                green=normalize_green(entry.values) if entry.variant is Variant.quality else None,
                info=info,
            )
            if entry.variant is Variant.evaluation:
                evaluations.append(attributes)
                totals.append(result.score)
    except ValidationError as exc:
        console.print(f"[red]Invalid sample metadata in {config}:[/]\n{escape(str(exc))}")
        raise SystemExit(1)

    summary = None
    if evaluations:
        summary = summarize_session(evaluations)
        renderer.render_session(summary, name=session.name, totals=totals)

    if export_json:
        payload = {
            "session": session.model_dump(mode="json"),
            "results": [r.model_dump(mode="json") for r in results],
            "summary": summary.model_dump(mode="json") if summary else None,
        }
        with open(export_json, "w") as f:
            json.dump(payload, f, indent=2)
        console.print(f"  [green]JSON report exported to:[/green] {export_json}")


@cli.command()
@click.pass_context
def samples(ctx: click.Context) -> None:
    """List the built-in sample and roast presets."""
    renderer = TerminalRenderer(ctx.obj["console"])
    renderer.render_presets()


@cli.command()
@click.option("--host", default="127.0.0.1", help="Interface to listen on")
@click.option("--port", "-p", default=8080, type=int, help="Port to listen on")
@click.option(
    "--cors-origin", "cors_origins", multiple=True,
    help="Origin allowed to call the API from a browser (repeatable; default any)",
)
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, cors_origins: tuple[str, ...]) -> None:
    """Serve the scoring endpoints over HTTP (requires the api extra)."""
    from cupping_lab.api import check_dependency

    for package in ("fastapi", "uvicorn"):
        check_dependency(package, "pip install -e '.[api]'")

    from cupping_lab.api.server import create_app
    import uvicorn

    console: Console = ctx.obj["console"]
    app = create_app(engine=ctx.obj["engine"], allow_origins=cors_origins or ("*",))
    console.print(
        f"[bold cyan]Cupping Lab API[/] on http://{host}:{port}/api/v1 "
        f"[dim](docs at /docs)[/]"
    )
    uvicorn.run(app, host=host, port=port, log_level=ctx.obj["log_level"])


def _export_json(result: BaseModel, path: str, console: Console) -> None:
    """Export to JSON."""
    with open(path, "w") as f:
        f.write(result.model_dump_json(indent=2))
    console.print(f"  [green]JSON report exported to:[/green] {path}")
