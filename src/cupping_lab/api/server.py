# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""FastAPI application factory for the cupping lab REST API."""

from __future__ import annotations

from typing import Sequence

from cupping_lab.api import check_dependency

check_dependency("fastapi", "pip install -e '.[api]'")

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

import cupping_lab  # noqa: E402
from cupping_lab.api.routes import get_engine, router  # noqa: E402
from cupping_lab.scoring.engine import ScoringEngine  # noqa: E402


def create_app(
    engine: ScoringEngine | None = None,
    allow_origins: Sequence[str] = ("*",),
) -> FastAPI:
    """Build the cupping lab API.

    *engine* replaces the shared scoring engine for every endpoint, which
    lets a deployment plug in its own advisory rule set.  Browser access
    is limited to *allow_origins*; the web forms post raw values, so only
    ``GET`` and ``POST`` are allowed.
    """
    app = FastAPI(
        title="Cupping Lab API",
        description=(
            "Score cupping forms, grade green coffee, classify roast logs "
            "and summarize cupping sessions."
        ),
        version=cupping_lab.__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(allow_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(router)

    if engine is not None:
        app.dependency_overrides[get_engine] = lambda: engine
    return app
