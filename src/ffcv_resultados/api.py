"""FastAPI application exposing FFCV standings, round and calendar data."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from .config import AppConfig, load_config
from .ffcv import FfcvClient
from .report import build_html_report, collect_report_sections

LOGGER = logging.getLogger(__name__)


def _serialize(loader: Callable[[], Sequence[Any]], error_message: str) -> List[Dict[str, Any]]:
    """Run ``loader`` and encode its records, turning any failure into a 500."""

    try:
        records = loader()
    except Exception as exc:
        LOGGER.error("%s: %s", error_message, exc)
        raise HTTPException(status_code=500, detail=error_message) from exc
    return [record.as_dict() for record in records]


def create_app(
    client: Optional[FfcvClient] = None,
    *,
    config: Optional[AppConfig] = None,
) -> FastAPI:
    config = config or AppConfig()
    client = client or FfcvClient.from_config(config)

    app = FastAPI(title="Resultados FFCV API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/api/standings")
    @app.get("/api/clasificacion", include_in_schema=False)
    def get_standings() -> List[Dict[str, Any]]:
        """Return the league table in source order."""

        return _serialize(client.get_standings, "Error al obtener la clasificación")

    @app.get("/api/round")
    @app.get("/api/jornada", include_in_schema=False)
    def get_current_round() -> List[Dict[str, Any]]:
        """Return the fixtures of the current round."""

        return _serialize(client.get_current_round, "Error al obtener la jornada actual")

    @app.get("/api/calendar")
    @app.get("/api/calendario", include_in_schema=False)
    def get_calendar() -> List[Dict[str, Any]]:
        """Return the season calendar grouped by round."""

        return _serialize(client.get_calendar, "Error al obtener el calendario")

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        sections = collect_report_sections(client)
        return HTMLResponse(content=build_html_report(**sections))

    return app


_DEFAULT_APP: Optional[FastAPI] = None


def get_default_app() -> FastAPI:
    """Build the app from ``load_config()`` on first use."""

    global _DEFAULT_APP
    if _DEFAULT_APP is None:
        _DEFAULT_APP = create_app(config=load_config())
    return _DEFAULT_APP


def __getattr__(name: str) -> Any:
    # ``uvicorn ffcv_resultados.api:app`` resolves the app lazily.
    if name == "app":
        return get_default_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
