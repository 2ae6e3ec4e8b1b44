"""FastAPI Application Factory."""

from __future__ import annotations

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sla_map.api.data import router as data_router
from sla_map.api.map import router as map_router
from sla_map.config import Settings

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Strukturiertes Logging mit Zeitstempel, Level und Modul-Name."""
    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    root = logging.getLogger("sla_map")
    root.setLevel(logging.INFO)
    # create_app() kann mehrfach laufen (Tests)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
        root.addHandler(handler)
    # Verhindert doppelte Log-Eintraege bei uvicorn
    root.propagate = False


def create_app() -> FastAPI:
    """Erstellt und konfiguriert die FastAPI-Anwendung."""
    _configure_logging()
    settings = Settings()

    app = FastAPI(
        title="SLA Map API",
        description="SLA-Weltkarte: NRQL-Ergebnisse pro Land aggregiert und eingefaerbt.",
        version="0.1.0",
    )

    # CORS (konfigurierbar via CORS_ORIGINS env variable)
    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(map_router)
    app.include_router(data_router)

    @app.on_event("startup")
    async def _log_configuration() -> None:
        # API-Key-Status (maskiert, nie den echten Key loggen)
        logger.info(
            "NerdGraph: %s (%s)",
            "API Key konfiguriert" if settings.nerdgraph_configured else "nicht konfiguriert",
            settings.nerdgraph_url,
        )
        logger.info("Nominal-Farbe: %s", settings.nominal_color)

    return app
