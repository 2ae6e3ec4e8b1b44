"""Zentrale Konfiguration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, loaded from environment / .env file."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # NerdGraph (New Relic GraphQL API)
    nerdgraph_url: str = "https://api.newrelic.com/graphql"
    nerdgraph_api_key: str = ""
    query_timeout: float = 30.0

    # Karte
    nominal_color: str = "green"
    value_suffix: str = "%"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def nerdgraph_configured(self) -> bool:
        return bool(self.nerdgraph_api_key)
