"""Tests fuer Pydantic Request/Response Models (api/schemas.py, domain/models.py)."""

import pytest
from pydantic import ValidationError

from sla_map.api.schemas import SlaMapRequest, SlaMapResponse
from sla_map.config import Settings
from sla_map.domain.models import ThresholdConfig, ViewState


class TestSlaMapRequest:
    """Tests fuer die Widget-Konfiguration."""

    def test_camel_case_fields(self):
        req = SlaMapRequest.model_validate({
            "accountId": 123,
            "nrqlQueries": [{"query": "SELECT 1 FACET x"}],
            "combineMethod": "multiply",
            "decimalPlaces": 2,
            "warning": 99,
            "critical": 95,
            "title": "Checkout SLA",
        })
        assert req.account_id == 123
        assert req.nrql_queries is not None
        assert req.nrql_queries[0].query == "SELECT 1 FACET x"
        assert req.combine_method == "multiply"
        assert req.decimal_places == 2
        assert req.title == "Checkout SLA"

    def test_snake_case_fields(self):
        req = SlaMapRequest(account_id=1, decimal_places=1)
        assert req.account_id == 1
        assert req.decimal_places == 1

    def test_defaults(self):
        req = SlaMapRequest()
        assert req.account_id is None
        assert req.nrql_queries is None
        assert req.combine_method is None
        assert req.decimal_places is None
        assert req.title == ""

    def test_negative_decimal_places_raises(self):
        with pytest.raises(ValidationError):
            SlaMapRequest(decimal_places=-1)

    def test_too_many_decimal_places_raises(self):
        with pytest.raises(ValidationError):
            SlaMapRequest(decimal_places=21)

    def test_thresholds(self):
        req = SlaMapRequest(warning=99.5, critical=95)
        assert req.thresholds == ThresholdConfig(warning=99.5, critical=95)


class TestSlaMapResponse:
    """Tests fuer die Antwort."""

    def test_serialized_camel_case(self):
        resp = SlaMapResponse(state=ViewState.READY, value_suffix="%", query_time_ms=5)
        data = resp.model_dump(by_alias=True, mode="json")
        assert data["state"] == "ready"
        assert data["valueSuffix"] == "%"
        assert data["queryTimeMs"] == 5
        assert data["exampleQuery"] == ""


class TestSettings:
    """Tests fuer Settings-Defaults."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("NERDGRAPH_API_KEY", raising=False)
        settings = Settings(_env_file=None)
        assert settings.nerdgraph_url == "https://api.newrelic.com/graphql"
        assert settings.nominal_color == "green"
        assert settings.nerdgraph_configured is False
        assert settings.host == "0.0.0.0"
        assert settings.port == 8000

    def test_api_key_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NERDGRAPH_API_KEY", "NRAK-123")
        assert Settings(_env_file=None).nerdgraph_configured is True
