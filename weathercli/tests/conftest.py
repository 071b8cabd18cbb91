"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from weathercli.ingest.report_parser import parse_report
from weathercli.models.weather import Report

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def london_payload() -> dict:
    """Fresh copy of the London forecast.json payload."""
    with open(FIXTURE_DIR / "forecast_london.json") as f:
        return json.load(f)


@pytest.fixture
def london_report(london_payload: dict) -> Report:
    return parse_report(london_payload)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove the tool's environment variables for the duration of a test."""
    monkeypatch.delenv("WEATHER_API_KEY", raising=False)
    monkeypatch.delenv("WEATHER_CONFIG", raising=False)
    return monkeypatch
