"""Shared fixtures for the calculator test-suite."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from calc_api.config import Settings
from calc_api.main import create_app
from calc_api.services.calculators import CalculatorEngine


@pytest.fixture
def engine() -> CalculatorEngine:
    return CalculatorEngine()


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="dev", api_prefix="/api", enable_access_log=True)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """Client without lifespan, so global logging config stays untouched."""
    return TestClient(create_app(settings))
