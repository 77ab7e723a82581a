# This file provides shared helpers for API endpoint tests.
# Tests override dependencies with a deterministic config and a fixed-clock age service.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date

from fastapi.testclient import TestClient

from workshop_api.api.api_config import ApiConfig
from workshop_api.api.app import app
from workshop_api.api.dependencies import get_calc_age_service, get_config
from workshop_api.api.services.calc_age_service import CalcAgeService

FIXED_TODAY = date(2024, 6, 15)


def build_test_config() -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Workshop API",
        api_base_path="/api",
        schema_version="1.0.0",
        host="0.0.0.0",
        port=8000,
        environment="test",
        enable_request_logging=False,
        allowed_origins=[],
        app_version="0.1.0",
        timezone=None,
    )


def fixed_clock_service(today: date = FIXED_TODAY) -> CalcAgeService:
    return CalcAgeService(clock=lambda: today)


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    calc_age_service: CalcAgeService | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()
    resolved_service = calc_age_service or fixed_clock_service()

    app.dependency_overrides[get_config] = lambda: resolved_config
    app.dependency_overrides[get_calc_age_service] = lambda: resolved_service

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
