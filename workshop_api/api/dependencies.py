# This file provides dependency factories for FastAPI routes.
# Services are created once and shared through dependency injection,
# which lets tests swap them through `app.dependency_overrides`.

from __future__ import annotations

from functools import lru_cache

from workshop_api.api.api_config import ApiConfig, get_api_config
from workshop_api.api.services.calc_age_service import CalcAgeService, build_clock


@lru_cache(maxsize=1)
def get_calc_age_service() -> CalcAgeService:
    config = get_api_config()
    return CalcAgeService(clock=build_clock(config.timezone))


def get_config() -> ApiConfig:
    return get_api_config()
