# This file defines the age calculation endpoint.
# The raw `birthDay` query string is handed to the service, which parses and validates it.
# Rejected input is translated into a 400 APIError carrying the service's error code.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from workshop_api.api.dependencies import get_calc_age_service
from workshop_api.api.error_handlers import APIError
from workshop_api.api.schemas.calc_age_schemas import CalcAgeResponse
from workshop_api.api.schemas.common import ErrorResponse
from workshop_api.api.services.calc_age_service import AgeCalculationError, CalcAgeService

router = APIRouter(prefix="/calc-age", tags=["calc-age"])
CalcAgeServiceDep = Annotated[CalcAgeService, Depends(get_calc_age_service)]


@router.get(
    "",
    response_model=CalcAgeResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing, malformed, or future birth date."}},
)
def calculate_age(
    service: CalcAgeServiceDep,
    birth_day: str | None = Query(
        default=None,
        alias="birthDay",
        description="Birth date in ISO-8601 format (YYYY-MM-DD).",
        examples=["1990-04-01"],
    ),
) -> dict[str, int]:
    try:
        age = service.calculate_age_from_text(birth_day)
    except AgeCalculationError as exc:
        raise APIError(
            status_code=400,
            error_code=exc.error_code,
            message=str(exc),
            details={"birthDay": birth_day},
        ) from exc

    return {"age": age}
