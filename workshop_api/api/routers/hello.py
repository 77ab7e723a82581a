# This file defines the greeting endpoint.
# The response is constant and the endpoint takes no input.

from __future__ import annotations

from fastapi import APIRouter

from workshop_api.api.schemas.hello_schemas import HelloResponse

GREETING = "Hello, World!"

router = APIRouter(prefix="/hello", tags=["hello"])


@router.get("", response_model=HelloResponse)
def say_hello() -> dict[str, str]:
    return {"message": GREETING}
