# This file defines the response schema for the age calculation endpoint.

from __future__ import annotations

from pydantic import BaseModel, Field


class CalcAgeResponse(BaseModel):
    age: int = Field(ge=0, description="Whole years elapsed since the birth date.")
