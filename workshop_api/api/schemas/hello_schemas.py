# This file defines the response schema for the greeting endpoint.

from __future__ import annotations

from pydantic import BaseModel


class HelloResponse(BaseModel):
    message: str
