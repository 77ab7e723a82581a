# This file defines schema pieces shared by several API endpoints.
# The error payload here matches what `register_error_handlers` renders.

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Any | None = None
    request_id: str
    timestamp: datetime
