# This file defines response schemas for health and version endpoints.
# The models include request tracing and version metadata for monitoring checks.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    app_version: str
    schema_version: str
    request_id: str
    status: str
    environment: str
    service_name: str
    timestamp: datetime


class VersionResponse(BaseModel):
    app_version: str
    schema_version: str
    request_id: str
    api_base_path: str
    git_commit: str | None = None
    project: str
    version: str
    timestamp: datetime
