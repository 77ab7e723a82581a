# This file defines the version metadata block carried by operational responses.

from __future__ import annotations


def build_version_fields(*, app_version: str, schema_version: str) -> dict[str, str]:
    """Return a normalized version metadata block."""

    return {
        "app_version": app_version,
        "schema_version": schema_version,
    }
