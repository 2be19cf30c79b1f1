"""Liveness and readiness payloads."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """GET /health: the process is up."""

    status: Literal["ok"] = "ok"


class ReadinessResponse(BaseModel):
    """GET /health/ready: Postgres answered SELECT 1."""

    status: Literal["ok"] = "ok"
    database: Literal["up"] = "up"


class ReadinessErrorResponse(BaseModel):
    """GET /health/ready when the database is missing or unreachable (503)."""

    status: Literal["not_ready"] = "not_ready"
    message: str = Field(..., description="Why the database check failed")
