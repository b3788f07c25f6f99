"""Pydantic schemas for system endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service status, always 'ok' when the app answers")
    app: str = Field(..., description="Configured application name")
    environment: str = Field(..., description="Deployment environment name")
