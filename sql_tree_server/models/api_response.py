"""API response data models."""

from typing import List

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response from health check."""

    status: str
    version: str


class ServiceInfo(BaseModel):
    """Service banner returned from the root endpoint."""

    message: str
    version: str
    docs: str
    grammar: str
    tools: List[str] = []
