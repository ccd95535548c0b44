"""Data models for the SQL parse tree service."""

from .api_response import HealthResponse, ServiceInfo
from .parse import ParseRequest, ParseResponse

__all__ = [
    # Parse models
    "ParseRequest",
    "ParseResponse",
    # API response models
    "HealthResponse",
    "ServiceInfo",
]
