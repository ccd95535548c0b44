"""Parse request and response data models."""

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    """SQL text to parse."""

    sql: str = Field(..., description="sql text to parse")


class ParseResponse(BaseModel):
    """Rendered syntax tree."""

    tree: str
