"""Wire schema, version 1. Field names are snake_case throughout."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

SCHEMA_VERSION = "1"


class ConvertTimeBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    city: str = Field(min_length=1, max_length=64)
    hour: int = Field(ge=0, le=23, strict=True)
    minute: int = Field(ge=0, le=59, strict=True)


class CurrentTimeResponse(BaseModel):
    toronto_time: str
    tehran_time: str
    toronto_time_str: str
    tehran_time_str: str


class ConvertTimeResponse(BaseModel):
    source_city: str
    source_time: str
    target_city: str
    target_time: str


class ErrorResponse(BaseModel):
    error: str


__all__ = [
    "SCHEMA_VERSION",
    "ConvertTimeBody",
    "ConvertTimeResponse",
    "CurrentTimeResponse",
    "ErrorResponse",
]
