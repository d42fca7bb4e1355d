from __future__ import annotations

from pydantic import BaseModel, Field


class ParseRequestSchema(BaseModel):
    text: str
    globe: str | None = Field(default=None, min_length=1)
    precision: float | None = Field(default=None, gt=0.0, allow_inf_nan=False)


class GlobeCoordinateSchema(BaseModel):
    latitude: float
    longitude: float
    precision: float
    globe: str
    grammar: str


class FormatRequestSchema(BaseModel):
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    precision: float = Field(..., gt=0.0, allow_inf_nan=False)
    globe: str | None = Field(default=None, min_length=1)


class FormatResponseSchema(BaseModel):
    text: str


class ParseErrorSchema(BaseModel):
    detail: str
    text: str
    format: str
