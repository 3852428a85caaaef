"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    strict: bool | None = Field(
        default=None,
        description="Fail on the first malformed path instead of skipping it (defaults to server setting)",
    )


class RenderRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    scale: float = Field(default=1.0, gt=0, description="Document units → surface units")
    origin_x: float = Field(default=0.0, description="Surface x of the image origin")
    origin_y: float = Field(default=0.0, description="Surface y of the image origin")
