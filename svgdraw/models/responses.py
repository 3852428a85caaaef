"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from svgdraw.models.svg_document import SvgBasicDocumentModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ParseResponse(BaseModel):
    document: SvgBasicDocumentModel
    processing_time_ms: float = 0.0


class DrawOpModel(BaseModel):
    name: str
    args: list[Any] = Field(default_factory=list)


class RenderResponse(BaseModel):
    ops: list[DrawOpModel] = Field(default_factory=list)
    error: str | None = None
    path_errors: int = 0
    processing_time_ms: float = 0.0
