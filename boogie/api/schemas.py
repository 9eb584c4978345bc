"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from boogie.models import (
    Canvas, Composition, GenerationConfig, GenerationParams, ProtectedShape,
)


class GenerateRequest(BaseModel):
    """Request body for the /generate and /preview endpoints."""
    canvas: Canvas
    protected: list[ProtectedShape] = []
    seed: str = Field(min_length=1)
    params: GenerationParams = GenerationParams()
    config: GenerationConfig = GenerationConfig()


class GenerateResponse(BaseModel):
    """Response from the /generate and /preview endpoints."""
    composition: Composition
    draw_order: list[str]    # Shape ids / fill indices, back to front
    rule_count: int
    protected_count: int


class RuleInfo(BaseModel):
    id: str
    name: str
