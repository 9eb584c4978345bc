"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from boogie.models import Composition, ProtectedShape
from boogie.services.composition_service import CompositionService
from boogie.services.sample import SAMPLE_CANVAS, SAMPLE_SEED, sample_protected
from boogie.api.schemas import (
    GenerateRequest, GenerateResponse, RuleInfo,
)

router = APIRouter()

# Shared service instance
_service = CompositionService()


def _response(composition: Composition) -> GenerateResponse:
    order = []
    fill_index = 0
    for shape in composition.draw_order():
        if isinstance(shape, ProtectedShape):
            order.append(shape.id)
        else:
            order.append(f"fill:{fill_index}")
            fill_index += 1
    return GenerateResponse(
        composition=composition,
        draw_order=order,
        rule_count=len(_service.list_rules()),
        protected_count=len(composition.protected),
    )


@router.post("/generate", response_model=GenerateResponse)
async def generate_composition(request: GenerateRequest) -> GenerateResponse:
    """Generate a composition around the given protected shapes."""
    try:
        composition = _service.generate(
            request.canvas, request.protected, request.seed,
            request.params, request.config,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _response(composition)


@router.post("/preview", response_model=GenerateResponse)
async def preview_composition(request: GenerateRequest) -> GenerateResponse:
    """Protected shapes only, clipped to the diamond, no generated fill."""
    composition = _service.preview(
        request.canvas, request.protected, request.seed,
        request.params, request.config,
    )
    return _response(composition)


@router.get("/sample", response_model=GenerateRequest)
async def sample() -> GenerateRequest:
    """The bundled demo dataset as a ready-to-send request."""
    return GenerateRequest(
        canvas=SAMPLE_CANVAS, protected=sample_protected(), seed=SAMPLE_SEED,
    )


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available pattern rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
