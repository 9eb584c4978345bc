"""Shared fixtures for the composition tests."""
from __future__ import annotations

import pytest

from boogie.core.registry import create_default_registry
from boogie.models import Canvas, DiamondBounds, GenerationContext, ProtectedShape
from boogie.services.composition_service import CompositionService
from boogie.services.sample import SAMPLE_CANVAS, sample_protected


@pytest.fixture
def canvas() -> Canvas:
    return Canvas(width=400, height=400)


@pytest.fixture
def diamond() -> DiamondBounds:
    return DiamondBounds()


@pytest.fixture
def registry():
    return create_default_registry()


@pytest.fixture
def service() -> CompositionService:
    return CompositionService()


@pytest.fixture
def sample_shapes() -> list[ProtectedShape]:
    return sample_protected()


@pytest.fixture
def sample_canvas() -> Canvas:
    return SAMPLE_CANVAS


@pytest.fixture
def context(canvas) -> GenerationContext:
    """Bare context with default params, for rule-level tests."""
    return GenerationContext.create(canvas, [], "fixture")
