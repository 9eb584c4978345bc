"""Generation parameters and configuration."""

from __future__ import annotations
from typing import Literal
from pydantic import BaseModel, Field

from .geometry import DiamondBounds


class LayoutParams(BaseModel):
    """Controls how free space is partitioned into candidate leaves."""
    cell: float = Field(default=20.0, gt=0)            # Base module (pixels)
    min_split_size: float = Field(default=40.0, gt=0)  # Smallest side a part may have
    max_depth: int = Field(default=8, ge=0)            # Deepest tree level
    split_probability: float = Field(default=0.8, ge=0, le=1)
    min_aspect: float = Field(default=0.2, gt=0)       # Width/height window a node
    max_aspect: float = Field(default=5.0, gt=0)       # must fall in to be split


class BalanceParams(BaseModel):
    """Envelope the accepted fill has to stay inside."""
    min_white: float = Field(default=0.3, ge=0, le=1)
    max_white: float = Field(default=0.55, ge=0, le=1)
    max_color_dominance: float = Field(default=0.35, ge=0, le=1)
    max_fill_jump: float = Field(default=0.15, ge=0, le=1)  # Per-acceptance growth cap


class PaletteEntry(BaseModel):
    color: str
    weight: float = Field(gt=0)


def _default_palette() -> list[PaletteEntry]:
    return [
        PaletteEntry(color="#f2c500", weight=30),  # yellow
        PaletteEntry(color="#d62828", weight=25),  # red
        PaletteEntry(color="#1f3c88", weight=15),  # blue
        PaletteEntry(color="#f5f5f5", weight=30),  # white
    ]


class ColorParams(BaseModel):
    """Palette, weights and the colour rules' thresholds."""
    palette: list[PaletteEntry] = Field(default_factory=_default_palette, min_length=1)
    white: str = "#f5f5f5"
    large_area_white_threshold: float = 140 * 140  # Above this a region is forced white
    neighbor_repulsion: int = Field(default=2, ge=1)  # Neighbour uses that exclude a colour


class GenerationParams(BaseModel):
    """User-adjustable parameters for a composition run."""
    layout: LayoutParams = Field(default_factory=LayoutParams)
    balance: BalanceParams = Field(default_factory=BalanceParams)
    color: ColorParams = Field(default_factory=ColorParams)


class GenerationConfig(BaseModel):
    """Controls which strategies and rules are applied."""
    strategy: Literal["tree", "grid"] = "tree"   # Partition tree or void resolver
    diamond: DiamondBounds = Field(default_factory=DiamondBounds)
    enabled_rules: list[str] = []                # Empty = use all registered defaults
    disabled_rules: list[str] = []               # Explicitly disable specific rules
