from .geometry import Rect, DiamondBounds
from .composition import (
    Canvas, ProtectedShape, PlacedRect, ShapeRole, SizeClass,
    BalanceMetrics, CompositionStats, Composition, classify_role,
)
from .parameters import (
    LayoutParams, BalanceParams, PaletteEntry, ColorParams,
    GenerationParams, GenerationConfig,
)
from .partition import PartitionNode, PartitionTree, OccupancyGrid
from .context import GenerationContext

__all__ = [
    "Rect", "DiamondBounds",
    "Canvas", "ProtectedShape", "PlacedRect", "ShapeRole", "SizeClass",
    "BalanceMetrics", "CompositionStats", "Composition", "classify_role",
    "LayoutParams", "BalanceParams", "PaletteEntry", "ColorParams",
    "GenerationParams", "GenerationConfig",
    "PartitionNode", "PartitionTree", "OccupancyGrid",
    "GenerationContext",
]
