"""Bundled 400x400 demo dataset: tape bars, anchors and boogie clusters."""

from __future__ import annotations

from boogie.models import Canvas, ProtectedShape

SAMPLE_CANVAS = Canvas(width=400, height=400)

SAMPLE_SEED = "demo-seed-001"

_SHAPES: list[tuple[str, float, float, float, float, str]] = [
    # Soft tape bars
    ("b1", 0, 40, 400, 20, "#f2f2f2"),
    ("b2", 60, 0, 20, 400, "#f2f2f2"),
    ("b3", 220, 0, 20, 400, "#f2f2f2"),
    ("b4", 0, 240, 400, 20, "#f2f2f2"),
    # Anchors
    ("a1", 80, 80, 80, 60, "#d62828"),
    ("a2", 260, 80, 60, 60, "#1f3c88"),
    ("a3", 280, 280, 80, 60, "#f2c500"),
    # Cluster, top left
    ("s1", 100, 60, 20, 20, "#f2c500"),
    ("s2", 120, 60, 20, 20, "#f5f5f5"),
    ("s3", 140, 60, 20, 20, "#d62828"),
    # Cluster, centre
    ("s4", 180, 180, 20, 20, "#1f3c88"),
    ("s5", 200, 180, 20, 20, "#f2c500"),
    ("s6", 180, 200, 20, 20, "#f5f5f5"),
    ("s7", 200, 200, 20, 20, "#d62828"),
    # Cluster, bottom left
    ("s8", 40, 300, 20, 20, "#d62828"),
    ("s9", 60, 300, 20, 20, "#f2c500"),
    ("s10", 80, 300, 20, 20, "#1f3c88"),
    # Cluster, right edge
    ("s11", 360, 140, 20, 20, "#f2c500"),
    ("s12", 360, 160, 20, 20, "#d62828"),
    ("s13", 360, 180, 20, 20, "#f5f5f5"),
    ("s14", 360, 180, 20, 20, "#d62828"),
]


def sample_protected() -> list[ProtectedShape]:
    return [
        ProtectedShape(id=sid, x=x, y=y, w=w, h=h, color=color)
        for sid, x, y, w, h, color in _SHAPES
    ]
