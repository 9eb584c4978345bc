"""Hierarchical partition of free space into a binary tree of rectangles."""

from __future__ import annotations
import logging
import math

from boogie.core.rng import SeededRng
from boogie.models import (
    DiamondBounds, LayoutParams, PartitionNode, PartitionTree,
    ProtectedShape, Rect,
)

log = logging.getLogger(__name__)


class PartitionTreeBuilder:
    """
    Recursively splits the diamond's bounding box into an irregular
    binary tree.

    Whether a node may split is decided deterministically by
    `is_eligible()`; whether it actually does is a separate Bernoulli
    draw in `decide_split()`, so the tree thins out stochastically
    instead of becoming a regular quadtree.
    """

    def __init__(self, layout: LayoutParams, diamond: DiamondBounds) -> None:
        self.layout = layout
        self.diamond = diamond

    def build_tree(
        self, protected: list[ProtectedShape], rng: SeededRng,
    ) -> PartitionTree:
        tree = PartitionTree.with_root(self.diamond.bounding_rect())
        self.mark_protected(tree.root, protected)
        self.recursive_split(tree, tree.root, protected, rng)
        return tree

    def mark_protected(self, node: PartitionNode, protected: list[ProtectedShape]) -> None:
        """Flag nodes that lie entirely under one protected shape."""
        node.is_protected = any(p.contains(node) for p in protected)

    def is_eligible(self, node: PartitionNode) -> bool:
        layout = self.layout
        if node.depth >= layout.max_depth:
            return False
        if node.w < layout.min_split_size or node.h < layout.min_split_size:
            return False
        return layout.min_aspect <= node.aspect_ratio <= layout.max_aspect

    def decide_split(self, node: PartitionNode, rng: SeededRng) -> bool:
        return rng.chance(self.layout.split_probability)

    def split(self, tree: PartitionTree, node: PartitionNode, rng: SeededRng) -> bool:
        """Split `node` into two children; returns False if it stays a leaf."""
        if not self.is_eligible(node) or not self.decide_split(node, rng):
            return False

        # Cut across the longer side; squares flip a coin
        if node.w > node.h:
            horizontal = False
        elif node.w < node.h:
            horizontal = True
        else:
            horizontal = rng.chance(0.5)

        length = node.h if horizontal else node.w
        cut = length * (0.3 + rng.next_float() * 0.4)
        cut = math.floor(cut / self.layout.cell) * self.layout.cell
        if cut < self.layout.min_split_size or length - cut < self.layout.min_split_size:
            return False

        if horizontal:
            parts = [
                Rect(x=node.x, y=node.y, w=node.w, h=cut),
                Rect(x=node.x, y=node.y + cut, w=node.w, h=node.h - cut),
            ]
        else:
            parts = [
                Rect(x=node.x, y=node.y, w=cut, h=node.h),
                Rect(x=node.x + cut, y=node.y, w=node.w - cut, h=node.h),
            ]
        for part in parts:
            tree.add_node(part, depth=node.depth + 1, parent=node.index)
        return True

    def recursive_split(
        self,
        tree: PartitionTree,
        node: PartitionNode,
        protected: list[ProtectedShape],
        rng: SeededRng,
    ) -> None:
        if node.is_protected:
            return
        if not self.diamond.intersects_rect(node):
            # Excluded from the fill but still occupies tree space
            node.is_protected = True
            return

        if not self.split(tree, node, rng):
            return

        for child in tree.get_children(node):
            self.mark_protected(child, protected)
            if not child.is_protected and not self.diamond.intersects_rect(child):
                child.is_protected = True
            if not child.is_protected:
                # Children overlapping a protected shape still split; the
                # fill loop carves the free part out of them later
                self.recursive_split(tree, child, protected, rng)

    def fillable_leaves(self, tree: PartitionTree) -> list[Rect]:
        leaves = tree.get_all_leaves()
        fillable = [leaf.as_rect() for leaf in leaves if not leaf.is_protected]
        log.info(
            "Tree built. Total leaves: %d, fillable: %d", len(leaves), len(fillable),
        )
        return fillable
