"""Rebuild the heading outline from semantic levels."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from headingcheck.extractor import HeadingInfo, heading_level
from headingcheck.schemas import HeadingNode

logger = logging.getLogger(__name__)

SkippedLevel = tuple[HeadingNode, HeadingNode]


def build_semantic_tree(
    headings: Sequence[HeadingInfo],
) -> tuple[list[HeadingNode], list[SkippedLevel]]:
    """Nest headings under the closest preceding stronger heading.

    Attaches children in place on each ``HeadingInfo.node`` and returns the
    root nodes together with every parent/child edge that skips a level.
    Skipped-level pairs are snapshots, so later changes to the tree do not
    leak into them.

    Args:
        headings: Headings in document order.

    Returns:
        Tuple of (roots, skipped_levels).
    """
    roots: list[HeadingNode] = []
    skipped: list[SkippedLevel] = []
    stack: list[HeadingNode] = []

    for info in headings:
        current = info.node
        level = info.level

        # Equal levels pop too: siblings never nest under each other.
        while stack and heading_level(stack[-1].tag) >= level:
            stack.pop()

        if stack:
            parent = stack[-1]
            parent.children.append(current)
            if level - heading_level(parent.tag) > 1:
                skipped.append((parent.snapshot(), current.snapshot()))
        else:
            roots.append(current)

        stack.append(current)

    logger.debug(
        "Built outline with %d roots and %d skipped levels", len(roots), len(skipped)
    )
    return roots, skipped


def iter_outline(roots: Sequence[HeadingNode]) -> Iterator[tuple[int, HeadingNode]]:
    """Yield ``(depth, node)`` for every node of the outline in pre-order."""
    for root in roots:
        yield from _walk(root, 0)


def _walk(node: HeadingNode, depth: int) -> Iterator[tuple[int, HeadingNode]]:
    yield depth, node
    for child in node.children:
        yield from _walk(child, depth + 1)
