"""Extract heading elements with their semantic level and structural depth."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from headingcheck.schemas import HeadingNode

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


HEADING_TAGS: Final[tuple[str, ...]] = ("h1", "h2", "h3", "h4", "h5", "h6")
SECTIONING_TAGS: Final[frozenset[str]] = frozenset(
    {"section", "article", "aside", "nav", "div"}
)

_LEVEL_RE = re.compile(r"^h(\d)$")


@dataclass
class HeadingInfo:
    """A heading occurrence in document order.

    Only ``node.children`` is mutated after construction, by the outline
    builder.
    """

    node: HeadingNode
    dom_depth: int
    level: int


def extract_headings(document: BeautifulSoup | Tag) -> list[HeadingInfo]:
    """Collect every h1-h6 element in document order."""
    headings: list[HeadingInfo] = []
    for element in document.find_all(list(HEADING_TAGS)):
        tag = element.name.lower()
        node = HeadingNode(tag=tag, content=element.get_text().strip())
        headings.append(
            HeadingInfo(
                node=node,
                dom_depth=structural_depth(element),
                level=heading_level(tag),
            )
        )
    return headings


def heading_level(tag: str | None) -> int:
    """Return the numeric level of a heading tag, or 0 if it is not one."""
    match = _LEVEL_RE.match((tag or "").lower())
    if not match:
        return 0
    return int(match.group(1))


def structural_depth(element: Tag) -> int:
    """Count the sectioning containers among an element's ancestors."""
    depth = 0
    parent = element.parent
    while parent is not None:
        # The BeautifulSoup object itself is named "[document]".
        if parent.name and parent.name.lower() in SECTIONING_TAGS:
            depth += 1
        parent = parent.parent
    return depth
