"""Detect headings whose nesting contradicts their semantic level."""

from __future__ import annotations

from typing import Sequence

from headingcheck.extractor import HeadingInfo
from headingcheck.schemas import HeadingNode


def detect_incongruent_headings(headings: Sequence[HeadingInfo]) -> list[HeadingNode]:
    """Flag headings nested deeper than an earlier, semantically weaker heading.

    A heading is incongruent when any preceding heading has a higher level
    number (weaker) yet sits at a smaller structural depth. The first such
    predecessor is enough; the scan is quadratic in the heading count.
    """
    incongruent: list[HeadingNode] = []
    for index, current in enumerate(headings):
        for preceding in headings[:index]:
            if (
                preceding.level > current.level
                and preceding.dom_depth < current.dom_depth
            ):
                incongruent.append(current.node.snapshot())
                break
    return incongruent
