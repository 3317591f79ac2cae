"""Heading outline models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HeadingNode(BaseModel):
    """A heading in the reconstructed outline."""

    tag: str
    content: str
    children: list["HeadingNode"] = Field(default_factory=list)

    def snapshot(self) -> HeadingNode:
        """Copy tag and content with an empty, unshared children list."""
        return HeadingNode(tag=self.tag, content=self.content)


class AnalysisResult(BaseModel):
    """Outcome of a heading structure analysis.

    Field aliases are the wire names used by the JSON API and must stay
    hyphenated.

    Attributes:
        semantic_structure: Root headings of the outline built from levels.
        skipped_levels: (parent, child) snapshots whose levels differ by more
            than one.
        incongruent_headings: Snapshots of headings nested deeper than an
            earlier, weaker heading.
    """

    model_config = ConfigDict(populate_by_name=True)

    semantic_structure: list[HeadingNode] = Field(
        default_factory=list, alias="semantic-structure"
    )
    skipped_levels: list[tuple[HeadingNode, HeadingNode]] = Field(
        default_factory=list, alias="skipped-levels"
    )
    incongruent_headings: list[HeadingNode] = Field(
        default_factory=list, alias="incongruent-headings"
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Return the JSON-ready payload keyed by the hyphenated names."""
        return self.model_dump(mode="json", by_alias=True)
