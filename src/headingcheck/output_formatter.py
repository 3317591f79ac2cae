"""Render an analysis result as a readable text report."""

from __future__ import annotations

from headingcheck.outline import iter_outline
from headingcheck.schemas import AnalysisResult, HeadingNode

_INDENT = "  "


def format_report(result: AnalysisResult) -> str:
    """Create the outline tree followed by the findings."""
    lines = ["Outline:"]
    outline = [
        f"{_INDENT * (depth + 1)}{_label(node)}"
        for depth, node in iter_outline(result.semantic_structure)
    ]
    lines.extend(outline or [f"{_INDENT}(no headings)"])

    lines.append("")
    lines.append(f"Skipped levels: {len(result.skipped_levels)}")
    for parent, child in result.skipped_levels:
        lines.append(f"{_INDENT}{_label(parent)} -> {_label(child)}")

    lines.append("")
    lines.append(f"Incongruent headings: {len(result.incongruent_headings)}")
    for node in result.incongruent_headings:
        lines.append(f"{_INDENT}{_label(node)}")

    return "\n".join(lines)


def _label(node: HeadingNode) -> str:
    return f"<{node.tag}> {node.content}"
