"""Command line entry point: ``python -m headingcheck``."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from headingcheck.analysis import analyze_html, analyze_url
from headingcheck.exceptions import HeadingCheckError
from headingcheck.output_formatter import format_report

logger = logging.getLogger("headingcheck")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check heading levels and nesting of an HTML document."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", help="URL of the page to analyze")
    source.add_argument("--file", help="Local HTML file path")
    parser.add_argument(
        "--format",
        choices=("json", "tree"),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.url:
            result = asyncio.run(analyze_url(args.url))
        else:
            path = Path(args.file)
            if not path.is_file():
                print(f"HTML file not found: {path}", file=sys.stderr)
                return 1
            result = analyze_html(path.read_text(encoding="utf-8", errors="replace"))
    except HeadingCheckError as exc:
        logger.debug("Analysis failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.format == "tree":
        print(format_report(result))
    else:
        print(json.dumps(result.to_json_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
