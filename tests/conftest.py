"""Test setup for headingcheck."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from headingcheck.html_utils import parse_document  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


@pytest.fixture
def parse():
    """Parse an HTML snippet with the default tree builder."""
    return parse_document


@pytest.fixture
def outline_html() -> str:
    """Document mixing a skipped level with an out-of-place heading."""
    return """
      <section>
        <h1>Heading 1</h1>
        <section>
          <h2>Heading 2</h2>
          <h2>Another Heading 2</h2>
          <section>
            <h3>Heading 3</h3>
            <section>
              <h4>Heading 4</h4>
              <section>
                <h2>An out of place Heading 2</h2>
                <h5>Heading 5</h5>
              </section>
            </section>
          </section>
        </section>
      </section>
    """
