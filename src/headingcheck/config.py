"""Local configuration for headingcheck."""

from __future__ import annotations

import os


DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; HeadingChecker/1.0)"
DEFAULT_HTML_PARSER = "lxml"

HEADINGCHECK_FETCH_TIMEOUT_S = float(os.getenv("HEADINGCHECK_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
HEADINGCHECK_FETCH_MAX_RETRIES = int(os.getenv("HEADINGCHECK_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
HEADINGCHECK_FETCH_BACKOFF_S = float(os.getenv("HEADINGCHECK_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
HEADINGCHECK_USER_AGENT = os.getenv("HEADINGCHECK_USER_AGENT", DEFAULT_USER_AGENT)
# BeautifulSoup tree builder; "html.parser" works without lxml installed.
HEADINGCHECK_HTML_PARSER = os.getenv("HEADINGCHECK_HTML_PARSER", DEFAULT_HTML_PARSER)
