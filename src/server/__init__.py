"""HTTP API for headingcheck."""
