"""Tally inventory counts by item and date in a small web app, and produce HTML and PDF reports."""

__version__ = "0.1.0"

__all__ = ["cid", "entries", "juicecount", "kebab", "reports", "server", "sitegen"]