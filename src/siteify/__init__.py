"""siteify: build-time helpers for the documentation website."""

__version__ = "0.1.0"
