"""Custom exception hierarchy for siteify."""

from __future__ import annotations


class SiteifyError(Exception):
    """Base exception for siteify."""

    pass


class ConfigError(SiteifyError):
    """Raised when configuration loading or validation fails."""

    pass


class MissingInputError(SiteifyError):
    """Raised when a health file to be siteified does not exist."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"You seem to have misplaced your {filename} file.")
