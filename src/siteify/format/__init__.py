"""Format tasks: run the site's linters."""

from siteify.format.lint_runner import LintRunner

__all__ = ["LintRunner"]
