"""
Exception hierarchy for codegraph-jsxdiff.

Diff and source inputs never raise: malformed sections are dropped and
malformed sources produce partial trees. These exceptions cover failures
of the environment (e.g. a grammar that cannot be loaded).

Example:
    try:
        tree = AstTree.parse(source)
    except UnsupportedLanguageError as e:
        logger.error("grammar_unavailable", language=e.details["language"])
        raise
"""

from typing import Any


class JsxDiffError(Exception):
    """Base exception for all codegraph-jsxdiff errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ParsingError(JsxDiffError):
    """Source parsing failures."""

    pass


class UnsupportedLanguageError(ParsingError):
    """No grammar is available for the requested language."""

    def __init__(self, language: str):
        super().__init__(f"Language not supported: {language}", {"language": language})
