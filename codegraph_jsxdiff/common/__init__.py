"""
Common utilities: exceptions and observability.
"""

from codegraph_jsxdiff.common.exceptions import JsxDiffError, ParsingError, UnsupportedLanguageError
from codegraph_jsxdiff.common.observability import configure_logging, get_logger, reset_logging

__all__ = [
    "JsxDiffError",
    "ParsingError",
    "UnsupportedLanguageError",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
