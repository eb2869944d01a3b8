"""
Parser Registry for Tree-sitter

Maps file extensions to the JS-family grammars and hands out parsers.
"""

from pathlib import Path

from tree_sitter import Language, Parser
from tree_sitter_language_pack import get_language

from codegraph_jsxdiff.common.exceptions import UnsupportedLanguageError
from codegraph_jsxdiff.common.observability import get_logger

logger = get_logger(__name__)

# Extension → grammar. The javascript grammar parses JSX natively.
EXTENSION_LANGUAGES = {
    ".tsx": "tsx",
    ".jsx": "javascript",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
}

DEFAULT_LANGUAGE = "typescript"


class ParserRegistry:
    """
    Registry for language grammars.

    Grammars are loaded once and cached. Parsers are created per call:
    a tree-sitter Parser is stateful, so analyses running in parallel
    must not share one.
    """

    def __init__(self):
        self._languages: dict[str, Language] = {}
        self._setup_languages()

    def _register_language(self, name: str, aliases: list[str] | None = None) -> None:
        try:
            lang = get_language(name)
        except Exception as e:
            logger.warning("grammar_load_failed", language=name, error=str(e))
            return

        self._languages[name] = lang
        for alias in aliases or []:
            self._languages[alias] = lang
        logger.debug("grammar_loaded", language=name, aliases=aliases or [])

    def _setup_languages(self) -> None:
        self._register_language("typescript", ["ts"])
        self._register_language("tsx")
        self._register_language("javascript", ["js", "jsx"])

    def get_parser(self, language: str) -> Parser:
        """
        Create a parser for the language.

        Raises:
            UnsupportedLanguageError: If no grammar is loaded for it
        """
        lang = self._languages.get(language.lower())
        if lang is None:
            raise UnsupportedLanguageError(language)
        return Parser(lang)

    def detect_language(self, file_path: str | Path) -> str:
        """
        Detect grammar from file extension.

        Unknown extensions fall back to typescript.
        """
        return EXTENSION_LANGUAGES.get(Path(file_path).suffix.lower(), DEFAULT_LANGUAGE)


# Global registry instance
_registry: ParserRegistry | None = None


def get_registry() -> ParserRegistry:
    """Get global parser registry instance"""
    global _registry
    if _registry is None:
        _registry = ParserRegistry()
    return _registry
