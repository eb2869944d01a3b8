"""
Source File representation
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceFile:
    """
    New-file source text handed in by the caller.

    Attributes:
        file_path: Path as named in the diff
        content: File content
        language: Grammar name (tsx, typescript, javascript)
        encoding: Encoding used to produce parser bytes
    """

    file_path: str
    content: str
    language: str
    encoding: str = "utf-8"

    @classmethod
    def from_content(cls, file_path: str, content: str, language: str | None = None) -> "SourceFile":
        """
        Create source file from content string.

        Args:
            file_path: File path (used for language detection)
            content: Source code content
            language: Grammar override (auto-detected if None)
        """
        if language is None:
            from .parser_registry import get_registry

            language = get_registry().detect_language(file_path)

        return cls(file_path=file_path, content=content, language=language)

