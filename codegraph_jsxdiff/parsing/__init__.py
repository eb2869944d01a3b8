"""
Parsing Layer

Tree-sitter parsing for TypeScript / TSX / JavaScript (JSX).

Components:
- parser_registry: Grammar management and extension detection
- source_file: Source file representation
- ast_tree: AST wrapper with traversal and ancestor lookup
"""

from codegraph_jsxdiff.parsing.ast_tree import AstTree
from codegraph_jsxdiff.parsing.parser_registry import ParserRegistry, get_registry
from codegraph_jsxdiff.parsing.source_file import SourceFile

__all__ = [
    "ParserRegistry",
    "get_registry",
    "SourceFile",
    "AstTree",
]
