"""
AST Tree wrapper for Tree-sitter
"""

from collections.abc import Callable, Iterator

from tree_sitter import Node as TSNode
from tree_sitter import Tree as TSTree

from codegraph_jsxdiff.common.exceptions import ParsingError
from codegraph_jsxdiff.parsing.parser_registry import get_registry
from codegraph_jsxdiff.parsing.source_file import SourceFile


class AstTree:
    """
    Wrapper for Tree-sitter AST.

    Tree-sitter nodes are parent-linked and never mutated here, so
    ancestor lookups are plain upward walks (see find_ancestor).
    """

    def __init__(self, source: SourceFile, tree: TSTree, source_bytes: bytes):
        """
        Initialize AST tree.

        Args:
            source: Source file
            tree: Tree-sitter tree
            source_bytes: Encoded content the tree was parsed from
        """
        self.source = source
        self.tree = tree
        self._root = tree.root_node
        self._bytes = source_bytes

    @classmethod
    def parse(cls, source: SourceFile) -> "AstTree":
        """
        Parse source file into AST.

        Tree-sitter never fails on malformed input; syntax errors become
        ERROR / MISSING nodes (see get_errors).

        Raises:
            UnsupportedLanguageError: If no grammar is available
            ParsingError: If the parser returns no tree
        """
        parser = get_registry().get_parser(source.language)

        source_bytes = source.content.encode(source.encoding)
        tree = parser.parse(source_bytes)

        if tree is None:
            raise ParsingError(f"Failed to parse file: {source.file_path}", {"language": source.language})

        return cls(source, tree, source_bytes)

    @property
    def root(self) -> TSNode:
        """Get root node"""
        return self._root

    def walk(self, node: TSNode | None = None) -> Iterator[TSNode]:
        """
        Iterate nodes in depth-first pre-order (document order).

        Iterative, so deeply nested markup cannot hit the recursion limit.
        Every child is visited regardless of what the caller does with
        its parent.

        Args:
            node: Starting node (defaults to root)
        """
        stack = [node if node is not None else self._root]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def start_line(self, node: TSNode) -> int:
        """1-indexed line where the node starts."""
        return node.start_point[0] + 1

    def get_text(self, node: TSNode) -> str:
        """
        Get text content of a node.

        Node offsets are byte offsets into the encoded source.
        """
        return self._bytes[node.start_byte : node.end_byte].decode(self.source.encoding, errors="replace")

    def find_ancestor(self, node: TSNode, predicate: Callable[[TSNode], bool]) -> TSNode | None:
        """
        Find the nearest strict ancestor matching a predicate.

        Args:
            node: Starting node (not itself tested)
            predicate: Test applied to each ancestor, nearest first

        Returns:
            Matching ancestor or None
        """
        current = node.parent
        while current is not None:
            if predicate(current):
                return current
            current = current.parent
        return None

    def has_error(self, node: TSNode | None = None) -> bool:
        """Check if AST has any error nodes."""
        target = node if node is not None else self._root
        return target.has_error

    def get_errors(self, node: TSNode | None = None) -> list[TSNode]:
        """
        Get all ERROR and MISSING nodes.

        Args:
            node: Starting node (defaults to root)
        """
        return [n for n in self.walk(node) if n.type == "ERROR" or n.is_missing]

    def __repr__(self) -> str:
        return f"AstTree(file={self.source.file_path}, language={self.source.language})"
