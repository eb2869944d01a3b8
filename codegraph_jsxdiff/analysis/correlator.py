"""
Diff ↔ AST Correlator

Parses the new content of a changed file with tree-sitter and intersects
node positions with the diff's changed ranges to find:
- Which components (capitalized functions) were touched
- Which plain functions were touched
- Which JSX attributes changed, paired with their removed values
- Which test-id values are involved

Thread-Safety: Safe. All mutable state (removed-value indexes, result
collections) lives in a _CorrelationRun created per analyze() call.
"""

import re

from tree_sitter import Node as TSNode

from codegraph_jsxdiff.analysis.summary import build_summary
from codegraph_jsxdiff.common.observability import get_logger
from codegraph_jsxdiff.config import RangeMode, Settings, get_settings
from codegraph_jsxdiff.diff.ranges import changed_line_ranges, in_any_range
from codegraph_jsxdiff.diff.removed_values import RemovedValueIndex
from codegraph_jsxdiff.models import AnalysisResult, AttributeChange, ChangedRange, DiffFile
from codegraph_jsxdiff.parsing import AstTree
from codegraph_jsxdiff.parsing.source_file import SourceFile

logger = get_logger(__name__)


# ============================================================
# Node kinds
# ============================================================

FUNCTION_DECLARATION_TYPES = frozenset(["function_declaration", "generator_function_declaration"])

# "function" is the pre-0.21 tree-sitter-javascript name of function_expression
FUNCTION_VALUE_TYPES = frozenset(["arrow_function", "function_expression", "function"])

JSX_ELEMENT_TAG_TYPES = frozenset(["jsx_opening_element", "jsx_self_closing_element"])

STRING_VALUE_TYPES = frozenset(["string", "jsx_string"])

COMPONENT_NAME_PATTERN = re.compile(r"^[A-Z]")


class _CorrelationRun:
    """State of a single analyze() call. Discarded afterwards."""

    def __init__(
        self,
        diff_file: DiffFile,
        tree: AstTree,
        ranges: list[ChangedRange],
        test_id_attribute: str,
        component_wrappers: frozenset[str],
    ):
        self.diff_file = diff_file
        self.tree = tree
        self.ranges = ranges
        self.test_id_attribute = test_id_attribute
        self.component_wrappers = component_wrappers

        # attribute name → index, built lazily on first use
        self._indexes: dict[str, RemovedValueIndex] = {}

        # dicts as insertion-ordered sets
        self.components: dict[str, None] = {}
        self.functions: dict[str, None] = {}
        self.test_ids: dict[str, None] = {}
        self.jsx_changes: list[AttributeChange] = []

    def run(self) -> AnalysisResult:
        for node in self.tree.walk():
            if not in_any_range(self.tree.start_line(node), self.ranges):
                continue

            if node.type == "jsx_attribute":
                self._visit_attribute(node)
            elif node.type in FUNCTION_DECLARATION_TYPES or node.type == "variable_declarator":
                self._visit_declaration(node)

        components = tuple(self.components)
        functions = tuple(self.functions)
        test_ids = tuple(self.test_ids)
        jsx_changes = tuple(self.jsx_changes)

        return AnalysisResult(
            filename=self.diff_file.filename,
            raw_diff=self.diff_file.raw_diff,
            hunks=self.diff_file.hunks,
            components=components,
            functions=functions,
            jsx_changes=jsx_changes,
            test_ids=test_ids,
            summary=build_summary(components, functions, jsx_changes, test_ids),
        )

    # ------------------------------------------------------------
    # Visitors
    # ------------------------------------------------------------

    def _visit_attribute(self, node: TSNode) -> None:
        named = node.named_children
        if not named:
            return

        attr_name = self.tree.get_text(named[0])
        element_name = self._element_name(node)
        added_value = self._attribute_value(named[1]) if len(named) > 1 else None
        removed_value = self._consume_removed_value(attr_name, element_name)

        if attr_name == self.test_id_attribute and added_value:
            self.test_ids[added_value] = None

        self.jsx_changes.append(
            AttributeChange(
                element=element_name,
                attribute=attr_name,
                added_value=added_value,
                removed_value=removed_value,
            )
        )

        component = self._enclosing_name(node, self._is_component)
        if component:
            self.components[component] = None

        function = self._enclosing_name(node, self._is_named_function)
        if function and function != component:
            self.functions[function] = None

    def _visit_declaration(self, node: TSNode) -> None:
        if node.type == "variable_declarator" and not self._is_function_value(node.child_by_field_name("value")):
            return

        name = self._declared_name(node)
        if not name:
            return

        if COMPONENT_NAME_PATTERN.match(name):
            self.components[name] = None
        else:
            self.functions[name] = None

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    def _consume_removed_value(self, attr_name: str, element_name: str) -> str | None:
        index = self._indexes.get(attr_name)
        if index is None:
            index = RemovedValueIndex.from_diff_file(self.diff_file, attr_name)
            self._indexes[attr_name] = index
        return index.pop(element_name)

    def _element_name(self, attribute: TSNode) -> str:
        element = self.tree.find_ancestor(attribute, lambda n: n.type in JSX_ELEMENT_TAG_TYPES)
        if element is None:
            return ""
        name = element.child_by_field_name("name")
        return self.tree.get_text(name) if name is not None else ""

    def _attribute_value(self, value: TSNode) -> str | None:
        """Literal text of a quoted string, source text of an {expression}."""
        if value.type in STRING_VALUE_TYPES:
            return self.tree.get_text(value)[1:-1]

        if value.type == "jsx_expression":
            for child in value.named_children:
                if child.type != "comment":
                    return self.tree.get_text(child)

        return None

    def _declared_name(self, node: TSNode) -> str | None:
        name = node.child_by_field_name("name")
        if name is None or name.type not in ("identifier", "property_identifier"):
            return None
        return self.tree.get_text(name)

    def _enclosing_name(self, node: TSNode, predicate) -> str | None:
        ancestor = self.tree.find_ancestor(node, predicate)
        return self._declared_name(ancestor) if ancestor is not None else None

    def _is_component(self, node: TSNode) -> bool:
        if node.type not in FUNCTION_DECLARATION_TYPES and not self._is_function_binding(node):
            return False
        name = self._declared_name(node)
        return bool(name and COMPONENT_NAME_PATTERN.match(name))

    def _is_named_function(self, node: TSNode) -> bool:
        if node.type in FUNCTION_DECLARATION_TYPES or node.type == "method_definition":
            return self._declared_name(node) is not None
        if self._is_function_binding(node):
            return self._declared_name(node) is not None
        return False

    def _is_function_binding(self, node: TSNode) -> bool:
        """variable_declarator whose value is a function (possibly wrapped)."""
        return node.type == "variable_declarator" and self._is_function_value(node.child_by_field_name("value"))

    def _is_function_value(self, value: TSNode | None) -> bool:
        """
        Function, arrow function, or a component wrapper call around one.

        memo(() => ...) and React.forwardRef(function Foo() {...}) count as
        functions; items.map(...) or useMemo(() => ...) do not.
        """
        if value is None:
            return False
        if value.type in FUNCTION_VALUE_TYPES:
            return True
        if value.type != "call_expression":
            return False

        callee = value.child_by_field_name("function")
        if callee is None or self.tree.get_text(callee) not in self.component_wrappers:
            return False

        arguments = value.child_by_field_name("arguments")
        if arguments is None or not arguments.named_children:
            return False
        return self._is_function_value(arguments.named_children[0])


# ============================================================
# DiffCorrelator
# ============================================================


class DiffCorrelator:
    """
    Correlates one file's diff with its new source.

    Usage:
        correlator = create_correlator()
        result = correlator.analyze(diff_file, source_text)
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def analyze(
        self,
        diff_file: DiffFile,
        source_content: str,
        *,
        test_id_attribute: str | None = None,
        range_mode: RangeMode | str | None = None,
    ) -> AnalysisResult:
        """
        Analyze a diffed file against its new content.

        Args:
            diff_file: Parsed diff section of the file
            source_content: Complete new-file source text
            test_id_attribute: Override of settings.test_id_attribute
            range_mode: Override of settings.range_mode

        Returns:
            AnalysisResult (empty collections when no node is in range)

        Raises:
            UnsupportedLanguageError: If the grammar cannot be loaded
        """
        source = SourceFile.from_content(diff_file.filename, source_content)
        tree = AstTree.parse(source)

        if tree.has_error():
            logger.warning(
                "partial_parse",
                file=diff_file.filename,
                language=source.language,
                error_count=len(tree.get_errors()),
            )

        ranges = changed_line_ranges(diff_file, range_mode or self.settings.range_mode)

        run = _CorrelationRun(
            diff_file=diff_file,
            tree=tree,
            ranges=ranges,
            test_id_attribute=test_id_attribute or self.settings.test_id_attribute,
            component_wrappers=frozenset(self.settings.component_wrappers),
        )
        result = run.run()

        logger.debug(
            "analysis_complete",
            file=diff_file.filename,
            ranges=len(ranges),
            components=len(result.components),
            functions=len(result.functions),
            jsx_changes=len(result.jsx_changes),
            test_ids=len(result.test_ids),
        )
        return result


def create_correlator(settings: Settings | None = None) -> DiffCorrelator:
    """Factory function for DiffCorrelator."""
    return DiffCorrelator(settings)


def analyze_with_ast(
    diff_file: DiffFile,
    source_content: str,
    *,
    test_id_attribute: str | None = None,
    range_mode: RangeMode | str | None = None,
) -> AnalysisResult:
    """Analyze a diffed file with default settings."""
    return DiffCorrelator().analyze(
        diff_file,
        source_content,
        test_id_attribute=test_id_attribute,
        range_mode=range_mode,
    )
