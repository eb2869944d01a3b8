"""
Diff layer: unified diff model, changed ranges and the removed-value index.
"""

from codegraph_jsxdiff.diff.parser import UnifiedDiffParser, is_code_file, parse_diff
from codegraph_jsxdiff.diff.ranges import changed_line_ranges, in_any_range
from codegraph_jsxdiff.diff.removed_values import (
    RemovedValueIndex,
    build_removed_value_map,
    extract_removed_values,
)

__all__ = [
    "UnifiedDiffParser",
    "parse_diff",
    "is_code_file",
    "changed_line_ranges",
    "in_any_range",
    "RemovedValueIndex",
    "build_removed_value_map",
    "extract_removed_values",
]
