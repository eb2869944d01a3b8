"""
CodeGraph JSX Diff

Correlates a unified diff of a TS/TSX/JS/JSX file with a tree-sitter parse
of its new content: which components, functions and JSX attributes
changed, with dedicated tracking of the test-id attribute.

Usage:
    from codegraph_jsxdiff import analyze_with_ast, is_code_file, parse_diff

    for diff_file in parse_diff(raw_diff):
        if is_code_file(diff_file.filename):
            result = analyze_with_ast(diff_file, load_source(diff_file.filename))
            print(result.summary)
"""

__version__ = "0.1.0"

from .analysis import DiffCorrelator, analyze_with_ast, build_summary, create_correlator
from .common.exceptions import JsxDiffError, ParsingError, UnsupportedLanguageError
from .config import RangeMode, Settings, get_settings
from .diff import (
    RemovedValueIndex,
    build_removed_value_map,
    changed_line_ranges,
    extract_removed_values,
    is_code_file,
    parse_diff,
)
from .models import (
    AnalysisResult,
    AttributeChange,
    ChangedRange,
    DiffFile,
    DiffHunk,
    DiffLine,
    DiffLineKind,
)

__all__ = [
    # Diff layer
    "parse_diff",
    "is_code_file",
    "changed_line_ranges",
    "build_removed_value_map",
    "extract_removed_values",
    "RemovedValueIndex",
    # Analysis
    "DiffCorrelator",
    "analyze_with_ast",
    "create_correlator",
    "build_summary",
    # Models
    "DiffLine",
    "DiffLineKind",
    "DiffHunk",
    "DiffFile",
    "ChangedRange",
    "AttributeChange",
    "AnalysisResult",
    # Config
    "Settings",
    "RangeMode",
    "get_settings",
    # Errors
    "JsxDiffError",
    "ParsingError",
    "UnsupportedLanguageError",
]
