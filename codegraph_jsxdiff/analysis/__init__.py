"""
Analysis layer: diff ↔ AST correlation and summaries.
"""

from codegraph_jsxdiff.analysis.correlator import DiffCorrelator, analyze_with_ast, create_correlator
from codegraph_jsxdiff.analysis.summary import build_summary, render_attribute_change

__all__ = [
    "DiffCorrelator",
    "analyze_with_ast",
    "create_correlator",
    "build_summary",
    "render_attribute_change",
]
