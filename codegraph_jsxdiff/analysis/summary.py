"""
Human-readable summary of an analysis.

Format (non-empty clauses only, joined by " | "):
    Components: A, B | Functions: f | JSX: <button> data-test-id="old" → "new" | test-ids: new
"""

from collections.abc import Sequence

from codegraph_jsxdiff.models import AttributeChange

SEPARATOR = " | "


def render_attribute_change(change: AttributeChange) -> str:
    """
    Render one attribute change.

    <tag> attr="old" → "new" when both values are present, else <tag> attr.
    """
    if change.removed_value and change.added_value:
        rendered = f'{change.attribute}="{change.removed_value}" → "{change.added_value}"'
    else:
        rendered = change.attribute
    return f"<{change.element}> {rendered}"


def build_summary(
    components: Sequence[str],
    functions: Sequence[str],
    jsx_changes: Sequence[AttributeChange],
    test_ids: Sequence[str],
) -> str:
    """Build the summary string ("" when every category is empty)."""
    parts: list[str] = []

    if components:
        parts.append(f"Components: {', '.join(components)}")

    if functions:
        parts.append(f"Functions: {', '.join(functions)}")

    if jsx_changes:
        parts.append(f"JSX: {', '.join(render_attribute_change(c) for c in jsx_changes)}")

    if test_ids:
        parts.append(f"test-ids: {', '.join(test_ids)}")

    return SEPARATOR.join(parts)
