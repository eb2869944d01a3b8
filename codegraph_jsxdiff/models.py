"""
Diff and analysis models (immutable).
"""

from collections.abc import Iterator
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class DiffLineKind(str, Enum):
    """Kind of a line inside a hunk."""

    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class DiffLine:
    """
    One line of a hunk.

    Attributes:
        kind: added / removed / context
        content: Line text without the leading marker
        old_line_number: Old-file line (None for added lines)
        new_line_number: New-file line (None for removed lines)
    """

    kind: DiffLineKind
    content: str
    old_line_number: int | None
    new_line_number: int | None


@dataclass(frozen=True, slots=True)
class DiffHunk:
    """
    Diff hunk.

    @@ -old_start,old_count +new_start,new_count @@
    """

    old_start: int
    new_start: int
    lines: tuple[DiffLine, ...] = ()

    @property
    def added_line_numbers(self) -> list[int]:
        """New-file line numbers of added lines, in diff order."""
        return [
            line.new_line_number
            for line in self.lines
            if line.kind is DiffLineKind.ADDED and line.new_line_number is not None
        ]


@dataclass(frozen=True, slots=True)
class DiffFile:
    """
    Per-file section of a unified diff.

    Attributes:
        filename: New-file path from the "diff --git" header
        raw_diff: Section text (without the "diff --git " prefix)
        hunks: Hunks in encounter order
    """

    filename: str
    raw_diff: str
    hunks: tuple[DiffHunk, ...] = ()

    def added_lines(self) -> Iterator[DiffLine]:
        for hunk in self.hunks:
            yield from (line for line in hunk.lines if line.kind is DiffLineKind.ADDED)

    def removed_lines(self) -> Iterator[DiffLine]:
        for hunk in self.hunks:
            yield from (line for line in hunk.lines if line.kind is DiffLineKind.REMOVED)

    @property
    def added_line_count(self) -> int:
        return sum(1 for _ in self.added_lines())

    @property
    def removed_line_count(self) -> int:
        return sum(1 for _ in self.removed_lines())


@dataclass(frozen=True, slots=True)
class ChangedRange:
    """
    Closed interval of new-file line numbers treated as touched.

    Attributes:
        start: First line (1-indexed, inclusive)
        end: Last line (1-indexed, inclusive)
    """

    start: int
    end: int

    def contains(self, line: int) -> bool:
        """Check if the range contains the given line"""
        return self.start <= line <= self.end


@dataclass(frozen=True, slots=True)
class AttributeChange:
    """
    Markup attribute found on a changed line.

    The removed value is a best-effort pairing from the removed-value
    index (same tag, FIFO), not a verified structural match.
    """

    element: str
    attribute: str
    added_value: str | None = None
    removed_value: str | None = None


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """
    Correlation of one file's diff with its new source.

    Attributes:
        filename: File path
        raw_diff: Pass-through section text
        hunks: Pass-through hunks
        components: Changed component names (capitalized), insertion order
        functions: Changed plain function names, insertion order
        jsx_changes: Attribute changes in traversal order
        test_ids: New values of the test-id attribute, insertion order
        summary: Human-readable summary ("" when nothing changed)
    """

    filename: str
    raw_diff: str
    hunks: tuple[DiffHunk, ...]
    components: tuple[str, ...] = ()
    functions: tuple[str, ...] = ()
    jsx_changes: tuple[AttributeChange, ...] = ()
    test_ids: tuple[str, ...] = ()
    summary: str = field(default="")

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form for reporting layers."""
        return asdict(self)
