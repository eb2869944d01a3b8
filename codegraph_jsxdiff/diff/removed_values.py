"""
Removed-Value Index

The syntax tree only sees the new file, so old attribute values are read
straight from removed diff lines. Values are grouped per element tag and
consumed FIFO: the k-th new element of a tag pairs with the k-th removed
value of that tag. This is a positional heuristic; reordered same-tag
elements can be mispaired.
"""

import re
from collections import deque

from codegraph_jsxdiff.common.observability import get_logger
from codegraph_jsxdiff.models import DiffFile, DiffLineKind

logger = get_logger(__name__)

# Opening element: "<button", "<Foo.Bar", "<svg:path"; not a generic like "Event<T>"
OPENING_TAG_PATTERN = re.compile(r"(?<![\w$.)\]])<([A-Za-z][\w.:\-]*)")


def _attribute_pattern(attribute: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![\w\-:.]){re.escape(attribute)}=[\"']([^\"']+)[\"']")


def _last_tag_before(content: str, position: int) -> str | None:
    tags = OPENING_TAG_PATTERN.findall(content, 0, position)
    return tags[-1] if tags else None


def build_removed_value_map(file: DiffFile, attribute: str) -> dict[str, list[str]]:
    """
    Map element tag → removed values of an attribute, in diff order.

    Each attribute occurrence on a removed line is paired with the nearest
    opening tag before it on the same line; if the line has none (multi-line
    element), the last opening tag seen on an earlier old-side line of the
    same hunk is used.

    Args:
        file: Parsed diff file
        attribute: Attribute name (e.g. "data-test-id")

    Returns:
        Tag → ordered values (added and context lines never contribute)
    """
    pattern = _attribute_pattern(attribute)
    values: dict[str, list[str]] = {}

    for hunk in file.hunks:
        last_tag: str | None = None

        for line in hunk.lines:
            if line.kind is DiffLineKind.ADDED:
                continue

            if line.kind is DiffLineKind.REMOVED:
                for match in pattern.finditer(line.content):
                    tag = _last_tag_before(line.content, match.start()) or last_tag
                    if tag is None:
                        logger.debug("removed_value_without_tag", attribute=attribute, line=line.old_line_number)
                        continue
                    values.setdefault(tag, []).append(match.group(1))

            last_tag = _last_tag_before(line.content, len(line.content)) or last_tag

    return values


def extract_removed_values(file: DiffFile, attribute: str) -> list[str]:
    """
    Get every removed value of an attribute, in diff order, regardless of tag.

    Args:
        file: Parsed diff file
        attribute: Attribute name
    """
    pattern = _attribute_pattern(attribute)
    return [
        match.group(1)
        for line in file.removed_lines()
        for match in pattern.finditer(line.content)
    ]


class RemovedValueIndex:
    """
    Per-tag FIFO queues of removed values for one attribute.

    Consumption is destructive. Build one per attribute per analysis call;
    never share an index across calls.
    """

    def __init__(self, attribute: str, values: dict[str, list[str]]):
        self.attribute = attribute
        self._queues: dict[str, deque[str]] = {tag: deque(items) for tag, items in values.items()}

    @classmethod
    def from_diff_file(cls, file: DiffFile, attribute: str) -> "RemovedValueIndex":
        values = build_removed_value_map(file, attribute)
        logger.debug(
            "removed_value_index_built",
            file=file.filename,
            attribute=attribute,
            tags=len(values),
            values=sum(len(v) for v in values.values()),
        )
        return cls(attribute, values)

    def pop(self, tag: str) -> str | None:
        """
        Consume the earliest remaining value for a tag.

        Returns:
            Removed value, or None when exhausted (pure addition)
        """
        queue = self._queues.get(tag)
        if not queue:
            return None
        return queue.popleft()

    def __repr__(self) -> str:
        return f"RemovedValueIndex(attribute={self.attribute!r}, tags={sorted(self._queues)})"
