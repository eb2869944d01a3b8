"""
Changed-range extraction (new-file line numbers).

SPAN mode treats every line between the first and last added line of a
hunk as touched. Ranges from different hunks are never merged; callers
test membership with in_any_range().
"""

from collections.abc import Iterable

from codegraph_jsxdiff.config import RangeMode
from codegraph_jsxdiff.models import ChangedRange, DiffFile


def changed_line_ranges(file: DiffFile, mode: RangeMode | str = RangeMode.SPAN) -> list[ChangedRange]:
    """
    Get new-file line ranges touched by added lines.

    Args:
        file: Parsed diff file
        mode: SPAN → one [min, max] per hunk with added lines;
              PRECISE → one range per run of consecutive added lines

    Returns:
        Ranges in hunk order (hunks without added lines contribute none)
    """
    mode = RangeMode(mode)
    ranges: list[ChangedRange] = []

    for hunk in file.hunks:
        added = hunk.added_line_numbers
        if not added:
            continue

        if mode is RangeMode.SPAN:
            ranges.append(ChangedRange(start=min(added), end=max(added)))
        else:
            ranges.extend(_consecutive_runs(added))

    return ranges


def _consecutive_runs(line_numbers: list[int]) -> list[ChangedRange]:
    runs: list[ChangedRange] = []
    ordered = sorted(set(line_numbers))

    start = prev = ordered[0]
    for line in ordered[1:]:
        if line != prev + 1:
            runs.append(ChangedRange(start, prev))
            start = line
        prev = line
    runs.append(ChangedRange(start, prev))

    return runs


def in_any_range(line: int, ranges: Iterable[ChangedRange]) -> bool:
    """Check if any range contains the line (ranges are not merged)."""
    return any(r.contains(line) for r in ranges)
