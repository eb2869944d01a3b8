"""
Unified Diff Parser

Parses unified diff text (git format) into DiffFile / DiffHunk / DiffLine.

Sections whose "diff --git a/<old> b/<new>" header does not match are
dropped silently; callers detect them by their absence from the result.
"""

import re

from codegraph_jsxdiff.common.observability import get_logger
from codegraph_jsxdiff.config import get_settings
from codegraph_jsxdiff.models import DiffFile, DiffHunk, DiffLine, DiffLineKind

logger = get_logger(__name__)


class UnifiedDiffParser:
    """
    Unified diff parser.

    Thread-Safety: Safe (stateless, all state in locals)
    """

    # Section boundary; split() leaves each section without this prefix
    SECTION_PATTERN = re.compile(r"^diff --git ", re.MULTILINE)

    # First section line: "a/path b/path"
    HEADER_PATTERN = re.compile(r"^a/.+ b/(.+)$")

    # Hunk header: @@ -old_start[,count] +new_start[,count] @@
    HUNK_HEADER_PATTERN = re.compile(r"^@@ -(\d+)(?:,\d+)? \+(\d+)(?:,\d+)? @@")

    def parse(self, raw_diff: str) -> list[DiffFile]:
        """
        Parse diff text.

        Args:
            raw_diff: Unified diff text, possibly spanning several files

        Returns:
            One DiffFile per section with a well-formed header
        """
        files: list[DiffFile] = []

        sections = [s for s in self.SECTION_PATTERN.split(raw_diff) if s]
        for section in sections:
            diff_file = self._parse_section(section)
            if diff_file is None:
                logger.debug("diff_section_skipped", reason="malformed_header", head=section[:80])
                continue
            files.append(diff_file)

        logger.debug("diff_parsed", sections=len(sections), files=len(files))
        return files

    def _parse_section(self, section: str) -> DiffFile | None:
        lines = [line.rstrip("\r") for line in section.split("\n")]

        header_match = self.HEADER_PATTERN.match(lines[0])
        if not header_match:
            return None

        filename = header_match.group(1).strip()
        hunks: list[DiffHunk] = []

        hunk_start: tuple[int, int] | None = None
        hunk_lines: list[DiffLine] = []
        old_line = 0
        new_line = 0

        for line in lines[1:]:
            if match := self.HUNK_HEADER_PATTERN.match(line):
                if hunk_start is not None:
                    hunks.append(DiffHunk(hunk_start[0], hunk_start[1], tuple(hunk_lines)))
                old_line = int(match.group(1))
                new_line = int(match.group(2))
                hunk_start = (old_line, new_line)
                hunk_lines = []
                continue

            if hunk_start is None:
                continue

            if line.startswith("+") and not line.startswith("+++"):
                hunk_lines.append(DiffLine(DiffLineKind.ADDED, line[1:], None, new_line))
                new_line += 1
            elif line.startswith("-") and not line.startswith("---"):
                hunk_lines.append(DiffLine(DiffLineKind.REMOVED, line[1:], old_line, None))
                old_line += 1
            elif line.startswith(" "):
                hunk_lines.append(DiffLine(DiffLineKind.CONTEXT, line[1:], old_line, new_line))
                old_line += 1
                new_line += 1

        if hunk_start is not None:
            hunks.append(DiffHunk(hunk_start[0], hunk_start[1], tuple(hunk_lines)))

        return DiffFile(filename=filename, raw_diff=section, hunks=tuple(hunks))


_parser = UnifiedDiffParser()


def parse_diff(raw_diff: str) -> list[DiffFile]:
    """Parse unified diff text into typed per-file records."""
    return _parser.parse(raw_diff)


def is_code_file(filename: str, extensions: tuple[str, ...] | None = None) -> bool:
    """
    Check if a file is worth analyzing.

    Args:
        filename: File path
        extensions: Accepted extensions (None → settings.code_extensions)
    """
    if extensions is None:
        extensions = get_settings().code_extensions
    return filename.lower().endswith(tuple(extensions))
