"""
Markdown heading scanner.

Extracts ATX headings (``#`` through ``######``) and the line range each one
owns. Lines inside fenced code blocks are never treated as headings.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Optional

from ..models import IndexedLine, Section


HEADING_PATTERN = re.compile(r'^(#{1,6}) +(.*\S)\s*$')
CLOSING_HASHES = re.compile(r'\s+#+$')
FENCE_MARKER = "```"


def is_fence(line: str) -> bool:
    return line.lstrip().startswith(FENCE_MARKER)


def iter_prose_lines(lines: Iterable[IndexedLine]) -> Iterator[IndexedLine]:
    """Yield lines that are outside fenced code blocks, fence markers excluded."""
    in_fence = False
    for line in lines:
        if is_fence(line.text):
            in_fence = not in_fence
            continue
        if not in_fence:
            yield line


def count_code_blocks(lines: Iterable[IndexedLine]) -> int:
    """Count opened fenced code blocks; a trailing unterminated fence counts."""
    opened = 0
    in_fence = False
    for line in lines:
        if is_fence(line.text):
            if not in_fence:
                opened += 1
            in_fence = not in_fence
    return opened


def scan_sections(lines: List[IndexedLine]) -> List[Section]:
    """
    Scan lines for headings.

    A section spans from its heading to the line before the next heading of
    equal or shallower level, or to the last scanned line.

    Args:
        lines: Indexed lines; may be a slice of a document, numbers are kept.

    Returns:
        Sections in document order (empty if no headings were found).
    """
    if not lines:
        return []

    headings = []
    for line in iter_prose_lines(lines):
        match = HEADING_PATTERN.match(line.text)
        if match:
            title = CLOSING_HASHES.sub("", match.group(2)) or match.group(2)
            headings.append((len(match.group(1)), title, line.number))

    last_line = lines[-1].number
    sections = []
    for i, (level, title, start) in enumerate(headings):
        end = last_line
        for next_level, _, next_start in headings[i + 1:]:
            if next_level <= level:
                end = next_start - 1
                break
        sections.append(Section(title=title, level=level, start_line=start, end_line=end))

    return sections


def find_section(sections: Iterable[Section], titles: Iterable[str]) -> Optional[Section]:
    """Return the first section whose title matches any of ``titles`` (case-insensitive)."""
    wanted = {t.strip().lower() for t in titles}
    for section in sections:
        if section.title.lower() in wanted:
            return section
    return None
