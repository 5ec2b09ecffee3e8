"""Per-line cleanup: blank removal, timestamp rewriting and markup stripping."""

from __future__ import annotations

import re
from typing import Iterable, List

from .config import TIMESTAMP_ARROW, TIMESTAMP_LEN
from .lines import is_timestamp_line

# A tag runs from "<" to the next ">"; an unclosed tag runs to the end of the line.
MARKUP_REGEX = re.compile(r"<[^>]*>?")


def truncate_timestamp(line: str) -> str:
    """Cut a cue timing line right after the end clock.

    Assumes the fixed-width ``HH:MM:SS.mmm --> HH:MM:SS.mmm`` layout emitted by
    YouTube; cue settings such as ``align:start position:0%`` are discarded.
    """
    arrow = line.find(TIMESTAMP_ARROW)
    if arrow < 0:
        return line
    return line[: arrow + TIMESTAMP_LEN]


def fix_timestamp_separators(line: str) -> str:
    return line.replace(".", ",")


def normalize_timestamp(line: str) -> str:
    return fix_timestamp_separators(truncate_timestamp(line))


def strip_markup(text: str) -> str:
    """Remove ``<...>`` spans from caption text.

    This is not a tag parser: a stray ``<`` erases the rest of the line and a
    stray ``>`` is dropped, so "5 < 10 apples" becomes "5 ".
    """
    return MARKUP_REGEX.sub("", text).replace(">", "")


def normalize_lines(lines: Iterable[str]) -> List[str]:
    normalized: List[str] = []
    for line in lines:
        if len(line) <= 1:
            continue
        if is_timestamp_line(line):
            normalized.append(normalize_timestamp(line))
            continue
        text = strip_markup(line)
        if text:
            normalized.append(text)
    return normalized
