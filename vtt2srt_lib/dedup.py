"""Collapse the repetition left behind by rolling auto-generated captions.

YouTube's auto captions show every spoken line twice: once when it scrolls in
and again, verbatim, in the next cue while the following line appears. After
normalization that leaves a stream such as::

    00:00:00,000 --> 00:00:02,000
    hello world
    00:00:02,000 --> 00:00:02,010
    hello world
    00:00:02,010 --> 00:00:04,000
    hello world
    next line

Two passes clean it up. The first drops captions identical to the previous
caption; the second drops the timestamps that the first pass left without a
caption. They must run in that order.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .lines import is_timestamp_line

LOGGER = logging.getLogger(__name__)


def collapse_repeated_captions(lines: Sequence[str]) -> List[str]:
    """Drop captions equal to the caption kept just before them.

    Lines before the first timestamp are discarded; a document without any
    timestamp collapses to an empty list. Only the immediately preceding
    caption is compared, and only by exact string equality.
    """
    start = next((idx for idx, line in enumerate(lines) if is_timestamp_line(line)), None)
    if start is None:
        return []

    kept = [lines[start]]
    last_caption: str | None = None
    for line in lines[start + 1 :]:
        if is_timestamp_line(line):
            kept.append(line)
            continue
        if line == last_caption:
            continue
        last_caption = line
        kept.append(line)
    return kept


def drop_uncaptioned_timestamps(lines: Sequence[str]) -> List[str]:
    """Drop timestamps that are not directly followed by a caption."""
    kept: List[str] = []
    for idx, line in enumerate(lines):
        if is_timestamp_line(line):
            has_caption = idx + 1 < len(lines) and not is_timestamp_line(lines[idx + 1])
            if not has_caption:
                continue
        kept.append(line)
    return kept


def deduplicate(lines: Sequence[str]) -> List[str]:
    collapsed = collapse_repeated_captions(lines)
    result = drop_uncaptioned_timestamps(collapsed)
    LOGGER.debug(
        "Deduplicated %d lines: %d after caption collapse, %d after timestamp collapse",
        len(lines),
        len(collapsed),
        len(result),
    )
    return result
