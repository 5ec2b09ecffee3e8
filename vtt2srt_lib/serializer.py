"""Pair timestamps with captions and write them out as SubRip."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

import pysrt

from .config import FALLBACK_MESSAGE, TARGET_ENCODING, TIMESTAMP_ARROW
from .lines import is_timestamp_line

LOGGER = logging.getLogger(__name__)

SRT_EOL = "\n"


class CueItem(pysrt.SubRipItem):
    """A SubRip item that writes its timing line exactly as it was read.

    ``start``/``end`` are filled in when pysrt understands the clocks and stay
    at zero otherwise (e.g. ``MM:SS,mmm`` short-form cues).
    """

    def __init__(self, index: int, timing: str, text: str):
        start, end = _parse_timing(timing)
        super().__init__(index=index, start=start, end=end, text=text)
        self.timing = timing

    def __str__(self) -> str:
        return f"{self.index}\n{self.timing}\n{self.text}\n"


def _parse_timing(line: str):
    start, _, end = line.partition(TIMESTAMP_ARROW)
    try:
        return pysrt.SubRipTime.from_string(start.strip()), pysrt.SubRipTime.from_string(end.strip())
    except (pysrt.Error, ValueError):
        LOGGER.debug("pysrt cannot parse timing %r; keeping it verbatim", line)
        return None, None


def _is_caption(line: str) -> bool:
    return bool(line) and not is_timestamp_line(line)


def build_subtitles(lines: Sequence[str]) -> pysrt.SubRipFile:
    """Turn ``timestamp, caption`` pairs into numbered SubRip items.

    Timestamps not followed by a non-empty caption, and captions without a
    timestamp before them, are skipped.
    """
    items: list[CueItem] = []
    idx = 0
    while idx < len(lines):
        line = lines[idx]
        if not is_timestamp_line(line) or idx + 1 >= len(lines) or not _is_caption(lines[idx + 1]):
            idx += 1
            continue
        items.append(CueItem(len(items) + 1, line, lines[idx + 1]))
        idx += 2
    return pysrt.SubRipFile(items=items, eol=SRT_EOL)


def write_srt(subs: pysrt.SubRipFile, sink: TextIO) -> None:
    subs.write_into(sink, eol=SRT_EOL)


def export_srt(
    subs: pysrt.SubRipFile,
    target_path: str | Path,
    fallback: TextIO | None = None,
) -> bool:
    """Write *subs* to *target_path*, or to *fallback* (stdout) if it cannot be opened.

    Returns True when the target file was written.
    """
    try:
        fh = open(target_path, "w", encoding=TARGET_ENCODING, newline="")
    except OSError as exc:
        LOGGER.warning("Cannot open %s for writing: %s", target_path, exc)
        LOGGER.debug("Open failure details", exc_info=True)
        print(FALLBACK_MESSAGE, file=sys.stderr)
        write_srt(subs, fallback if fallback is not None else sys.stdout)
        return False

    with fh:
        write_srt(subs, fh)
    return True
