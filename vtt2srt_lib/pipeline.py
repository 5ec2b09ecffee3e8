"""Reusable helpers for running the VTT -> SRT conversion."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Sequence

import pysrt

from .config import EXPORTED_MESSAGE
from .dedup import deduplicate
from .lines import read_source_lines, split_lines
from .normalizer import normalize_lines
from .serializer import build_subtitles, export_srt

LogFn = Callable[[str], None]


def process_lines(lines: Sequence[str]) -> List[str]:
    return deduplicate(normalize_lines(lines))


def convert_text(raw: str) -> pysrt.SubRipFile:
    """Convert raw VTT text into SubRip items entirely in memory."""
    return build_subtitles(process_lines(split_lines(raw)))


def convert_file(
    source_path: str | Path,
    target_path: str | Path,
    log_func: LogFn | None = print,
) -> int:
    """Read *source_path*, convert it and write the result to *target_path*.

    Returns the number of subtitle blocks written. Read failures raise
    ``ConversionError`` subclasses; a target that cannot be opened falls back
    to stdout.
    """

    def _log(message: str) -> None:
        if log_func:
            log_func(message)

    lines = read_source_lines(source_path)
    _log(f"→ Read {len(lines)} lines from {source_path}")
    normalized = normalize_lines(lines)
    deduplicated = deduplicate(normalized)
    _log(f"→ Kept {len(deduplicated)} of {len(normalized)} lines after removing repeats.")
    subs = build_subtitles(deduplicated)
    export_srt(subs, target_path)
    _log(EXPORTED_MESSAGE.format(target=target_path))
    return len(subs)
