"""Reading caption files and splitting them into lines."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import SOURCE_ENCODING, TIMESTAMP_ARROW
from .utils import SourceNotFoundError, SourceReadError

LOGGER = logging.getLogger(__name__)


def is_timestamp_line(line: str) -> bool:
    return TIMESTAMP_ARROW in line


def split_lines(text: str) -> list[str]:
    """Split on line feeds, trimming a trailing carriage return from each line.

    The final line is kept even without a terminating line feed, so empty
    input yields ``[""]``.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def read_source_lines(source_path: str | Path, encoding: str | None = None) -> list[str]:
    path = Path(source_path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise SourceNotFoundError(str(path)) from exc
    except OSError as exc:
        raise SourceReadError(str(path)) from exc

    text = raw.decode(encoding or SOURCE_ENCODING, errors="ignore")
    lines = split_lines(text)
    LOGGER.debug("Read %d bytes, %d lines from %s", len(raw), len(lines), path)
    return lines
