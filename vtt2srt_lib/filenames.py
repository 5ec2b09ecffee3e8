"""Resolve source and target filenames from arguments or interactive prompts."""

from __future__ import annotations

from typing import Callable

from .config import SOURCE_SUFFIX, TARGET_SUFFIX
from .utils import EmptyFilenameError, FilenameReadError

InputFn = Callable[[str], str]


def ensure_suffix(name: str, suffix: str) -> str:
    return name if name.endswith(suffix) else f"{name}{suffix}"


def _ask(prompt: str, input_func: InputFn | None, what: str) -> str:
    try:
        return (input_func or input)(prompt).strip()
    except EOFError as exc:
        raise FilenameReadError(f"Error reading {what} filename.") from exc


def resolve_input_name(arg: str | None, input_func: InputFn | None = None) -> str:
    """Return the source filename, prompting when no argument was given.

    ``lecture`` resolves to ``lecture.vtt``.
    """
    if arg is None:
        name = _ask(f"Enter input filename (*{SOURCE_SUFFIX}): ", input_func, "input")
    else:
        name = arg
    if not name:
        raise EmptyFilenameError("Empty input filename.")
    return ensure_suffix(name, SOURCE_SUFFIX)


def default_output_name(input_name: str) -> str:
    # input_name always ends in ".vtt" here, so this swaps the extension.
    return input_name[:-3] + TARGET_SUFFIX[1:]


def resolve_output_name(
    arg: str | None,
    input_name: str,
    input_func: InputFn | None = None,
) -> str:
    """Return the target filename; an empty prompt answer accepts the default."""
    default = default_output_name(input_name)
    if arg is None:
        name = _ask(f"Enter output filename (default: {default}): ", input_func, "output")
    else:
        name = arg
    return ensure_suffix(name or default, TARGET_SUFFIX)
