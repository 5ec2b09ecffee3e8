"""Global configuration values for vtt2srt."""

import os

from dotenv import load_dotenv

load_dotenv()

BUILD_DATE = "2024-07-10"

TIMESTAMP_ARROW = " --> "
# Width of " --> HH:MM:SS.mmm", measured from the start of the arrow.
TIMESTAMP_LEN = 17

SOURCE_SUFFIX = ".vtt"
TARGET_SUFFIX = ".srt"

SOURCE_ENCODING = os.getenv("VTT2SRT_SOURCE_ENCODING", "utf-8-sig")
TARGET_ENCODING = os.getenv("VTT2SRT_TARGET_ENCODING", "utf-8")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL = os.getenv("VTT2SRT_LOG_LEVEL", "").strip().upper()
if LOG_LEVEL not in LOG_LEVELS:
    LOG_LEVEL = "WARNING"

BANNER = (
    "Convert Youtube's Autotranscribed VTT to SRT [build {build_date}]\n"
    "Converts .vtt files from youtube to .srt files.\n"
    "Usage: vtt2srt [sourcesubtitles.vtt] [targetsubtitles.srt]\n"
    "Press Ctrl+C to abort."
)
EXPORTED_MESSAGE = "Subtitles exported to {target}."
FALLBACK_MESSAGE = "File creating error. Sending the result to stdout."
