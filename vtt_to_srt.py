import argparse
import logging
import sys

from vtt2srt_lib.config import BANNER, BUILD_DATE, LOG_LEVEL, LOG_LEVELS
from vtt2srt_lib.filenames import default_output_name, resolve_input_name, resolve_output_name
from vtt2srt_lib.pipeline import convert_file
from vtt2srt_lib.utils import ConversionError

LOGGER = logging.getLogger("vtt_to_srt")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert YouTube auto-generated VTT captions to SRT."
    )
    parser.add_argument(
        "source", nargs="?", help="Input VTT file; '.vtt' is appended if missing."
    )
    parser.add_argument(
        "target",
        nargs="?",
        help="Output SRT file (defaults to the input name with an .srt extension).",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Accept the default output filename instead of prompting for it.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for diagnostics on stderr (default: %(default)s).",
    )
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    print(BANNER.format(build_date=BUILD_DATE))
    try:
        source = resolve_input_name(args.source)
        target_arg = args.target
        if target_arg is None and args.yes:
            target_arg = default_output_name(source)
        target = resolve_output_name(target_arg, source)
        convert_file(source, target)
    except ConversionError as exc:
        LOGGER.debug("Conversion aborted", exc_info=True)
        print(exc, file=sys.stderr)
        return 1
    except MemoryError:
        print("Memory allocation error.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
