"""Command-line interface for snipsmart.

Reads text from a file or stdin, extracts the embedded JSON value or markup
snippet, and prints the result. Defaults come from snipsmart.config and are
overridden by flags.

Exit codes:
    0  success
    1  fail, strict-mode error, or unreadable input
    2  check (result needs manual review)
"""
import argparse
import json
import logging
import sys
from pathlib import Path

import pydantic

from snipsmart.config import load_settings, validate_log_level
from snipsmart.core.app import snip_smart, snip_smart_or_throw, snipper
from snipsmart.core.domain import Result, SnipOptions, SnipSmartError, Status

logger = logging.getLogger("snipsmart.cli")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

EXIT_CODES = {Status.SUCCESS: 0, Status.FAIL: 1, Status.CHECK: 2}


def build_parser(default_format: str = "json") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snipsmart",
        description="Extract an embedded JSON value or HTML/XML snippet from noisy text.",
    )
    parser.add_argument("--format", default=default_format, help=f"one of: {', '.join(snipper.formats())}")
    parser.add_argument("--case-sensitive", action="store_true", default=None)
    parser.add_argument("--strict", action="store_true", help="fail on anything but success")
    parser.add_argument("--data-only", action="store_true", help="print only the extracted data")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("file", nargs="?", default=None, help="input file (default: stdin)")
    return parser


def read_input(path: str | None) -> str:
    """Read the input text from a file path, or stdin when path is None or '-'.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the path cannot be read, e.g. a directory.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def format_data(data, options: SnipOptions) -> str:
    if options.format == "tag" and isinstance(data, str):
        return data
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_result(result: Result) -> str:
    return json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the snipsmart CLI.

    Options:
        --format: Extraction format, "json" or "tag"
            (default: SNIPSMART_FORMAT or json)
        --case-sensitive: Compare tag names verbatim
            (default: SNIPSMART_CASE_SENSITIVE)
        --strict: Print the error to stderr and exit 1 unless the
            result is success
        --data-only: Print only the extracted data instead of the
            full result
        --log-level: Logging level (default: SNIPSMART_LOG_LEVEL or WARNING)
        file: Input file; stdin when omitted or '-'

    Raises:
        SystemExit: Always, with the exit code for the outcome.

    Examples:
        snipsmart response.txt
        cat page.txt | snipsmart --format tag --data-only
        snipsmart --strict --format json response.txt
    """
    try:
        settings = load_settings()
    except pydantic.ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)
    args = build_parser(settings.format).parse_args(argv)

    try:
        log_level = validate_log_level(args.log_level) if args.log_level else settings.log_level
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stderr)
    logger.debug(f"CLI args parsed: {args}")

    case_sensitive = settings.case_sensitive if args.case_sensitive is None else args.case_sensitive
    options = SnipOptions(format=args.format, case_sensitive=case_sensitive)

    try:
        content = read_input(args.file)
    except FileNotFoundError:
        logger.error(f"Input file not found: {args.file}")
        print(f"Error: input file not found: {args.file}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read input file {args.file}: {e}")
        print(f"Error: cannot read input file: {args.file} ({e})", file=sys.stderr)
        sys.exit(1)

    if args.strict:
        try:
            data = snip_smart_or_throw(content, options)
        except SnipSmartError as e:
            print(f"Error: {e}", file=sys.stderr)
            if e.result.raw is not None:
                logger.info(f"Raw candidate: {e.result.raw!r}")
            sys.exit(1)
        print(format_data(data, options))
        sys.exit(0)

    result = snip_smart(content, options)
    if args.data_only:
        if result.data is not None:
            print(format_data(result.data, options))
        else:
            print(result.comments, file=sys.stderr)
    else:
        print(format_result(result))
    sys.exit(EXIT_CODES[result.status])


if __name__ == "__main__":
    main()
