from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from rich.logging import RichHandler

from . import __version__
from . import reporter
from .errors import AppendFileError, ConfigError, UrlShortError
from .fileio import read_lines, write_lines
from .models import FindResult, ShortenOptions
from .pipeline import run_shorten


def _configure_logging(debug: bool, verbose: bool) -> None:
    level = logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=debug, markup=True, show_time=False, show_path=False)],
    )


def _build_parser() -> argparse.ArgumentParser:
    # -h is handled by hand so the banner can precede the usage text
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="Generate shortened URL variations at delimiter boundaries, with optional payload appends.",
        add_help=False,
    )
    parser.add_argument("-f", dest="input", help="Input file containing URLs (required)")
    parser.add_argument("-o", dest="output", help="Output file to write shortened URLs")
    parser.add_argument("-x", dest="delimiters", default="=", help="Delimiters to use for shortening (comma separated)")
    parser.add_argument("-p", dest="split_path", action="store_true", help="Split URLs at path segments (/)")
    parser.add_argument("-a", dest="append", default="", help="String to append to each generated variation")
    parser.add_argument("-F", dest="append_file", help="File containing strings to append (overrides -a)")
    parser.add_argument("-D", dest="no_duplicates", action="store_true", help="Remove duplicate URLs")
    parser.add_argument("-Q", dest="quiet", action="store_true", help="Quiet mode")
    parser.add_argument("--find", dest="find", help="Save URLs containing any of these keywords (comma separated)")
    parser.add_argument("--findX", dest="find_x", help="Save URLs containing all of these keywords (comma separated)")
    parser.add_argument("-h", "--help", dest="help", action="store_true", help="Show help message")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _save_find(result: FindResult, quiet: bool) -> None:
    if not result.matches:
        if not quiet:
            reporter.notice(f"No URLs matched the criteria for file '{result.file_name}'. File not created.")
        return
    try:
        count = write_lines(result.file_name, result.sorted_matches)
    except UrlShortError as e:
        # A failed match file does not stop the remaining outputs
        reporter.error(f"saving {result.mode.value} results: {e}")
        return
    if not quiet:
        reporter.print_find_result(result)
    reporter.success(f"Successfully wrote {count} URLs to {result.file_name}")


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.debug, args.verbose)
    log = logging.getLogger(__name__)

    if args.help:
        reporter.show_banner()
        reporter.show_help()
        return 0

    quiet = args.quiet
    if not quiet:
        reporter.show_banner()

    try:
        if not args.input:
            raise ConfigError(code="E_MISSING_INPUT", message="Input file (-f) is required.")
        urls = read_lines(args.input)
    except ConfigError as e:
        reporter.error(e.message)
        reporter.show_help(to_stderr=True)
        return 1
    except UrlShortError as e:
        reporter.error(f"reading input file: {e}")
        return 1

    if not urls:
        reporter.notice(f"Input file '{args.input}' is empty or contains no valid lines.")
        return 0
    if not quiet:
        reporter.info(f"Read {len(urls)} URLs from {args.input}")

    append_list: tuple[str, ...] = ()
    if args.append_file:
        try:
            append_list = tuple(read_lines(args.append_file, error_cls=AppendFileError))
        except UrlShortError as e:
            reporter.error(f"reading append file: {e}")
            return 1
        if not quiet and append_list:
            reporter.info(f"Read {len(append_list)} strings to append from {args.append_file}")

    options = ShortenOptions(
        delimiters=args.delimiters,
        no_duplicates=args.no_duplicates,
        split_path=args.split_path,
        append=args.append,
        append_list=append_list,
        find=args.find,
        find_x=args.find_x,
    )
    log.debug("Options: %s", options)

    if not quiet:
        reporter.info("Processing URLs...")
    summary = run_shorten(urls, options)

    if not quiet:
        reporter.info(f"Generated {summary.result_count} variations:")
        reporter.print_urls(summary.results)

    if args.output:
        try:
            count = write_lines(args.output, summary.results)
        except UrlShortError as e:
            reporter.error(f"writing output file: {e}")
            return 1
        reporter.success(f"Successfully wrote {count} URLs to {args.output}")
    elif quiet:
        reporter.success(f"Processing complete. {summary.result_count} variations generated (output suppressed).")
    elif summary.results:
        reporter.success("Output displayed above.")

    for result in summary.finds:
        _save_find(result, quiet)

    if not quiet:
        reporter.print_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
