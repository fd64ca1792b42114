"""CLI entry point for wordharvest."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from wordharvest.core.common.errors import HarvestError, UnsupportedExtensionError, OutputUnavailableError
from wordharvest.core.config.settings import settings
from wordharvest.core.logging_setup import configure_logging
from wordharvest.features.extensions.domain.models import ExtensionSet
from wordharvest.features.extensions.service.api import build_allow_list, parse_extension_list, pdf_probe
from wordharvest.features.harvest.domain.models import HarvestRequest
from wordharvest.features.harvest.service.harvester import WordHarvester

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_USAGE = 2

USAGE = "Usage: wordharvest -e <extension0>:<extension1>:..:<extensionN> -d <dir> -o <output file>"


def build_parser(allow_list: ExtensionSet) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordharvest",
        description="Harvest a deduplicated word list from text files under a directory.",
        epilog=f"Allowed extensions: {allow_list}",
    )
    parser.add_argument(
        "-e",
        "--extensions",
        required=True,
        help="Colon-separated extensions to harvest, e.g. txt:asc",
    )
    parser.add_argument("-d", "--directory", required=True, help="Root directory to scan")
    parser.add_argument("-o", "--output", required=True, help="Output word list path")
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=settings.WORKERS,
        help=f"Files read in parallel (default: {settings.WORKERS})",
    )
    parser.add_argument(
        "-m",
        "--min-length",
        type=int,
        default=settings.MIN_WORD_LENGTH,
        help=f"Shortest word kept (default: {settings.MIN_WORD_LENGTH})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every file")
    return parser


def print_usage(allow_list: ExtensionSet) -> None:
    print(USAGE)
    print(f"Allowed extensions: {allow_list}")
    print("Check if the directory passed with -d option exists")


def _output_is_writable(output: Path) -> bool:
    if output.is_dir():
        return False
    return output.parent.is_dir() and os.access(output.parent, os.W_OK)


def validate(args: argparse.Namespace, allow_list: ExtensionSet) -> Optional[HarvestRequest]:
    """
    Checks all three required settings. Returns None if any of them is invalid.
    Nothing is created on disk here.
    """
    valid = True

    extensions = None
    try:
        extensions = parse_extension_list(args.extensions, allow_list)
    except UnsupportedExtensionError as e:
        print(f"ERROR: {e.message}")
        valid = False

    root = Path(args.directory)
    if not root.is_dir():
        logger.error(f"Directory not found: {root}")
        valid = False

    output = Path(args.output)
    if not _output_is_writable(output):
        logger.error(f"Cannot write output file: {output}")
        valid = False

    if not valid:
        return None

    try:
        return HarvestRequest(
            root_path=root,
            output_path=output,
            extensions=extensions,
            workers=args.workers,
            min_word_length=args.min_length,
        )
    except (OSError, ValueError) as e:
        logger.error(str(e))
        return None


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    configure_logging()
    # One filesystem check for the PDF helper, shared by the allow-list and the harvester
    probe = pdf_probe()
    allow_list = build_allow_list(probe)

    try:
        args = build_parser(allow_list).parse_args(argv)
    except SystemExit as e:
        # --help exits cleanly; anything else is a missing or malformed option
        if e.code == EXIT_OK:
            return EXIT_OK
        print_usage(allow_list)
        return EXIT_USAGE

    if args.verbose:
        logging.getLogger("wordharvest").setLevel(logging.DEBUG)

    request = validate(args, allow_list)
    if request is None:
        print_usage(allow_list)
        return EXIT_USAGE

    try:
        summary = WordHarvester(pdftotext=probe.find()).harvest(request)
    except OutputUnavailableError as e:
        logger.error(str(e))
        return EXIT_FATAL
    except (HarvestError, OSError) as e:
        logger.critical(f"Harvest failed fatally: {e}")
        return EXIT_FATAL

    print(f"{summary.words_written} words written to {request.output_path}")
    if summary.errors:
        print(f"{len(summary.errors)} files or directories could not be read (see log)")
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
