"""Command-line entry point: ``sitemapgen pages.json --format xml --output sitemap.xml``."""

import argparse
import json
import logging
import logging.config
import os
import sys
from typing import List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from sitemapgen.errors import InvalidInputError, SinkError
from sitemapgen.models.options import GenerateOptions
from sitemapgen.models.page import PageRecord
from sitemapgen.models.sitemap_format import SitemapFormat
from sitemapgen.services.generator import generate

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SINK_ERROR = 1
EXIT_INVALID_INPUT = 2

_LOG_LEVEL_ENV = "SITEMAPGEN_LOG_LEVEL"


def configure_logging(level: str) -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {"level": level, "handlers": ["console"]},
        }
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitemapgen",
        description="Validate a list of pages and write it as an XML, JSON or CSV sitemap.",
    )
    parser.add_argument("input_path", help="JSON file with an array of page objects ('-' for stdin).")
    parser.add_argument(
        "-f",
        "--format",
        default=SitemapFormat.XML.value,
        help="Output format: xml, json or csv (default: xml).",
    )
    parser.add_argument("-o", "--output", dest="output_path", required=True, help="Destination file.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=os.environ.get(_LOG_LEVEL_ENV, "INFO").upper(),
        help=f"Logging level (default: ${_LOG_LEVEL_ENV} or INFO).",
    )
    return parser


def _read_input(input_path: str) -> str:
    try:
        if input_path == "-":
            return sys.stdin.read()
        with open(input_path, encoding="utf-8") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidInputError(f"Cannot read input {input_path}: {exc}") from exc


def load_pages(raw: str) -> List[PageRecord]:
    """Parse a JSON array of page objects, keeping each object's key order.

    Raises:
        InvalidInputError: if *raw* is not JSON or not an array of objects.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidInputError(f"Input is not valid JSON: {exc}") from exc

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise InvalidInputError("Input must be a JSON array of page objects.")
    return [PageRecord.from_mapping(item) for item in data]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        options = GenerateOptions(
            input_path=args.input_path,
            format=args.format,
            output_path=args.output_path,
            log_level=args.log_level,
        )
    except PydanticValidationError as exc:
        # Logging is not configured yet; report straight to stderr
        print(f"sitemapgen: invalid arguments: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    configure_logging(options.log_level)
    logger.debug("Generating sitemap", extra={"input": options.input_path, "format": options.format.value})

    try:
        pages = load_pages(_read_input(options.input_path))
        generate(pages, options.format, options.output_path)
    except InvalidInputError as exc:
        logger.error("Invalid input: %s", exc)
        return EXIT_INVALID_INPUT
    except SinkError as exc:
        logger.error("Could not write sitemap: %s", exc)
        return EXIT_SINK_ERROR

    logger.info("Generated %s sitemap with %d pages at %s", options.format.value, len(pages), options.output_path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
