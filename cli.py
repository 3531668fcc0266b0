# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Command-line interface: render a RackML or rack-text file to SVG."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from config import ConfigError, load_settings
from models import FormatError
from services.convert import DIALECTS, UnknownDialectError, convert
from services.links import make_link_resolver

logger = logging.getLogger(__name__)

XML_SUFFIXES = {".xml", ".rackml"}


class UsageError(Exception):
    pass


class FriendlyArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # pragma: no cover - argparse callback
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = FriendlyArgumentParser(
        prog="rackviz",
        description="Render RackML or rack-text rack layouts to SVG.",
    )
    parser.add_argument("input", nargs="?", help="Input file (default: stdin)")
    parser.add_argument("--text", help="Raw source text")
    parser.add_argument("--dialect", choices=sorted(DIALECTS), help="Input dialect")
    parser.add_argument("-o", "--output", help="Output .svg path (default: stdout)")
    parser.add_argument("--config", help="Settings YAML file")
    parser.add_argument(
        "--internal-link-base",
        help="Prefix for links that carry no URL scheme",
    )
    return parser


def _guess_dialect(path: Optional[str], fallback: str) -> str:
    if path and Path(path).suffix.lower() in XML_SUFFIXES:
        return "rack-xml"
    return fallback


def _read_source(path: Optional[str], text: Optional[str]) -> str:
    if path and text is not None:
        raise UsageError("--text cannot be combined with file input")
    if text is not None:
        return text
    if path:
        return Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
        settings = load_settings(args.config)
        logging.basicConfig(level=settings.log_level)
        dialect = args.dialect or _guess_dialect(args.input, settings.default_dialect)
        link_base = args.internal_link_base or settings.internal_link_base
        resolver = make_link_resolver(link_base) if link_base else None

        source = _read_source(args.input, args.text)
        svg = convert(dialect, source, link_resolver=resolver)

        if args.output:
            Path(args.output).write_text(svg + "\n", encoding="utf-8")
            logger.info("wrote %s", args.output)
        else:
            sys.stdout.write(svg + "\n")
        return 0
    except UsageError as exc:
        sys.stderr.write(f"usage error: {exc}\n")
        return 2
    except (FormatError, ConfigError, UnknownDialectError, OSError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2


if __name__ == "__main__":
    sys.exit(main())
