# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Dialect dispatch: source text in a named dialect to an SVG document."""

from __future__ import annotations

from collections.abc import Callable

from models import RackSet
from services.links import LinkResolver, rewrite_links
from services.rackml import parse_rackml
from services.render_svg import generate_svg
from services.text_markup import parse_text_markup

DIALECTS: dict[str, Callable[[str], RackSet]] = {
    "rack-xml": parse_rackml,
    "rackml": parse_rackml,
    "rack-text": parse_text_markup,
    "rack": parse_text_markup,
}


class UnknownDialectError(ValueError):
    """Raised when a dialect name has no registered parser."""


def parse_source(dialect: str, text: str) -> RackSet:
    parser = DIALECTS.get(dialect)
    if parser is None:
        raise UnknownDialectError(
            f"unsupported dialect: {dialect!r}; allowed: {sorted(DIALECTS)}"
        )
    return parser(text)


def convert(dialect: str, text: str, link_resolver: LinkResolver | None = None) -> str:
    rack_set = parse_source(dialect, text)
    if link_resolver is not None:
        rewrite_links(rack_set, link_resolver)
    return generate_svg(rack_set)
