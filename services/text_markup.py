# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Parser for the line-oriented rack-text dialect.

A document describes exactly one rack::

    caption: Core
    height: 4
    items:
    - server[2]: Web1
    - net:switch: [SW1](https://example.com/sw1)

Blank lines are ignored. Errors report the 1-based line in the source text.
"""

from __future__ import annotations

import re

from models import FormatError, Rack, RackDevice, RackSet

_IDENT = r"[A-Za-z][A-Za-z0-9_-]*"
_HEIGHT = r"(?:\s*\[(?P<height>\d+)\])?"
QUALIFIED_KEY = re.compile(rf"^(?P<category>{_IDENT}):(?P<type>{_IDENT}){_HEIGHT}\s*:(?P<label>.*)$")
BARE_KEY = re.compile(rf"^(?P<type>{_IDENT}){_HEIGHT}\s*:(?P<label>.*)$")
LINK_LABEL = re.compile(r"^\[([^\]]+)\]\(([^)]+)\)$")
INTEGER = re.compile(r"^[+-]?\d+$")


class TextMarkupParser:
    def __init__(self, content: str) -> None:
        self.lines: list[tuple[int, str]] = [
            (number, line.strip())
            for number, line in enumerate(re.split(r"\r\n|\r|\n", content), start=1)
            if line.strip()
        ]
        self.index = 0

    def parse(self) -> RackSet:
        rack = Rack()
        self._parse_header(rack)
        self._parse_items(rack)
        return RackSet(racks=[rack])

    # ------------------------------------------------------------------
    # cursor helpers
    # ------------------------------------------------------------------

    def _has_more(self) -> bool:
        return self.index < len(self.lines)

    def _peek(self) -> str:
        return self.lines[self.index][1] if self._has_more() else ""

    def _next(self) -> tuple[int, str]:
        if not self._has_more():
            last_line = self.lines[-1][0] if self.lines else 1
            raise FormatError("unexpected end of input", last_line)
        entry = self.lines[self.index]
        self.index += 1
        return entry

    def _expect(self, keyword: str) -> tuple[int, str]:
        number, line = self._next()
        if not line.startswith(keyword):
            raise FormatError(f"expected '{keyword}', got: {line}", number)
        return number, line[len(keyword) :].strip()

    # ------------------------------------------------------------------
    # grammar
    # ------------------------------------------------------------------

    def _parse_header(self, rack: Rack) -> None:
        _, rack.name = self._expect("caption:")

        number, raw_height = self._expect("height:")
        if not INTEGER.match(raw_height):
            raise FormatError(f"invalid height value: {raw_height}", number)
        height = int(raw_height)
        if height < 1:
            raise FormatError(f"rack height must be at least 1, got {height}", number)
        rack.height = height

    def _parse_items(self, rack: Rack) -> None:
        self._expect("items:")
        while self._has_more() and self._peek().startswith("-"):
            rack.devices.append(self._parse_item())

    def _parse_item(self) -> RackDevice:
        number, line = self._next()
        entry = line[1:].strip()

        match = QUALIFIED_KEY.match(entry) or BARE_KEY.match(entry)
        if match is None:
            if ":" not in entry:
                raise FormatError("expected ':' in item entry", number)
            key = entry.split(":", 1)[0].strip()
            raise FormatError(f"invalid identifier: {key}", number)

        height = int(match.group("height")) if match.group("height") else 1
        if height < 1:
            raise FormatError(f"item height must be at least 1, got {height}", number)

        label = match.group("label").strip()
        link = LINK_LABEL.match(label)
        return RackDevice(
            type=match.group("type"),
            category=match.groupdict().get("category"),
            height=height,
            name=link.group(1) if link else label,
            href=link.group(2) if link else None,
        )


def parse_text_markup(text: str) -> RackSet:
    return TextMarkupParser(text).parse()
