# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Device glyphs: small vector symbols drawn inside a device body.

Each glyph is a tuple of primitive shapes laid out in a GLYPH_WIDTH x
GLYPH_HEIGHT box. The renderer positions the box; shapes only know how to
serialize themselves.
"""

from __future__ import annotations

from dataclasses import dataclass

GLYPH_WIDTH = 24
GLYPH_HEIGHT = 16
SYMBOL_COLOR = "#555"


@dataclass(frozen=True)
class PathShape:
    d: str
    fill: str = "none"
    stroke: str = "none"
    stroke_width: float | None = None
    stroke_linecap: str | None = None
    fill_rule: str | None = None

    def to_svg(self) -> str:
        attrs = [f'd="{self.d}"', f'fill="{self.fill}"', f'stroke="{self.stroke}"']
        if self.stroke_width is not None:
            attrs.append(f'stroke-width="{self.stroke_width:g}"')
        if self.stroke_linecap:
            attrs.append(f'stroke-linecap="{self.stroke_linecap}"')
        if self.fill_rule:
            attrs.append(f'fill-rule="{self.fill_rule}"')
        return f"<path {' '.join(attrs)}/>"


@dataclass(frozen=True)
class RectShape:
    x: float
    y: float
    width: float
    height: float
    fill: str = SYMBOL_COLOR

    def to_svg(self) -> str:
        return (
            f'<rect x="{self.x:g}" y="{self.y:g}" width="{self.width:g}" '
            f'height="{self.height:g}" fill="{self.fill}" stroke="none"/>'
        )


@dataclass(frozen=True)
class CircleShape:
    cx: float
    cy: float
    r: float
    fill: str = SYMBOL_COLOR
    stroke: str = "#ccc"
    stroke_width: float = 2

    def to_svg(self) -> str:
        return (
            f'<circle cx="{self.cx:g}" cy="{self.cy:g}" r="{self.r:g}" stroke="{self.stroke}" '
            f'fill="{self.fill}" stroke-width="{self.stroke_width:g}"/>'
        )


Shape = PathShape | RectShape | CircleShape
Glyph = tuple[Shape, ...]


def _patch_ports() -> Glyph:
    return tuple(
        RectShape(x=1 + col * 6, y=2 + row * 7, width=4, height=5)
        for row in range(2)
        for col in range(4)
    )


def _outline(d: str) -> Glyph:
    return (PathShape(d=d, stroke=SYMBOL_COLOR, stroke_width=2),)


DEVICE_GLYPHS: dict[str, Glyph] = {
    "patch": _patch_ports(),
    "pdu": (
        PathShape(
            d="M 8 1 L 8 5 M 16 1 L 16 5 M 5 5 L 19 5 L 19 9 Q 12 15 5 9 Z M 12 12 L 12 15",
            stroke=SYMBOL_COLOR,
            stroke_width=2,
            stroke_linecap="round",
        ),
    ),
    "storage": (
        PathShape(
            d="M 0 1 H 24 V 15 H 0 Z M 2 3 H 22 V 6 H 2 Z M 2 7 H 22 V 9 H 2 Z M 2 10 H 22 V 13 H 2 Z",
            fill=SYMBOL_COLOR,
            fill_rule="evenodd",
        ),
    ),
    "server": (
        PathShape(
            d="M 0 2 H 24 V 14 H 0 Z M 2 4 H 16 V 12 H 2 Z M 19 6 H 22 V 10 H 19 Z",
            fill=SYMBOL_COLOR,
            fill_rule="evenodd",
        ),
    ),
    "switch": (
        PathShape(
            d="M 2 3 H 16 V 0 L 22 4 L 16 8 V 5 H 2 Z M 22 11 H 8 V 8 L 2 12 L 8 16 V 13 H 22 Z",
            fill=SYMBOL_COLOR,
        ),
    ),
    "tape": (
        RectShape(x=0, y=2, width=24, height=12),
        CircleShape(cx=7, cy=8, r=4),
        CircleShape(cx=17, cy=8, r=4),
    ),
    "ups": (PathShape(d="M 14 0 L 5 9 H 11 L 9 16 L 19 7 H 13 Z", fill=SYMBOL_COLOR),),
    # outline-only glyphs for common extra types
    "router": _outline("M 12 1 A 7 7 0 1 1 11.9 1 Z M 7 8 H 17 M 12 3 V 13"),
    "firewall": _outline("M 1 2 H 23 V 14 H 1 Z M 1 6 H 23 M 1 10 H 23 M 8 2 V 6 M 16 6 V 10 M 8 10 V 14"),
    "kvm": _outline("M 3 1 H 21 V 10 H 3 Z M 9 10 V 13 H 15 V 10 M 5 15 H 19"),
}


def get_glyph(device_type: str) -> Glyph | None:
    return DEVICE_GLYPHS.get(device_type)
