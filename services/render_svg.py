# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""SVG rendering of a RackSet: U-scales, rack frames, stacked devices and labels."""

from __future__ import annotations

import re
from html import escape
from urllib.parse import urljoin, urlparse

from models import DEFAULT_RACK_HEIGHT, Rack, RackDevice, RackSet
from services.colors import get_color
from services.symbols import GLYPH_HEIGHT, get_glyph

MARGIN = 25
UNIT_HEIGHT = 25
RACK_WIDTH = 300
RACK_SPACING = 25
LABEL_GUTTER = 16
SCALE_OFFSET = 50
GLYPH_X = 10
FONT_FAMILY = "sans-serif"

# C0 controls other than tab, newline and carriage return are illegal in XML 1.0
XML_ILLEGAL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")

LINK_STYLE = """<style>
a text {
    fill: #0066cc;
    text-decoration: underline;
}
a:hover text {
    fill: #004499;
}
</style>"""

EMPTY_PATTERN = (
    f'<pattern id="pattern-empty" patternUnits="userSpaceOnUse" width="{UNIT_HEIGHT}" height="{UNIT_HEIGHT}">'
    f'<path d="M 0 {UNIT_HEIGHT / 2:g} L {UNIT_HEIGHT} {UNIT_HEIGHT / 2:g}" fill="none" stroke="#ccc" stroke-width="1"/>'
    "</pattern>"
)


def _num(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _esc(value: str) -> str:
    return escape(XML_ILLEGAL.sub("", value), quote=True)


def label_width(rack_set: RackSet) -> int:
    """Reserved width for right-hand labels, estimated from the longest name."""
    longest = max(
        (len(device.name) for rack in rack_set.racks for device in rack.devices),
        default=0,
    )
    return longest * 8 + 32


def canvas_size(rack_set: RackSet) -> tuple[int, int]:
    rack_count = len(rack_set.racks)
    max_height = max((rack.height for rack in rack_set.racks), default=DEFAULT_RACK_HEIGHT)
    height = 2 * MARGIN + UNIT_HEIGHT * max_height
    width = (
        2 * MARGIN
        + rack_count * RACK_WIDTH
        + max(rack_count - 1, 0) * RACK_SPACING
        + label_width(rack_set)
    )
    return width, height


def device_layout(rack: Rack) -> list[tuple[RackDevice, int, int]]:
    """Place devices bottom-up in reverse declaration order.

    Returns (device, base_u, top_u) in placement order, with U offsets
    measured from the bottom of the rack. An explicit position moves the
    stacking cursor too.
    """
    placed: list[tuple[RackDevice, int, int]] = []
    cursor = 0
    for device in reversed(rack.devices):
        base = device.position - 1 if device.position is not None else cursor
        top = base + device.height
        placed.append((device, base, top))
        cursor = top
    return placed


def resolve_href(href: str, base: str | None) -> str:
    if base and urlparse(base).scheme:
        return urljoin(base, href)
    return href


def _render_scale(rack_height: int) -> list[str]:
    scale_x = 44
    tick_x1 = scale_x - 14
    tick_x2 = scale_x + 2
    lines: list[str] = []
    for u in range(rack_height, 0, -1):
        y = MARGIN + (rack_height - u) * UNIT_HEIGHT
        lines.append(
            f'<text x="{scale_x}" y="{_num(y + UNIT_HEIGHT / 2 + 2)}" text-anchor="end" '
            f'dominant-baseline="middle" font-family="{FONT_FAMILY}" font-size="12">{u}</text>'
        )
        lines.append(
            f'<line x1="{tick_x1}" y1="{y}" x2="{tick_x2}" y2="{y}" stroke="black" stroke-width="2"/>'
        )
    bottom = MARGIN + rack_height * UNIT_HEIGHT
    lines.append(
        f'<line x1="{tick_x1}" y1="{bottom}" x2="{tick_x2}" y2="{bottom}" stroke="black" stroke-width="2"/>'
    )
    return lines


def _render_glyph(device: RackDevice, device_height: int) -> list[str]:
    glyph = get_glyph(device.type)
    if not glyph:
        return []
    offset_y = (device_height - GLYPH_HEIGHT) / 2
    return [
        f'<g transform="translate({GLYPH_X}, {_num(offset_y)})">',
        *(shape.to_svg() for shape in glyph),
        "</g>",
    ]


def _render_device(device: RackDevice, base: str | None) -> list[str]:
    device_height = device.height * UNIT_HEIGHT
    color = device.color or get_color(device.type)
    text_y = _num(device_height / 2 + 2)
    href = _esc(resolve_href(device.href, base)) if device.href else None

    body = [
        f'<rect x="0" y="0" width="{RACK_WIDTH}" height="{device_height}" fill="{_esc(color)}" stroke="black"/>',
        f'<text x="{RACK_WIDTH // 2}" y="{text_y}" text-anchor="middle" dominant-baseline="middle" '
        f'font-family="{FONT_FAMILY}" font-size="13">{_esc(device.type)}</text>',
        *_render_glyph(device, device_height),
    ]
    if href:
        body = [f'<a href="{href}">', *body, "</a>"]

    if device.name:
        label = (
            f'<text x="{RACK_WIDTH + LABEL_GUTTER}" y="{text_y}" text-anchor="start" dominant-baseline="middle" '
            f'font-family="{FONT_FAMILY}" font-size="13">{_esc(device.name)}</text>'
        )
        body.append(f'<a href="{href}">{label}</a>' if href else label)
    return body


def _render_rack(rack: Rack, base: str | None) -> list[str]:
    lines: list[str] = []
    if rack.name:
        lines.append(
            f'<text x="{RACK_WIDTH // 2}" y="{_num(MARGIN / 2 + 2)}" text-anchor="middle" '
            f'dominant-baseline="middle" font-family="{FONT_FAMILY}">{_esc(rack.name)}</text>'
        )
    lines.append(
        f'<rect x="0" y="{MARGIN}" width="{RACK_WIDTH}" height="{rack.height * UNIT_HEIGHT}" '
        'fill="url(#pattern-empty)" stroke="black"/>'
    )

    rack_bottom = MARGIN + rack.height * UNIT_HEIGHT
    for device, _, top in device_layout(rack):
        device_y = rack_bottom - top * UNIT_HEIGHT
        lines.append(f'<g transform="translate(0, {device_y})">')
        lines.extend(_render_device(device, base))
        lines.append("</g>")
    return lines


def generate_svg(rack_set: RackSet) -> str:
    width, height = canvas_size(rack_set)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
        f'version="1.1" baseProfile="full" width="{width}" height="{height}">',
        LINK_STYLE,
        EMPTY_PATTERN,
    ]

    x_offset = MARGIN
    for rack in rack_set.racks:
        lines.append(f'<g transform="translate({x_offset - SCALE_OFFSET}, 0)">')
        lines.extend(_render_scale(rack.height))
        lines.append("</g>")

        lines.append(f'<g transform="translate({x_offset}, 0)">')
        lines.extend(_render_rack(rack, rack_set.base))
        lines.append("</g>")

        x_offset += RACK_WIDTH + RACK_SPACING

    lines.append("</svg>")
    return "\n".join(lines)
