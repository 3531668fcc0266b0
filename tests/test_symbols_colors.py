# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from services.colors import DEFAULT_COLOR, DEVICE_COLORS, get_color
from services.symbols import (
    GLYPH_HEIGHT,
    GLYPH_WIDTH,
    CircleShape,
    PathShape,
    RectShape,
    get_glyph,
)

CORE_TYPES = ("server", "switch", "patch", "pdu", "storage", "tape", "ups")


@pytest.mark.parametrize("device_type", CORE_TYPES)
def test_core_types_have_color_and_glyph(device_type: str) -> None:
    assert get_color(device_type) == DEVICE_COLORS[device_type]
    assert get_color(device_type) != DEFAULT_COLOR
    assert get_glyph(device_type)


def test_unknown_type_falls_back() -> None:
    assert get_color("toaster") == DEFAULT_COLOR
    assert get_glyph("toaster") is None


def test_lookup_is_case_sensitive() -> None:
    assert get_color("Server") == DEFAULT_COLOR
    assert get_glyph("Server") is None


def test_outline_fallback_glyphs_are_stroked_only() -> None:
    for device_type in ("router", "firewall", "kvm"):
        (shape,) = get_glyph(device_type)
        assert isinstance(shape, PathShape)
        assert shape.fill == "none"
        assert shape.stroke == "#555"
        assert 'stroke-width="2"' in shape.to_svg()


def test_patch_glyph_is_eight_ports_inside_box() -> None:
    ports = get_glyph("patch")
    assert len(ports) == 8
    for port in ports:
        assert isinstance(port, RectShape)
        assert 0 <= port.x and port.x + port.width <= GLYPH_WIDTH
        assert 0 <= port.y and port.y + port.height <= GLYPH_HEIGHT


def test_tape_glyph_shapes() -> None:
    background, *reels = get_glyph("tape")
    assert isinstance(background, RectShape)
    assert all(isinstance(reel, CircleShape) for reel in reels)
    assert 'stroke="#ccc"' in reels[0].to_svg()


def test_pdu_glyph_uses_round_caps() -> None:
    (shape,) = get_glyph("pdu")
    markup = shape.to_svg()
    assert 'stroke-linecap="round"' in markup
    assert 'fill="none"' in markup


def test_filled_glyphs_use_evenodd_where_hollow() -> None:
    for device_type in ("server", "storage"):
        (shape,) = get_glyph(device_type)
        assert shape.fill_rule == "evenodd"


@pytest.mark.parametrize("device_type", CORE_TYPES + ("router", "firewall", "kvm"))
def test_shapes_serialize_to_well_formed_markup(device_type: str) -> None:
    for shape in get_glyph(device_type):
        ET.fromstring(shape.to_svg())
