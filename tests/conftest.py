# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

SVG_NS = "{http://www.w3.org/2000/svg}"

CORE_TEXT = "caption: Core\nheight: 4\nitems:\n- server[2]: Web1\n- switch: SW1"

TWO_RACK_XML = """<racks base="https://wiki.example.com/hosts/">
  <rack name="R1" height="10">
    <switch>SW1</switch>
    <server height="2" href="web1">Web1</server>
  </rack>
  <rack name="R2" height="6">
    <ups height="2" color="#123456">UPS</ups>
  </rack>
</racks>"""


@pytest.fixture
def core_text() -> str:
    return CORE_TEXT


@pytest.fixture
def two_rack_xml() -> str:
    return TWO_RACK_XML


def parse_svg(svg: str) -> ET.Element:
    root = ET.fromstring(svg)
    assert root.tag == f"{SVG_NS}svg"
    return root


def device_groups(svg: str, rack_index: int = 0) -> list[ET.Element]:
    """Return the device <g> elements of one rack, in placement order."""
    root = parse_svg(svg)
    rack_groups = [
        g for g in root.findall(f"{SVG_NS}g") if g.find(f"{SVG_NS}rect") is not None
    ]
    return rack_groups[rack_index].findall(f"{SVG_NS}g")
