# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""RackML (XML) parser.

Numeric attributes are parsed leniently: the leading integer is used and a
value without one falls back to the attribute default. Values below 1 are
rejected.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from models import DEFAULT_RACK_HEIGHT, FormatError, Rack, RackDevice, RackSet

GAP_TAG = "gap"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _local_name(tag: str) -> str:
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def _int_attr(element: ET.Element, name: str, default: int | None) -> int | None:
    raw = element.get(name)
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    value = int(match.group(1))
    if value < 1:
        raise FormatError(f"{name} must be at least 1 on <{_local_name(element.tag)}>, got {raw!r}")
    return value


def _parse_device(element: ET.Element) -> RackDevice:
    return RackDevice(
        type=_local_name(element.tag),
        name="".join(element.itertext()).strip(),
        height=_int_attr(element, "height", 1),
        href=element.get("href"),
        color=element.get("color"),
        position=_int_attr(element, "at", None),
    )


def _parse_rack(element: ET.Element) -> Rack:
    rack = Rack(
        name=element.get("name", ""),
        height=_int_attr(element, "height", DEFAULT_RACK_HEIGHT),
    )
    for child in element:
        # comments and processing instructions have non-string tags
        if not isinstance(child.tag, str):
            continue
        if _local_name(child.tag) == GAP_TAG:
            continue
        rack.devices.append(_parse_device(child))
    return rack


def parse_rackml(text: str) -> RackSet:
    # an XML declaration must be the first thing in the document
    if text.lstrip().startswith("<?xml"):
        text = text.lstrip()
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        line, _ = getattr(exc, "position", (None, None))
        raise FormatError(f"failed to parse RackML: {exc}", line) from exc

    if _local_name(root.tag) != "racks":
        raise FormatError("root element must be racks")

    rack_set = RackSet(base=root.get("base"), id=root.get("id"))
    for child in root:
        if isinstance(child.tag, str) and _local_name(child.tag) == "rack":
            rack_set.racks.append(_parse_rack(child))
    return rack_set
