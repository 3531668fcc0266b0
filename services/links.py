# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Hyperlink rewriting applied to a parsed RackSet before rendering."""

from __future__ import annotations

import re
from collections.abc import Callable
from urllib.parse import quote, urlparse

from models import RackSet

LinkResolver = Callable[[str], str]

WIKI_LINK = re.compile(r"\[\[([^\]]+)\]\]")


def rewrite_links(rack_set: RackSet, resolver: LinkResolver) -> RackSet:
    """Resolve every device href and the first [[target]] found in a device name.

    A [[target]] in a name is replaced by its bare text and its resolved
    form becomes the device href. The RackSet is modified in place.
    """
    for rack in rack_set.racks:
        for device in rack.devices:
            if device.href:
                device.href = resolver(device.href)
            match = WIKI_LINK.search(device.name)
            if match:
                target = match.group(1)
                device.name = device.name.replace(match.group(0), target, 1)
                device.href = resolver(target)
    return rack_set


def make_link_resolver(internal_base: str) -> LinkResolver:
    """Map note references to ``internal_base + quoted target``.

    Links that already carry a URL scheme pass through unchanged.
    """

    def resolve(link: str) -> str:
        wiki = WIKI_LINK.fullmatch(link)
        if wiki:
            return internal_base + quote(wiki.group(1), safe="")
        if urlparse(link).scheme:
            return link
        return internal_base + quote(link, safe="")

    return resolve
