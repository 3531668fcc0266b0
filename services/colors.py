# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Default fill colors per device type."""

from __future__ import annotations

DEFAULT_COLOR = "#eeeeee"

DEVICE_COLORS = {
    "server": "#a3c4f3",
    "switch": "#90dbb4",
    "patch": "#d9d9d9",
    "pdu": "#f4a3a3",
    "storage": "#f9d58b",
    "tape": "#c9b3e6",
    "ups": "#ffc69e",
    "router": "#8fd3e8",
    "firewall": "#f28b82",
    "kvm": "#cfd8dc",
    "blank": "#bdbdbd",
}


def get_color(device_type: str) -> str:
    return DEVICE_COLORS.get(device_type, DEFAULT_COLOR)
