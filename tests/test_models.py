# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

import pytest
from pydantic import ValidationError

from models import FormatError, Rack, RackDevice, RackSet


def test_defaults() -> None:
    device = RackDevice(type="server")
    assert (device.name, device.height, device.href, device.color, device.position) == (
        "",
        1,
        None,
        None,
        None,
    )
    assert Rack().height == 42
    assert RackSet().racks == []


def test_model_rejects_non_positive_heights() -> None:
    with pytest.raises(ValidationError):
        RackDevice(type="server", height=0)
    with pytest.raises(ValidationError):
        Rack(height=0)


def test_model_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        RackDevice(type="server", label="x")


def test_devices_keep_declaration_order() -> None:
    rack = Rack(devices=[RackDevice(type=t) for t in ("a", "b", "c")])
    assert [d.type for d in rack.devices] == ["a", "b", "c"]


def test_format_error_message() -> None:
    assert str(FormatError("bad")) == "bad"
    err = FormatError("bad", line=3)
    assert str(err) == "line 3: bad"
    assert err.message == "bad"
    assert isinstance(err, ValueError)
