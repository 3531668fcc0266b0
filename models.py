# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Shared rack model produced by both input dialects and consumed by the renderer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_RACK_HEIGHT = 42


class FormatError(ValueError):
    """Raised when a RackML or rack-text document is malformed."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class RackDevice(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: str
    name: str = ""
    height: int = Field(default=1, ge=1)
    href: str | None = None
    color: str | None = None
    position: int | None = Field(default=None, ge=1)
    category: str | None = None


class Rack(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = ""
    height: int = Field(default=DEFAULT_RACK_HEIGHT, ge=1)
    devices: list[RackDevice] = Field(default_factory=list)


class RackSet(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base: str | None = None
    id: str | None = None
    racks: list[Rack] = Field(default_factory=list)
