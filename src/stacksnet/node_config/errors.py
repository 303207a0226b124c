# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

from __future__ import annotations
from typing import Optional


class ConfigError(ValueError):
    """Resolution failed; the node must not start with this configuration."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        if field:
            message = f"[{field}] {message}"
        super().__init__(message)


class MalformedConfigError(ConfigError):
    """A value is present but cannot be parsed (hex seed, principal, event key, peer)."""


class UnsupportedConfigError(ConfigError):
    """A value parses but the node does not support it (mode, missing mode requirement)."""


class ConfigFileError(ConfigError):
    """The document could not be read or does not have the expected shape."""
