# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

from __future__ import annotations
import dataclasses
from typing import Any, TypeVar

T = TypeVar("T")


def first_present(*values: Any) -> Any:
    for v in values:
        if v is not None:
            return v
    return None


def overlay(partial: Any, default: T, **fallbacks: Any) -> T:
    """Copy of the frozen `default` with every non-None field of `partial` applied.

    `fallbacks` replace the default's own value for fields the partial leaves out.
    Fields of `partial` that `default` does not declare are ignored.
    """
    changes = {}
    for f in dataclasses.fields(default):
        value = first_present(getattr(partial, f.name, None), fallbacks.get(f.name))
        if value is not None:
            changes[f.name] = value
    return dataclasses.replace(default, **changes) if changes else default
