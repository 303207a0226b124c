# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

from __future__ import annotations
from dataclasses import dataclass

from ..utils import config as CFG
from .connection import ConnectionOptions, ReadOnlyCallLimit
from .model import BurnchainConfig


@dataclass(frozen=True)
class DefaultRegistry:
    """Compiled-in baseline for every section, built once and passed to the resolver."""
    burnchain: BurnchainConfig
    connection_options: ConnectionOptions
    node_name: str = CFG.NODE_NAME_DEFAULT
    node_seed: bytes = CFG.NODE_SEED_DEFAULT
    supported_modes: tuple = CFG.SUPPORTED_MODES
    mining_key_modes: tuple = CFG.MINING_KEY_MODES


def build_default_registry() -> DefaultRegistry:
    return DefaultRegistry(
        burnchain=BurnchainConfig(),
        connection_options=ConnectionOptions(read_only_call_limit=ReadOnlyCallLimit()),
    )
