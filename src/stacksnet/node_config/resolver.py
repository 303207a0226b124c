# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

"""
Turns a PartialConfig into the node's one resolved Config.

Order matters: the node section is resolved first because the burnchain's
default SPV header path is derived from the node's working directory, and
the mode checks run on the resolved burnchain. Any failure raises a
ConfigError; there is no partially resolved result.
"""

from __future__ import annotations
import dataclasses
import os
from typing import List, Mapping, Optional

from ..core.principal import parse_standard_principal
from ..network.neighbor import parse_bootstrap_node
from ..utils import config as CFG
from ..utils.helpers import hex_bytes
from .connection import merge_connection_options
from .defaults import DefaultRegistry, build_default_registry
from .errors import MalformedConfigError, UnsupportedConfigError
from .event_keys import AnyEvent, parse_event_key_or_raise
from .file import (PartialBurnchainConfig, PartialConfig, PartialEventObserver, PartialInitialBalance,
                   PartialNodeConfig, load_partial_from_path, load_partial_from_str)
from .identity import Entropy, derive_identity
from .layered import overlay
from .model import BurnchainConfig, Config, EventObserverConfig, InitialBalance, NodeConfig

# ---------------- Logger ----------------
from ..utils.node_logging import get_ctx_logger
log = get_ctx_logger("stacksnet.node_config(resolver)")


# -----------------------------
# Sections
# -----------------------------

def _resolve_node(partial: Optional[PartialNodeConfig], baseline: NodeConfig) -> NodeConfig:
    if partial is None:
        log.trace("[_resolve_node] [node] absent, using derived identity", extra={"section": "node"})
        return baseline

    seed = baseline.seed
    if partial.seed is not None:
        try:
            seed = hex_bytes(partial.seed)
        except ValueError as e:
            raise MalformedConfigError(f"Seed should be a hex encoded string: {e}", field="node.seed") from e
        if not seed:
            raise MalformedConfigError("Seed must not be empty", field="node.seed")

    bootstrap_node = None
    if partial.bootstrap_node is not None:
        try:
            bootstrap_node = parse_bootstrap_node(partial.bootstrap_node)
        except ValueError as e:
            raise MalformedConfigError(str(e), field="node.bootstrap_node") from e

    return overlay(
        dataclasses.replace(partial, seed=None, bootstrap_node=None),
        baseline,
        seed=seed,
        bootstrap_node=bootstrap_node,
    )


def _resolve_burnchain(partial: Optional[PartialBurnchainConfig], defaults: BurnchainConfig,
                       node: NodeConfig) -> BurnchainConfig:
    spv_headers_path = node.get_default_spv_headers_path()
    if partial is None:
        log.trace("[_resolve_burnchain] [burnchain] absent, using defaults", extra={"section": "burnchain"})
        return dataclasses.replace(defaults, spv_headers_path=spv_headers_path)
    if partial.magic_bytes is not None:
        log.warning("[_resolve_burnchain] burnchain.magic_bytes cannot be overridden; keeping %r",
                    defaults.magic_bytes, extra={"section": "burnchain", "field": "magic_bytes"})
    return overlay(
        dataclasses.replace(partial, magic_bytes=None),
        dataclasses.replace(defaults, spv_headers_path=spv_headers_path),
    )


def _validate_burnchain(burnchain: BurnchainConfig, registry: DefaultRegistry) -> None:
    if burnchain.mode not in registry.supported_modes:
        raise UnsupportedConfigError(
            f"Setting burnchain.mode to {burnchain.mode!r} not supported "
            f"(should be: {', '.join(registry.supported_modes)})",
            field="burnchain.mode",
        )
    if burnchain.mode in registry.mining_key_modes and burnchain.local_mining_public_key is None:
        raise UnsupportedConfigError(
            f"Config is missing the setting `burnchain.local_mining_public_key` (mandatory for {burnchain.mode})",
            field="burnchain.local_mining_public_key",
        )


def _resolve_initial_balances(raw: Optional[List[PartialInitialBalance]]) -> List[InitialBalance]:
    balances = []
    for i, entry in enumerate(raw or []):
        try:
            address = parse_standard_principal(entry.address)
        except ValueError as e:
            raise MalformedConfigError(str(e), field=f"mstx_balance[{i}].address") from e
        balances.append(InitialBalance(address, entry.amount))
    return balances


def _resolve_events_observers(raw: Optional[List[PartialEventObserver]],
                              environ: Mapping[str, str]) -> List[EventObserverConfig]:
    observers = []
    for i, entry in enumerate(raw or []):
        keys = tuple(
            parse_event_key_or_raise(k, field=f"events_observer[{i}].events_keys[{j}]")
            for j, k in enumerate(entry.events_keys)
        )
        observers.append(EventObserverConfig(entry.endpoint, keys))

    endpoint = environ.get(CFG.EVENT_OBSERVER_ENV)
    if endpoint is not None:
        log.debug("[_resolve_events_observers] %s set, appending catch-all observer -> %s",
                  CFG.EVENT_OBSERVER_ENV, endpoint, extra={"section": "events_observer"})
        observers.append(EventObserverConfig(endpoint, (AnyEvent(),)))
    return observers


# -----------------------------
# Entry points
# -----------------------------

def resolve(partial: Optional[PartialConfig] = None,
            registry: Optional[DefaultRegistry] = None,
            environ: Optional[Mapping[str, str]] = None,
            entropy: Optional[Entropy] = None) -> Config:
    partial = partial or PartialConfig()
    registry = registry or build_default_registry()
    environ = os.environ if environ is None else environ

    baseline = derive_identity(entropy, registry)
    node = _resolve_node(partial.node, baseline)
    burnchain = _resolve_burnchain(partial.burnchain, registry.burnchain, node)
    _validate_burnchain(burnchain, registry)

    config = Config(
        burnchain=burnchain,
        node=node,
        initial_balances=_resolve_initial_balances(partial.mstx_balance),
        events_observers=_resolve_events_observers(partial.events_observer, environ),
        connection_options=merge_connection_options(partial.connection_options, registry.connection_options),
    )
    log.info(
        "[resolve] node=%s mode=%s chain=%s working_dir=%s balances=%d observers=%d",
        node.name, burnchain.mode, burnchain.chain, node.working_dir,
        len(config.initial_balances), len(config.events_observers),
    )
    return config


def config_from_str(content: str, **kwargs) -> Config:
    return resolve(load_partial_from_str(content), **kwargs)


def config_from_path(path: str | os.PathLike, **kwargs) -> Config:
    return resolve(load_partial_from_path(path), **kwargs)


def default_config(**kwargs) -> Config:
    return resolve(None, **kwargs)
