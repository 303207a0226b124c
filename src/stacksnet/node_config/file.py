# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE
# Refs: TOML-1.0

"""
As-parsed mirror of the node's TOML document.

Every field of every section is optional; only the keys that identify a
list entry (`address`/`amount` of a balance, `endpoint`/`events_keys` of an
observer) are required. Unknown keys are ignored. Values are type checked
here, never range checked.
"""

from __future__ import annotations
import dataclasses
import os
import tomllib
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, TypeVar

from .errors import ConfigFileError

# ---------------- Logger ----------------
from ..utils.node_logging import get_ctx_logger
log = get_ctx_logger("stacksnet.node_config(file)")

T = TypeVar("T")

# field kinds checked by _coerce
STR, UINT, U16, U32, BOOL = "str", "uint", "u16", "u32", "bool"
_WIDTH = {U16: 0xFFFF, U32: 0xFFFF_FFFF}


def _coerce(value: Any, kind: str, where: str) -> Any:
    if kind == STR:
        if isinstance(value, str):
            return value
    elif kind == BOOL:
        if isinstance(value, bool):
            return value
    elif isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        if value <= _WIDTH.get(kind, value):
            return value
    expected = {STR: "a string", BOOL: "a boolean", UINT: "a non-negative integer",
                U16: "an integer in 0..65535", U32: "an integer in 0..4294967295"}[kind]
    raise ConfigFileError(f"expected {expected}, got {value!r}", field=where)


def _section(cls: Type[T], raw: Any, where: str) -> T:
    if not isinstance(raw, dict):
        raise ConfigFileError(f"expected a table, got {type(raw).__name__}", field=where)
    kwargs = {}
    for f in dataclasses.fields(cls):
        kind = f.metadata["kind"]
        if f.name in raw:
            kwargs[f.name] = _coerce(raw[f.name], kind, f"{where}.{f.name}")
        elif f.metadata.get("required"):
            raise ConfigFileError("missing required key", field=f"{where}.{f.name}")
    unknown = set(raw) - {f.name for f in dataclasses.fields(cls)}
    if unknown:
        log.debug("[%s] ignoring unknown keys: %s", where, ", ".join(sorted(unknown)))
    return cls(**kwargs)


def _opt(kind: str):
    return dataclasses.field(default=None, metadata={"kind": kind})

def _req(kind: str):
    return dataclasses.field(default=None, metadata={"kind": kind, "required": True})


# -----------------------------
# Sections
# -----------------------------

@dataclass(frozen=True)
class PartialNodeConfig:
    name: Optional[str] = _opt(STR)
    seed: Optional[str] = _opt(STR)
    working_dir: Optional[str] = _opt(STR)
    rpc_bind: Optional[str] = _opt(STR)
    p2p_bind: Optional[str] = _opt(STR)
    bootstrap_node: Optional[str] = _opt(STR)


@dataclass(frozen=True)
class PartialBurnchainConfig:
    chain: Optional[str] = _opt(STR)
    burn_fee_cap: Optional[int] = _opt(UINT)
    mode: Optional[str] = _opt(STR)
    block_time: Optional[int] = _opt(UINT)
    commit_anchor_block_within: Optional[int] = _opt(UINT)
    peer_host: Optional[str] = _opt(STR)
    peer_port: Optional[int] = _opt(U16)
    rpc_port: Optional[int] = _opt(U16)
    rpc_ssl: Optional[bool] = _opt(BOOL)
    username: Optional[str] = _opt(STR)
    password: Optional[str] = _opt(STR)
    timeout: Optional[int] = _opt(U32)
    spv_headers_path: Optional[str] = _opt(STR)
    first_block: Optional[int] = _opt(UINT)
    magic_bytes: Optional[str] = _opt(STR)
    local_mining_public_key: Optional[str] = _opt(STR)
    burnchain_op_tx_fee: Optional[int] = _opt(UINT)


@dataclass(frozen=True)
class PartialConnectionOptions:
    inbox_maxlen: Optional[int] = _opt(UINT)
    outbox_maxlen: Optional[int] = _opt(UINT)
    timeout: Optional[int] = _opt(UINT)
    idle_timeout: Optional[int] = _opt(UINT)
    heartbeat: Optional[int] = _opt(U32)
    private_key_lifetime: Optional[int] = _opt(UINT)
    num_neighbors: Optional[int] = _opt(UINT)
    num_clients: Optional[int] = _opt(UINT)
    soft_num_neighbors: Optional[int] = _opt(UINT)
    soft_num_clients: Optional[int] = _opt(UINT)
    max_neighbors_per_host: Optional[int] = _opt(UINT)
    max_clients_per_host: Optional[int] = _opt(UINT)
    soft_max_neighbors_per_host: Optional[int] = _opt(UINT)
    soft_max_neighbors_per_org: Optional[int] = _opt(UINT)
    soft_max_clients_per_host: Optional[int] = _opt(UINT)
    walk_interval: Optional[int] = _opt(UINT)
    dns_timeout: Optional[int] = _opt(UINT)
    max_inflight_blocks: Optional[int] = _opt(UINT)
    read_only_call_limit_write_length: Optional[int] = _opt(UINT)
    read_only_call_limit_read_length: Optional[int] = _opt(UINT)
    read_only_call_limit_write_count: Optional[int] = _opt(UINT)
    read_only_call_limit_read_count: Optional[int] = _opt(UINT)
    read_only_call_limit_runtime: Optional[int] = _opt(UINT)
    maximum_call_argument_size: Optional[int] = _opt(U32)


@dataclass(frozen=True)
class PartialInitialBalance:
    address: str = _req(STR)
    amount: int = _req(UINT)


@dataclass(frozen=True)
class PartialEventObserver:
    endpoint: str = _req(STR)
    events_keys: List[str] = dataclasses.field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any, where: str) -> "PartialEventObserver":
        if not isinstance(raw, dict):
            raise ConfigFileError(f"expected a table, got {type(raw).__name__}", field=where)
        if "endpoint" not in raw:
            raise ConfigFileError("missing required key", field=f"{where}.endpoint")
        if "events_keys" not in raw:
            raise ConfigFileError("missing required key", field=f"{where}.events_keys")
        keys = raw["events_keys"]
        if not isinstance(keys, list):
            raise ConfigFileError(f"expected an array, got {keys!r}", field=f"{where}.events_keys")
        return cls(
            endpoint=_coerce(raw["endpoint"], STR, f"{where}.endpoint"),
            events_keys=[_coerce(k, STR, f"{where}.events_keys[{i}]") for i, k in enumerate(keys)],
        )


# -----------------------------
# Document
# -----------------------------

@dataclass(frozen=True)
class PartialConfig:
    burnchain: Optional[PartialBurnchainConfig] = None
    node: Optional[PartialNodeConfig] = None
    mstx_balance: Optional[List[PartialInitialBalance]] = None
    events_observer: Optional[List[PartialEventObserver]] = None
    connection_options: Optional[PartialConnectionOptions] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PartialConfig":
        def tables(key: str) -> Optional[list]:
            raw = data.get(key)
            if raw is None:
                return None
            if not isinstance(raw, list):
                raise ConfigFileError(f"expected an array of tables, got {type(raw).__name__}", field=key)
            return raw

        balances = tables("mstx_balance")
        observers = tables("events_observer")
        return cls(
            burnchain=_section(PartialBurnchainConfig, data["burnchain"], "burnchain") if "burnchain" in data else None,
            node=_section(PartialNodeConfig, data["node"], "node") if "node" in data else None,
            mstx_balance=None if balances is None else [
                _section(PartialInitialBalance, b, f"mstx_balance[{i}]") for i, b in enumerate(balances)
            ],
            events_observer=None if observers is None else [
                PartialEventObserver.from_dict(o, f"events_observer[{i}]") for i, o in enumerate(observers)
            ],
            connection_options=(
                _section(PartialConnectionOptions, data["connection_options"], "connection_options")
                if "connection_options" in data else None
            ),
        )


def load_partial_from_str(content: str) -> PartialConfig:
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(f"invalid TOML: {e}") from e
    return PartialConfig.from_dict(data)


def load_partial_from_path(path: str | os.PathLike) -> PartialConfig:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigFileError(f"cannot read config file {os.fspath(path)!r}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(f"invalid TOML in {os.fspath(path)!r}: {e}") from e
    log.debug("[load_partial_from_path] loaded %s", os.fspath(path))
    return PartialConfig.from_dict(data)
