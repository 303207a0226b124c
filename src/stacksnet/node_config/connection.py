# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from ..utils import config as CFG
from .layered import first_present, overlay

if TYPE_CHECKING:
    from .file import PartialConnectionOptions

# ---------------- Logger ----------------
from ..utils.node_logging import get_ctx_logger
log = get_ctx_logger("stacksnet.node_config(connection)", section="connection_options")

READ_ONLY_PREFIX = "read_only_call_limit_"


@dataclass(frozen=True)
class ReadOnlyCallLimit:
    write_length: int = CFG.READ_ONLY_WRITE_LENGTH
    write_count: int = CFG.READ_ONLY_WRITE_COUNT
    read_length: int = CFG.READ_ONLY_READ_LENGTH
    read_count: int = CFG.READ_ONLY_READ_COUNT
    runtime: int = CFG.READ_ONLY_RUNTIME


@dataclass(frozen=True)
class ConnectionOptions:
    inbox_maxlen: int = CFG.CONN_INBOX_MAXLEN
    outbox_maxlen: int = CFG.CONN_OUTBOX_MAXLEN
    timeout: int = CFG.CONN_TIMEOUT
    idle_timeout: int = CFG.CONN_IDLE_TIMEOUT
    heartbeat: int = CFG.CONN_HEARTBEAT
    private_key_lifetime: int = CFG.CONN_PRIVATE_KEY_LIFETIME
    num_neighbors: int = CFG.CONN_NUM_NEIGHBORS
    num_clients: int = CFG.CONN_NUM_CLIENTS
    soft_num_neighbors: int = CFG.CONN_SOFT_NUM_NEIGHBORS
    soft_num_clients: int = CFG.CONN_SOFT_NUM_CLIENTS
    max_neighbors_per_host: int = CFG.CONN_MAX_NEIGHBORS_PER_HOST
    max_clients_per_host: int = CFG.CONN_MAX_CLIENTS_PER_HOST
    soft_max_neighbors_per_host: int = CFG.CONN_SOFT_MAX_NEIGHBORS_PER_HOST
    soft_max_neighbors_per_org: int = CFG.CONN_SOFT_MAX_NEIGHBORS_PER_ORG
    soft_max_clients_per_host: int = CFG.CONN_SOFT_MAX_CLIENTS_PER_HOST
    walk_interval: int = CFG.CONN_WALK_INTERVAL
    dns_timeout: int = CFG.CONN_DNS_TIMEOUT
    max_inflight_blocks: int = CFG.CONN_MAX_INFLIGHT_BLOCKS
    maximum_call_argument_size: int = CFG.CONN_MAXIMUM_CALL_ARGUMENT_SIZE
    read_only_call_limit: ReadOnlyCallLimit = field(default_factory=ReadOnlyCallLimit)


def _merge_read_only_call_limit(partial: "PartialConnectionOptions",
                                defaults: ReadOnlyCallLimit) -> ReadOnlyCallLimit:
    nested = {
        name[len(READ_ONLY_PREFIX):]: getattr(partial, name)
        for name in vars(partial)
        if name.startswith(READ_ONLY_PREFIX)
    }
    merged = {k: first_present(v, getattr(defaults, k)) for k, v in nested.items()}
    return ReadOnlyCallLimit(**merged)


def merge_connection_options(partial: Optional["PartialConnectionOptions"],
                             defaults: ConnectionOptions) -> ConnectionOptions:
    """Field-wise merge of the document's [connection_options] over `defaults`.

    The nested read-only call limit falls back to `defaults.read_only_call_limit`,
    field by field. Values are not range checked.
    """
    if partial is None:
        log.trace("[merge_connection_options] section absent, using defaults")
        return defaults
    read_only_call_limit = _merge_read_only_call_limit(partial, defaults.read_only_call_limit)
    merged = overlay(partial, defaults, read_only_call_limit=read_only_call_limit)
    overridden = [k for k, v in vars(partial).items() if v is not None]
    log.debug("[merge_connection_options] overridden fields: %s", ", ".join(sorted(overridden)) or "none")
    return merged
