# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

from __future__ import annotations
import secrets
from typing import Callable, Optional

from ..utils import config as CFG
from ..utils.helpers import to_hex
from .defaults import DefaultRegistry, build_default_registry
from .model import NodeConfig

# ---------------- Logger ----------------
from ..utils.node_logging import get_ctx_logger
log = get_ctx_logger("stacksnet.node_config(identity)", section="node")

Entropy = Callable[[int], bytes]


def saturating_port(raw: bytes) -> int:
    """Big-endian u16 plus the privileged-port floor, clamped at 65535."""
    return min(int.from_bytes(raw[:2], "big") + CFG.NODE_PORT_FLOOR, CFG.U16_MAX)


def derive_identity(entropy: Optional[Entropy] = None,
                    registry: Optional[DefaultRegistry] = None) -> NodeConfig:
    registry = registry or build_default_registry()
    buf = (entropy or secrets.token_bytes)(CFG.NODE_ENTROPY_BYTES)
    if len(buf) < 4:
        raise ValueError(f"Entropy source returned {len(buf)} bytes, need at least 4")
    testnet_id = f"{CFG.NODE_WORKDIR_PREFIX}{to_hex(buf)}"
    rpc_port = saturating_port(buf[0:2])
    p2p_port = saturating_port(buf[2:4])
    node = NodeConfig(
        name=registry.node_name,
        seed=registry.node_seed,
        working_dir=f"{CFG.NODE_WORKDIR_ROOT}/{testnet_id}",
        rpc_bind=f"{CFG.NODE_BIND_HOST}:{rpc_port}",
        p2p_bind=f"{CFG.NODE_BIND_HOST}:{p2p_port}",
    )
    log.trace("[derive_identity] working_dir=%s rpc=%d p2p=%d", node.working_dir, rpc_port, p2p_port)
    return node
