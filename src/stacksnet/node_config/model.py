# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

from __future__ import annotations
import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..core.principal import StandardPrincipal, parse_standard_principal
from ..network.neighbor import Neighbor
from ..utils import config as CFG
from .connection import ConnectionOptions
from .errors import MalformedConfigError
from .event_keys import EventKeyType

# ---------------- Logger ----------------
from ..utils.node_logging import get_ctx_logger
log = get_ctx_logger("stacksnet.node_config(model)")


@dataclass(frozen=True)
class NodeConfig:
    name: str
    seed: bytes
    working_dir: str
    rpc_bind: str
    p2p_bind: str
    bootstrap_node: Optional[Neighbor] = None

    def get_burnchain_path(self) -> str:
        return f"{self.working_dir}/burnchain"

    def get_default_spv_headers_path(self) -> str:
        return f"{self.get_burnchain_path()}/{CFG.SPV_HEADERS_FILE}"


@dataclass(frozen=True)
class BurnchainConfig:
    chain: str = CFG.BURN_CHAIN_DEFAULT
    mode: str = CFG.BURN_MODE_DEFAULT
    commit_anchor_block_within: int = CFG.COMMIT_ANCHOR_BLOCK_WITHIN_DEFAULT
    burn_fee_cap: int = CFG.BURN_FEE_CAP_DEFAULT
    peer_host: str = CFG.BURN_PEER_HOST_DEFAULT
    peer_port: int = CFG.BURN_PEER_PORT_DEFAULT
    rpc_port: int = CFG.BURN_RPC_PORT_DEFAULT
    rpc_ssl: bool = CFG.BURN_RPC_SSL_DEFAULT
    username: Optional[str] = None
    password: Optional[str] = None
    timeout: int = CFG.BURN_TIMEOUT_DEFAULT
    spv_headers_path: str = CFG.SPV_HEADERS_PATH
    first_block: int = CFG.FIRST_BLOCK_MAINNET
    magic_bytes: bytes = CFG.BLOCKSTACK_MAGIC_MAINNET
    local_mining_public_key: Optional[str] = None
    burnchain_op_tx_fee: int = CFG.BURNCHAIN_OP_TX_FEE_DEFAULT

    def get_rpc_url(self) -> str:
        scheme = "https://" if self.rpc_ssl else "http://"
        return f"{scheme}{self.peer_host}:{self.rpc_port}"


@dataclass(frozen=True)
class InitialBalance:
    address: StandardPrincipal
    amount: int


@dataclass(frozen=True)
class EventObserverConfig:
    endpoint: str
    events_keys: Tuple[EventKeyType, ...] = ()


@dataclass
class Config:
    burnchain: BurnchainConfig
    node: NodeConfig
    initial_balances: List[InitialBalance] = field(default_factory=list)
    events_observers: List[EventObserverConfig] = field(default_factory=list)
    connection_options: ConnectionOptions = field(default_factory=ConnectionOptions)

    # -------- Derived paths ----------

    def get_burnchain_path(self) -> str:
        return f"{self.node.working_dir}/burnchain/"

    def get_burn_db_path(self) -> str:
        return f"{self.node.working_dir}/burnchain/db"

    def get_burn_db_file_path(self) -> str:
        return f"{self.node.working_dir}/burnchain/db/{self.burnchain.chain}/{CFG.BURN_DB_NETWORK_SEGMENT}/burn.db/"

    def get_chainstate_path(self) -> str:
        return f"{self.node.working_dir}/chainstate/"

    def get_peer_db_path(self) -> str:
        return f"{self.node.working_dir}/peer_db.sqlite"

    # -------- Mutation ----------

    def add_initial_balance(self, address: str, amount: int) -> InitialBalance:
        try:
            principal = parse_standard_principal(address)
        except ValueError as e:
            raise MalformedConfigError(str(e), field="mstx_balance.address") from e
        balance = InitialBalance(principal, int(amount))
        self.initial_balances.append(balance)
        log.debug("[add_initial_balance] %s -> %d", principal, balance.amount)
        return balance

    # -------- Display ----------

    def summary(self) -> Dict[str, Any]:
        """JSON-safe view for operators; secrets are masked."""
        burnchain = dataclasses.asdict(self.burnchain)
        burnchain["magic_bytes"] = self.burnchain.magic_bytes.hex()
        if burnchain["password"] is not None:
            burnchain["password"] = "***"
        burnchain["rpc_url"] = self.burnchain.get_rpc_url()
        node = self.node
        return {
            "node": {
                "name": node.name,
                "working_dir": node.working_dir,
                "rpc_bind": node.rpc_bind,
                "p2p_bind": node.p2p_bind,
                "bootstrap_node": str(node.bootstrap_node) if node.bootstrap_node else None,
            },
            "burnchain": burnchain,
            "initial_balances": [
                {"address": str(b.address), "amount": b.amount} for b in self.initial_balances
            ],
            "events_observers": [
                {"endpoint": o.endpoint, "events_keys": [str(k) for k in o.events_keys]}
                for o in self.events_observers
            ],
            "connection_options": dataclasses.asdict(self.connection_options),
            "paths": {
                "burnchain": self.get_burnchain_path(),
                "burn_db": self.get_burn_db_path(),
                "burn_db_file": self.get_burn_db_file_path(),
                "chainstate": self.get_chainstate_path(),
                "peer_db": self.get_peer_db_path(),
            },
        }
