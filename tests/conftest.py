# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

import os
import sys

import pytest
from ecdsa import SECP256k1, SigningKey

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_ROOT = os.path.join(PROJECT_ROOT, "src")
for path in (PROJECT_ROOT, SRC_ROOT):
    if path not in sys.path:
        sys.path.append(path)

BOOT_ADDRESS = "SP000000000000000000002Q6VF78"


def fixed_entropy(buf: bytes):
    def _entropy(n: int) -> bytes:
        assert n == 8
        return buf
    return _entropy


@pytest.fixture
def entropy():
    return fixed_entropy(bytes.fromhex("0102030405060708"))


@pytest.fixture
def empty_env():
    return {}


@pytest.fixture
def pubkey_hex():
    sk = SigningKey.generate(curve=SECP256k1)
    return sk.get_verifying_key().to_string("compressed").hex()


@pytest.fixture
def sample_toml(pubkey_hex):
    return f"""
[node]
name = "miner-1"
seed = "{'ab' * 32}"
rpc_bind = "0.0.0.0:20443"
bootstrap_node = "{pubkey_hex}@127.0.0.1:20444"

[burnchain]
chain = "bitcoin"
mode = "helium"
peer_host = "bitcoind.local"
rpc_ssl = true
rpc_port = 18443
username = "helium"
password = "s3cret"
local_mining_public_key = "04ee0b1602eb18fef7986887a7e8769a30c9df981d33c8380d255edef003abdcd243a0eb74afdf6740e6c423e62aea876b1f42c1d4c1b0f92b3ad35f1a1d2e6a9e"

[[mstx_balance]]
address = "{BOOT_ADDRESS}"
amount = 10000000

[[events_observer]]
endpoint = "localhost:3700"
events_keys = ["*", "stx", "{BOOT_ADDRESS}.my-contract::my-event"]

[connection_options]
heartbeat = 1000
read_only_call_limit_read_count = 60
"""
