# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE
# Refs: SEC1; libsecp256k1

import ipaddress

import pytest
from ecdsa import SECP256k1, SigningKey

from stacksnet.network.neighbor import (InvalidPeerError, PeerAddress, Secp256k1PublicKey, parse_bootstrap_node,
                                        parse_socket_addr)
from stacksnet.utils import config as CFG


def test_parse_bootstrap_node(pubkey_hex):
    n = parse_bootstrap_node(f"{pubkey_hex}@127.0.0.1:20444")
    assert n.addr.port == 20444
    assert n.addr.peer_version == CFG.PEER_VERSION
    assert n.addr.network_id == CFG.NETWORK_ID_TESTNET
    assert n.addr.addrbytes.addrbytes == b"\x00" * 10 + b"\xff\xff" + bytes([127, 0, 0, 1])
    assert n.public_key.to_hex() == pubkey_hex
    assert n.expire_block == 99999
    assert (n.last_contact_time, n.whitelisted, n.blacklisted, n.asn, n.org, n.in_degree, n.out_degree) == (0,) * 7
    assert str(n) == f"{pubkey_hex}@127.0.0.1:20444"


def test_parse_bootstrap_node_ipv6(pubkey_hex):
    n = parse_bootstrap_node(f"{pubkey_hex}@[::1]:20444")
    assert n.addr.addrbytes.to_ip() == ipaddress.IPv6Address("::1")


def test_uncompressed_pubkey_kept_uncompressed():
    vk = SigningKey.generate(curve=SECP256k1).get_verifying_key()
    raw = vk.to_string("uncompressed").hex()
    key = Secp256k1PublicKey.from_hex(raw)
    assert not key.compressed
    assert key.to_hex() == raw


@pytest.mark.parametrize("descriptor", [
    "no-at-sign",
    "a@b@c",
    "{pk}@localhost:20444",
    "{pk}@127.0.0.1",
    "{pk}@127.0.0.1:70000",
    "{pk}@[127.0.0.1]:20444",
    "zz@127.0.0.1:20444",
    "05{bad}@127.0.0.1:20444",
    "04{offcurve}@127.0.0.1:20444",
    "0x{pk}@127.0.0.1:20444",
    "{pk}@127.0.0.1:２０",
    "{pk}@127.0.0.1:²",
    "{pk}@127.0.0.1:+20",
    "{pk}@127.0.0.1: 20",
])
def test_parse_bootstrap_node_rejects_malformed(descriptor, pubkey_hex):
    with pytest.raises(InvalidPeerError):
        parse_bootstrap_node(descriptor.format(pk=pubkey_hex, bad="11" * 32, offcurve=("00" * 31 + "01") * 2))


def test_parse_socket_addr():
    assert parse_socket_addr("10.0.0.1:80") == (ipaddress.IPv4Address("10.0.0.1"), 80)
    ip, port = parse_socket_addr("[2001:db8::1]:443")
    assert ip == ipaddress.IPv6Address("2001:db8::1") and port == 443


def test_peer_address_round_trip():
    ip = ipaddress.IPv4Address("192.168.1.7")
    assert PeerAddress.from_ip(ip).to_ip() == ip


@pytest.mark.parametrize("addr", ["127.0.0.1:２０", "127.0.0.1:²", "127.0.0.1:", "127.0.0.1:020444", "[::1]:٣"])
def test_parse_socket_addr_requires_ascii_port(addr):
    with pytest.raises(InvalidPeerError):
        parse_socket_addr(addr)
