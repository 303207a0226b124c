# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE
# Refs: SEC1; libsecp256k1; RFC4291-IPv4-Mapped

from __future__ import annotations
import ipaddress
import re
from dataclasses import dataclass
from typing import Tuple

from ecdsa import SECP256k1, VerifyingKey
from ecdsa.errors import MalformedPointError

# ---------------- Local Project ----------------
from ..utils import config as CFG
from ..utils.helpers import hex_bytes


class InvalidPeerError(ValueError):
    pass


# -----------------------------
# Public key
# -----------------------------

@dataclass(frozen=True)
class Secp256k1PublicKey:
    key: VerifyingKey
    compressed: bool = True

    @classmethod
    def from_hex(cls, pubkey_hex: str) -> "Secp256k1PublicKey":
        try:
            raw = hex_bytes(pubkey_hex)
        except ValueError as e:
            raise InvalidPeerError(f"Public key is not hex: {e}") from e
        if len(raw) == 33 and raw[0] in (2, 3):
            compressed = True
        elif len(raw) == 65 and raw[0] == 4:
            compressed = False
        else:
            raise InvalidPeerError(f"Unsupported pubkey format ({len(raw)} bytes)")
        try:
            vk = VerifyingKey.from_string(raw, curve=SECP256k1)
        except (MalformedPointError, ValueError) as e:
            raise InvalidPeerError(f"Public key is not on secp256k1: {e}") from e
        return cls(vk, compressed)

    def to_bytes(self) -> bytes:
        return self.key.to_string("compressed" if self.compressed else "uncompressed")

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Secp256k1PublicKey):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())


# -----------------------------
# Addresses
# -----------------------------

@dataclass(frozen=True)
class PeerAddress:
    addrbytes: bytes

    @classmethod
    def from_ip(cls, ip: ipaddress.IPv4Address | ipaddress.IPv6Address) -> "PeerAddress":
        if isinstance(ip, ipaddress.IPv4Address):
            return cls(b"\x00" * 10 + b"\xff\xff" + ip.packed)
        return cls(ip.packed)

    def to_ip(self) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
        ip = ipaddress.IPv6Address(self.addrbytes)
        return ip.ipv4_mapped or ip


_PORT_RE = re.compile(r"[0-9]{1,5}")


def parse_socket_addr(addr: str) -> Tuple[ipaddress.IPv4Address | ipaddress.IPv6Address, int]:
    """Parse an IP-literal socket address: `a.b.c.d:port` or `[v6]:port`."""
    if addr.startswith("["):
        host, sep, port_s = addr[1:].partition("]:")
        if not sep:
            raise InvalidPeerError(f"Invalid socket address: {addr!r}")
    else:
        host, sep, port_s = addr.rpartition(":")
        if not sep or ":" in host:
            raise InvalidPeerError(f"Invalid socket address: {addr!r}")
    if not _PORT_RE.fullmatch(port_s) or int(port_s) > CFG.U16_MAX:
        raise InvalidPeerError(f"Invalid port in socket address: {addr!r}")
    try:
        ip = ipaddress.ip_address(host)
    except ValueError as e:
        raise InvalidPeerError(f"Invalid host in socket address {addr!r}: {e}") from e
    if addr.startswith("[") and not isinstance(ip, ipaddress.IPv6Address):
        raise InvalidPeerError(f"Bracketed host must be IPv6: {addr!r}")
    return ip, int(port_s)


# -----------------------------
# Neighbor
# -----------------------------

@dataclass(frozen=True)
class NeighborKey:
    peer_version: int
    network_id: int
    addrbytes: PeerAddress
    port: int

@dataclass(frozen=True)
class Neighbor:
    addr: NeighborKey
    public_key: Secp256k1PublicKey
    expire_block: int = CFG.NEIGHBOR_EXPIRE_BLOCK
    last_contact_time: int = 0
    whitelisted: int = 0
    blacklisted: int = 0
    asn: int = 0
    org: int = 0
    in_degree: int = 0
    out_degree: int = 0

    def __str__(self) -> str:
        ip = self.addr.addrbytes.to_ip()
        host = f"[{ip}]" if ip.version == 6 else str(ip)
        return f"{self.public_key.to_hex()}{CFG.BOOTSTRAP_NODE_SEP}{host}:{self.addr.port}"


def parse_bootstrap_node(descriptor: str) -> Neighbor:
    comps = descriptor.split(CFG.BOOTSTRAP_NODE_SEP)
    if len(comps) != 2:
        raise InvalidPeerError(
            f"Bootstrap node must look like <pubkey-hex>{CFG.BOOTSTRAP_NODE_SEP}<host>:<port>, got {descriptor!r}"
        )
    public_key, peer_addr = comps
    ip, port = parse_socket_addr(peer_addr)
    return Neighbor(
        addr=NeighborKey(
            peer_version=CFG.PEER_VERSION,
            network_id=CFG.NETWORK_ID_TESTNET,
            addrbytes=PeerAddress.from_ip(ip),
            port=port,
        ),
        public_key=Secp256k1PublicKey.from_hex(public_key),
    )
