# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE
# Refs: SIP-005; Crockford-Base32
from __future__ import annotations
import hashlib
import re
from typing import Tuple


# -----------------------------
# HASHING
# -----------------------------

def sha256(b: bytes) -> bytes:
    return hashlib.sha256(b).digest()

def double_sha256(data: bytes) -> bytes:
    return sha256(sha256(data))


# -----------------------------
# HEX
# -----------------------------

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")

def to_hex(b: bytes) -> str:
    return bytes(b).hex()

def hex_bytes(s: str) -> bytes:
    """Strict hex decode: pairs of hex digits only, no prefix, no whitespace."""
    if not isinstance(s, str):
        raise ValueError(f"Expected hex string, got {type(s).__name__}")
    if len(s) % 2:
        raise ValueError("Hex string has odd length")
    if not _HEX_RE.fullmatch(s):
        raise ValueError(f"Invalid hex string: {s!r}")
    return bytes.fromhex(s)


# -----------------------------
# C32 (Crockford base32)
# -----------------------------

C32_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_C32_INDEX = {ch: i for i, ch in enumerate(C32_ALPHABET)}
C32_ADDRESS_PREFIX = "S"


class C32Error(ValueError):
    pass


def c32_normalize(s: str) -> str:
    return s.upper().replace("O", "0").replace("L", "1").replace("I", "1")

def c32_encode(data: bytes) -> str:
    out = []
    carry = 0
    carry_bits = 0
    for byte in reversed(bytes(data)):
        low_bits_to_take = 5 - carry_bits
        low_bits = byte & ((1 << low_bits_to_take) - 1)
        out.append(C32_ALPHABET[(low_bits << carry_bits) + carry])
        carry_bits = (8 + carry_bits) - 5
        carry = byte >> (8 - carry_bits)
        if carry_bits >= 5:
            out.append(C32_ALPHABET[carry & 0x1F])
            carry_bits -= 5
            carry >>= 5
    if carry_bits > 0:
        out.append(C32_ALPHABET[carry])

    # strip zero digits produced by the bit packing, then restore one per leading zero byte
    while out and out[-1] == C32_ALPHABET[0]:
        out.pop()
    for byte in data:
        if byte != 0:
            break
        out.append(C32_ALPHABET[0])
    return "".join(reversed(out))

def c32_decode(s: str) -> bytes:
    if not s.isascii():
        raise C32Error("c32 string must be ASCII")
    s = c32_normalize(s)
    out = bytearray()
    carry = 0
    carry_bits = 0
    for ch in reversed(s):
        value = _C32_INDEX.get(ch)
        if value is None:
            raise C32Error(f"Invalid c32 character: {ch!r}")
        carry += value << carry_bits
        carry_bits += 5
        if carry_bits >= 8:
            out.append(carry & 0xFF)
            carry_bits -= 8
            carry >>= 8
    if carry_bits > 0:
        out.append(carry)

    while out and out[-1] == 0:
        out.pop()
    for ch in s:
        if ch != C32_ALPHABET[0]:
            break
        out.append(0)
    out.reverse()
    return bytes(out)

def c32_checksum(version: int, data: bytes) -> bytes:
    return double_sha256(bytes([version]) + bytes(data))[:4]

def c32check_encode(version: int, data: bytes) -> str:
    if not 0 <= version < 32:
        raise C32Error(f"Invalid c32check version: {version}")
    return C32_ALPHABET[version] + c32_encode(bytes(data) + c32_checksum(version, data))

def c32check_decode(s: str) -> Tuple[int, bytes]:
    if not s.isascii():
        raise C32Error("c32check string must be ASCII")
    if len(s) < 2:
        raise C32Error("c32check string too short")
    s = c32_normalize(s)
    version = _C32_INDEX.get(s[0])
    if version is None:
        raise C32Error(f"Invalid c32check version character: {s[0]!r}")
    payload = c32_decode(s[1:])
    if len(payload) < 4:
        raise C32Error("c32check payload too short for checksum")
    data, checksum = payload[:-4], payload[-4:]
    if c32_checksum(version, data) != checksum:
        raise C32Error("c32check checksum mismatch")
    return version, data

def c32_address(version: int, hash160: bytes) -> str:
    return C32_ADDRESS_PREFIX + c32check_encode(version, hash160)

def c32_address_decode(addr: str) -> Tuple[int, bytes]:
    if len(addr) <= 5:
        raise C32Error("c32 address too short")
    if addr[0] != C32_ADDRESS_PREFIX:
        raise C32Error(f"c32 address must start with {C32_ADDRESS_PREFIX!r}")
    return c32check_decode(addr[1:])
