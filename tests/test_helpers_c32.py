# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE
# Refs: SIP-005; Crockford-Base32

import pytest

from stacksnet.utils.helpers import (C32Error, c32_address, c32_address_decode, c32_decode, c32_encode,
                                     c32check_decode, hex_bytes)


def test_boot_address_decodes_to_zero_hash():
    version, data = c32_address_decode("SP000000000000000000002Q6VF78")
    assert version == 22
    assert data == b"\x00" * 20


def test_boot_address_encodes_back():
    assert c32_address(22, b"\x00" * 20) == "SP000000000000000000002Q6VF78"


def test_leading_zero_bytes_survive():
    data = b"\x00\x00\x01\x02"
    encoded = c32_encode(data)
    assert encoded.startswith("00")
    assert c32_decode(encoded) == data


def test_decode_normalizes_lookalikes():
    assert c32_decode("o1") == c32_decode("01")
    assert c32_decode("IL") == c32_decode("11")


def test_checksum_mismatch_rejected():
    addr = c32_address(26, bytes(range(20)))
    tampered = addr[:-1] + ("0" if addr[-1] != "0" else "1")
    with pytest.raises(C32Error):
        c32_address_decode(tampered)


def test_invalid_character_rejected():
    with pytest.raises(C32Error):
        c32check_decode("PU000")


def test_address_prefix_required():
    addr = c32_address(22, b"\x11" * 20)
    with pytest.raises(C32Error):
        c32_address_decode("X" + addr[1:])


def test_hex_bytes_strict():
    assert hex_bytes("00fF") == b"\x00\xff"
    assert hex_bytes("") == b""
    with pytest.raises(ValueError):
        hex_bytes("abc")
    with pytest.raises(ValueError):
        hex_bytes("zz")


@pytest.mark.parametrize("raw", ["0x00ff", "0X00ff", "abcd  ef", "ab cd", " abcd", "abcd\n", "００"])
def test_hex_bytes_rejects_prefix_and_whitespace(raw):
    with pytest.raises(ValueError):
        hex_bytes(raw)
