# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE
# Refs: SIP-002; SIP-005

import pytest

from stacksnet.core.principal import (InvalidNameError, InvalidPrincipalError, QualifiedContractIdentifier,
                                      parse_clarity_name, parse_contract_name, parse_standard_principal)
from stacksnet.utils.helpers import c32_address

from conftest import BOOT_ADDRESS


def test_standard_principal_round_trip():
    p = parse_standard_principal(BOOT_ADDRESS)
    assert p.version == 22
    assert str(p) == BOOT_ADDRESS


def test_principal_requires_20_byte_hash():
    short = c32_address(22, b"\x01" * 19)
    with pytest.raises(InvalidPrincipalError):
        parse_standard_principal(short)


def test_principal_rejects_garbage():
    for bad in ("", "not-an-address", "SP", "SP000000000000000000002Q6VF79"):
        with pytest.raises(InvalidPrincipalError):
            parse_standard_principal(bad)


def test_contract_names():
    assert parse_contract_name("my-contract") == "my-contract"
    assert parse_contract_name("__transient") == "__transient"
    for bad in ("", "1abc", "has.dot", "a" * 41):
        with pytest.raises(InvalidNameError):
            parse_contract_name(bad)


def test_clarity_names():
    for ok in ("my-asset", "is-ok?", "+", "<=", "a*b"):
        assert parse_clarity_name(ok) == ok
    for bad in ("", "9lives", "has space", "a" * 129):
        with pytest.raises(InvalidNameError):
            parse_clarity_name(bad)


def test_qualified_contract_identifier_parse():
    cid = QualifiedContractIdentifier.parse(f"{BOOT_ADDRESS}.my-contract")
    assert str(cid.issuer) == BOOT_ADDRESS
    assert cid.name == "my-contract"
    assert str(cid) == f"{BOOT_ADDRESS}.my-contract"


def test_qualified_contract_identifier_rejects_wrong_shape():
    with pytest.raises(ValueError):
        QualifiedContractIdentifier.parse(BOOT_ADDRESS)
    with pytest.raises(ValueError):
        QualifiedContractIdentifier.parse(f"{BOOT_ADDRESS}.a.b")
