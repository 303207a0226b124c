# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE
# Refs: SIP-002; SIP-005

"""
Principal and identifier types referenced by the node config.

Only parsing and rendering live here: a standard principal is a c32check
address, a contract is identified by `<principal>.<contract-name>` and an
asset by a contract identifier plus a Clarity name.
"""

from __future__ import annotations
import re
from dataclasses import dataclass

from ..utils.helpers import C32Error, c32_address, c32_address_decode

CONTRACT_MIN_NAME_LENGTH = 1
CONTRACT_MAX_NAME_LENGTH = 40
CLARITY_MAX_NAME_LENGTH  = 128
TRANSIENT_CONTRACT_NAME  = "__transient"

_RE_CONTRACT_NAME = re.compile(
    r"[a-zA-Z][a-zA-Z0-9_-]{%d,%d}" % (CONTRACT_MIN_NAME_LENGTH - 1, CONTRACT_MAX_NAME_LENGTH - 1)
)
_RE_CLARITY_NAME = re.compile(r"[a-zA-Z][a-zA-Z0-9_!?+<>=/*-]*|[-+=/*]|[<>]=?")


class InvalidPrincipalError(ValueError):
    pass

class InvalidNameError(ValueError):
    pass


def parse_contract_name(name: str) -> str:
    if name == TRANSIENT_CONTRACT_NAME or _RE_CONTRACT_NAME.fullmatch(name or ""):
        return name
    raise InvalidNameError(f"Invalid contract name: {name!r}")

def parse_clarity_name(name: str) -> str:
    if name and len(name) <= CLARITY_MAX_NAME_LENGTH and _RE_CLARITY_NAME.fullmatch(name):
        return name
    raise InvalidNameError(f"Invalid Clarity name: {name!r}")


@dataclass(frozen=True)
class StandardPrincipal:
    version: int
    hash_bytes: bytes

    def __str__(self) -> str:
        return c32_address(self.version, self.hash_bytes)

def parse_standard_principal(literal: str) -> StandardPrincipal:
    if not isinstance(literal, str):
        raise InvalidPrincipalError(f"Principal must be a string, got {type(literal).__name__}")
    try:
        version, data = c32_address_decode(literal)
    except C32Error as e:
        raise InvalidPrincipalError(f"Invalid principal {literal!r}: {e}") from e
    if len(data) != 20:
        raise InvalidPrincipalError(f"Invalid principal {literal!r}: expected 20-byte hash, got {len(data)}")
    return StandardPrincipal(version, data)


@dataclass(frozen=True)
class QualifiedContractIdentifier:
    issuer: StandardPrincipal
    name: str

    @classmethod
    def parse(cls, literal: str) -> "QualifiedContractIdentifier":
        parts = literal.split(".")
        if len(parts) != 2:
            raise InvalidPrincipalError(f"Invalid contract identifier: {literal!r}")
        return cls(parse_standard_principal(parts[0]), parse_contract_name(parts[1]))

    def __str__(self) -> str:
        return f"{self.issuer}.{self.name}"


@dataclass(frozen=True)
class AssetIdentifier:
    contract_identifier: QualifiedContractIdentifier
    asset_name: str

    def __str__(self) -> str:
        return f"{self.contract_identifier}.{self.asset_name}"
