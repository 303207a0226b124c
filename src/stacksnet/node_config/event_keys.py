# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

"""
Event subscription keys for `[[events_observer]].events_keys`.

Grammar, first match wins:

    "*"                               -> AnyEvent
    "stx"                             -> STXEvent
    <principal>.<contract>::<event>   -> SmartContractEvent
    <principal>.<contract>.<asset>    -> AssetEvent
    anything else                     -> no match

Parsing is split in two steps. `tokenize` only looks at delimiters and
decides which branch applies; `parse_event_key` then validates the
principal and names of that branch. A branch that fails validation is a
"no match" (None); it never falls through to another branch.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..core.principal import (AssetIdentifier, QualifiedContractIdentifier, parse_clarity_name,
                              parse_contract_name, parse_standard_principal)
from ..utils import config as CFG
from .errors import MalformedConfigError


# -----------------------------
# Variants
# -----------------------------

@dataclass(frozen=True)
class AnyEvent:
    def __str__(self) -> str:
        return CFG.EVENT_KEY_ANY

@dataclass(frozen=True)
class STXEvent:
    def __str__(self) -> str:
        return CFG.EVENT_KEY_STX

@dataclass(frozen=True)
class AssetEvent:
    asset_identifier: AssetIdentifier

    def __str__(self) -> str:
        return str(self.asset_identifier)

@dataclass(frozen=True)
class SmartContractEvent:
    contract_identifier: QualifiedContractIdentifier
    event_name: str

    def __str__(self) -> str:
        return f"{self.contract_identifier}{CFG.EVENT_KEY_SEP}{self.event_name}"

EventKeyType = Union[AnyEvent, STXEvent, AssetEvent, SmartContractEvent]


# -----------------------------
# Tokenizer
# -----------------------------

class TokenKind(enum.Enum):
    ANY = "any"
    STX = "stx"
    CONTRACT_EVENT = "contract_event"
    ASSET = "asset"
    REJECT = "reject"

@dataclass(frozen=True)
class EventKeyTokens:
    kind: TokenKind
    parts: Tuple[str, ...] = ()


def tokenize(raw: str) -> EventKeyTokens:
    if raw == CFG.EVENT_KEY_ANY:
        return EventKeyTokens(TokenKind.ANY)
    if raw == CFG.EVENT_KEY_STX:
        return EventKeyTokens(TokenKind.STX)

    segments = raw.split(CFG.EVENT_KEY_SEP)
    if len(segments) == 2:
        # contract id stays whole; QualifiedContractIdentifier.parse splits it
        return EventKeyTokens(TokenKind.CONTRACT_EVENT, tuple(segments))
    if len(segments) == 1:
        parts = segments[0].split(CFG.EVENT_ID_SEP)
        if len(parts) == 3:
            return EventKeyTokens(TokenKind.ASSET, tuple(parts))
    return EventKeyTokens(TokenKind.REJECT, tuple(segments))


# -----------------------------
# Parser
# -----------------------------

def _parse_asset(addr: str, contract_name: str, asset_name: str) -> Optional[AssetEvent]:
    try:
        issuer = parse_standard_principal(addr)
        name = parse_contract_name(contract_name)
        asset = parse_clarity_name(asset_name)
    except ValueError:
        return None
    return AssetEvent(AssetIdentifier(QualifiedContractIdentifier(issuer, name), asset))

def _parse_contract_event(contract_id: str, event_name: str) -> Optional[SmartContractEvent]:
    try:
        contract_identifier = QualifiedContractIdentifier.parse(contract_id)
    except ValueError:
        return None
    return SmartContractEvent(contract_identifier, event_name)


def parse_event_key(raw: str) -> Optional[EventKeyType]:
    tokens = tokenize(raw)
    if tokens.kind is TokenKind.ANY:
        return AnyEvent()
    if tokens.kind is TokenKind.STX:
        return STXEvent()
    if tokens.kind is TokenKind.CONTRACT_EVENT:
        return _parse_contract_event(*tokens.parts)
    if tokens.kind is TokenKind.ASSET:
        return _parse_asset(*tokens.parts)
    return None


def parse_event_key_or_raise(raw: str, field: Optional[str] = None) -> EventKeyType:
    key = parse_event_key(raw)
    if key is None:
        raise MalformedConfigError(f"Unrecognised event key {raw!r}", field=field)
    return key
