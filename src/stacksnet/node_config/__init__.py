# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

from .errors import ConfigError, ConfigFileError, MalformedConfigError, UnsupportedConfigError
from .event_keys import AnyEvent, AssetEvent, SmartContractEvent, STXEvent, parse_event_key
from .model import BurnchainConfig, Config, EventObserverConfig, InitialBalance, NodeConfig
from .resolver import config_from_path, config_from_str, default_config, resolve
__all__ = [
    "ConfigError", "ConfigFileError", "MalformedConfigError", "UnsupportedConfigError",
    "AnyEvent", "AssetEvent", "SmartContractEvent", "STXEvent", "parse_event_key",
    "BurnchainConfig", "Config", "EventObserverConfig", "InitialBalance", "NodeConfig",
    "config_from_path", "config_from_str", "default_config", "resolve",
]
