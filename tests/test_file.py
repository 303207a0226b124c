# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE
# Refs: TOML-1.0

import pytest

from stacksnet.node_config.errors import ConfigFileError
from stacksnet.node_config.file import PartialConfig, load_partial_from_path, load_partial_from_str


def test_empty_document_is_all_absent():
    p = load_partial_from_str("")
    assert p == PartialConfig()


def test_sections_parse(sample_toml):
    p = load_partial_from_str(sample_toml)
    assert p.node.name == "miner-1"
    assert p.node.working_dir is None
    assert p.burnchain.rpc_ssl is True
    assert p.burnchain.rpc_port == 18443
    assert p.mstx_balance[0].amount == 10000000
    assert p.events_observer[0].events_keys[:2] == ["*", "stx"]
    assert p.connection_options.heartbeat == 1000
    assert p.connection_options.timeout is None


def test_unknown_keys_ignored():
    p = load_partial_from_str('[node]\nname = "x"\ncolour = "red"\n[extra]\na = 1\n')
    assert p.node.name == "x"


def test_ignored_burnchain_fields_accepted():
    p = load_partial_from_str('[burnchain]\nblock_time = 5000\nmagic_bytes = "X2"\n')
    assert p.burnchain.block_time == 5000
    assert p.burnchain.magic_bytes == "X2"


@pytest.mark.parametrize("doc, field", [
    ('[burnchain]\nrpc_port = "8332"\n', "burnchain.rpc_port"),
    ('[burnchain]\nrpc_port = 70000\n', "burnchain.rpc_port"),
    ('[burnchain]\nrpc_ssl = 1\n', "burnchain.rpc_ssl"),
    ('[connection_options]\nheartbeat = -1\n', "connection_options.heartbeat"),
    ('[connection_options]\ntimeout = true\n', "connection_options.timeout"),
    ('[[mstx_balance]]\naddress = "SP000000000000000000002Q6VF78"\n', "mstx_balance[0].amount"),
    ('[[events_observer]]\nevents_keys = ["*"]\n', "events_observer[0].endpoint"),
    ('[[events_observer]]\nendpoint = "x"\nevents_keys = "*"\n', "events_observer[0].events_keys"),
    ('[burnchain]\ntimeout = 4294967296\n', "burnchain.timeout"),
    ('[connection_options]\nheartbeat = 4294967296\n', "connection_options.heartbeat"),
    ('[connection_options]\nmaximum_call_argument_size = 5000000000\n', "connection_options.maximum_call_argument_size"),
    ('node = "flat"\n', "node"),
    ('mstx_balance = 3\n', "mstx_balance"),
])
def test_type_errors_name_the_field(doc, field):
    with pytest.raises(ConfigFileError) as exc:
        load_partial_from_str(doc)
    assert exc.value.field == field


def test_invalid_toml():
    with pytest.raises(ConfigFileError, match="invalid TOML"):
        load_partial_from_str("[node\nname=")


def test_load_from_path(tmp_path, sample_toml):
    path = tmp_path / "node.toml"
    path.write_text(sample_toml, encoding="utf-8")
    assert load_partial_from_path(path) == load_partial_from_str(sample_toml)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigFileError, match="cannot read"):
        load_partial_from_path(tmp_path / "nope.toml")


def test_u32_fields_accept_full_width():
    p = load_partial_from_str(
        '[burnchain]\ntimeout = 4294967295\n[connection_options]\nheartbeat = 4294967295\ntimeout = 4294967296\n'
    )
    assert p.burnchain.timeout == 0xFFFF_FFFF
    assert p.connection_options.heartbeat == 0xFFFF_FFFF
    # conversation timeout is 64-bit
    assert p.connection_options.timeout == 0x1_0000_0000
