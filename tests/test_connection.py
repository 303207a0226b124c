# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

import dataclasses

from stacksnet.node_config.connection import ConnectionOptions, ReadOnlyCallLimit, merge_connection_options
from stacksnet.node_config.defaults import build_default_registry
from stacksnet.node_config.file import PartialConnectionOptions


def _defaults() -> ConnectionOptions:
    return build_default_registry().connection_options


def test_default_values():
    d = _defaults()
    assert d.inbox_maxlen == 100 and d.outbox_maxlen == 100
    assert d.timeout == 5000 and d.idle_timeout == 15 and d.heartbeat == 60000
    assert d.private_key_lifetime == 9223372036854775807
    assert d.walk_interval == 9223372036854775807
    assert d.num_neighbors == 4 and d.num_clients == 1000
    assert d.soft_max_neighbors_per_org == 100
    assert d.dns_timeout == 15000 and d.max_inflight_blocks == 6
    assert d.read_only_call_limit == ReadOnlyCallLimit(0, 0, 100000, 30, 1000000000)


def test_absent_section_returns_defaults():
    d = _defaults()
    assert merge_connection_options(None, d) is d


def test_heartbeat_only_override():
    d = _defaults()
    merged = merge_connection_options(PartialConnectionOptions(heartbeat=1234), d)
    assert merged.heartbeat == 1234
    assert dataclasses.replace(merged, heartbeat=d.heartbeat) == d


def test_nested_limit_merges_per_field():
    d = _defaults()
    merged = merge_connection_options(
        PartialConnectionOptions(read_only_call_limit_runtime=5, read_only_call_limit_write_count=2), d
    )
    assert merged.read_only_call_limit == dataclasses.replace(d.read_only_call_limit, runtime=5, write_count=2)
    assert dataclasses.replace(merged, read_only_call_limit=d.read_only_call_limit) == d


def test_nested_limit_falls_back_to_given_defaults():
    custom = dataclasses.replace(_defaults(), read_only_call_limit=ReadOnlyCallLimit(1, 2, 3, 4, 5))
    merged = merge_connection_options(PartialConnectionOptions(read_only_call_limit_read_count=40), custom)
    assert merged.read_only_call_limit == ReadOnlyCallLimit(1, 2, 3, 40, 5)


def test_out_of_range_values_accepted():
    merged = merge_connection_options(PartialConnectionOptions(num_neighbors=10**30, timeout=0), _defaults())
    assert merged.num_neighbors == 10**30
    assert merged.timeout == 0
