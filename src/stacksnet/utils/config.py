# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE
# Refs: SIP-005; Bitcoin-Core-RPC

'''
=============================================================================
 -------- COMPILED-IN DEFAULTS - READ BEFORE EDITING --------
=============================================================================

Every value below is the fallback used when the node's TOML document leaves
a field out. The resolver never mutates these; it copies them into frozen
records through `stacksnet.node_config.defaults.build_default_registry()`.

  1) NODE IDENTITY
   - NODE_NAME_DEFAULT, NODE_SEED_DEFAULT, NODE_WORKDIR_*, NODE_BIND_HOST

  2) BURNCHAIN
   - BURN_* values, FIRST_BLOCK_MAINNET, BLOCKSTACK_MAGIC_MAINNET
   - SUPPORTED_MODES

  3) PEER NETWORK
   - PEER_VERSION, NETWORK_ID_TESTNET, NEIGHBOR_* bookkeeping

  4) CONNECTION TUNING
   - CONN_* values, READ_ONLY_* call limits
   - I64_MAX stands in for "unbounded" because the peer DB keeps these as
     signed 64-bit integers.

  5) EVENTS & LOGGING
   - EVENT_OBSERVER_ENV, LOG_*

=============================================================================
'''

import os
import appdirs


# =============================================================================
# 1. APPLICATION
# =============================================================================
# ---- APP METADATA ----
APP_NAME   = "StacksNet"  # display name used for user data directories
APP_AUTHOR = "TsarStudio"  # vendor string passed into platform dir helpers
LOG_DIR    = appdirs.user_log_dir(APP_NAME, APP_AUTHOR)  # OS-specific log folder resolved via appdirs

# ---- INTEGER LIMITS ----
U16_MAX = 0xFFFF  # ceiling for saturating port arithmetic
I64_MAX = 9223372036854775807  # largest value the peer DB can store


# =============================================================================
# 2. NODE IDENTITY
# =============================================================================
# ---- DERIVED IDENTITY ----
NODE_NAME_DEFAULT     = "helium-node"  # display name when [node].name is absent
NODE_SEED_DEFAULT     = b"\x00" * 32  # fixed seed keeps default runs reproducible
NODE_ENTROPY_BYTES    = 8  # random bytes drawn to derive workdir and ports
NODE_WORKDIR_ROOT     = "/tmp"  # parent directory for derived working dirs
NODE_WORKDIR_PREFIX   = "stacks-testnet-"  # prefix of the derived working dir name
NODE_BIND_HOST        = "127.0.0.1"  # loopback host used for derived binds
NODE_PORT_FLOOR       = 1024  # added to derived ports to skip privileged range


# =============================================================================
# 3. BURNCHAIN
# =============================================================================
# ---- CHAIN IDENTITY ----
BURN_CHAIN_DEFAULT       = "bitcoin"  # external chain observed by the node
BURN_MODE_DEFAULT        = "mocknet"  # operating mode when [burnchain].mode is absent
SUPPORTED_MODES          = ("mocknet", "helium", "neon", "neon-god")  # every mode the node can run
MINING_KEY_MODES         = ("helium",)  # modes that require local_mining_public_key
BURN_DB_NETWORK_SEGMENT  = "regtest"  # fixed network segment inside the burn DB path
FIRST_BLOCK_MAINNET      = 373601  # first burnchain block scanned by the indexer
BLOCKSTACK_MAGIC_MAINNET = b"id"  # magic bytes prefixed to burnchain operations

# ---- FEES ----
BURN_FEE_CAP_DEFAULT               = 10_000  # per-block burn fee ceiling
COMMIT_ANCHOR_BLOCK_WITHIN_DEFAULT = 5_000  # ms to wait before committing an anchor block
BURNCHAIN_OP_TX_FEE_DEFAULT        = 1_000  # fee attached to each burnchain operation

# ---- RPC ENDPOINT ----
BURN_PEER_HOST_DEFAULT = "127.0.0.1"  # bitcoind host
BURN_PEER_PORT_DEFAULT = 8333  # bitcoind p2p port
BURN_RPC_PORT_DEFAULT  = 8332  # bitcoind rpc port
BURN_RPC_SSL_DEFAULT   = False  # plain http unless the document opts in
BURN_TIMEOUT_DEFAULT   = 30  # seconds before an rpc call is abandoned
SPV_HEADERS_FILE       = "spv-headers.dat"  # header file name under the burnchain dir
SPV_HEADERS_PATH       = "./spv-headers.dat"  # registry placeholder, replaced during resolution


# =============================================================================
# 4. PEER NETWORK
# =============================================================================
# ---- HANDSHAKE IDENTIFIERS ----
PEER_VERSION       = 0x18000000  # peer protocol version advertised to the bootstrap node
NETWORK_ID_TESTNET = 0x80000000  # testnet network id

# ---- BOOTSTRAP NEIGHBOR ----
NEIGHBOR_EXPIRE_BLOCK = 99_999  # far-future expiry for the configured bootstrap peer
BOOTSTRAP_NODE_SEP    = "@"  # separator between pubkey and socket address


# =============================================================================
# 5. CONNECTION TUNING
# =============================================================================
# ---- QUEUES & TIMEOUTS ----
CONN_INBOX_MAXLEN         = 100  # inbound message queue depth
CONN_OUTBOX_MAXLEN        = 100  # outbound message queue depth
CONN_TIMEOUT              = 5_000  # conversation timeout
CONN_IDLE_TIMEOUT         = 15  # seconds an HTTP connection may sit idle
CONN_HEARTBEAT            = 60_000  # heartbeat interval
CONN_PRIVATE_KEY_LIFETIME = I64_MAX  # never rotate the p2p session key
CONN_DNS_TIMEOUT          = 15_000  # ms before a DNS lookup is abandoned

# ---- PEER QUOTAS ----
CONN_NUM_NEIGHBORS               = 4  # hard cap on outbound neighbors
CONN_NUM_CLIENTS                 = 1_000  # hard cap on inbound clients
CONN_SOFT_NUM_NEIGHBORS          = 4  # soft cap on outbound neighbors
CONN_SOFT_NUM_CLIENTS            = 1_000  # soft cap on inbound clients
CONN_MAX_NEIGHBORS_PER_HOST      = 10  # hard cap on neighbors sharing one host
CONN_MAX_CLIENTS_PER_HOST        = 1_000  # hard cap on clients sharing one host
CONN_SOFT_MAX_NEIGHBORS_PER_HOST = 10  # soft cap on neighbors sharing one host
CONN_SOFT_MAX_NEIGHBORS_PER_ORG  = 100  # soft cap on neighbors sharing one AS org
CONN_SOFT_MAX_CLIENTS_PER_HOST   = 1_000  # soft cap on clients sharing one host

# ---- DISCOVERY & DOWNLOADS ----
CONN_WALK_INTERVAL               = I64_MAX  # disables the neighbor walk
CONN_MAX_INFLIGHT_BLOCKS         = 6  # concurrent block downloads
CONN_MAXIMUM_CALL_ARGUMENT_SIZE  = 20 * 2 * 2 * 1024 * 1024  # 20 hex-encoded max-size values

# ---- READ-ONLY CALL LIMIT ----
READ_ONLY_WRITE_LENGTH = 0  # read-only calls may not write
READ_ONLY_WRITE_COUNT  = 0  # read-only calls may not write
READ_ONLY_READ_LENGTH  = 100_000  # bytes a read-only call may read
READ_ONLY_READ_COUNT   = 30  # reads a read-only call may issue
READ_ONLY_RUNTIME      = 1_000_000_000  # runtime cost budget per read-only call


# =============================================================================
# 6. EVENTS
# =============================================================================
EVENT_OBSERVER_ENV = "STACKS_EVENT_OBSERVER"  # env var injecting a catch-all observer
EVENT_KEY_ANY      = "*"  # subscribe to every event
EVENT_KEY_STX      = "stx"  # subscribe to native token transfers
EVENT_KEY_SEP      = "::"  # separates a contract id from its event name
EVENT_ID_SEP       = "."  # separates principal, contract and asset


# =============================================================================
# 7. LOGGING
# =============================================================================
# ---- BASE OUTPUT ----
LOG_LEVEL                   = "INFO"  # balanced verbosity for node startup
LOG_FORMAT                  = "plain"  # "plain" or "json"
LOG_TO_CONSOLE              = True  # mirror logs to stderr
LOG_RATE_LIMIT_SECONDS      = 0.0  # console throttling disabled
LOG_FILE_RATE_LIMIT_SECONDS = 0.0  # file throttling disabled
LOG_ROTATE_MAX_BYTES        = 5_000_000  # rollover log files after ~5MB
LOG_BACKUP_COUNT            = 3  # retain a few rotated log files
LOG_SHOW_PROCESS            = False  # include process metadata when True
LOG_PROC_PLACEHOLDER        = "-"  # value used when process info is hidden

# ---- LOG PATH NORMALIZATION ----
_LOG_BASE = os.path.join(LOG_DIR, "stacksnet")  # base path used to pick extension
if str(LOG_FORMAT).lower().strip() == "json":
    LOG_PATH = _LOG_BASE + ".jsonl"  # JSON lines extension to aid parsing
else:
    LOG_PATH = _LOG_BASE + ".log"  # plain-text log extension
