# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of StacksNet — see LICENSE

"""
StacksNet — Node Config Check

Role
- Resolves the node configuration exactly as the node does at startup
  and prints the result, or the reason it would refuse to start.

Key flags
--config PATH   : TOML document to resolve (defaults only when omitted).
--json          : Print the resolved summary as JSON.
--log-level LVL : TRACE / DEBUG / INFO / WARNING.
--no-console    : Log to file only.

Exit status
- 0 when the configuration resolves, 1 on any configuration error.
"""

import argparse, json, sys
from datetime import datetime

import colorama

# ---------------- Local Project ----------------
from stacksnet.node_config import ConfigError, config_from_path, default_config
from stacksnet.utils import config as CFG
from stacksnet.utils.node_logging import get_ctx_logger, setup_logging

log = get_ctx_logger("stacksnet.apps(check_config)")

# ---------- Simple color + timestamp utilities ----------

RESET  = "\033[0m"
BLUE   = "\033[34m"
YELLOW = "\033[33m"
GREEN  = "\033[32m"
RED    = "\033[31m"
CYAN   = "\033[36m"

def _stamp() -> str:
    now = datetime.now()
    d = f"{now.year:04d}.{now.month:02d}.{now.day:02d}"
    t = f"{now.hour:02d}.{now.minute:02d}.{now.second:02d}"
    return f"[{BLUE}{d}{RESET}] - [{YELLOW}{t}{RESET}]"

def clog(message: str, color: str = GREEN):
    print(f"{_stamp()} : {color}{message}{RESET}")


def _print_summary(summary: dict):
    node = summary["node"]
    burn = summary["burnchain"]
    clog(f"Node          : {node['name']}", CYAN)
    clog(f"Working dir   : {node['working_dir']}", CYAN)
    clog(f"RPC / P2P     : {node['rpc_bind']} / {node['p2p_bind']}", CYAN)
    clog(f"Bootstrap     : {node['bootstrap_node'] or '-'}", CYAN)
    clog(f"Burnchain     : {burn['chain']} ({burn['mode']}) via {burn['rpc_url']}", CYAN)
    clog(f"SPV headers   : {burn['spv_headers_path']}", CYAN)
    clog(f"Balances      : {len(summary['initial_balances'])}", CYAN)
    for obs in summary["events_observers"]:
        clog(f"Observer      : {obs['endpoint']} <- {', '.join(obs['events_keys'])}", CYAN)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Resolve and check a StacksNet node configuration.")
    ap.add_argument("--config", dest="config", default=None, help="TOML config file (default: compiled defaults)")
    ap.add_argument("--json", dest="as_json", action="store_true", help="Print the resolved summary as JSON")
    ap.add_argument("--log-level", dest="log_level", default=CFG.LOG_LEVEL, help=f"Log level (default: {CFG.LOG_LEVEL})")
    ap.add_argument("--log-file", dest="log_file", default=CFG.LOG_PATH, help=f"Log file (default: {CFG.LOG_PATH})")
    ap.add_argument("--no-console", dest="no_console", action="store_true", help="Do not mirror logs to the console")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    colorama.init()
    setup_logging(log_file=args.log_file, level=args.log_level, to_console=not args.no_console, force=True)

    try:
        config = config_from_path(args.config) if args.config else default_config()
    except ConfigError as e:
        log.error("[main] configuration rejected: %s", e)
        clog(f"Configuration rejected: {e}", RED)
        return 1

    summary = config.summary()
    if args.as_json:
        print(json.dumps(summary, indent=2))
    else:
        _print_summary(summary)
        clog("Configuration OK", GREEN)
    return 0


if __name__ == "__main__":
    sys.exit(main())
