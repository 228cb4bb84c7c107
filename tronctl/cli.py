"""The tronctl command line."""

from __future__ import annotations

import argparse
import os
import sys

from tronctl.address import base58_to_address, hex_to_address
from tronctl.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    default_config_dir,
    get_config_value,
    init_config,
    save_config,
    set_config_value,
)

VERSION = "dev"
COMMIT = "unknown"
BUILT_AT = "unknown"
BUILT_BY = "unknown"


def _cmd_version(args) -> int:
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "tronctl"
    print(
        f"TronCTL. {prog} version {VERSION}-{COMMIT} ({BUILT_BY} {BUILT_AT})",
        file=sys.stderr,
    )
    return 0


def _cmd_config_set(args) -> int:
    directory = default_config_dir()
    config = set_config_value(init_config(directory), args.param, args.value)
    save_config(config, directory / CONFIG_FILE_NAME)
    return 0


def _cmd_config_get(args) -> int:
    print(get_config_value(init_config(default_config_dir()), args.param))
    return 0


def _cmd_noop(args) -> int:
    return 0


def _cmd_base58_to_addr(args) -> int:
    print(base58_to_address(args.address).to_hex())
    return 0


def _cmd_addr_to_base58(args) -> int:
    addr = hex_to_address(args.address)
    print("" if addr is None else str(addr))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(prog="tronctl", description="Tron command line tool")
    parser.set_defaults(help_parser=parser)
    commands = parser.add_subparsers(dest="command")

    version = commands.add_parser("version", help="Show version")
    version.set_defaults(func=_cmd_version)

    config = commands.add_parser("config", help="update default config")
    config.set_defaults(help_parser=config)
    config_cmds = config.add_subparsers(dest="config_command")
    set_cmd = config_cmds.add_parser("set", help="set default config")
    set_cmd.add_argument("param")
    set_cmd.add_argument("value")
    set_cmd.set_defaults(func=_cmd_config_set)
    get_cmd = config_cmds.add_parser("get", help="get default config")
    get_cmd.add_argument("param")
    get_cmd.set_defaults(func=_cmd_config_get)

    utility = commands.add_parser("utility", help="common tron utilities")
    utility.set_defaults(help_parser=utility)
    util_cmds = utility.add_subparsers(dest="utility_command")
    util_cmds.add_parser(
        "metadata", help="data includes network specific values"
    ).set_defaults(func=_cmd_noop)
    util_cmds.add_parser(
        "metrics", help="mostly in-memory fluctuating values"
    ).set_defaults(func=_cmd_noop)
    b58 = util_cmds.add_parser("base58-to-addr", help="0x Address of a base58 one-address")
    b58.add_argument("address")
    b58.set_defaults(func=_cmd_base58_to_addr)
    hexa = util_cmds.add_parser("addr-to-base58", help="base58 tron-address of an 0x address")
    hexa.add_argument("address")
    hexa.set_defaults(func=_cmd_addr_to_base58)
    return parser


def main(argv=None) -> int:
    """Run the command line and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    func = getattr(args, "func", None)
    if func is None:
        args.help_parser.print_help()
        return 0
    try:
        return func(args)
    except (ValueError, ConfigError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())