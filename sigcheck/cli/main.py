"""
CLI entry point for sigcheck.

Parses command-line arguments and dispatches to the appropriate command handler.
"""

import sys
import logging
import argparse

from sigcheck.bitcoin.config import Config, NETWORKS
from sigcheck.cli.commands import (
    cmd_verify,
    cmd_verify_armored,
    cmd_decode_address,
    cmd_inspect,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sigcheck",
        description="Bitcoin signed message verifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s verify bc1q... "hello world" HK0zjJT1...      Verify a signature
  %(prog)s --testnet verify tb1p... "hello world" HBa...  Verify on testnet
  %(prog)s verify-armored signed.txt                    Verify a BIP-137 block
  %(prog)s verify-armored -                             Read the block from stdin
  %(prog)s decode-address 3Pk3gGKJ...                   Show address kind and payload
  %(prog)s inspect HK0zjJT1...                          Show signature header details
        """
    )

    parser.add_argument('--network', choices=sorted(NETWORKS), help='Network (default: mainnet)')
    parser.add_argument('--testnet', action='store_true', help='Use testnet')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # verify
    verify_parser = subparsers.add_parser('verify', help='Verify a signed message')
    verify_parser.add_argument('address', help='Address that signed the message')
    verify_parser.add_argument('message', help='Message that was signed')
    verify_parser.add_argument('signature', help='Base64 signature')

    # verify-armored
    armored_parser = subparsers.add_parser('verify-armored', help='Verify a BIP-137 armored block')
    armored_parser.add_argument('file', nargs='?', default='-', help='File holding the block (default: stdin)')

    # decode-address
    decode_parser = subparsers.add_parser('decode-address', help='Decode an address')
    decode_parser.add_argument('address', help='Address to decode')

    # inspect
    inspect_parser = subparsers.add_parser('inspect', help='Show signature header details')
    inspect_parser.add_argument('signature', help='Base64 signature')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    Config.load_saved_settings()
    if args.testnet:
        Config.NETWORK = "testnet"
    if args.network:
        Config.NETWORK = args.network

    commands = {
        'verify': cmd_verify,
        'verify-armored': cmd_verify_armored,
        'decode-address': cmd_decode_address,
        'inspect': cmd_inspect,
    }

    if args.command in commands:
        return commands[args.command](args)
    parser.print_help()
    return 2


if __name__ == '__main__':
    sys.exit(main())
