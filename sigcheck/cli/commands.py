"""
CLI command implementations for sigcheck.

Each cmd_* function corresponds to a subcommand and returns the process exit
code: 0 on success, 1 when verification or decoding fails.
"""

import sys

from sigcheck.bitcoin.config import Config


def _print_result(result, address: str) -> int:
    if result.verified:
        print(f"[OK] Signature is valid for {address}")
        print(f"     Kind: {result.kind.value}  Flag: {result.flag}")
        return 0
    print(f"[FAIL] {result.error}")
    print(f"       ({type(result.error).__name__})")
    return 1


def cmd_verify(args):
    """Verify address / message / signature given on the command line"""
    from sigcheck.message.verifier import SignedMessage, verify

    signed = SignedMessage(address=args.address, message=args.message, signature=args.signature)
    result = verify(signed, Config.params())
    return _print_result(result, args.address)


def cmd_verify_armored(args):
    """Verify a BIP-137 armored block from a file or stdin"""
    from sigcheck.message.verifier import verify_armored
    from sigcheck.message.armor import parse_armored
    from sigcheck.message.errors import ArmorFormatError

    if args.file == '-':
        armored = sys.stdin.read()
    else:
        try:
            with open(args.file, 'r') as f:
                armored = f.read()
        except OSError as e:
            print(f"[FAIL] Could not read {args.file}: {e.strerror}")
            return 1

    result = verify_armored(armored, Config.params())
    try:
        address = parse_armored(armored)[0]
    except ArmorFormatError:
        address = ''
    return _print_result(result, address)


def cmd_decode_address(args):
    """Show kind, network and payload of an address"""
    from sigcheck.bitcoin.addresses import decode_address, AddressFormatError, UnsupportedAddressError
    from sigcheck.crypto.encoding import EncodingError

    try:
        decoded = decode_address(args.address, Config.params())
    except (EncodingError, AddressFormatError, UnsupportedAddressError) as e:
        print(f"[FAIL] {e}")
        return 1

    print(f"Address: {decoded.text}")
    print(f"Kind:    {decoded.kind.value}")
    print(f"Network: {decoded.network.name}")
    print(f"Payload: {decoded.payload.hex()}")
    return 0


def cmd_inspect(args):
    """Show the header byte of a signature and how it would be read"""
    from sigcheck.bitcoin.flags import RecoveryFlag, InvalidFlagError
    from sigcheck.crypto.signatures import (
        SignatureFormatError, SignatureSizeError, decode_compact_signature, split_compact_signature,
    )

    try:
        sig = decode_compact_signature(args.signature)
    except (SignatureFormatError, SignatureSizeError) as e:
        print(f"[FAIL] {e}")
        return 1

    header, r, s = split_compact_signature(sig)
    print(f"Header: {header}")
    print(f"r:      {r:064x}")
    print(f"s:      {s:064x}")
    try:
        flag = RecoveryFlag(header)
    except InvalidFlagError as e:
        print(f"[!] {e}")
        return 0

    print(f"Recovery ID: {flag.recovery_id}")
    print(f"Compressed:  {'yes' if flag.is_compressed else 'no'}")
    print(f"Convention:  {flag.convention.value}")
    return 0
