"""
BIP-137 ASCII armored signed messages.

    -----BEGIN BITCOIN SIGNED MESSAGE-----
    <message lines>
    -----BEGIN BITCOIN SIGNATURE-----
    <address>
    <base64 signature>
    -----END BITCOIN SIGNATURE-----
"""

from typing import List, Sequence, Tuple

from sigcheck.message.errors import ArmorFormatError


BEGIN_MESSAGE = ("-----BEGIN BITCOIN SIGNED MESSAGE-----",)
BEGIN_SIGNATURE = ("-----BEGIN BITCOIN SIGNATURE-----", "-----BEGIN SIGNATURE-----")
END_SIGNATURE = (
    "-----END BITCOIN SIGNATURE-----",
    "-----END SIGNATURE-----",
    "-----END BITCOIN SIGNED MESSAGE-----",
)


def _find_first(lines: List[str], markers: Sequence[str]) -> int:
    for marker in markers:
        if marker in lines:
            return lines.index(marker)
    raise ArmorFormatError(f"missing marker {markers[0]}")


def parse_armored(armored: str) -> Tuple[str, str, str]:
    """Split an armored block into (address, message, signature)"""
    raw_lines = armored.splitlines()
    lines = [line.strip() for line in raw_lines]

    begin_msg = _find_first(lines, BEGIN_MESSAGE)
    begin_sig = _find_first(lines, BEGIN_SIGNATURE)
    end_sig = _find_first(lines, END_SIGNATURE)

    if not begin_msg < begin_sig < end_sig:
        raise ArmorFormatError("armored block markers are out of order")

    # Message lines keep their spacing, only markers and signature lines are stripped
    message_lines = raw_lines[begin_msg + 1:begin_sig]
    if not message_lines:
        raise ArmorFormatError("armored block has no message")

    signature_section = [line for line in lines[begin_sig + 1:end_sig] if line]
    if len(signature_section) != 2:
        raise ArmorFormatError("armored block must hold an address line and a signature line")

    address, signature = signature_section
    return address, "\n".join(message_lines), signature


def format_armored(address: str, message: str, signature: str) -> str:
    """Render an armored block"""
    return "\n".join([
        BEGIN_MESSAGE[0],
        message,
        BEGIN_SIGNATURE[0],
        address,
        signature,
        END_SIGNATURE[0],
    ])
