"""
sigcheck Web - Security Hardening

Input validation and security headers.
"""

import re

from sigcheck.bitcoin.config import Config

# =========================================================================
#                         INPUT VALIDATION
# =========================================================================

_ADDRESS_RE = re.compile(r'^[\x21-\x7e]{1,100}$')
_SIGNATURE_RE = re.compile(r'^[\x21-\x7e]{1,200}$')


def _validate_address_text(addr) -> bool:
    """Cheap shape check before the address reaches the decoder"""
    return isinstance(addr, str) and bool(_ADDRESS_RE.fullmatch(addr))


def _validate_signature_text(sig) -> bool:
    """Cheap shape check before the signature reaches the decoder"""
    return isinstance(sig, str) and bool(_SIGNATURE_RE.fullmatch(sig))


def _validate_message(message) -> bool:
    """Message must be text within the configured size limit"""
    if not isinstance(message, str):
        return False
    try:
        size = len(message.encode('utf-8'))
    except UnicodeEncodeError:
        return False
    return size <= Config.MAX_MESSAGE_BYTES


# =========================================================================
#                         HEADERS
# =========================================================================

def add_security_headers(response):
    """Add security headers to every response"""
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "no-referrer"
    response.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'"
    response.headers["Cache-Control"] = "no-store"
    return response
