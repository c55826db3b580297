"""
sigcheck Web - Verification JSON API Blueprint

Routes: /api/verify, /api/verify/armored, /api/networks
"""

import logging

from flask import Blueprint, request, jsonify

from sigcheck.bitcoin.config import Config, NETWORKS, UnknownNetworkError, get_network
from sigcheck.message.verifier import SignedMessage, VerificationResult, verify, verify_armored
from sigcheck.web.security import (
    _validate_address_text, _validate_signature_text, _validate_message
)

logger = logging.getLogger(__name__)

verify_bp = Blueprint('verify_bp', __name__)


def _result_json(result: VerificationResult, network: str):
    return jsonify({
        'verified': result.verified,
        'error': str(result.error) if result.error else None,
        'error_type': type(result.error).__name__ if result.error else None,
        'kind': result.kind.value if result.kind else None,
        'network': network,
    })


def _bad_request(message: str):
    logger.info("Rejected %s from %s: %s", request.path, request.remote_addr, message)
    return jsonify({'error': message}), 400


def _request_network(data: dict):
    return get_network(data.get('network') or Config.NETWORK)


@verify_bp.route('/api/verify', methods=['POST'])
def api_verify():
    """Verify {address, message, signature[, network]}"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _bad_request('Expected a JSON object')

    address = data.get('address')
    message = data.get('message')
    signature = data.get('signature')

    if not _validate_address_text(address):
        return _bad_request('Missing or malformed address')
    if not _validate_message(message):
        return _bad_request('Missing or oversized message')
    if not _validate_signature_text(signature):
        return _bad_request('Missing or malformed signature')

    try:
        params = _request_network(data)
    except UnknownNetworkError as e:
        return _bad_request(str(e))

    result = verify(SignedMessage(address=address, message=message, signature=signature), params)
    return _result_json(result, params.name)


@verify_bp.route('/api/verify/armored', methods=['POST'])
def api_verify_armored():
    """Verify {armored[, network]} holding a BIP-137 armored block"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _bad_request('Expected a JSON object')

    armored = data.get('armored')
    if not _validate_message(armored) or not armored:
        return _bad_request('Missing or oversized armored block')

    try:
        params = _request_network(data)
    except UnknownNetworkError as e:
        return _bad_request(str(e))

    result = verify_armored(armored, params)
    return _result_json(result, params.name)


@verify_bp.route('/api/networks')
def api_networks():
    """Supported networks and their address parameters"""
    return jsonify({
        'default': Config.NETWORK,
        'networks': [
            {
                'name': params.name,
                'pubkey_hash_version': params.pubkey_hash_version,
                'script_hash_version': params.script_hash_version,
                'bech32_hrp': params.bech32_hrp,
            }
            for params in NETWORKS.values()
        ],
    })
