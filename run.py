#!/usr/bin/env python3
"""
sigcheck Web - Development Server Entry Point

Usage:
    python run.py                    # Start on port 5000
    python run.py --port 8080        # Custom port
    python run.py --testnet          # Verify against testnet by default
    python run.py --debug            # Enable debug mode
"""

import argparse
import logging

from sigcheck.web import create_app
from sigcheck.bitcoin.config import Config, NETWORKS


def main():
    Config.load_saved_settings()

    parser = argparse.ArgumentParser(description='sigcheck Web - Development Server')
    parser.add_argument('--port', type=int, default=Config.PORT)
    parser.add_argument('--host', default=Config.HOST)
    parser.add_argument('--network', choices=sorted(NETWORKS), default=None)
    parser.add_argument('--testnet', action='store_true')
    parser.add_argument('--debug', action='store_true')
    args = parser.parse_args()

    if args.testnet:
        Config.NETWORK = 'testnet'
    if args.network:
        Config.NETWORK = args.network

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    app = create_app()
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == '__main__':
    main()
