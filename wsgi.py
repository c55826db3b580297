#!/usr/bin/env python3
"""
WSGI Entry Point for sigcheck
Run with: gunicorn -c gunicorn.conf.py wsgi:app
"""

from sigcheck.web import create_app
from sigcheck.bitcoin.config import Config

# Load network settings
Config.load_saved_settings()

# Create the Flask application
app = create_app()

# Production configuration
app.config.update(
    DEBUG=False,
    TESTING=False,
    PROPAGATE_EXCEPTIONS=False,
    MAX_CONTENT_LENGTH=Config.MAX_MESSAGE_BYTES * 2,
)

if __name__ == "__main__":
    app.run(host=Config.HOST, port=Config.PORT)
