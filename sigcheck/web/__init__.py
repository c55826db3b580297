"""
sigcheck Web - Application Factory

Creates and configures the Flask application with the verification API
blueprint and security headers.
"""

from flask import Flask

from sigcheck.web.security import add_security_headers
from sigcheck.web.blueprints.verify import verify_bp


def create_app(config: dict = None):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    if config:
        app.config.update(config)

    # ---- Register blueprints ----
    app.register_blueprint(verify_bp)

    # ---- Security headers on every response ----
    app.after_request(add_security_headers)

    return app
