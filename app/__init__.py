"""
Flask application factory module.

This module creates and configures the Flask application using
the factory pattern, allowing for different configurations
(development, testing, production).
"""

import logging
from flask import Flask, current_app

from app.resource import UserResource
from config import get_config

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

USER_RESOURCE_KEY = "user_resource"


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Every call builds a fresh user collection from ``SEED_USERS``,
    so separate apps never share state.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    app.json.sort_keys = app.config["JSON_SORT_KEYS"]
    logging.getLogger().setLevel(app.config["LOG_LEVEL"])

    logger.info(f"Creating app with config: {config_class.__name__}")

    app.extensions[USER_RESOURCE_KEY] = UserResource(seed=app.config["SEED_USERS"])

    # Register blueprints
    from app.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app


def get_user_resource() -> UserResource:
    """Return the user collection owned by the current application."""
    return current_app.extensions[USER_RESOURCE_KEY]
