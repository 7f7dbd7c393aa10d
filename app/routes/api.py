"""
REST API endpoints for User management.

This module exposes the in-memory user collection over HTTP.
All endpoints return JSON responses, errors included.

Endpoints:
    GET    /api/health        - Health check
    GET    /api/users         - List all users
    GET    /api/users/<id>    - Get a single user by ID
    POST   /api/users         - Create a new user
"""

import logging
import os
from flask import Blueprint, jsonify, request, Response

from app import get_user_resource
from app.resource import Result

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def to_response(result: Result) -> tuple[Response, int]:
    """Serialize a ``(status, body)`` pair from the user resource."""
    status, body = result
    return jsonify(body), status.value


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "service": "users",
        "environment": os.getenv("ENVIRONMENT", "unknown"),
        "version": os.getenv("APP_VERSION", "unknown")
    }), 200


@api_bp.route("/users", methods=["GET"])
@api_bp.route("/users/", methods=["GET"])
def get_users() -> tuple[Response, int]:
    """
    List all users.

    A trailing slash is accepted on the collection path.

    Returns:
        JSON array of users in insertion order and 200 status code.
    """
    logger.info("GET /api/users - Fetching all users")
    return to_response(get_user_resource().list())


@api_bp.route("/users/<user_id>", methods=["GET"])
def get_user(user_id: str) -> tuple[Response, int]:
    """
    Get a single user by ID.

    The id segment is taken as a string so that non-numeric ids get
    the same 404 body as ids that do not exist.

    Args:
        user_id: Raw path segment.

    Returns:
        JSON response with user data and 200 status code,
        or error message and 404 if not found.
    """
    logger.info(f"GET /api/users/{user_id} - Fetching user")
    return to_response(get_user_resource().get_by_id(user_id))


@api_bp.route("/users", methods=["POST"])
@api_bp.route("/users/", methods=["POST"])
def create_user() -> tuple[Response, int]:
    """
    Create a new user.

    Request Body (JSON):
        name: User name (required)
        email: User email (required)

    Returns:
        JSON response with created user and 201 status code,
        or error message and 400 if validation fails.
    """
    logger.info("POST /api/users - Creating new user")

    # An unparseable body is treated like a body with no fields
    data = request.get_json(silent=True)
    return to_response(get_user_resource().create(data))


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.app_errorhandler(404)
def not_found(error: Exception) -> tuple[Response, int]:
    """Handle 404 Not Found errors."""
    return jsonify({"message": "Resource not found"}), 404


@api_bp.app_errorhandler(405)
def method_not_allowed(error: Exception) -> tuple[Response, int]:
    """Handle 405 Method Not Allowed errors."""
    return jsonify({"message": "Method not allowed"}), 405


@api_bp.app_errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    logger.error(f"Internal server error: {error}")
    return jsonify({"message": "Internal server error"}), 500
