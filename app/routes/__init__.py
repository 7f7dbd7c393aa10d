"""
Routes package for the User Resource service.

This package contains route blueprints:
- api: REST API endpoints for the /users resource
"""
