"""
API test package for the User Resource service.

This package contains tests for the REST API endpoints.
Tests use the Flask test client and demonstrate:
- List / read / create testing
- Input validation testing
- Error handling testing
"""
