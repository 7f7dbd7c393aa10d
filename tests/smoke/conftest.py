"""
Smoke-test fixtures for a running user service.

Provides the ``smoke_base_url`` session-scoped fixture that yields a
healthy base URL shared across the entire smoke suite.  The URL comes
from ``TEST_BASE_URL``; when it is unset the suite is skipped, since
smoke tests never start a server themselves.

Key SDET Concepts Demonstrated:
- Session-scoped URL fixtures to share a single live target across tests
- Polling a health endpoint before running any assertions
"""

from __future__ import annotations

import os
import time

import pytest
import requests


def _wait_for_healthy(url: str, timeout: int = 30, interval: int = 1) -> None:
    """Poll the health endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            response = requests.get(f"{url}/api/health", timeout=2)
            if response.status_code == 200:
                return
        except requests.RequestException:
            pass
        time.sleep(interval)
    raise RuntimeError(f"User service at {url} not healthy after {timeout}s")


@pytest.fixture(scope="session")
def smoke_base_url() -> str:
    """Return a healthy base URL for smoke tests."""
    base_url = os.getenv("TEST_BASE_URL")
    if not base_url:
        pytest.skip("TEST_BASE_URL is not set; smoke tests need a running service")

    base_url = base_url.rstrip("/")
    _wait_for_healthy(base_url)
    return base_url
