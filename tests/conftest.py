"""
Shared test fixtures and helpers for the autoroute test suite.
"""

import pytest
import httpx

from autoroute import ASGIAdapter, Router, configure, get_config


@pytest.fixture(autouse=True)
def restore_config():
    """Keep process-wide config changes local to a test."""
    saved = get_config()
    yield
    configure(saved)


@pytest.fixture
def router():
    return Router()


@pytest.fixture
def client_for():
    """Factory: httpx client talking to a router in-process."""

    def make(router: Router) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=ASGIAdapter(router)),
            base_url="http://testserver",
        )

    return make


@pytest.fixture
def route_set():
    """Helper: {(verb, path)} of everything bound on a router."""

    def collect(router: Router):
        return {(entry.verb, entry.path) for entry in router.routes}

    return collect
