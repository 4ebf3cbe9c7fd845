"""
Shared fixtures for Bifrost tests.
"""

import pytest

from bifrost.group import RouteGroup
from bifrost.router import Router
from bifrost.store import RouteStore


@pytest.fixture
def store() -> RouteStore:
    return RouteStore()


@pytest.fixture
def router(store: RouteStore) -> Router:
    return Router(store)


@pytest.fixture
def group(router: Router) -> RouteGroup:
    return RouteGroup(router)
