import os

import pytest


@pytest.fixture(scope="session")
def _rides_domain(request):
    """Initialize the rides domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from rides.domain import rides

    rides.init()
    return rides


@pytest.fixture(scope="session", autouse=True)
def setup_db(_rides_domain):
    from shared.db import drop_db, setup_db

    setup_db(_rides_domain)

    yield

    drop_db(_rides_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_rides_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _rides_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()
