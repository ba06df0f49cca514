import os

import pytest


@pytest.fixture(scope="session")
def _commerce_domain(request):
    """Initialize the commerce domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from commerce.domain import commerce

    commerce.init()
    return commerce


@pytest.fixture(scope="session", autouse=True)
def setup_db(_commerce_domain):
    from shared.db import drop_db, setup_db

    setup_db(_commerce_domain)

    yield

    drop_db(_commerce_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_commerce_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _commerce_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()
