"""Fixtures for tests that drive the assembled application.

The app pushes the owning domain's context per request, so these tests only
need the domains initialized and their data cleared between tests.
"""

import os

import pytest


@pytest.fixture(scope="session")
def app(request):
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from app import app

    return app


@pytest.fixture(autouse=True)
def run_around_tests(app):
    yield

    from commerce.domain import commerce
    from rides.domain import rides

    for domain in (commerce, rides):
        with domain.domain_context():
            for _, provider in domain.providers.items():
                provider._data_reset()

            for _, broker in domain.brokers.items():
                broker._data_reset()

            domain.event_store.store._data_reset()
