"""Schema management for SQL-backed providers."""

from protean.domain import Domain
from sqlalchemy import create_engine

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in SQL_PROVIDERS:
            yield provider


def setup_db(domain: Domain):
    """Create tables for every aggregate and entity on a SQL provider."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])

            # Touching ``_dao`` registers the model with SQLAlchemy's metadata.
            for _, record in domain.registry.aggregates.items():
                if record.cls.meta_.provider == provider.name:
                    domain.repository_for(record.cls)._dao  # noqa: B018

            for _, record in domain.registry.entities.items():
                if record.cls.meta_.provider == provider.name:
                    domain.repository_for(record.cls)._dao  # noqa: B018

            provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    """Drop all tables owned by the domain's SQL providers."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
