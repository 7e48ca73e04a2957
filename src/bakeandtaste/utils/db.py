from protean.domain import Domain
from sqlalchemy import create_engine

_SQL_PROVIDERS = ("sqlite", "postgresql")


def _register_tables(domain: Domain, provider_name: str) -> None:
    # Touching `_dao` makes the provider build the SQLAlchemy model for the element
    for _, record in domain.registry.aggregates.items():
        if record.cls.meta_.provider == provider_name:
            domain.repository_for(record.cls)._dao  # noqa: B018

    for _, record in domain.registry.projections.items():
        if record.cls.meta_.provider == provider_name:
            domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain):
    """Create tables for every SQL-backed provider"""
    with domain.domain_context():
        for name, provider in domain.providers.items():
            if provider.conn_info["provider"] in _SQL_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])
                _register_tables(domain, name)
                provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    """Drop tables for every SQL-backed provider"""
    with domain.domain_context():
        for name, provider in domain.providers.items():
            if provider.conn_info["provider"] in _SQL_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])
                _register_tables(domain, name)
                provider._metadata.drop_all(engine)
