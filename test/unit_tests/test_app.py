from unittest import mock

import pytest
from starlette.testclient import TestClient

from subgraph import SubgraphCore, create_app
from subgraph.services.customers import DatabaseCustomerRepository, InMemoryCustomerRepository
from subgraph.settings import RepositoryType


def test_create_app(settings):
    app = create_app(settings)

    assert list(app.graphql_routers) == ["/graphql"]
    assert isinstance(app.customers, InMemoryCustomerRepository)
    assert app.inventory is None


def test_create_app_inventory_without_database(settings):
    settings.INVENTORY_ENABLED = True

    app = create_app(settings)

    assert list(app.graphql_routers) == ["/graphql"]


def test_register_graphql_twice_replaces_schema(fastapi_app):
    router = fastapi_app.graphql_routers["/graphql"]
    old_schema = router.schema

    fastapi_app.register_graphql()

    assert fastapi_app.graphql_routers["/graphql"] is router
    assert router.schema is not old_schema


def test_customer_repository_from_database(database, settings):
    settings.CUSTOMER_REPOSITORY = RepositoryType.DATABASE

    app = SubgraphCore(base_settings=settings, database=database)

    assert isinstance(app.customers, DatabaseCustomerRepository)


def test_customer_repository_from_database_requires_database(settings):
    settings.CUSTOMER_REPOSITORY = RepositoryType.DATABASE

    with pytest.raises(RuntimeError, match="no DATABASE_URI"):
        SubgraphCore(base_settings=settings)


def test_lifespan_disposes_database(inventory_app, database):
    with mock.patch.object(database, "dispose") as mock_dispose:
        with TestClient(inventory_app) as client:
            assert client.get("/health/").json() == "OK"
            mock_dispose.assert_not_called()

    mock_dispose.assert_called_once_with()


def test_add_sentry(fastapi_app):
    with mock.patch("subgraph.app.sentry_sdk.init") as mock_init:
        fastapi_app.add_sentry("https://key@sentry.example.com/1", 0.5, "test", "TESTING")

    kwargs = mock_init.call_args.kwargs
    assert kwargs["dsn"] == "https://key@sentry.example.com/1"
    assert kwargs["environment"] == "TESTING"
    assert any(type(integration).__name__ == "StrawberryIntegration" for integration in kwargs["integrations"])
