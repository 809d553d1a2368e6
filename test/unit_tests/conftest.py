from collections.abc import Iterator

import pytest
from sqlalchemy.pool import StaticPool
from starlette.testclient import TestClient

from subgraph import SubgraphCore
from subgraph.db import BaseModel, Database, FuelInventoryTable, wrapped_db
from subgraph.graphql import InventoryQuery
from subgraph.settings import AppSettings, app_settings

SQLITE_ENGINE_ARGUMENTS = {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}


@pytest.fixture(scope="session", autouse=True)
def disable_oauth2() -> Iterator[None]:
    from oauth2_lib.settings import oauth2lib_settings

    oauth2lib_settings.OAUTH2_ACTIVE = False
    yield
    oauth2lib_settings.OAUTH2_ACTIVE = True


@pytest.fixture
def database() -> Iterator[Database]:
    """In-memory SQLite database with all tables created.

    A StaticPool keeps the single connection (and thus the data) alive across sessions and threads.
    """
    database = Database("sqlite://", engine_arguments=SQLITE_ENGINE_ARGUMENTS)
    BaseModel.metadata.create_all(database.engine)
    try:
        yield database
    finally:
        database.engine.dispose()
        wrapped_db.update(None)


@pytest.fixture
def inventory_rows(database):
    rows = [
        {"type": "Diesel", "quantity": 12000.0, "price": 1.62},
        {"type": "Unleaded 95", "quantity": 8500.0, "price": 1.79},
        {"type": "Jet A-1", "quantity": 40000.0, "price": 0.94},
    ]
    with database.database_scope():
        database.session.add_all(FuelInventoryTable(**row) for row in rows)
        database.session.commit()
    return rows


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def fastapi_app() -> SubgraphCore:
    app = SubgraphCore(base_settings=app_settings)
    app.register_graphql()
    return app


@pytest.fixture
def test_client(fastapi_app) -> TestClient:
    return TestClient(fastapi_app)


@pytest.fixture
def inventory_app(database, settings) -> SubgraphCore:
    app = SubgraphCore(base_settings=settings, database=database)
    app.register_graphql(InventoryQuery, settings.INVENTORY_GRAPHQL_PATH)
    return app


@pytest.fixture
def inventory_client(inventory_app) -> TestClient:
    return TestClient(inventory_app)
