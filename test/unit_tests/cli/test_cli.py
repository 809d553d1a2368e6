from unittest import mock

import pytest
from typer.testing import CliRunner

from subgraph.cli.database import MOCK_INVENTORY, seed_customers, seed_inventory
from subgraph.cli.main import app
from subgraph.db import CustomerTable, FuelInventoryTable, db, wrapped_db
from subgraph.services.customers import DatabaseCustomerRepository
from subgraph.settings import app_settings

runner = CliRunner()


def test_schema_accounts():
    result = runner.invoke(app, ["schema"])

    assert result.exit_code == 0
    assert 'type User @key(fields: "id")' in result.stdout
    assert "customer(id: ID!): Customer" in result.stdout


def test_schema_inventory():
    result = runner.invoke(app, ["schema", "inventory"])

    assert result.exit_code == 0
    assert "FuelInventoryConnection" in result.stdout


def test_serve():
    with mock.patch("subgraph.cli.main.uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve", "--port", "4001"])

    assert result.exit_code == 0
    mock_run.assert_called_once_with(
        "subgraph.app:create_app", factory=True, host=app_settings.HOST, port=4001, reload=False, log_config=None
    )


@pytest.mark.parametrize("command", [["db", "seed"], ["db", "create-tables"]])
def test_db_commands_require_database_uri(command):
    result = runner.invoke(app, command)

    assert result.exit_code == 1
    assert "No DATABASE_URI configured" in result.stdout


def test_seed(database):
    wrapped_db.update(database)

    with db.database_scope():
        assert seed_customers() == 2
        assert seed_inventory() == len(MOCK_INVENTORY)
        db.session.commit()

    with db.database_scope():
        # Seeding twice leaves existing rows untouched
        assert seed_customers() == 0
        assert seed_inventory() == 0
        assert db.session.query(CustomerTable).count() == 2
        assert db.session.query(FuelInventoryTable).count() == len(MOCK_INVENTORY)
        assert DatabaseCustomerRepository(database).lookup("CUST-2001").credit_limit == 25000
