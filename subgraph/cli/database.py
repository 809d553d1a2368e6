# Copyright 2019-2025 SURF.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import typer
from sqlalchemy import select
from structlog import get_logger

from subgraph.db import BaseModel, CustomerTable, FuelInventoryTable, db, init_database
from subgraph.services.customers import MOCK_CUSTOMERS
from subgraph.settings import app_settings

logger = get_logger(__name__)

app: typer.Typer = typer.Typer()

MOCK_INVENTORY: tuple[dict, ...] = (
    {"type": "Diesel", "quantity": 12000.0, "price": 1.62},
    {"type": "Unleaded 95", "quantity": 8500.0, "price": 1.79},
    {"type": "Jet A-1", "quantity": 40000.0, "price": 0.94},
)


def _init() -> None:
    if app_settings.DATABASE_URI is None:
        typer.echo("No DATABASE_URI configured")
        raise typer.Exit(code=1)
    init_database(app_settings)


@app.command(name="create-tables", help="Create the customers and inventory tables if they do not exist.")
def create_tables() -> None:
    _init()
    BaseModel.metadata.create_all(db.engine)
    logger.info("Tables created", tables=sorted(BaseModel.metadata.tables))


def seed_customers() -> int:
    existing = set(db.session.scalars(select(CustomerTable.customer_id)))
    new_customers = [customer for customer in MOCK_CUSTOMERS if customer.customer_id not in existing]
    db.session.add_all(CustomerTable(**customer.model_dump()) for customer in new_customers)
    return len(new_customers)


def seed_inventory() -> int:
    if db.session.scalar(select(FuelInventoryTable.id).limit(1)) is not None:
        return 0
    db.session.add_all(FuelInventoryTable(**row) for row in MOCK_INVENTORY)
    return len(MOCK_INVENTORY)


@app.command(help="Insert the mock customer catalog and fuel inventory. Existing rows are left untouched.")
def seed() -> None:
    _init()
    with db.database_scope():
        customers = seed_customers()
        inventory = seed_inventory()
        db.session.commit()
    logger.info("Database seeded", customers=customers, inventory=inventory)
