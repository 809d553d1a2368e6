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
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Protocol

import structlog

from subgraph.db import CustomerTable, Database
from subgraph.schemas.customer import CustomerSchema
from subgraph.types import CustomerStatus

logger = structlog.get_logger(__name__)

MOCK_CUSTOMERS: tuple[CustomerSchema, ...] = (
    CustomerSchema(
        customer_id="CUST-1001", name="Acme Logistics", status=CustomerStatus.ACTIVE.value, credit_limit=100000
    ),
    CustomerSchema(
        customer_id="CUST-2001", name="Global Retail Corp", status=CustomerStatus.ON_HOLD.value, credit_limit=25000
    ),
)


class CustomerRepository(Protocol):
    def lookup(self, customer_id: str) -> CustomerSchema | None: ...


class InMemoryCustomerRepository:
    def __init__(self, customers: Iterable[CustomerSchema] = MOCK_CUSTOMERS) -> None:
        self._customers: Mapping[str, CustomerSchema] = MappingProxyType(
            {customer.customer_id: customer for customer in customers}
        )

    def lookup(self, customer_id: str) -> CustomerSchema | None:
        return self._customers.get(customer_id)

    def __iter__(self) -> Iterator[CustomerSchema]:
        return iter(self._customers.values())


class DatabaseCustomerRepository:
    """Customer lookups against the `customers` table, using the session of the current database scope."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def lookup(self, customer_id: str) -> CustomerSchema | None:
        customer = self.database.session.get(CustomerTable, customer_id)
        if customer is None:
            logger.debug("Customer not found", customer_id=customer_id)
            return None
        return CustomerSchema.model_validate(customer)
