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
import strawberry

from subgraph.schemas.customer import CustomerSchema


@strawberry.federation.type(name="Customer", description="A customer from the customer catalog")
class CustomerType:
    id: strawberry.ID
    name: str
    status: str
    credit_limit: float | None

    @classmethod
    def from_schema(cls, customer: CustomerSchema) -> "CustomerType":
        return cls(
            id=strawberry.ID(customer.customer_id),
            name=customer.name,
            status=customer.status,
            credit_limit=customer.credit_limit,
        )
