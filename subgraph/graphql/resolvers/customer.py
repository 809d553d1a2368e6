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
import structlog
from starlette.concurrency import run_in_threadpool

from subgraph.graphql.schemas.customer import CustomerType
from subgraph.graphql.types import SubgraphInfo

logger = structlog.get_logger(__name__)


async def resolve_customer(info: SubgraphInfo, id: strawberry.ID) -> CustomerType | None:
    customer = await run_in_threadpool(info.context.customers.lookup, str(id))
    if customer is None:
        logger.debug("Customer not found", customer_id=id)
        return None
    return CustomerType.from_schema(customer)
