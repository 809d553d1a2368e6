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
import structlog
from starlette.concurrency import run_in_threadpool

from subgraph.graphql.pagination import Connection
from subgraph.graphql.schemas.inventory import FuelInventoryType
from subgraph.graphql.types import SubgraphInfo
from subgraph.graphql.utils import to_graphql_result_page
from subgraph.services.inventory import InventoryRepository, clamp_page

logger = structlog.get_logger(__name__)


def _fetch_page(repository: InventoryRepository, first: int, after: int) -> tuple[list[FuelInventoryType], int]:
    total = repository.count()
    rows = repository.page(limit=first, offset=after) if first else []
    return [FuelInventoryType.from_schema(row) for row in rows], total


async def resolve_inventory(info: SubgraphInfo, first: int = 20, after: int = 0) -> Connection[FuelInventoryType]:
    repository = info.context.inventory
    if repository is None:
        raise RuntimeError("Inventory is not available, no database has been configured")

    first, after = clamp_page(first, after, info.context.settings.INVENTORY_MAX_PAGE_SIZE)
    items, total = await run_in_threadpool(_fetch_page, repository, first, after)
    logger.debug("Fetched inventory page", first=first, after=after, total=total, items=len(items))
    return to_graphql_result_page(items, first, after, total)
