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
from typing import Protocol

from sqlalchemy import func, select

from subgraph.db import Database, FuelInventoryTable
from subgraph.schemas.inventory import FuelInventorySchema


class InventoryRepository(Protocol):
    def count(self) -> int: ...

    def page(self, limit: int, offset: int) -> list[FuelInventorySchema]: ...


class DatabaseInventoryRepository:
    def __init__(self, database: Database) -> None:
        self.database = database

    def count(self) -> int:
        stmt = select(func.count()).select_from(FuelInventoryTable)
        return self.database.session.scalar(stmt) or 0

    def page(self, limit: int, offset: int) -> list[FuelInventorySchema]:
        stmt = select(FuelInventoryTable).order_by(FuelInventoryTable.id).limit(limit).offset(offset)
        rows = self.database.session.scalars(stmt).all()
        return [FuelInventorySchema.model_validate(row) for row in rows]


def clamp_page(first: int, after: int, max_page_size: int) -> tuple[int, int]:
    """Bound a requested page to `[0, max_page_size]` items starting at a non-negative offset."""
    return max(0, min(first, max_page_size)), max(0, after)
