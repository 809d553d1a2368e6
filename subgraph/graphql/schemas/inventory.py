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

from subgraph.schemas.inventory import FuelInventorySchema


@strawberry.type(name="FuelInventory", description="Fuel stock on hand")
class FuelInventoryType:
    id: strawberry.ID
    type: str | None
    quantity: float | None
    price: float | None

    @classmethod
    def from_schema(cls, row: FuelInventorySchema) -> "FuelInventoryType":
        return cls(id=strawberry.ID(str(row.id)), type=row.type, quantity=row.quantity, price=row.price)
