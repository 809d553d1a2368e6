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

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from subgraph.db.database import BaseModel

STATUS_LENGTH = 255


class CustomerTable(BaseModel):
    __tablename__ = "customers"

    customer_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(), nullable=False)
    status: Mapped[str] = mapped_column(String(STATUS_LENGTH), nullable=False)
    credit_limit: Mapped[float | None] = mapped_column(Float(), nullable=True)


class FuelInventoryTable(BaseModel):
    __tablename__ = "inventory"

    id: Mapped[int] = mapped_column(Integer(), primary_key=True, autoincrement=True)
    type: Mapped[str | None] = mapped_column(String(), nullable=True)
    quantity: Mapped[float | None] = mapped_column(Float(), nullable=True)
    price: Mapped[float | None] = mapped_column(Float(), nullable=True)
