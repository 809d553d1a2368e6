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
from typing import Any, Optional, cast

from structlog import get_logger

from subgraph.db.database import BaseModel, Database, DBSessionMiddleware
from subgraph.db.models import CustomerTable, FuelInventoryTable
from subgraph.settings import AppSettings

logger = get_logger(__name__)


class WrappedDatabase:
    def __init__(self, wrappee: Optional[Database] = None) -> None:
        self.wrapped_database = wrappee

    def update(self, wrappee: Optional[Database]) -> None:
        self.wrapped_database = wrappee
        if wrappee is not None:
            logger.warning("Database object configured, all methods referencing `db` should work.")

    @property
    def configured(self) -> bool:
        return isinstance(self.wrapped_database, Database)

    def __getattr__(self, attr: str) -> Any:
        if not isinstance(self.wrapped_database, Database):
            raise RuntimeWarning(
                "No database configured at this time. Please set DATABASE_URI or pass a Database to SubgraphCore"
            )

        return getattr(self.wrapped_database, attr)


wrapped_db = WrappedDatabase()
db = cast(Database, wrapped_db)


# The global database is set after calling this function
def init_database(settings: AppSettings) -> Database:
    wrapped_db.update(Database(str(settings.DATABASE_URI)))
    return db


__all__ = [
    "BaseModel",
    "CustomerTable",
    "DBSessionMiddleware",
    "Database",
    "FuelInventoryTable",
    "db",
    "init_database",
    "wrapped_db",
]
