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

import warnings

from pydantic import PostgresDsn
from pydantic_settings import BaseSettings

from oauth2_lib.settings import oauth2lib_settings
from subgraph.types import strEnum


class SubgraphDeprecationWarning(DeprecationWarning):
    pass


class RepositoryType(strEnum):
    MEMORY = "memory"
    DATABASE = "database"


class AppSettings(BaseSettings):
    ENVIRONMENT: str = "local"
    SERVICE_NAME: str = "accounts-subgraph"
    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 4000
    CORS_ORIGINS: str = "*"
    CORS_ALLOW_METHODS: list[str] = ["GET", "POST", "OPTIONS", "HEAD"]
    CORS_ALLOW_HEADERS: list[str] = ["Authorization", "Content-Type", "Apollo-Require-Preflight"]
    CORS_EXPOSE_HEADERS: list[str] = ["Cache-Control", "Content-Language", "Content-Length", "Content-Type"]
    GRAPHQL_PATH: str = "/graphql"
    INVENTORY_GRAPHQL_PATH: str = "/inventory/graphql"
    INVENTORY_ENABLED: bool = False
    INVENTORY_MAX_PAGE_SIZE: int = 100
    SERVE_GRAPHQL_UI: bool = False
    INTROSPECTION_ENABLED: bool = True
    FEDERATION_ENABLED: bool = True
    ENABLE_GRAPHQL_STATS_EXTENSION: bool = False
    DATABASE_URI: PostgresDsn | None = None
    CUSTOMER_REPOSITORY: RepositoryType = RepositoryType.MEMORY
    DEFAULT_USER_ID: str = "1"
    DEFAULT_USER_USERNAME: str = "demo-user"
    DEFAULT_USER_NAME: str = "Demo User"
    DEFAULT_USER_EMAIL: str = "demo@example.com"
    SENTRY_DSN: str | None = None
    SENTRY_TRACE_SAMPLE_RATE: float = 0.1

    def __init__(self) -> None:
        super(AppSettings, self).__init__()
        if self.DATABASE_URI is not None:
            self.DATABASE_URI = PostgresDsn(convert_database_uri(str(self.DATABASE_URI)))


def convert_database_uri(db_uri: str) -> str:
    if db_uri.startswith(("postgresql://", "postgresql+psycopg2://")):
        db_uri = "postgresql+psycopg" + db_uri[db_uri.find("://") :]
        warnings.filterwarnings("always", category=SubgraphDeprecationWarning)
        warnings.warn(  # noqa: B028
            "DATABASE_URI converted to postgresql+psycopg:// format, please update your environment variable",
            SubgraphDeprecationWarning,
        )
    return db_uri


app_settings = AppSettings()

# Set oauth2lib_settings variables to the same (default) value of settings
oauth2lib_settings.SERVICE_NAME = app_settings.SERVICE_NAME
oauth2lib_settings.ENVIRONMENT = app_settings.ENVIRONMENT
