#!/usr/bin/env python3
"""The main application module.

This module contains the `SubgraphCore` class for the `FastAPI` backend and the `create_app` factory used to serve
the accounts (and optionally the inventory) subgraph.
"""

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
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import sentry_sdk
import structlog
from fastapi.applications import FastAPI
from sentry_sdk.integrations import Integration
from sentry_sdk.integrations.asyncio import AsyncioIntegration
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
from sentry_sdk.integrations.strawberry import StrawberryIntegration
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse, Response

from nwastdlib.logging import ClearStructlogContextASGIMiddleware, initialise_logging
from oauth2_lib.fastapi import AuthManager, Authorization, GraphqlAuthorization, OIDCAuth
from subgraph import __version__
from subgraph.api import api_router
from subgraph.db import Database, DBSessionMiddleware, init_database, wrapped_db
from subgraph.graphql import AccountsQuery, InventoryQuery, SubgraphGraphqlRouter, create_graphql_router
from subgraph.log_config import LOGGER_OVERRIDES
from subgraph.services.customers import CustomerRepository, DatabaseCustomerRepository, InMemoryCustomerRepository
from subgraph.services.inventory import DatabaseInventoryRepository, InventoryRepository
from subgraph.services.users import UserRepository, default_user_repository
from subgraph.settings import AppSettings, RepositoryType, app_settings

logger = structlog.get_logger(__name__)


class SubgraphCore(FastAPI):
    graphql_routers: dict[str, SubgraphGraphqlRouter]

    def __init__(
        self,
        title: str = "Accounts subgraph",
        description: str = "Federated GraphQL subgraph for users and customers.",
        version: str = __version__,
        default_response_class: type[Response] = JSONResponse,
        base_settings: AppSettings = app_settings,
        database: Database | None = None,
        customers: CustomerRepository | None = None,
        users: UserRepository | None = None,
        **kwargs: Any,
    ) -> None:
        self.auth_manager = AuthManager()
        self.base_settings = base_settings
        self.graphql_routers = {}

        if database is not None:
            wrapped_db.update(database)
        elif base_settings.DATABASE_URI is not None:
            database = init_database(base_settings)
        self.database = database

        self.users = users or default_user_repository(base_settings)
        self.customers = customers or self._default_customer_repository()
        self.inventory: InventoryRepository | None = DatabaseInventoryRepository(database) if database else None

        super().__init__(
            title=title,
            description=description,
            version=version,
            default_response_class=default_response_class,
            lifespan=self._lifespan,
            **kwargs,
        )

        initialise_logging(LOGGER_OVERRIDES)

        self.include_router(api_router)

        self.add_middleware(ClearStructlogContextASGIMiddleware)
        if database is not None:
            self.add_middleware(DBSessionMiddleware, database=database)
        origins = base_settings.CORS_ORIGINS.split(",")
        self.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=base_settings.CORS_ALLOW_METHODS,
            allow_headers=base_settings.CORS_ALLOW_HEADERS,
            expose_headers=base_settings.CORS_EXPOSE_HEADERS,
        )

        @self.router.get("/", response_model=str, response_class=JSONResponse, include_in_schema=False)
        def _index() -> str:
            return f"{base_settings.SERVICE_NAME} subgraph"

    def _default_customer_repository(self) -> CustomerRepository:
        if self.base_settings.CUSTOMER_REPOSITORY == RepositoryType.DATABASE:
            if self.database is None:
                raise RuntimeError("CUSTOMER_REPOSITORY is 'database' but no DATABASE_URI has been configured")
            return DatabaseCustomerRepository(self.database)
        return InMemoryCustomerRepository()

    @asynccontextmanager
    async def _lifespan(self, _app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Subgraph ready",
            service=self.base_settings.SERVICE_NAME,
            graphql_paths=list(self.graphql_routers),
            version=__version__,
        )
        try:
            yield
        finally:
            logger.info("Shutting down", service=self.base_settings.SERVICE_NAME)
            if self.database is not None:
                self.database.dispose()

    def add_sentry(
        self,
        sentry_dsn: str,
        trace_sample_rate: float,
        server_name: str,
        environment: str,
        release: str | None = __version__,
    ) -> None:
        logger.info("Adding Sentry middleware to app", app=self.title)
        sentry_integrations: list[Integration] = [FastApiIntegration(), AsyncioIntegration()]
        if self.database is not None:
            sentry_integrations.append(SqlalchemyIntegration())
        if self.graphql_routers:
            sentry_integrations.append(StrawberryIntegration(async_execution=True))

        sentry_sdk.init(
            dsn=sentry_dsn,
            traces_sample_rate=trace_sample_rate,
            server_name=server_name,
            environment=environment,
            release=f"subgraph@{release}",
            integrations=sentry_integrations,
        )

    def register_graphql(self: "SubgraphCore", query: Any = AccountsQuery, path: str | None = None) -> None:
        """Mount a federated GraphQL schema on the given path.

        Registering a second schema on an already mounted path replaces the schema of the existing router.

        Args:
            query: The (merged) strawberry Query type of the schema.
            path: The URL path to serve the schema on, defaults to the GRAPHQL_PATH setting.

        Returns:
            None:

        """
        path = path or self.base_settings.GRAPHQL_PATH
        new_router = create_graphql_router(
            self.auth_manager,
            customers=self.customers,
            users=self.users,
            inventory=self.inventory,
            query=query,
            settings=self.base_settings,
        )
        if path in self.graphql_routers:
            self.graphql_routers[path].schema = new_router.schema
        else:
            self.graphql_routers[path] = new_router
            self.include_router(new_router, prefix=path)
        logger.debug("Registered GraphQL schema", path=path)

    def register_authentication(self, authentication_instance: OIDCAuth) -> None:
        """Registers a custom authentication instance, used to resolve the calling principal of `me`."""
        self.auth_manager.authentication = authentication_instance

    def register_authorization(self, authorization_instance: Authorization) -> None:
        self.auth_manager.authorization = authorization_instance

    def register_graphql_authorization(self, graphql_authorization_instance: GraphqlAuthorization) -> None:
        self.auth_manager.graphql_authorization = graphql_authorization_instance


def create_app(settings: AppSettings = app_settings) -> SubgraphCore:
    """Build the application served by `subgraph serve`."""
    app = SubgraphCore(base_settings=settings)
    app.register_graphql(AccountsQuery, settings.GRAPHQL_PATH)

    if settings.INVENTORY_ENABLED:
        if app.inventory is None:
            logger.warning("INVENTORY_ENABLED is set but no DATABASE_URI has been configured, skipping inventory")
        else:
            app.register_graphql(InventoryQuery, settings.INVENTORY_GRAPHQL_PATH)

    if settings.SENTRY_DSN:
        app.add_sentry(
            settings.SENTRY_DSN, settings.SENTRY_TRACE_SAMPLE_RATE, settings.SERVICE_NAME, settings.ENVIRONMENT
        )

    return app
