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
from collections.abc import Callable, Iterable
from typing import Any, Coroutine

import strawberry
import structlog
from graphql import GraphQLError
from graphql.validation import NoSchemaIntrospectionCustomRule
from strawberry.extensions import AddValidationRules, SchemaExtension
from strawberry.fastapi import GraphQLRouter
from strawberry.tools import merge_types
from strawberry.types import ExecutionContext
from strawberry.utils.logging import StrawberryLogger

from nwastdlib.graphql.extensions.error_handler_extension import ErrorHandlerExtension
from oauth2_lib.fastapi import AuthManager
from subgraph.graphql.extensions.stats import StatsExtension
from subgraph.graphql.pagination import Connection
from subgraph.graphql.resolvers import resolve_customer, resolve_inventory, resolve_me
from subgraph.graphql.schemas.customer import CustomerType
from subgraph.graphql.schemas.inventory import FuelInventoryType
from subgraph.graphql.schemas.user import UserType
from subgraph.graphql.types import SubgraphContext
from subgraph.services.customers import CustomerRepository
from subgraph.services.inventory import InventoryRepository
from subgraph.services.users import UserRepository
from subgraph.settings import AppSettings, app_settings

logger = structlog.get_logger(__name__)


@strawberry.federation.type(description="User queries")
class UserQuery:
    me: UserType | None = strawberry.field(resolver=resolve_me, description="Returns the calling user")


@strawberry.federation.type(description="Customer queries")
class CustomerQuery:
    customer: CustomerType | None = strawberry.field(
        resolver=resolve_customer, description="Returns a single customer, or null when it does not exist"
    )


@strawberry.federation.type(description="Fuel inventory queries")
class FuelInventoryQuery:
    inventory: Connection[FuelInventoryType] = strawberry.field(
        resolver=resolve_inventory, description="Returns a page of the fuel inventory"
    )


AccountsQuery = merge_types("Query", (UserQuery, CustomerQuery))
InventoryQuery = merge_types("Query", (FuelInventoryQuery,))

SubgraphGraphqlRouter = GraphQLRouter


class SubgraphSchema(strawberry.federation.Schema):
    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        """Override error processing to reduce verbosity of the logging.

        Errors without an original exception are caused by the request (syntax, validation) and are logged without
        a traceback.
        """
        for error in errors:
            if error.original_error is None:
                StrawberryLogger.logger.info(error.message)
            else:
                StrawberryLogger.error(error, execution_context)


def default_context_getter(
    auth_manager: AuthManager,
    customers: CustomerRepository,
    users: UserRepository,
    inventory: InventoryRepository | None = None,
    settings: AppSettings = app_settings,
) -> Callable[[], Coroutine[Any, Any, SubgraphContext]]:
    async def context_getter() -> SubgraphContext:
        return SubgraphContext(
            auth_manager=auth_manager, customers=customers, users=users, inventory=inventory, settings=settings
        )

    return context_getter


def get_extensions(settings: AppSettings = app_settings) -> Iterable[type[SchemaExtension] | SchemaExtension]:
    yield ErrorHandlerExtension
    if not settings.INTROSPECTION_ENABLED:
        yield AddValidationRules([NoSchemaIntrospectionCustomRule])
    if settings.ENABLE_GRAPHQL_STATS_EXTENSION:
        yield StatsExtension


def create_schema(query: Any = AccountsQuery, settings: AppSettings = app_settings) -> SubgraphSchema:
    return SubgraphSchema(
        query=query,
        enable_federation_2=settings.FEDERATION_ENABLED,
        extensions=list(get_extensions(settings)),
    )


def create_graphql_router(
    auth_manager: AuthManager,
    customers: CustomerRepository,
    users: UserRepository,
    inventory: InventoryRepository | None = None,
    query: Any = AccountsQuery,
    settings: AppSettings = app_settings,
) -> SubgraphGraphqlRouter:
    schema = create_schema(query, settings)
    return SubgraphGraphqlRouter(
        schema,
        context_getter=default_context_getter(auth_manager, customers, users, inventory, settings),  # type: ignore
        graphql_ide="graphiql" if settings.SERVE_GRAPHQL_UI else None,
    )
