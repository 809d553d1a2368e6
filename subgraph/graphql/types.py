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
from graphql import GraphQLError
from strawberry.types import Info
from strawberry.types.info import RootValueType

from oauth2_lib.fastapi import AuthManager
from oauth2_lib.strawberry import OauthContext
from subgraph.services.customers import CustomerRepository
from subgraph.services.inventory import InventoryRepository
from subgraph.services.users import UserRepository
from subgraph.settings import AppSettings, app_settings


class SubgraphContext(OauthContext):
    customers: CustomerRepository
    users: UserRepository
    inventory: InventoryRepository | None
    settings: AppSettings

    def __init__(
        self,
        auth_manager: AuthManager,
        customers: CustomerRepository,
        users: UserRepository,
        inventory: InventoryRepository | None = None,
        settings: AppSettings = app_settings,
    ):
        self.errors: list[GraphQLError] = []
        self.customers = customers
        self.users = users
        self.inventory = inventory
        self.settings = settings
        super().__init__(auth_manager)


SubgraphInfo = Info[SubgraphContext, RootValueType]
