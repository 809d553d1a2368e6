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
from typing import TYPE_CHECKING

import strawberry

from subgraph.schemas.user import UserSchema

if TYPE_CHECKING:
    from subgraph.graphql.types import SubgraphInfo


@strawberry.federation.type(name="User", keys=["id"], description="A user owned by the accounts subgraph")
class UserType:
    id: strawberry.ID
    email: str | None
    name: str | None
    username: str | None

    @classmethod
    def from_schema(cls, user: UserSchema) -> "UserType":
        return cls(id=strawberry.ID(user.id), email=user.email, name=user.name, username=user.username)

    @classmethod
    def resolve_reference(cls, info: "SubgraphInfo", id: strawberry.ID) -> "UserType | None":
        # Called by the gateway with key fields only, possibly more than once for the same id
        user = info.context.users.lookup(str(id))
        return cls.from_schema(user) if user else None
