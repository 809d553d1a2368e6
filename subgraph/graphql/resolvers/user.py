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
from fastapi import HTTPException
from httpx import HTTPError

from subgraph.graphql.schemas.user import UserType
from subgraph.graphql.types import SubgraphInfo
from subgraph.services.users import user_from_oidc

logger = structlog.get_logger(__name__)


async def resolve_me(info: SubgraphInfo) -> UserType:
    """Return the calling principal, or the default user when the request carries none.

    An invalid or missing token is not an error for this field.
    """
    current_user = None
    if user_resolver := info.context.get_current_user:
        try:
            current_user = await user_resolver
        except (HTTPException, HTTPError) as exc:
            logger.debug("Could not resolve the current user, using the default user", error=str(exc))

    return UserType.from_schema(user_from_oidc(current_user, info.context.settings))
