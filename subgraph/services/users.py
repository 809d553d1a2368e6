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
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Protocol


from oauth2_lib.fastapi import OIDCUserModel
from subgraph.schemas.user import UserSchema
from subgraph.settings import AppSettings, app_settings


class UserRepository(Protocol):
    def lookup(self, user_id: str) -> UserSchema | None: ...


class InMemoryUserRepository:
    """Read-only user directory; the catalog is frozen at construction."""

    def __init__(self, users: Iterable[UserSchema]) -> None:
        self._users: Mapping[str, UserSchema] = MappingProxyType({user.id: user for user in users})

    def lookup(self, user_id: str) -> UserSchema | None:
        return self._users.get(user_id)

    def __len__(self) -> int:
        return len(self._users)


def default_user(settings: AppSettings = app_settings) -> UserSchema:
    return UserSchema(
        id=settings.DEFAULT_USER_ID,
        username=settings.DEFAULT_USER_USERNAME,
        name=settings.DEFAULT_USER_NAME,
        email=settings.DEFAULT_USER_EMAIL,
    )


def default_user_repository(settings: AppSettings = app_settings) -> InMemoryUserRepository:
    return InMemoryUserRepository([default_user(settings)])


def user_from_oidc(oidc_user: OIDCUserModel | None, settings: AppSettings = app_settings) -> UserSchema:
    """Map the claims of the calling principal on a user.

    Falls back to the default user when no principal is attached or the principal carries no subject.
    """
    if not oidc_user or not oidc_user.get("sub"):
        return default_user(settings)

    return UserSchema(
        id=str(oidc_user["sub"]),
        username=oidc_user.get("preferred_username"),
        name=oidc_user.get("name"),
        email=oidc_user.get("email"),
    )
