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
from typing import Generic, TypeVar

import strawberry

GenericType = TypeVar("GenericType")


@strawberry.type(description="Represents a paginated relationship between two entities")
class Connection(Generic[GenericType]):
    """A page of items together with the context needed to fetch the next one."""

    page_info: "PageInfo"
    page: list["GenericType"]


@strawberry.federation.type(shareable=True, description="Pagination context to navigate objects with offset cursors")
class PageInfo:
    """Pagination context.

    Cursors are offsets into the (stably ordered) collection: `end_cursor + 1` is the `after` value of the next page.
    """

    has_next_page: bool
    has_previous_page: bool
    start_cursor: int | None
    end_cursor: int | None
    total_items: int
