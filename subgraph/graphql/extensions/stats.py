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
import time
from typing import Any, Iterator

import structlog
from strawberry.extensions import SchemaExtension

logger = structlog.get_logger(__name__)


class StatsExtension(SchemaExtension):
    """Measures the operation time of an executed GraphQL query, logged and returned in the extension results."""

    start: float | None
    end: float | None

    def __init__(self, *args, **kwargs) -> None:  # type: ignore
        super().__init__(*args, **kwargs)
        self.start = None
        self.end = None

    def get_results(self) -> dict[str, Any]:
        if self.start is None:
            return {}
        end = self.end if self.end is not None else time.perf_counter()
        return {"stats": {"operation_time": end - self.start}}

    def on_operation(self, *args, **kwargs) -> Iterator[None]:  # type: ignore
        self.start = time.perf_counter()

        yield

        self.end = time.perf_counter()
        logger.info(
            "GraphQL query stats",
            operation_name=self.execution_context.operation_name,
            variables=self.execution_context.variables,
            **self.get_results()["stats"],
        )
