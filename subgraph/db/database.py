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
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

import structlog
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = structlog.get_logger(__name__)


class BaseModel(DeclarativeBase):
    pass


ENGINE_ARGUMENTS: dict[str, Any] = {
    "connect_args": {"connect_timeout": 10, "options": "-c timezone=UTC"},
    "pool_pre_ping": True,
    "pool_size": 20,
    "max_overflow": 10,
}
SESSION_ARGUMENTS: dict[str, Any] = {"autoflush": True, "autocommit": False, "expire_on_commit": False}


class Database:
    """Setup and contain our database connection.

    Every request gets its own session: the `scoped_session` is keyed on a context variable which is set for the
    duration of a `database_scope`. Sessions are never shared between requests.
    """

    def __init__(self, db_url: str, engine_arguments: dict[str, Any] | None = None) -> None:
        self.request_context: ContextVar[str] = ContextVar("request_context", default="")
        self.engine = create_engine(db_url, **(ENGINE_ARGUMENTS if engine_arguments is None else engine_arguments))
        self.session_factory = sessionmaker(bind=self.engine, **SESSION_ARGUMENTS)
        self.scoped_session = scoped_session(self.session_factory, self._scopefunc)

    def _scopefunc(self) -> str:
        return self.request_context.get()

    @property
    def session(self) -> Session:
        return self.scoped_session()

    @contextmanager
    def database_scope(self, **kwargs: Any) -> Iterator["Database"]:
        """Create a new database session (scope).

        The session is removed, and its connection returned to the pool, on every exit path.
        """
        token = self.request_context.set(str(uuid4()))
        self.scoped_session(**kwargs)
        try:
            yield self
        finally:
            self.scoped_session.remove()
            self.request_context.reset(token)

    def dispose(self) -> None:
        logger.info("Disposing database engine")
        self.engine.dispose()


class DBSessionMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, database: Database) -> None:
        super().__init__(app)
        self.database = database

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        with self.database.database_scope():
            return await call_next(request)
