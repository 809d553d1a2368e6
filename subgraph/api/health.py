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

from http import HTTPStatus

import structlog
from fastapi import HTTPException
from fastapi.routing import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from subgraph.db import db, wrapped_db

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/", response_model=str)
def get_health() -> str:
    if not wrapped_db.configured:
        return "OK"
    try:
        db.session.execute(text("SELECT 1"))
    except OperationalError as e:
        logger.warning("Health endpoint returned: notok!")
        logger.debug("Health endpoint error details", error=str(e))
        raise HTTPException(status_code=HTTPStatus.SERVICE_UNAVAILABLE, detail="Database unavailable") from e
    return "OK"
