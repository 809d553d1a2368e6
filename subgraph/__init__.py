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

"""Federated GraphQL subgraphs for accounts and fuel inventory."""

__version__ = "1.0.0"


from structlog import get_logger

logger = get_logger(__name__)

logger.info("Starting the subgraph", version=__version__)

from subgraph.settings import app_settings

from subgraph.app import SubgraphCore, create_app

__all__ = [
    "SubgraphCore",
    "app_settings",
    "create_app",
]
