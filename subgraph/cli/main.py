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
from enum import Enum

import typer
import uvicorn

from subgraph.cli import database
from subgraph.graphql import AccountsQuery, InventoryQuery, create_schema
from subgraph.settings import app_settings

app = typer.Typer()
app.add_typer(database.app, name="db", help="Interact with the application database")


class SchemaName(str, Enum):
    accounts = "accounts"
    inventory = "inventory"


@app.command(help="Serve the subgraph over HTTP.")
def serve(
    host: str = typer.Option(app_settings.HOST, help="Interface to bind to"),
    port: int = typer.Option(app_settings.PORT, help="Port to listen on, defaults to the PORT env-var or 4000"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    # uvicorn handles SIGINT/SIGTERM (exit status 0) and logs a failed bind before exiting with status 1
    uvicorn.run("subgraph.app:create_app", factory=True, host=host, port=port, reload=reload, log_config=None)


@app.command(help="Print the federated SDL of a subgraph, e.g. for composition with rover.")
def schema(name: SchemaName = typer.Argument(SchemaName.accounts)) -> None:
    query = InventoryQuery if name == SchemaName.inventory else AccountsQuery
    typer.echo(create_schema(query).as_str())


if __name__ == "__main__":
    app()
