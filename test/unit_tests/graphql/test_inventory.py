import json
from http import HTTPStatus

import pytest
from starlette.testclient import TestClient

from subgraph import SubgraphCore
from subgraph.graphql import InventoryQuery
from test.unit_tests.config import GRAPHQL_HEADERS, INVENTORY_GRAPHQL_ENDPOINT


def get_inventory_query(first: int = 20, after: int = 0) -> bytes:
    query = """
query InventoryQuery($first: Int!, $after: Int!) {
  inventory(first: $first, after: $after) {
    page {
      id
      type
      quantity
      price
    }
    pageInfo {
      hasNextPage
      hasPreviousPage
      startCursor
      endCursor
      totalItems
    }
  }
}
    """
    return json.dumps(
        {"operationName": "InventoryQuery", "query": query, "variables": {"first": first, "after": after}}
    ).encode("utf-8")


def query_inventory(client: TestClient, first: int = 20, after: int = 0) -> dict:
    response = client.post(
        INVENTORY_GRAPHQL_ENDPOINT, content=get_inventory_query(first, after), headers=GRAPHQL_HEADERS
    )
    assert HTTPStatus.OK == response.status_code
    result = response.json()
    assert "errors" not in result
    return result["data"]["inventory"]


def test_inventory(inventory_client, inventory_rows):
    inventory = query_inventory(inventory_client)

    assert [item["type"] for item in inventory["page"]] == ["Diesel", "Unleaded 95", "Jet A-1"]
    assert inventory["page"][0] == {"id": "1", "type": "Diesel", "quantity": 12000.0, "price": 1.62}
    assert inventory["pageInfo"] == {
        "hasNextPage": False,
        "hasPreviousPage": False,
        "startCursor": 0,
        "endCursor": 2,
        "totalItems": 3,
    }


@pytest.mark.parametrize(
    "first,after,expected_types,has_next_page,has_previous_page,end_cursor",
    [
        (2, 0, ["Diesel", "Unleaded 95"], True, False, 1),
        (2, 2, ["Jet A-1"], False, True, 2),
        (1, 1, ["Unleaded 95"], True, True, 1),
    ],
)
def test_inventory_pagination(
    inventory_client, inventory_rows, first, after, expected_types, has_next_page, has_previous_page, end_cursor
):
    inventory = query_inventory(inventory_client, first, after)

    assert [item["type"] for item in inventory["page"]] == expected_types
    assert inventory["pageInfo"]["hasNextPage"] is has_next_page
    assert inventory["pageInfo"]["hasPreviousPage"] is has_previous_page
    assert inventory["pageInfo"]["startCursor"] == after
    assert inventory["pageInfo"]["endCursor"] == end_cursor
    assert inventory["pageInfo"]["totalItems"] == 3


def test_inventory_past_the_end(inventory_client, inventory_rows):
    inventory = query_inventory(inventory_client, first=10, after=10)

    assert inventory["page"] == []
    assert inventory["pageInfo"]["startCursor"] is None
    assert inventory["pageInfo"]["endCursor"] is None
    assert inventory["pageInfo"]["hasNextPage"] is False


def test_inventory_empty_table(inventory_client):
    inventory = query_inventory(inventory_client)

    assert inventory["page"] == []
    assert inventory["pageInfo"]["totalItems"] == 0


def test_inventory_page_size_is_bounded(database, inventory_rows, settings):
    settings.INVENTORY_MAX_PAGE_SIZE = 2
    app = SubgraphCore(base_settings=settings, database=database)
    app.register_graphql(InventoryQuery, settings.INVENTORY_GRAPHQL_PATH)

    inventory = query_inventory(TestClient(app), first=1000)

    assert len(inventory["page"]) == 2
    assert inventory["pageInfo"]["hasNextPage"] is True


def test_inventory_negative_arguments_are_clamped(inventory_client, inventory_rows):
    inventory = query_inventory(inventory_client, first=-5, after=-3)

    assert inventory["page"] == []
    assert inventory["pageInfo"]["hasPreviousPage"] is False


def test_inventory_without_database(settings):
    app = SubgraphCore(base_settings=settings)
    app.register_graphql(InventoryQuery, settings.INVENTORY_GRAPHQL_PATH)

    response = TestClient(app).post(
        INVENTORY_GRAPHQL_ENDPOINT, content=get_inventory_query(), headers=GRAPHQL_HEADERS
    )
    result = response.json()

    assert result["data"] is None
    assert len(result["errors"]) == 1
    assert result["errors"][0]["path"] == ["inventory"]
