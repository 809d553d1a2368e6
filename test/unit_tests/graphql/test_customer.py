import asyncio
import json
from http import HTTPStatus

import pytest

from oauth2_lib.fastapi import AuthManager
from subgraph.graphql import AccountsQuery, create_schema
from subgraph.graphql.types import SubgraphContext
from subgraph.services.customers import InMemoryCustomerRepository
from subgraph.services.users import default_user_repository
from test.unit_tests.config import GRAPHQL_ENDPOINT, GRAPHQL_HEADERS

CUSTOMER_QUERY = """
query CustomerQuery($id: ID!) {
  customer(id: $id) {
    id
    name
    status
    creditLimit
  }
}
"""


def get_customer_query(customer_id: str) -> bytes:
    return json.dumps(
        {
            "operationName": "CustomerQuery",
            "query": CUSTOMER_QUERY,
            "variables": {"id": customer_id},
        }
    ).encode("utf-8")


@pytest.mark.parametrize(
    "customer_id,expected",
    [
        ("CUST-1001", {"id": "CUST-1001", "name": "Acme Logistics", "status": "ACTIVE", "creditLimit": 100000}),
        ("CUST-2001", {"id": "CUST-2001", "name": "Global Retail Corp", "status": "ON_HOLD", "creditLimit": 25000}),
    ],
)
def test_customer(test_client, customer_id, expected):
    response = test_client.post(GRAPHQL_ENDPOINT, content=get_customer_query(customer_id), headers=GRAPHQL_HEADERS)
    assert HTTPStatus.OK == response.status_code
    result = response.json()
    assert "errors" not in result
    assert result["data"]["customer"] == expected


@pytest.mark.parametrize("customer_id", ["CUST-9999", "cust-1001", "", "CUST-1001 "])
def test_customer_not_found_is_null(test_client, customer_id):
    response = test_client.post(GRAPHQL_ENDPOINT, content=get_customer_query(customer_id), headers=GRAPHQL_HEADERS)
    assert HTTPStatus.OK == response.status_code
    result = response.json()
    assert "errors" not in result
    assert result["data"] == {"customer": None}


def test_customer_without_id_is_a_validation_error(test_client):
    data = json.dumps({"query": "query { customer { id } }"}).encode("utf-8")
    response = test_client.post(GRAPHQL_ENDPOINT, content=data, headers=GRAPHQL_HEADERS)
    result = response.json()
    assert result["data"] is None
    assert "argument 'id'" in result["errors"][0]["message"]


def test_malformed_query(test_client):
    data = json.dumps({"query": "query { customer(id: "}).encode("utf-8")
    response = test_client.post(GRAPHQL_ENDPOINT, content=data, headers=GRAPHQL_HEADERS)
    result = response.json()
    assert result["data"] is None
    assert result["errors"][0]["message"].startswith("Syntax Error")


@pytest.mark.asyncio
async def test_concurrent_customer_lookups_do_not_mix_results():
    schema = create_schema(AccountsQuery)
    customers = InMemoryCustomerRepository()
    users = default_user_repository()
    auth_manager = AuthManager()

    def context() -> SubgraphContext:
        return SubgraphContext(auth_manager=auth_manager, customers=customers, users=users)

    customer_ids = ["CUST-1001", "CUST-2001", "CUST-9999"] * 10
    results = await asyncio.gather(
        *(
            schema.execute(CUSTOMER_QUERY, variable_values={"id": customer_id}, context_value=context())
            for customer_id in customer_ids
        )
    )

    for customer_id, result in zip(customer_ids, results):
        assert not result.errors
        if customer_id == "CUST-9999":
            assert result.data == {"customer": None}
        else:
            assert result.data["customer"]["id"] == customer_id


def test_customer_from_injected_repository(settings):
    from starlette.testclient import TestClient

    from subgraph import SubgraphCore
    from subgraph.schemas.customer import CustomerSchema

    customers = InMemoryCustomerRepository(
        [CustomerSchema(customer_id="CUST-3001", name="Northwind", status="SUSPENDED", credit_limit=None)]
    )
    app = SubgraphCore(base_settings=settings, customers=customers)
    app.register_graphql()

    response = TestClient(app).post(GRAPHQL_ENDPOINT, content=get_customer_query("CUST-3001"), headers=GRAPHQL_HEADERS)
    result = response.json()
    assert result["data"]["customer"] == {
        "id": "CUST-3001",
        "name": "Northwind",
        "status": "SUSPENDED",
        "creditLimit": None,
    }

    response = TestClient(app).post(GRAPHQL_ENDPOINT, content=get_customer_query("CUST-1001"), headers=GRAPHQL_HEADERS)
    assert response.json()["data"] == {"customer": None}
