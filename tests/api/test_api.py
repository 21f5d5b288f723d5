import asyncio

import pytest
from fastapi.testclient import TestClient

from glowboard.core.identity import create_identity_token
from glowboard.server import app

OWNER_EMAIL = "owner@glowboard.test"
STAFF_EMAIL = "sam@glowboard.test"

CREATE_SALES_RECORD = """
mutation {
  createSalesRecord(input: {location: "%s", date: "2024-05-15", dailySales: 1250.5, treatmentsCount: 6}) {
    id
    location
    dailySales
    treatmentsCount
  }
}
"""


def auth_headers(email, name=None):
    return {"Authorization": f"Bearer {create_identity_token(email, name)}"}


@pytest.fixture
def client(store):
    app.state.document_store = store
    app.state.bootstrap_lock = asyncio.Lock()
    with TestClient(app) as test_client:
        yield test_client


def graphql(client, query, headers=None):
    response = client.post("/graphql", json={"query": query}, headers=headers or {})
    assert response.status_code == 200
    return response.json()


def test_read_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "GlowBoard" in response.json()["message"]


def test_me_requires_token(client):
    response = client.get("/api/v1/auth/me")

    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated"


def test_first_login_becomes_admin(client):
    """Test that only the first account to sign in is made an admin"""
    owner = client.post("/api/v1/auth/login", headers=auth_headers(OWNER_EMAIL, "Olivia Owner"))
    staff = client.post("/api/v1/auth/login", headers=auth_headers(STAFF_EMAIL))

    assert owner.status_code == 200
    assert owner.json()["is_admin"] is True
    assert owner.json()["full_name"] == "Olivia Owner"
    assert staff.json()["is_admin"] is False
    assert staff.json()["location"] == "Flatiron"


def test_login_with_bad_token(client):
    response = client.post("/api/v1/auth/login", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401


def test_logout(client):
    headers = auth_headers(OWNER_EMAIL)

    response = client.post("/api/v1/auth/logout", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out"}


def test_graphql_sales_round_trip(client):
    """Test creating a record over GraphQL and reading it back"""
    headers = auth_headers(OWNER_EMAIL)

    created = graphql(client, CREATE_SALES_RECORD % "UWS", headers)
    listed = graphql(client, '{ salesRecords(location: "UWS") { id dailySales } }', headers)

    record = created["data"]["createSalesRecord"]
    assert record["location"] == "UWS"
    assert record["treatmentsCount"] == 6
    assert listed["data"]["salesRecords"] == [{"id": record["id"], "dailySales": 1250.5}]


def test_graphql_requires_authentication(client):
    result = graphql(client, "{ salesRecords { id } }")

    assert result["data"] is None
    assert result["errors"][0]["message"] == "Not authenticated"


def test_graphql_reports_validation_errors(client):
    """Test that each validation issue reaches the client with its field and code"""
    mutation = CREATE_SALES_RECORD.replace("dailySales: 1250.5", "dailySales: -5")
    result = graphql(client, mutation % "Atlantis", auth_headers(OWNER_EMAIL))

    error = result["errors"][0]
    assert "Invalid location selected" in error["message"]
    issues = error["extensions"]["issues"]
    assert {(issue["field"], issue["code"]) for issue in issues} == {
        ("location", "LOCATION_INVALID"),
        ("daily_sales", "SALES_AMOUNT_TOO_LOW"),
    }


def test_graphql_admin_only_fields(client):
    """Test that staff are refused the user list"""
    graphql(client, "{ me { id } }", auth_headers(OWNER_EMAIL))

    result = graphql(client, "{ users { email } }", auth_headers(STAFF_EMAIL))

    assert result["errors"][0]["message"] == "Admin privileges required"
