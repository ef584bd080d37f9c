"""
HTTP-level tests for the FastAPI application
"""

import pytest
from httpx import ASGITransport, AsyncClient

from contactbook.api.app import create_app
from contactbook.config import Settings


@pytest.fixture
def app(database_url):
    return create_app(Settings(database_url=database_url, debug=False, log_level="WARNING"))


@pytest.mark.integration
class TestApp:
    """Tests for the GraphQL endpoint and health check."""

    @pytest.mark.asyncio
    async def test_graphql_create_and_list(self, app):
        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                created = await client.post(
                    "/graphql",
                    json={
                        "query": 'mutation { createContact(firstName: "Ada", '
                        'lastName: "Lovelace", email: "ada@example.com") { id email } }'
                    },
                )
                listed = await client.post(
                    "/graphql", json={"query": "query AllContacts { contacts { id firstName } }"}
                )

        assert created.status_code == 200
        assert created.json() == {
            "data": {"createContact": {"id": "1", "email": "ada@example.com"}}
        }
        assert listed.json() == {"data": {"contacts": [{"id": "1", "firstName": "Ada"}]}}
        assert "X-Request-ID" in listed.headers

    @pytest.mark.asyncio
    async def test_graphql_field_error_in_response(self, app):
        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.post(
                    "/graphql", json={"query": 'mutation { deleteContact(id: "7") }'}
                )

        body = response.json()
        assert body["data"] == {"deleteContact": None}
        assert body["errors"][0]["message"] == "Contact #7 not found"

    @pytest.mark.asyncio
    async def test_request_id_header_is_echoed(self, app):
        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/health", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_health(self, app):
        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "0.1.0", "database": True}
