"""
Some tests for the expects and returns decorators,
run against the tool routes.
"""

from aiohttp.test_utils import TestClient

from toolshed.serializer import JSendSchema, JSendStatus


class TestExpectDecorator:

    async def test_expects_no_data(self, client: TestClient):
        """Assert that trying to add a tool with no data fails."""
        resp = await client.post('/api/v1/tools/add')
        assert resp.status == 400

        data = JSendSchema().load(await resp.json())
        assert "only accepts JSON" in data["data"]["message"]
        assert data["status"] == JSendStatus.FAIL
        assert "schema" in data["data"]

    async def test_expects_malformed_json(self, client: TestClient):
        """Assert that trying to add a tool with broken json fails."""
        resp = await client.post('/api/v1/tools/add', data="[", headers={"Content-Type": "application/json"})
        assert resp.status == 400

        data = JSendSchema().load(await resp.json())
        assert data["status"] == JSendStatus.FAIL
        assert "Could not parse" in data["data"]["message"]

    async def test_expects_undecodable_body(self, client: TestClient, tool_service):
        """Assert that a JSON body that isn't utf-8 fails like any other broken JSON."""
        resp = await client.post('/api/v1/tools/add', data=b"\xff\xfe{", headers={"Content-Type": "application/json"})
        assert resp.status == 400

        data = JSendSchema().load(await resp.json())
        assert data["status"] == JSendStatus.FAIL
        assert "Could not parse" in data["data"]["message"]
        assert await tool_service.count() == 0

    async def test_expects_invalid_data(self, client: TestClient):
        """Assert that trying to add a tool with invalid data fails."""
        resp = await client.put('/api/v1/tools/update/1', json={"name": 12})
        assert resp.status == 400

        data = JSendSchema().load(await resp.json())
        assert data["status"] == JSendStatus.FAIL
        assert "did not validate" in data["data"]["message"]
        assert "name" in data["data"]["errors"]
        assert data["data"]["schema"]["properties"]["name"]


class TestReturnsDecorator:

    async def test_returns_empty_body(self, client: TestClient, random_tool):
        resp = await client.delete(f'/api/v1/tools/delete/{random_tool.id}')
        assert resp.status == 200
        assert await resp.read() == b""

    async def test_returns_named_schema_status(self, client: TestClient):
        resp = await client.delete('/api/v1/tools/delete/1')
        assert resp.status == 404
